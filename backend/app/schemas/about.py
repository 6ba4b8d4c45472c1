"""Request/response contracts for about page content."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from app.schemas.site import VersionedUpdate


class AboutIntroUpdate(VersionedUpdate):
    heading: Optional[str] = None
    subheading: Optional[str] = None
    description: Optional[str] = None
    heading_color: Optional[str] = None
    description_color: Optional[str] = None


class PhilosophyPrincipleCreate(BaseModel):
    title: str = Field(min_length=1)
    description: Optional[str] = None
    icon_url: Optional[str] = None
    is_active: bool = True
    display_order: Optional[int] = None


class PhilosophyPrincipleUpdate(BaseModel):
    title: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    icon_url: Optional[str] = None
    is_active: Optional[bool] = None
    display_order: Optional[int] = None


class PhilosophyPrincipleOut(BaseModel):
    id: int
    title: str
    description: Optional[str] = None
    icon_url: Optional[str] = None
    display_order: int
    is_active: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class CollaborationCreate(BaseModel):
    logo_url: str = Field(min_length=1)
    name: Optional[str] = None
    website_url: Optional[str] = None
    is_active: bool = True
    display_order: Optional[int] = None


class CollaborationUpdate(BaseModel):
    logo_url: Optional[str] = Field(default=None, min_length=1)
    name: Optional[str] = None
    website_url: Optional[str] = None
    is_active: Optional[bool] = None
    display_order: Optional[int] = None


class CollaborationOut(BaseModel):
    id: int
    logo_url: str
    name: Optional[str] = None
    website_url: Optional[str] = None
    display_order: int
    is_active: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class TimelineEventCreate(BaseModel):
    year: int = Field(ge=1800, le=2200)
    title: Optional[str] = None
    description: Optional[str] = None
    description_color: Optional[str] = None
    display_order: Optional[int] = None


class TimelineEventUpdate(BaseModel):
    year: Optional[int] = Field(default=None, ge=1800, le=2200)
    title: Optional[str] = None
    description: Optional[str] = None
    description_color: Optional[str] = None
    display_order: Optional[int] = None


class TimelineEventOut(BaseModel):
    id: int
    year: int
    title: Optional[str] = None
    description: str
    description_color: Optional[str] = None
    display_order: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class OfficeGalleryImageCreate(BaseModel):
    image_url: str = Field(min_length=1)
    title: Optional[str] = None
    description: Optional[str] = None
    is_active: bool = True
    display_order: Optional[int] = None


class OfficeGalleryImageUpdate(BaseModel):
    image_url: Optional[str] = Field(default=None, min_length=1)
    title: Optional[str] = None
    description: Optional[str] = None
    is_active: Optional[bool] = None
    display_order: Optional[int] = None


class OfficeGalleryImageOut(BaseModel):
    id: int
    image_url: str
    title: Optional[str] = None
    description: Optional[str] = None
    display_order: int
    is_active: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}
