"""Request/response contracts for home page content."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from app.schemas.site import VersionedUpdate


class HeroSlideCreate(BaseModel):
    image_url: str = Field(min_length=1)
    title: Optional[str] = None
    subtitle: Optional[str] = None
    is_active: bool = True
    display_order: Optional[int] = None


class HeroSlideUpdate(BaseModel):
    image_url: Optional[str] = Field(default=None, min_length=1)
    title: Optional[str] = None
    subtitle: Optional[str] = None
    is_active: Optional[bool] = None
    display_order: Optional[int] = None


class HeroSlideOut(BaseModel):
    id: int
    image_url: str
    title: Optional[str] = None
    subtitle: Optional[str] = None
    display_order: int
    is_active: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class CeoSectionUpdate(VersionedUpdate):
    photo_url: Optional[str] = None
    name: Optional[str] = None
    title: Optional[str] = None
    vision: Optional[str] = None
    description: Optional[str] = None


class LearnMoreSectionUpdate(VersionedUpdate):
    heading: Optional[str] = None
    description: Optional[str] = None
    image_url: Optional[str] = None
    button_text: Optional[str] = None
