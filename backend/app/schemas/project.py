"""Request/response contracts for the portfolio: categories, projects and the page header."""

from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from app.schemas.site import VersionedUpdate

ProjectStatus = Literal["upcoming", "ongoing", "completed"]


class ProjectCategoryCreate(BaseModel):
    name: str = Field(min_length=1)
    slug: str = Field(min_length=1)
    is_active: bool = True
    display_order: Optional[int] = None


class ProjectCategoryUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1)
    slug: Optional[str] = Field(default=None, min_length=1)
    is_active: Optional[bool] = None
    display_order: Optional[int] = None


class ProjectCategoryOut(BaseModel):
    id: int
    name: str
    slug: str
    display_order: int
    is_active: bool
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class ProjectCreate(BaseModel):
    title: str = Field(min_length=1)
    description: Optional[str] = None
    short_description: Optional[str] = None
    image_url: str = Field(min_length=1)
    gallery_images: Optional[List[str]] = None
    category_id: Optional[int] = None
    status: ProjectStatus = "completed"
    is_featured: bool = False
    display_order: Optional[int] = None


class ProjectUpdate(BaseModel):
    title: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    short_description: Optional[str] = None
    image_url: Optional[str] = Field(default=None, min_length=1)
    gallery_images: Optional[List[str]] = None
    category_id: Optional[int] = None
    status: Optional[ProjectStatus] = None
    is_featured: Optional[bool] = None
    display_order: Optional[int] = None


class ProjectFeaturedUpdate(BaseModel):
    is_featured: bool


class ProjectOut(BaseModel):
    id: int
    title: str
    description: Optional[str] = None
    short_description: Optional[str] = None
    image_url: str
    gallery_images: Optional[List[str]] = None
    category_id: Optional[int] = None
    status: str
    is_featured: bool
    display_order: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    category: Optional[ProjectCategoryOut] = None

    model_config = {"from_attributes": True}


class PortfolioHeaderUpdate(VersionedUpdate):
    heading: Optional[str] = None
    subheading: Optional[str] = None
    description: Optional[str] = None
    heading_color: Optional[str] = None
    subheading_color: Optional[str] = None
    description_color: Optional[str] = None
    default_items_count: Optional[int] = Field(default=None, ge=1)
