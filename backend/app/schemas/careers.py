"""Request/response contracts for careers page content."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from app.schemas.site import VersionedUpdate


class HiringStatusUpdate(VersionedUpdate):
    is_hiring: Optional[bool] = None
    hiring_title: Optional[str] = None
    hiring_description: Optional[str] = None
    not_hiring_title: Optional[str] = None
    not_hiring_description: Optional[str] = None


class JobPositionCreate(BaseModel):
    title: str = Field(min_length=1)
    description: Optional[str] = None
    location: Optional[str] = None
    job_type: str = "Full-time"
    is_active: bool = True
    display_order: Optional[int] = None


class JobPositionUpdate(BaseModel):
    title: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    location: Optional[str] = None
    job_type: Optional[str] = None
    is_active: Optional[bool] = None
    display_order: Optional[int] = None


class JobPositionOut(BaseModel):
    id: int
    title: str
    description: Optional[str] = None
    location: Optional[str] = None
    job_type: str
    display_order: int
    is_active: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}
