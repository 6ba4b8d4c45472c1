"""Request/response contracts for staff page content."""

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field

from app.schemas.site import VersionedUpdate

TeamRole = Literal["ceo", "leadership", "manager", "staff"]


class TeamMemberCreate(BaseModel):
    photo_url: Optional[str] = None
    name: str = Field(min_length=1)
    position: str = Field(min_length=1)
    role: TeamRole = "staff"
    bio: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    is_ceo: bool = False
    is_leadership: bool = False
    is_active: bool = True
    display_order: Optional[int] = None


class TeamMemberUpdate(BaseModel):
    photo_url: Optional[str] = None
    name: Optional[str] = Field(default=None, min_length=1)
    position: Optional[str] = Field(default=None, min_length=1)
    role: Optional[TeamRole] = None
    bio: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    is_ceo: Optional[bool] = None
    is_leadership: Optional[bool] = None
    is_active: Optional[bool] = None
    display_order: Optional[int] = None


class TeamMemberOut(BaseModel):
    id: int
    photo_url: Optional[str] = None
    name: str
    position: str
    role: str
    bio: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    is_ceo: bool
    is_leadership: bool
    display_order: int
    is_active: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class StaffIntroUpdate(VersionedUpdate):
    heading: Optional[str] = None
    subheading: Optional[str] = None
    description: Optional[str] = None


class JoinTeamCtaUpdate(VersionedUpdate):
    heading: Optional[str] = None
    description: Optional[str] = None
    button_text: Optional[str] = None
