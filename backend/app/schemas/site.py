"""Request contracts for site-wide singleton blocks (branding, theme, contact info, stats)."""

from typing import Optional

from pydantic import BaseModel, Field


class VersionedUpdate(BaseModel):
    # Last version the editor saw; the write is rejected if the block changed since.
    version: Optional[int] = None


class LogoAndNameUpdate(VersionedUpdate):
    logo_url: Optional[str] = None
    company_name: Optional[str] = None
    company_name_color: Optional[str] = None


class SiteSettingsUpdate(VersionedUpdate):
    background_color: Optional[str] = None
    primary_accent_color: Optional[str] = None
    text_color: Optional[str] = None
    secondary_text_color: Optional[str] = None
    font_family: Optional[str] = None


class ContactInfoUpdate(VersionedUpdate):
    linkedin_url: Optional[str] = None
    instagram_url: Optional[str] = None
    youtube_url: Optional[str] = None
    pinterest_url: Optional[str] = None
    email: Optional[str] = None
    phone_number: Optional[str] = None
    telephone_number: Optional[str] = None
    address: Optional[str] = None
    google_maps_url: Optional[str] = None


class SiteStatsUpdate(VersionedUpdate):
    total_projects: Optional[int] = Field(default=None, ge=0)
    team_members: Optional[int] = Field(default=None, ge=0)
    completed_projects: Optional[int] = Field(default=None, ge=0)
    years_of_experience: Optional[int] = Field(default=None, ge=0)
