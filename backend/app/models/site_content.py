"""Site-wide singleton content blocks: branding, theme, contact details and headline stats."""

from sqlalchemy import Column, Integer, String, Text

from app.database import Base
from app.models.mixins import SingletonMixin


class LogoAndName(SingletonMixin, Base):
    __tablename__ = "logo_and_name"

    logo_url = Column(String(500), nullable=False)
    company_name = Column(String(100), nullable=False, default="")
    company_name_color = Column(String(20), nullable=False, default="#000000")


class SiteSettings(SingletonMixin, Base):
    __tablename__ = "site_settings"

    background_color = Column(String(20), nullable=False, default="#ffffff")
    primary_accent_color = Column(String(20), nullable=False, default="#c9a96e")
    text_color = Column(String(20), nullable=False, default="#1a1a1a")
    secondary_text_color = Column(String(20), nullable=False, default="#6b6b6b")
    font_family = Column(String(100), nullable=False, default="Inter")


class ContactInfo(SingletonMixin, Base):
    __tablename__ = "contact_info"

    linkedin_url = Column(String(500))
    instagram_url = Column(String(500))
    youtube_url = Column(String(500))
    pinterest_url = Column(String(500))
    email = Column(String(150))
    phone_number = Column(String(50))
    telephone_number = Column(String(50))
    address = Column(Text)
    google_maps_url = Column(String(1000))


class SiteStats(SingletonMixin, Base):
    __tablename__ = "site_stats"

    total_projects = Column(Integer, nullable=False, default=0)
    team_members = Column(Integer, nullable=False, default=0)
    completed_projects = Column(Integer, nullable=False, default=0)
    years_of_experience = Column(Integer, nullable=False, default=0)
