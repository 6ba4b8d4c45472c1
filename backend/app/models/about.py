"""About page content: intro, philosophy, collaborations, practice timeline, office gallery."""

from sqlalchemy import Boolean, Column, Integer, String, Text

from app.database import Base
from app.models.mixins import OrderedMixin, SingletonMixin


class AboutIntro(SingletonMixin, Base):
    __tablename__ = "about_intro"

    heading = Column(String(200), nullable=False, default="About Us")
    subheading = Column(String(300))
    description = Column(Text)
    heading_color = Column(String(20))
    description_color = Column(String(20))


class PhilosophyPrinciple(OrderedMixin, Base):
    __tablename__ = "philosophy_principles"

    title = Column(String(200), nullable=False)
    description = Column(Text)
    icon_url = Column(String(500))
    is_active = Column(Boolean, nullable=False, default=True)


class Collaboration(OrderedMixin, Base):
    __tablename__ = "collaborations"

    logo_url = Column(String(500), nullable=False)
    name = Column(String(200))
    website_url = Column(String(500))
    is_active = Column(Boolean, nullable=False, default=True)


class PracticeTimeline(OrderedMixin, Base):
    __tablename__ = "practice_timeline"

    year = Column(Integer, nullable=False)
    title = Column(String(200))
    description = Column(Text, nullable=False)
    description_color = Column(String(20))


class OfficeGalleryImage(OrderedMixin, Base):
    __tablename__ = "office_gallery"

    image_url = Column(String(500), nullable=False)
    title = Column(String(200))
    description = Column(Text)
    is_active = Column(Boolean, nullable=False, default=True)
