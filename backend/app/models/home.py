"""Home page content: hero slideshow, CEO block and the learn-more teaser."""

from sqlalchemy import Boolean, Column, String, Text

from app.database import Base
from app.models.mixins import OrderedMixin, SingletonMixin


class HeroSlide(OrderedMixin, Base):
    __tablename__ = "hero_slides"

    image_url = Column(String(500), nullable=False)
    title = Column(String(200))
    subtitle = Column(String(300))
    is_active = Column(Boolean, nullable=False, default=True)


class CeoSection(SingletonMixin, Base):
    __tablename__ = "ceo_section"

    photo_url = Column(String(500), nullable=False)
    name = Column(String(100), nullable=False)
    title = Column(String(100), nullable=False, default="CEO")
    vision = Column(Text)
    description = Column(Text)


class LearnMoreSection(SingletonMixin, Base):
    __tablename__ = "learn_more_section"

    heading = Column(String(200), nullable=False, default="")
    description = Column(Text)
    image_url = Column(String(500))
    button_text = Column(String(50), nullable=False, default="Learn More")
