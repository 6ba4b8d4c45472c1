"""Careers page content: hiring status banner and open job positions."""

from sqlalchemy import Boolean, Column, String, Text

from app.database import Base
from app.models.mixins import OrderedMixin, SingletonMixin


class HiringStatus(SingletonMixin, Base):
    __tablename__ = "hiring_status"

    is_hiring = Column(Boolean, nullable=False, default=False)
    hiring_title = Column(String(200))
    hiring_description = Column(Text)
    not_hiring_title = Column(String(200))
    not_hiring_description = Column(Text)


class JobPosition(OrderedMixin, Base):
    __tablename__ = "job_positions"

    title = Column(String(200), nullable=False)
    description = Column(Text)
    location = Column(String(200))
    job_type = Column(String(50), nullable=False, default="Full-time")
    is_active = Column(Boolean, nullable=False, default=True)
