"""Portfolio models: categories, projects and the portfolio page header."""

from sqlalchemy import JSON, Boolean, Column, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import relationship

from app.database import Base
from app.models.mixins import OrderedMixin, SingletonMixin


class ProjectCategory(OrderedMixin, Base):
    __tablename__ = "project_categories"

    name = Column(String(100), nullable=False)
    slug = Column(String(100), nullable=False)
    is_active = Column(Boolean, nullable=False, default=True)

    projects = relationship("Project", back_populates="category")


class Project(OrderedMixin, Base):
    __tablename__ = "projects"

    title = Column(String(200), nullable=False)
    description = Column(Text)
    short_description = Column(String(500))
    image_url = Column(String(500), nullable=False)
    gallery_images = Column(JSON)
    category_id = Column(Integer, ForeignKey("project_categories.id", ondelete="SET NULL"), nullable=True)
    status = Column(String(20), nullable=False, default="completed")  # upcoming/ongoing/completed
    is_featured = Column(Boolean, nullable=False, default=False)

    category = relationship("ProjectCategory", back_populates="projects", lazy="joined")

    __table_args__ = (
        Index("idx_project_category", "category_id"),
        Index("idx_project_status", "status"),
    )


class PortfolioHeader(SingletonMixin, Base):
    __tablename__ = "portfolio_header"

    heading = Column(String(200), nullable=False, default="Our Projects")
    subheading = Column(String(300))
    description = Column(Text)
    heading_color = Column(String(20))
    subheading_color = Column(String(20))
    description_color = Column(String(20))
    default_items_count = Column(Integer, nullable=False, default=10)
