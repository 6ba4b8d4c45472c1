"""Public read functions, one per content type. None of them raise on backend errors."""

from typing import List, Optional, Tuple

from sqlalchemy.orm import Session

from app.config import settings
from app.models.about import Collaboration, OfficeGalleryImage, PhilosophyPrinciple, PracticeTimeline
from app.models.careers import JobPosition
from app.models.home import HeroSlide
from app.models.project import Project, ProjectCategory
from app.models.team import TeamMember
from app.services import content_registry as registry


def get_site_settings(db: Session, default: dict | None = None) -> dict:
    return registry.site_settings.fetch_or_default(db, default)


def get_logo_and_name(db: Session) -> Optional[dict]:
    row = registry.logo_and_name.fetch(db)
    if row is None:
        return None
    return {"logo_url": row.logo_url, "company_name": row.company_name, "company_name_color": row.company_name_color}


def get_hero_slides(db: Session) -> List[HeroSlide]:
    return registry.hero_slides.list_public(db)


def get_ceo_section(db: Session, default: dict | None = None) -> dict:
    return registry.ceo_section.fetch_or_default(db, default)


def get_featured_projects(db: Session) -> List[Project]:
    return registry.projects.list_public(
        db,
        filters={"is_featured": True},
        limit=settings.FEATURED_PROJECTS_LIMIT,
    )


def get_projects(
    db: Session,
    category_id: int | None = None,
    status: str | None = None,
    limit: int | None = None,
    offset: int = 0,
) -> Tuple[List[Project], int]:
    filters = {"category_id": category_id, "status": status}
    page_size = settings.DEFAULT_PAGE_SIZE if limit is None else limit
    rows = registry.projects.list_public(db, filters=filters, limit=page_size, offset=offset)
    count = registry.projects.count_public(db, filters=filters)
    return rows, count


def get_project(db: Session, project_id: int) -> Optional[Project]:
    return registry.projects.get_public(db, project_id)


def get_project_categories(db: Session) -> List[ProjectCategory]:
    return registry.project_categories.list_public(db)


def get_learn_more_section(db: Session, default: dict | None = None) -> dict:
    return registry.learn_more_section.fetch_or_default(db, default)


def get_contact_info(db: Session, default: dict | None = None) -> dict:
    return registry.contact_info.fetch_or_default(db, default)


def get_portfolio_header(db: Session, default: dict | None = None) -> dict:
    return registry.portfolio_header.fetch_or_default(db, default)


def get_about_intro(db: Session, default: dict | None = None) -> dict:
    return registry.about_intro.fetch_or_default(db, default)


def get_philosophy_principles(db: Session) -> List[PhilosophyPrinciple]:
    return registry.philosophy_principles.list_public(db)


def get_team_members(db: Session, role: str | None = None) -> List[TeamMember]:
    return registry.team_members.list_public(db, filters={"role": role})


def get_collaborations(db: Session) -> List[Collaboration]:
    return registry.collaborations.list_public(db)


def get_practice_timeline(db: Session) -> List[PracticeTimeline]:
    return registry.practice_timeline.list_public(db)


def get_staff_intro(db: Session, default: dict | None = None) -> dict:
    return registry.staff_intro.fetch_or_default(db, default)


def get_join_team_cta(db: Session, default: dict | None = None) -> dict:
    return registry.join_team_cta.fetch_or_default(db, default)


def get_hiring_status(db: Session, default: dict | None = None) -> dict:
    return registry.hiring_status.fetch_or_default(db, default)


def get_site_stats(db: Session, default: dict | None = None) -> dict:
    return registry.site_stats.fetch_or_default(db, default)


def get_office_gallery_images(db: Session) -> List[OfficeGalleryImage]:
    return registry.office_gallery.list_public(db)


def get_job_positions(db: Session) -> List[JobPosition]:
    return registry.job_positions.list_public(db)
