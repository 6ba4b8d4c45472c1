"""Public page payloads. Each endpoint assembles everything one page of the site shows and caches it by path."""

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from app.database import get_db
from app.schemas.about import CollaborationOut, OfficeGalleryImageOut, PhilosophyPrincipleOut, TimelineEventOut
from app.schemas.careers import JobPositionOut
from app.schemas.home import HeroSlideOut
from app.schemas.project import ProjectCategoryOut, ProjectOut, ProjectStatus
from app.schemas.team import TeamMemberOut
from app.services import query_service
from app.services.revalidation import page_cache
from app.utils.helpers import serialize

router = APIRouter(tags=["pages"])

RELATED_PROJECTS_LIMIT = 4
DEFAULT_COMPANY_NAME = "LAND 8 FORM"
DEFAULT_COMPANY_NAME_COLOR = "#CC5500"

ABOUT_INTRO_FALLBACK = {
    "heading": "Who Are We",
    "subheading": "About Our Practice",
    "description": (
        "We are a collective of visionary architects, designers, and innovators dedicated to "
        "transforming spaces and enriching lives through thoughtful design."
    ),
    "heading_color": None,
    "description_color": None,
}
SITE_STATS_FALLBACK = {"total_projects": 50, "team_members": 25, "completed_projects": 45, "years_of_experience": 25}


@router.get("/api/site")
def get_site_layout(db: Session = Depends(get_db)):
    def build():
        logo = query_service.get_logo_and_name(db) or {}
        return {
            "settings": query_service.get_site_settings(db),
            "logo_url": logo.get("logo_url"),
            "company_name": logo.get("company_name") or DEFAULT_COMPANY_NAME,
            "company_name_color": logo.get("company_name_color") or DEFAULT_COMPANY_NAME_COLOR,
            "contact_info": query_service.get_contact_info(db),
        }

    return page_cache.get_or_build("/", ("layout",), build)


@router.get("/api/pages/home")
def get_home_page(db: Session = Depends(get_db)):
    def build():
        return {
            "hero_slides": serialize(query_service.get_hero_slides(db), HeroSlideOut),
            "ceo_section": query_service.get_ceo_section(db),
            "featured_projects": serialize(query_service.get_featured_projects(db), ProjectOut),
            "learn_more_section": query_service.get_learn_more_section(db),
            "collaborations": serialize(query_service.get_collaborations(db), CollaborationOut),
        }

    return page_cache.get_or_build("/", ("page",), build)


@router.get("/api/pages/about")
def get_about_page(db: Session = Depends(get_db)):
    def build():
        team = query_service.get_team_members(db)
        leadership = [member for member in team if member.role in ("ceo", "leadership")]
        return {
            "intro": query_service.get_about_intro(db, ABOUT_INTRO_FALLBACK),
            "stats": query_service.get_site_stats(db, SITE_STATS_FALLBACK),
            "ceo_section": query_service.get_ceo_section(db),
            "leadership": serialize(leadership, TeamMemberOut),
            "philosophy_principles": serialize(query_service.get_philosophy_principles(db), PhilosophyPrincipleOut),
            "collaborations": serialize(query_service.get_collaborations(db), CollaborationOut),
            "timeline": serialize(query_service.get_practice_timeline(db), TimelineEventOut),
            "office_gallery": serialize(query_service.get_office_gallery_images(db), OfficeGalleryImageOut),
            "join_team_cta": query_service.get_join_team_cta(db),
        }

    return page_cache.get_or_build("/about", (), build)


@router.get("/api/pages/projects")
def get_projects_page(
    category_id: int | None = None,
    status: ProjectStatus | None = None,
    limit: int | None = Query(None, ge=1, le=100),
    offset: int = Query(0, ge=0),
    db: Session = Depends(get_db),
):
    def build():
        header = query_service.get_portfolio_header(db)
        page_size = limit or header.get("default_items_count") or None
        rows, total = query_service.get_projects(db, category_id=category_id, status=status, limit=page_size, offset=offset)
        return {
            "header": header,
            "categories": serialize(query_service.get_project_categories(db), ProjectCategoryOut),
            "projects": serialize(rows, ProjectOut),
            "total": total,
            "has_more": offset + len(rows) < total,
        }

    return page_cache.get_or_build("/projects", (category_id, status, limit, offset), build)


@router.get("/api/pages/projects/{project_id}")
def get_project_page(project_id: int, db: Session = Depends(get_db)):
    def build():
        project = query_service.get_project(db, project_id)
        if project is None:
            return None
        related, _ = query_service.get_projects(
            db,
            category_id=project.category_id,
            limit=RELATED_PROJECTS_LIMIT + 1,
        )
        related = [row for row in related if row.id != project.id][:RELATED_PROJECTS_LIMIT]
        return {
            "project": serialize(project, ProjectOut),
            "related_projects": serialize(related, ProjectOut),
        }

    payload = page_cache.get_or_build(f"/projects/{project_id}", (), build)
    if payload is None:
        raise HTTPException(status_code=404, detail="Project not found.")
    return payload


@router.get("/api/pages/staff")
def get_staff_page(db: Session = Depends(get_db)):
    def build():
        return {
            "intro": query_service.get_staff_intro(db),
            "ceo_section": query_service.get_ceo_section(db),
            "team_members": serialize(query_service.get_team_members(db), TeamMemberOut),
            "join_team_cta": query_service.get_join_team_cta(db),
        }

    return page_cache.get_or_build("/staff", (), build)


@router.get("/api/pages/careers")
def get_careers_page(db: Session = Depends(get_db)):
    def build():
        return {
            "hiring_status": query_service.get_hiring_status(db),
            "job_positions": serialize(query_service.get_job_positions(db), JobPositionOut),
        }

    return page_cache.get_or_build("/careers", (), build)


@router.get("/api/pages/contact")
def get_contact_page(db: Session = Depends(get_db)):
    return page_cache.get_or_build("/contact", (), lambda: {"contact_info": query_service.get_contact_info(db)})
