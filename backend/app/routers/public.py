"""Public endpoints outside the page payloads: contact form, logo, sitemap and robots."""

import logging
from html import escape as xml_escape

from fastapi import APIRouter, Depends
from fastapi.responses import Response
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.config import settings
from app.database import get_db
from app.models.project import Project
from app.schemas.common import MutationOut
from app.schemas.contact import ContactSubmissionCreate, ContactSubmissionOut
from app.services import contact_service, query_service
from app.utils.helpers import mutation_response

logger = logging.getLogger(__name__)

router = APIRouter(tags=["public"])

STATIC_PAGES = [
    ("/", "weekly", "1.0"),
    ("/about", "monthly", "0.8"),
    ("/projects", "weekly", "0.9"),
    ("/staff", "monthly", "0.7"),
    ("/careers", "monthly", "0.6"),
    ("/contact", "monthly", "0.7"),
]


def _absolute_url(path: str) -> str:
    base = settings.SITE_URL.rstrip("/")
    return base if path == "/" else f"{base}{path}"


def _sitemap_entry(path: str, lastmod=None, changefreq: str = "monthly", priority: str = "0.6") -> str:
    lines = ["  <url>", f"    <loc>{xml_escape(_absolute_url(path))}</loc>"]
    if lastmod:
        lines.append(f"    <lastmod>{lastmod.strftime('%Y-%m-%dT%H:%M:%SZ')}</lastmod>")
    lines.append(f"    <changefreq>{changefreq}</changefreq>")
    lines.append(f"    <priority>{priority}</priority>")
    lines.append("  </url>")
    return "\n".join(lines)


@router.post("/api/contact", response_model=MutationOut)
def submit_contact_form(data: ContactSubmissionCreate, db: Session = Depends(get_db)):
    return mutation_response(contact_service.submit(db, data), ContactSubmissionOut)


@router.get("/api/logo")
def get_logo(db: Session = Depends(get_db)):
    logo = query_service.get_logo_and_name(db)
    if logo is None:
        return {"logo_url": None, "company_name": None}
    return logo


@router.get("/sitemap.xml")
def sitemap_xml(db: Session = Depends(get_db)):
    entries = [_sitemap_entry(path, changefreq=freq, priority=priority) for path, freq, priority in STATIC_PAGES]
    try:
        projects = db.query(Project.id, Project.updated_at, Project.created_at).order_by(Project.created_at.desc()).all()
        for project_id, updated_at, created_at in projects:
            entries.append(_sitemap_entry(f"/projects/{project_id}", lastmod=updated_at or created_at))
    except SQLAlchemyError:
        db.rollback()
        logger.exception("[sitemap] failed to list projects, serving static entries only")

    body = "\n".join([
        '<?xml version="1.0" encoding="UTF-8"?>',
        '<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">',
        *entries,
        "</urlset>",
    ])
    return Response(content=body, media_type="application/xml", headers={"Cache-Control": "public, max-age=3600"})


@router.get("/robots.txt")
def robots_txt():
    body = "\n".join([
        "User-agent: *",
        "Allow: /",
        "Disallow: /admin/",
        "Disallow: /api/",
        "",
        f"Sitemap: {_absolute_url('/sitemap.xml')}",
        "",
    ])
    return Response(content=body, media_type="text/plain", headers={"Cache-Control": "public, max-age=3600"})
