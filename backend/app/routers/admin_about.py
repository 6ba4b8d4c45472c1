"""Admin API for about page collections: philosophy, collaborations, timeline and office gallery."""

from fastapi import APIRouter, HTTPException
from sqlalchemy.orm import Session

from app.schemas.about import (
    CollaborationCreate,
    CollaborationOut,
    CollaborationUpdate,
    OfficeGalleryImageCreate,
    OfficeGalleryImageOut,
    OfficeGalleryImageUpdate,
    PhilosophyPrincipleCreate,
    PhilosophyPrincipleOut,
    PhilosophyPrincipleUpdate,
    TimelineEventCreate,
    TimelineEventOut,
    TimelineEventUpdate,
)
from app.services import content_registry as registry
from app.utils.crud_routes import register_collection_routes

philosophy_router = APIRouter(prefix="/api/admin/philosophy-principles", tags=["admin-about"])
collaborations_router = APIRouter(prefix="/api/admin/collaborations", tags=["admin-about"])
timeline_router = APIRouter(prefix="/api/admin/timeline", tags=["admin-about"])
office_gallery_router = APIRouter(prefix="/api/admin/office-gallery", tags=["admin-about"])


def _timeline_description(db: Session, payload: dict) -> dict:
    _ = db
    title = (payload.get("title") or "").strip()
    description = (payload.get("description") or "").strip()
    if not title and not description:
        raise HTTPException(status_code=400, detail="A timeline event needs a title or a description.")
    # The public timeline renders description only.
    payload["description"] = description or title
    return payload


register_collection_routes(
    philosophy_router,
    registry.philosophy_principles,
    PhilosophyPrincipleCreate,
    PhilosophyPrincipleUpdate,
    PhilosophyPrincipleOut,
)
register_collection_routes(
    collaborations_router,
    registry.collaborations,
    CollaborationCreate,
    CollaborationUpdate,
    CollaborationOut,
)
register_collection_routes(
    timeline_router,
    registry.practice_timeline,
    TimelineEventCreate,
    TimelineEventUpdate,
    TimelineEventOut,
    prepare_create=_timeline_description,
)
register_collection_routes(
    office_gallery_router,
    registry.office_gallery,
    OfficeGalleryImageCreate,
    OfficeGalleryImageUpdate,
    OfficeGalleryImageOut,
)
