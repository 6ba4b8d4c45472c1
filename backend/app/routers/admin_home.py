"""Admin API for home page collections."""

from fastapi import APIRouter

from app.schemas.home import HeroSlideCreate, HeroSlideOut, HeroSlideUpdate
from app.services import content_registry as registry
from app.utils.crud_routes import register_collection_routes

router = APIRouter(prefix="/api/admin/hero-slides", tags=["admin-home"])

register_collection_routes(router, registry.hero_slides, HeroSlideCreate, HeroSlideUpdate, HeroSlideOut)
