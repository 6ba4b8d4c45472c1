"""FastAPI entry point: public page payloads, admin CMS API, uploads and optional static frontend."""

import logging
import os

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from app.config import settings
from app.database import Base, engine
import app.models  # noqa: F401 - registers models on the metadata
from app.routers import (
    admin_about, admin_careers, admin_contact, admin_home, admin_projects, admin_singletons, admin_team,
    auth, dashboard, pages, public, uploads,
)
from app.services.content_service import BackendUnavailable
from app.utils.schema_sync import sync_missing_schema_objects

logging.basicConfig(
    level=getattr(logging, str(settings.LOG_LEVEL).upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Land8Form website CMS",
    description="Public page content and admin management API for an architecture studio website",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(BackendUnavailable)
def backend_unavailable_handler(request: Request, exc: BackendUnavailable):
    logger.warning("[content] backend unavailable for %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=503, content={"detail": "connection error"})


# Register all routers
app.include_router(auth.router)
app.include_router(pages.router)
app.include_router(public.router)
app.include_router(admin_singletons.router)
app.include_router(admin_home.router)
app.include_router(admin_team.router)
app.include_router(admin_projects.categories_router)
app.include_router(admin_projects.router)
app.include_router(admin_about.philosophy_router)
app.include_router(admin_about.collaborations_router)
app.include_router(admin_about.timeline_router)
app.include_router(admin_about.office_gallery_router)
app.include_router(admin_careers.router)
app.include_router(admin_contact.router)
app.include_router(dashboard.router)
app.include_router(uploads.router)


@app.on_event("startup")
def ensure_schema():
    # New tables are created, new columns on existing tables are added in place.
    Base.metadata.create_all(bind=engine)
    sync_missing_schema_objects(engine, Base.metadata)


@app.get("/api/health")
def health_check():
    return {"status": "ok", "service": "Land8Form website CMS"}


# Static file serving for uploads
os.makedirs(settings.UPLOAD_DIR, exist_ok=True)
app.mount(settings.UPLOAD_URL_PREFIX, StaticFiles(directory=settings.UPLOAD_DIR), name="uploads")

# Serve frontend static files
frontend_dir = os.path.join(os.path.dirname(os.path.dirname(os.path.dirname(__file__))), "frontend")
if os.path.exists(frontend_dir):
    app.mount("/", StaticFiles(directory=frontend_dir, html=True), name="frontend")
