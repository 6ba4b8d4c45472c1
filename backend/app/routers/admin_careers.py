"""Admin API for open job positions."""

from fastapi import APIRouter

from app.schemas.careers import JobPositionCreate, JobPositionOut, JobPositionUpdate
from app.services import content_registry as registry
from app.utils.crud_routes import register_collection_routes

router = APIRouter(prefix="/api/admin/job-positions", tags=["admin-careers"])

register_collection_routes(router, registry.job_positions, JobPositionCreate, JobPositionUpdate, JobPositionOut)
