"""Admin API for the portfolio: project categories and projects."""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from app.database import get_db
from app.middleware.auth_middleware import get_current_user
from app.models.user import User
from app.schemas.common import MutationOut
from app.schemas.project import (
    ProjectCategoryCreate,
    ProjectCategoryOut,
    ProjectCategoryUpdate,
    ProjectCreate,
    ProjectFeaturedUpdate,
    ProjectOut,
    ProjectStatus,
    ProjectUpdate,
)
from app.services import content_registry as registry
from app.utils.crud_routes import register_collection_routes
from app.utils.filters import filter_projects
from app.utils.helpers import mutation_response

categories_router = APIRouter(prefix="/api/admin/project-categories", tags=["admin-projects"])
router = APIRouter(prefix="/api/admin/projects", tags=["admin-projects"])


@categories_router.delete("/{item_id:int}", response_model=MutationOut)
def delete_category(
    item_id: int,
    confirm: bool = Query(False),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    _ = current_user
    project_count = registry.projects.count(db, {"category_id": item_id})
    if project_count and not confirm:
        raise HTTPException(
            status_code=409,
            detail=(
                f"{project_count} project(s) use this category. "
                "Deleting it leaves them uncategorized; repeat with confirm=true to proceed."
            ),
        )
    return mutation_response(registry.project_categories.delete(db, item_id))


register_collection_routes(
    categories_router,
    registry.project_categories,
    ProjectCategoryCreate,
    ProjectCategoryUpdate,
    ProjectCategoryOut,
    include_delete=False,
)


@router.get("", response_model=List[ProjectOut])
def list_projects(
    q: str | None = None,
    category_id: int | None = None,
    status: ProjectStatus | None = None,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    _ = current_user
    rows = registry.projects.list_admin(db)
    return filter_projects(rows, text=q, category_id=category_id, status=status)


@router.put("/{item_id:int}/featured", response_model=MutationOut)
def set_project_featured(
    item_id: int,
    data: ProjectFeaturedUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    _ = current_user
    return mutation_response(registry.projects.update(db, item_id, {"is_featured": data.is_featured}), ProjectOut)


register_collection_routes(
    router,
    registry.projects,
    ProjectCreate,
    ProjectUpdate,
    ProjectOut,
    include_list=False,
)
