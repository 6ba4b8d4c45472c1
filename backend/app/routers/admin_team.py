"""Admin API for team members."""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.database import get_db
from app.middleware.auth_middleware import get_current_user
from app.models.user import User
from app.schemas.team import TeamMemberCreate, TeamMemberOut, TeamMemberUpdate, TeamRole
from app.services import content_registry as registry
from app.utils.crud_routes import register_collection_routes

router = APIRouter(prefix="/api/admin/team-members", tags=["admin-team"])


@router.get("", response_model=List[TeamMemberOut])
def list_team_members(
    role: TeamRole | None = None,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    _ = current_user
    return registry.team_members.list_admin(db, filters={"role": role})


register_collection_routes(
    router,
    registry.team_members,
    TeamMemberCreate,
    TeamMemberUpdate,
    TeamMemberOut,
    include_list=False,
)
