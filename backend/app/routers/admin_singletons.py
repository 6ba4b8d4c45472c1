"""Admin API for singleton content blocks (one logical row per block)."""

from fastapi import APIRouter, Body, Depends, HTTPException
from fastapi.encoders import jsonable_encoder
from pydantic import ValidationError
from sqlalchemy.orm import Session

from app.database import get_db
from app.middleware.auth_middleware import get_current_user
from app.models.user import User
from app.schemas.about import AboutIntroUpdate
from app.schemas.careers import HiringStatusUpdate
from app.schemas.common import MutationOut, SingletonOut
from app.schemas.home import CeoSectionUpdate, LearnMoreSectionUpdate
from app.schemas.project import PortfolioHeaderUpdate
from app.schemas.site import ContactInfoUpdate, LogoAndNameUpdate, SiteSettingsUpdate, SiteStatsUpdate
from app.schemas.team import JoinTeamCtaUpdate, StaffIntroUpdate
from app.services.content_registry import SINGLETONS
from app.services.content_service import SingletonResource, row_to_dict
from app.utils.helpers import mutation_response

router = APIRouter(prefix="/api/admin/singletons", tags=["admin-content"])

UPDATE_SCHEMAS = {
    "logo-and-name": LogoAndNameUpdate,
    "site-settings": SiteSettingsUpdate,
    "ceo-section": CeoSectionUpdate,
    "learn-more": LearnMoreSectionUpdate,
    "contact-info": ContactInfoUpdate,
    "portfolio-header": PortfolioHeaderUpdate,
    "about-intro": AboutIntroUpdate,
    "staff-intro": StaffIntroUpdate,
    "join-team-cta": JoinTeamCtaUpdate,
    "hiring-status": HiringStatusUpdate,
    "site-stats": SiteStatsUpdate,
}


def _resolve(key: str) -> SingletonResource:
    resource = SINGLETONS.get(key)
    if resource is None:
        raise HTTPException(status_code=404, detail=f"Unknown content block: {key}")
    return resource


@router.get("", response_model=list[str])
def list_singleton_keys(current_user: User = Depends(get_current_user)):
    _ = current_user
    return sorted(SINGLETONS)


@router.get("/{key}", response_model=SingletonOut)
def get_singleton(
    key: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    _ = current_user
    resource = _resolve(key)
    row = resource.get_admin(db)
    if row is None:
        return SingletonOut(key=key, is_default=True, data=jsonable_encoder(resource.defaults))
    return SingletonOut(key=key, is_default=False, data=jsonable_encoder(row_to_dict(row)))


@router.put("/{key}", response_model=MutationOut)
def update_singleton(
    key: str,
    payload: dict = Body(...),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    _ = current_user
    resource = _resolve(key)
    try:
        data = UPDATE_SCHEMAS[key].model_validate(payload)
    except ValidationError as exc:
        errors = exc.errors(include_url=False, include_context=False)
        raise HTTPException(status_code=422, detail=jsonable_encoder(errors))

    patch = data.model_dump(exclude_unset=True, exclude={"version"})
    result = resource.upsert(db, patch, expected_version=data.version)
    if result.success:
        result.data = row_to_dict(result.data)
    return mutation_response(result)
