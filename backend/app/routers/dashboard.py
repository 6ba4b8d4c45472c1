"""Admin dashboard aggregates."""

from datetime import date

from fastapi import APIRouter, Depends
from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.database import get_db
from app.middleware.auth_middleware import get_current_user
from app.models.about import PracticeTimeline
from app.models.contact import ContactSubmission
from app.models.user import User
from app.schemas.contact import ContactSubmissionOut
from app.services import contact_service
from app.services import content_registry as registry
from app.services.content_service import BackendUnavailable, error_message

router = APIRouter(prefix="/api/admin/dashboard", tags=["admin-dashboard"])

RECENT_SUBMISSIONS_LIMIT = 5


def _years_of_experience(db: Session) -> int:
    start_year = db.query(func.min(PracticeTimeline.year)).scalar()
    current_year = date.today().year
    if start_year is None:
        return 0
    return max(current_year - int(start_year), 0)


@router.get("")
def get_dashboard(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    _ = current_user
    try:
        total_submissions = db.query(ContactSubmission).count()
        years = _years_of_experience(db)
    except SQLAlchemyError as exc:
        raise BackendUnavailable(error_message(exc)) from exc

    recent = contact_service.recent_submissions(db, limit=RECENT_SUBMISSIONS_LIMIT)
    return {
        "total_projects": registry.projects.count(db),
        "total_team_members": registry.team_members.count(db),
        "total_contact_submissions": total_submissions,
        "unread_submissions": contact_service.unread_count(db),
        "featured_projects": registry.projects.count(db, {"is_featured": True}),
        "years_of_experience": years,
        "recent_submissions": [ContactSubmissionOut.model_validate(row).model_dump(mode="json") for row in recent],
    }
