"""Admin inbox for contact form submissions."""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.database import get_db
from app.middleware.auth_middleware import get_current_user
from app.models.user import User
from app.schemas.common import MutationOut
from app.schemas.contact import ContactSubmissionOut, ReadStateUpdate
from app.services import contact_service
from app.utils.helpers import mutation_response

router = APIRouter(prefix="/api/admin/contact-submissions", tags=["admin-contact"])


@router.get("", response_model=List[ContactSubmissionOut])
def list_submissions(
    unread_only: bool = False,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    _ = current_user
    return contact_service.list_submissions(db, unread_only=unread_only)


@router.get("/unread-count")
def get_unread_count(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    _ = current_user
    return {"count": contact_service.unread_count(db)}


@router.get("/{submission_id:int}", response_model=ContactSubmissionOut)
def get_submission(
    submission_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    _ = current_user
    return contact_service.get_submission(db, submission_id)


@router.put("/{submission_id:int}/read", response_model=MutationOut)
def set_read_state(
    submission_id: int,
    data: ReadStateUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    _ = current_user
    return mutation_response(contact_service.set_read_state(db, submission_id, data.is_read), ContactSubmissionOut)


@router.delete("/{submission_id:int}", response_model=MutationOut)
def delete_submission(
    submission_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    _ = current_user
    return mutation_response(contact_service.delete_submission(db, submission_id))
