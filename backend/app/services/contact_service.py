"""Contact form submissions: public insert, admin inbox."""

import logging

from fastapi import HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.models.contact import ContactSubmission
from app.schemas.contact import ContactSubmissionCreate
from app.services.content_service import BackendUnavailable, MutationResult, error_message

logger = logging.getLogger(__name__)


def submit(db: Session, data: ContactSubmissionCreate) -> MutationResult:
    row = ContactSubmission(**data.model_dump(), is_read=False)
    try:
        db.add(row)
        db.commit()
        db.refresh(row)
    except SQLAlchemyError as exc:
        db.rollback()
        message = error_message(exc)
        logger.warning("[contact] failed to store submission from %s: %s", data.email, message)
        return MutationResult.fail(message)
    logger.info("[contact] new submission %s (%s)", row.id, data.subject)
    return MutationResult.ok(row)


def list_submissions(db: Session, unread_only: bool = False, limit: int | None = None) -> list[ContactSubmission]:
    try:
        query = db.query(ContactSubmission)
        if unread_only:
            query = query.filter(ContactSubmission.is_read == False)  # noqa: E712
        query = query.order_by(ContactSubmission.created_at.desc(), ContactSubmission.id.desc())
        if limit is not None:
            query = query.limit(limit)
        return query.all()
    except SQLAlchemyError as exc:
        raise BackendUnavailable(error_message(exc)) from exc


def get_submission(db: Session, submission_id: int) -> ContactSubmission:
    try:
        row = db.get(ContactSubmission, submission_id)
    except SQLAlchemyError as exc:
        raise BackendUnavailable(error_message(exc)) from exc
    if not row:
        raise HTTPException(status_code=404, detail="Contact submission not found.")
    return row


def set_read_state(db: Session, submission_id: int, is_read: bool) -> MutationResult:
    row = get_submission(db, submission_id)
    try:
        row.is_read = is_read
        db.commit()
        db.refresh(row)
    except SQLAlchemyError as exc:
        db.rollback()
        return MutationResult.fail(error_message(exc))
    return MutationResult.ok(row)


def delete_submission(db: Session, submission_id: int) -> MutationResult:
    row = get_submission(db, submission_id)
    try:
        db.delete(row)
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        return MutationResult.fail(error_message(exc))
    return MutationResult.ok({"id": submission_id})


def unread_count(db: Session) -> int:
    try:
        return db.query(ContactSubmission).filter(ContactSubmission.is_read == False).count()  # noqa: E712
    except SQLAlchemyError as exc:
        raise BackendUnavailable(error_message(exc)) from exc


def recent_submissions(db: Session, limit: int = 5) -> list[ContactSubmission]:
    return list_submissions(db, limit=limit)
