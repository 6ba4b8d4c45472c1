"""Auth Service layer. Password sign-in and access token issuing for the admin panel."""

import logging
from datetime import datetime, timedelta, timezone

from jose import jwt
from sqlalchemy.orm import Session
from fastapi import HTTPException, status

from app.models.user import User
from app.config import settings

ALGORITHM = "HS256"

logger = logging.getLogger(__name__)


def create_access_token(user_id: int) -> str:
    expire = datetime.now(timezone.utc) + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    payload = {"sub": str(user_id), "exp": expire}
    return jwt.encode(payload, settings.SECRET_KEY, algorithm=ALGORITHM)


def sign_in(db: Session, email: str, password: str) -> User:
    normalized = (email or "").strip().lower()
    user = db.query(User).filter(User.email == normalized, User.is_active == True).first()  # noqa: E712
    if not user or not user.check_password(password):
        logger.info("[auth] rejected sign-in for %s", normalized)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password.",
        )
    return user


def change_password(db: Session, user: User, current_password: str, new_password: str) -> None:
    if not user.check_password(current_password):
        raise HTTPException(status_code=400, detail="Current password is incorrect.")
    user.set_password(new_password)
    db.commit()


def create_user(db: Session, email: str, password: str, name: str, role: str = "editor") -> User:
    user = User(email=email.strip().lower(), name=name, role=role, is_active=True)
    user.set_password(password)
    db.add(user)
    db.commit()
    db.refresh(user)
    return user
