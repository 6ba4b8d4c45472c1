"""Admin user account model."""

from sqlalchemy import Column, Integer, String, Boolean, DateTime
from sqlalchemy.sql import func
from werkzeug.security import check_password_hash, generate_password_hash

from app.database import Base


class User(Base):
    __tablename__ = "users"

    user_id = Column(Integer, primary_key=True, autoincrement=True)
    email = Column(String(150), unique=True, nullable=False)
    password_hash = Column(String(256), nullable=False)
    name = Column(String(50), nullable=False)
    role = Column(String(20), nullable=False, default="editor")  # admin/editor
    is_active = Column(Boolean, default=True)
    created_at = Column(DateTime, server_default=func.now())

    def set_password(self, password: str) -> None:
        self.password_hash = generate_password_hash(password)

    def check_password(self, password: str) -> bool:
        return check_password_hash(self.password_hash, password)
