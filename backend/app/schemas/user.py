"""User and login request/response contracts."""

from pydantic import BaseModel, Field
from datetime import datetime


class UserOut(BaseModel):
    user_id: int
    email: str
    name: str
    role: str
    is_active: bool
    created_at: datetime

    model_config = {"from_attributes": True}


class LoginRequest(BaseModel):
    email: str
    password: str


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user: UserOut


class PasswordUpdate(BaseModel):
    current_password: str
    new_password: str = Field(min_length=8)
