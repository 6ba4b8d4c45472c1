"""Request/response contracts for contact form submissions."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class ContactSubmissionCreate(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    email: str = Field(min_length=3, max_length=150, pattern=r"^[^@\s]+@[^@\s]+$")
    phone: str = Field(min_length=1, max_length=50)
    alternative_phone: Optional[str] = None
    subject: str = Field(min_length=1, max_length=200)
    message: str = Field(min_length=1)


class ContactSubmissionOut(BaseModel):
    id: int
    name: str
    email: str
    phone: str
    alternative_phone: Optional[str] = None
    subject: str
    message: str
    is_read: bool
    created_at: datetime

    model_config = {"from_attributes": True}


class ReadStateUpdate(BaseModel):
    is_read: bool = True
