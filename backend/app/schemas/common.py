"""Request/response contracts shared by every admin content endpoint."""

from typing import Any, Optional

from pydantic import BaseModel


class MutationOut(BaseModel):
    success: bool
    data: Any = None
    error: Optional[str] = None


class ReorderRequest(BaseModel):
    ids: list[int]


class SingletonOut(BaseModel):
    key: str
    is_default: bool
    data: dict
