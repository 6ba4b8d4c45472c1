"""Upload request/response contracts."""

from typing import Optional

from pydantic import BaseModel


class Base64UploadRequest(BaseModel):
    file_data: str
    file_name: str
    folder: str = "general"
    content_type: Optional[str] = None


class UploadResultOut(BaseModel):
    success: bool
    url: Optional[str] = None
    path: Optional[str] = None
    size: int = 0
    error: Optional[str] = None


class AssetDeleteOut(BaseModel):
    success: bool
    error: Optional[str] = None


class AssetCleanupOut(BaseModel):
    dry_run: bool
    referenced_count: int
    existing_count: int
    orphan_count: int
    deleted_count: int
    orphan_urls: list[str]
