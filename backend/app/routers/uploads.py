"""Admin asset uploads: inline base64, multipart, delete by URL and orphan cleanup."""

from dataclasses import asdict

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from app.config import settings
from app.database import get_db
from app.middleware.auth_middleware import get_current_user, require_roles
from app.models.user import User
from app.schemas.upload import AssetCleanupOut, AssetDeleteOut, Base64UploadRequest, UploadResultOut
from app.services import asset_cleanup_service, storage_service
from app.utils.helpers import save_upload

router = APIRouter(prefix="/api/admin/uploads", tags=["uploads"])


def _validate_folder(folder: str) -> str:
    if folder not in settings.STORAGE_FOLDERS:
        raise HTTPException(
            status_code=400,
            detail=f"Unknown upload folder. Allowed: {', '.join(settings.STORAGE_FOLDERS)}",
        )
    return folder


def _upload_response(result: storage_service.UploadResult):
    if not result.success:
        return JSONResponse(status_code=400, content=asdict(result))
    return result


@router.post("", response_model=UploadResultOut)
def upload_base64(
    data: Base64UploadRequest,
    current_user: User = Depends(get_current_user),
):
    _ = current_user
    _validate_folder(data.folder)
    result = storage_service.upload_base64(data.file_data, data.file_name, data.folder, data.content_type)
    return _upload_response(result)


@router.post("/files", response_model=UploadResultOut)
async def upload_file(
    file: UploadFile = File(...),
    folder: str = Form("general"),
    current_user: User = Depends(get_current_user),
):
    _ = current_user
    _validate_folder(folder)
    return _upload_response(await save_upload(file, folder))


@router.delete("", response_model=AssetDeleteOut)
def delete_asset(
    url: str,
    folder: str,
    current_user: User = Depends(get_current_user),
):
    _ = current_user
    _validate_folder(folder)
    try:
        storage_service.delete_by_url(url, folder)
    except storage_service.StorageError as exc:
        return AssetDeleteOut(success=False, error=str(exc))
    return AssetDeleteOut(success=True)


@router.post("/cleanup", response_model=AssetCleanupOut)
def cleanup_orphan_assets(
    dry_run: bool = True,
    db: Session = Depends(get_db),
    _current_user: User = Depends(require_roles("admin")),
):
    return asset_cleanup_service.cleanup_orphan_assets(db, dry_run=dry_run)
