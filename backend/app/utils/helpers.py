from typing import Any, Type

from fastapi import UploadFile
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from app.services import storage_service
from app.services.content_service import MutationResult


def serialize(data: Any, out_schema: Type[BaseModel] | None = None) -> Any:
    if out_schema is None or data is None or isinstance(data, dict):
        return jsonable_encoder(data)
    if isinstance(data, list):
        return [out_schema.model_validate(item).model_dump(mode="json") for item in data]
    return out_schema.model_validate(data).model_dump(mode="json")


def mutation_response(result: MutationResult, out_schema: Type[BaseModel] | None = None):
    """Tagged ``{success, data | error}`` body; failures keep the status the service chose."""
    if not result.success:
        return JSONResponse(
            status_code=result.status_code,
            content={"success": False, "data": None, "error": result.error},
        )
    return {"success": True, "data": serialize(result.data, out_schema), "error": None}


async def save_upload(file: UploadFile, folder: str) -> storage_service.UploadResult:
    content = await file.read()
    try:
        url = storage_service.upload(content, folder, file.filename or "file", file.content_type)
    except storage_service.StorageError as exc:
        return storage_service.UploadResult(success=False, error=str(exc))
    return storage_service.UploadResult(success=True, url=url, path=url.rsplit("/", 1)[-1], size=len(content))
