"""Local-disk asset storage. Files live under ``UPLOAD_DIR/<folder>/`` and are served at ``UPLOAD_URL_PREFIX``."""

import base64
import binascii
import logging
import os
import re
import time
import uuid
from dataclasses import dataclass
from typing import Iterable, Optional
from urllib.parse import unquote, urlparse

from app.config import settings

logger = logging.getLogger(__name__)

_UNSAFE_NAME_RE = re.compile(r"[^a-zA-Z0-9.-]")
_DATA_URL_PREFIX_RE = re.compile(r"^data:[^;]+;base64,")


class StorageError(Exception):
    pass


@dataclass
class UploadResult:
    success: bool
    url: Optional[str] = None
    path: Optional[str] = None
    size: int = 0
    error: Optional[str] = None


def _folder_root(folder: str) -> str:
    if folder not in settings.STORAGE_FOLDERS:
        raise StorageError(f'Storage folder "{folder}" does not exist.')
    return os.path.join(settings.UPLOAD_DIR, folder)


def _url_prefix() -> str:
    return "/" + settings.UPLOAD_URL_PREFIX.strip("/")


def upload(data: bytes, folder: str, filename: str, content_type: str | None = None) -> str:
    root = _folder_root(folder)
    if not data:
        raise StorageError("File is empty.")
    if len(data) > settings.MAX_UPLOAD_SIZE:
        limit_mb = settings.MAX_UPLOAD_SIZE // (1024 * 1024)
        raise StorageError(f"File size exceeds {limit_mb}MB limit")

    clean_name = _UNSAFE_NAME_RE.sub("_", filename or "") or "file"
    stored_name = f"{int(time.time() * 1000)}-{uuid.uuid4().hex[:8]}-{clean_name}"

    os.makedirs(root, exist_ok=True)
    try:
        with open(os.path.join(root, stored_name), "wb") as f:
            f.write(data)
    except OSError as exc:
        raise StorageError(f"Could not store file: {exc}") from exc

    logger.info(
        "[storage] stored %s/%s (%d bytes, %s)",
        folder,
        stored_name,
        len(data),
        content_type or "unknown type",
    )
    return f"{_url_prefix()}/{folder}/{stored_name}"


def upload_base64(file_data: str, file_name: str, folder: str, content_type: str | None = None) -> UploadResult:
    """Decode an inline base64 payload (optionally a data URL) and store it."""
    raw = "".join(_DATA_URL_PREFIX_RE.sub("", (file_data or "").strip()).split())
    try:
        content = base64.b64decode(raw, validate=True)
    except (binascii.Error, ValueError):
        return UploadResult(success=False, error="File data is not valid base64.")

    try:
        url = upload(content, folder, file_name, content_type)
    except StorageError as exc:
        logger.warning("[storage] upload of %s to %s failed: %s", file_name, folder, exc)
        return UploadResult(success=False, error=str(exc))
    return UploadResult(success=True, url=url, path=url.rsplit("/", 1)[-1], size=len(content))


def extract_path_from_url(url: str | None) -> tuple[str, str] | None:
    """Return ``(folder, filename)`` for a URL produced by :func:`upload`, else ``None``."""
    if not url:
        return None
    path = unquote(urlparse(url).path)
    prefix = _url_prefix() + "/"
    if not path.startswith(prefix):
        return None
    parts = path[len(prefix):].split("/", 1)
    if len(parts) != 2 or not parts[0] or not parts[1]:
        return None
    return parts[0], parts[1]


def delete_by_url(url: str | None, folder: str) -> bool:
    """Delete a stored asset. URLs that do not point into storage are treated as nothing to delete."""
    if not url:
        return True
    located = extract_path_from_url(url)
    if located is None:
        logger.warning("[storage] could not extract a storage path from %s", url)
        return True

    url_folder, name = located
    if url_folder != folder:
        logger.warning("[storage] %s lives in %s, expected %s", url, url_folder, folder)
    root = os.path.abspath(_folder_root(url_folder))
    target = os.path.abspath(os.path.join(root, name))
    if os.path.commonpath([root, target]) != root:
        raise StorageError(f"Refusing to delete outside of {url_folder}: {url}")

    if not os.path.exists(target):
        logger.warning("[storage] %s already missing", url)
        return True
    try:
        os.remove(target)
    except OSError as exc:
        raise StorageError(f"Could not delete {url}: {exc}") from exc
    logger.info("[storage] deleted %s", url)
    return True


def delete_many_by_url(urls: Iterable[str | None], folder: str) -> bool:
    ok = True
    for url in urls:
        try:
            delete_by_url(url, folder)
        except StorageError as exc:
            logger.warning("[storage] %s", exc)
            ok = False
    return ok


def list_stored_urls() -> set[str]:
    if not os.path.exists(settings.UPLOAD_DIR):
        return set()

    existing: set[str] = set()
    for folder in settings.STORAGE_FOLDERS:
        root = os.path.join(settings.UPLOAD_DIR, folder)
        for dirpath, _, filenames in os.walk(root):
            for filename in filenames:
                rel_path = os.path.relpath(os.path.join(dirpath, filename), settings.UPLOAD_DIR).replace("\\", "/")
                existing.add(f"{_url_prefix()}/{rel_path}")
    return existing
