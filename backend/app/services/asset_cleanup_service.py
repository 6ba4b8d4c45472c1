"""Finds stored assets that no content row references any more and optionally removes them."""

import logging
import os

from sqlalchemy.orm import Session

from app.config import settings
from app.services import storage_service
from app.services.content_registry import COLLECTIONS, SINGLETONS

logger = logging.getLogger(__name__)


def collect_referenced_asset_urls(db: Session) -> set[str]:
    referenced: set[str] = set()
    for resource in list(SINGLETONS.values()) + list(COLLECTIONS.values()):
        referenced.update(resource.asset_urls(db))
    return referenced


def cleanup_orphan_assets(db: Session, dry_run: bool = True) -> dict:
    referenced = collect_referenced_asset_urls(db)
    existing = storage_service.list_stored_urls()
    orphan_urls = sorted(existing - referenced)

    deleted_count = 0
    if not dry_run:
        for url in orphan_urls:
            located = storage_service.extract_path_from_url(url)
            if located is None:
                continue
            try:
                storage_service.delete_by_url(url, located[0])
            except storage_service.StorageError as exc:
                logger.warning("[storage] orphan cleanup skipped %s: %s", url, exc)
                continue
            deleted_count += 1

        for folder in settings.STORAGE_FOLDERS:
            _remove_empty_dirs(os.path.join(settings.UPLOAD_DIR, folder))

    logger.info(
        "[storage] orphan scan: %d stored, %d referenced, %d orphaned, %d deleted",
        len(existing),
        len(referenced),
        len(orphan_urls),
        deleted_count,
    )
    return {
        "dry_run": dry_run,
        "referenced_count": len(referenced),
        "existing_count": len(existing),
        "orphan_count": len(orphan_urls),
        "deleted_count": deleted_count,
        "orphan_urls": orphan_urls,
    }


def _remove_empty_dirs(root: str):
    if not os.path.exists(root):
        return
    for dirpath, dirnames, filenames in os.walk(root, topdown=False):
        if dirnames or filenames or dirpath == root:
            continue
        try:
            os.rmdir(dirpath)
        except OSError:
            logger.debug("[storage] could not remove empty dir %s", dirpath)
