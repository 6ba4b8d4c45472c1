"""Cleanup stored assets that no content references.

Usage:
  python scripts/cleanup_orphan_assets.py            # dry-run
  python scripts/cleanup_orphan_assets.py --apply    # delete orphan files
"""
import argparse
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.database import SessionLocal
from app.services import asset_cleanup_service


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--apply", action="store_true", help="Actually delete orphan files")
    args = parser.parse_args()

    db = SessionLocal()
    try:
        result = asset_cleanup_service.cleanup_orphan_assets(db, dry_run=not args.apply)
    finally:
        db.close()

    print("Orphan asset cleanup result")
    for key in ("dry_run", "referenced_count", "existing_count", "orphan_count", "deleted_count"):
        print(f"  {key}: {result[key]}")
    if result["orphan_urls"]:
        print("  orphan_urls:")
        for url in result["orphan_urls"]:
            print(f"    - {url}")


if __name__ == "__main__":
    main()
