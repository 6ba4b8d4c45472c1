"""Create every content table and bring existing ones up to the current models.

Usage:
  python scripts/init_db.py
"""
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from sqlalchemy import inspect

from app.config import settings
from app.database import Base, engine
import app.models  # noqa: F401 - registers all models
from app.utils.schema_sync import sync_missing_schema_objects


def init_db():
    print(f"Database: {settings.DATABASE_URL}")
    before = set(inspect(engine).get_table_names())
    Base.metadata.create_all(bind=engine)
    created = sorted(set(inspect(engine).get_table_names()) - before)
    changes = sync_missing_schema_objects(engine, Base.metadata)

    for name in created:
        print(f"  created table {name}")
    for change in changes:
        print(f"  added {change}")
    if not created and not changes:
        print("  schema already up to date")


if __name__ == "__main__":
    init_db()
