"""Seed the database with the bootstrap admin account and starter website content."""
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.config import settings
from app.database import SessionLocal, engine, Base
import app.models  # noqa: F401

from app.models.user import User
from app.services import content_registry as registry
from app.services.auth_service import create_user

CATEGORIES = [
    {"name": "Residential", "slug": "residential"},
    {"name": "Commercial", "slug": "commercial"},
    {"name": "Interior", "slug": "interior"},
    {"name": "Landscape", "slug": "landscape"},
]

PHILOSOPHY = [
    {"title": "Context first", "description": "Every building answers to its site, climate and neighbours."},
    {"title": "Honest materials", "description": "We let structure and material speak for themselves."},
    {"title": "Designed to last", "description": "Durable spaces that adapt to the people who use them."},
]

TIMELINE = [
    {"year": 2000, "title": "Studio founded", "description": "The practice opens its first office."},
    {"year": 2012, "title": "First international commission", "description": "Our work crosses borders."},
]


def seed():
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        if db.query(User).count() > 0:
            print("Database already seeded. Skipping.")
            return

        admin = create_user(db, settings.ADMIN_EMAIL, settings.ADMIN_PASSWORD, name="Administrator", role="admin")
        print(f"Admin account: {admin.email}")

        for resource in registry.SINGLETONS.values():
            result = resource.upsert(db, dict(resource.defaults))
            if not result.success:
                print(f"  could not seed {resource.label}: {result.error}")

        for payload in CATEGORIES:
            registry.project_categories.add(db, payload)
        for payload in PHILOSOPHY:
            registry.philosophy_principles.add(db, payload)
        for payload in TIMELINE:
            registry.practice_timeline.add(db, payload)
        registry.job_positions.add(db, {"title": "Architect", "location": "Studio", "job_type": "Full-time"})

        print("Seed data created successfully!")
    finally:
        db.close()


if __name__ == "__main__":
    seed()
