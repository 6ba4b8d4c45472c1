"""Central application settings loaded from environment variables."""

from pydantic_settings import BaseSettings
from typing import List
from pathlib import Path


class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./atelier_cms.db"
    SECRET_KEY: str = "change-me-to-a-random-secret-key"
    DEBUG: bool = True
    ALLOWED_ORIGINS: List[str] = ["http://localhost:3000", "http://localhost:8000"]
    LOG_LEVEL: str = "INFO"

    # Public site
    SITE_URL: str = "https://land8form.com"
    FEATURED_PROJECTS_LIMIT: int = 6
    DEFAULT_PAGE_SIZE: int = 10

    # JWT
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 480

    # Asset storage
    UPLOAD_DIR: str = "uploads"
    UPLOAD_URL_PREFIX: str = "/uploads"
    MAX_UPLOAD_SIZE: int = 5 * 1024 * 1024  # 5 MB
    STORAGE_FOLDERS: List[str] = [
        "logos",
        "hero-images",
        "project-images",
        "team-photos",
        "collaborations",
        "office-gallery",
        "general",
    ]

    # Rendered page payload cache
    PAGE_CACHE_ENABLED: bool = True
    PAGE_CACHE_TTL_SECONDS: int = 300
    PAGE_CACHE_MAX_ENTRIES: int = 512

    # Bootstrap admin account for scripts/seed_data.py
    ADMIN_EMAIL: str = "admin@example.com"
    ADMIN_PASSWORD: str = "change-me"

    class Config:
        # Load backend/.env regardless of the working directory.
        env_file = str(Path(__file__).resolve().parents[1] / ".env")


settings = Settings()
