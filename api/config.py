"""FastAPI application settings."""

from pathlib import Path
from typing import Optional
from pydantic_settings import BaseSettings
from functools import lru_cache
import os


def _parse_cors_origins() -> list[str]:
    """Parse CORS origins from environment variable."""
    cors_env = os.getenv("STOREFRONT_CORS_ORIGINS", "")
    if cors_env:
        return [origin.strip() for origin in cors_env.split(",")]
    # Default development origins
    return ["http://localhost:3000", "http://localhost:8501"]


def _parse_db_path() -> Optional[Path]:
    raw = os.getenv("CATALOG_DB_PATH", "")
    return Path(raw) if raw else None


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    # App info
    app_name: str = "Storefront Catalog API"
    version: str = "1.0.0"
    debug: bool = os.getenv("STOREFRONT_DEBUG", "false").lower() == "true"

    # Catalog database (in-memory sample catalog when unset)
    database_path: Optional[Path] = _parse_db_path()

    # CORS - configurable via environment variable
    cors_origins: list[str] = _parse_cors_origins()

    # Pagination
    default_page_size: int = 24
    max_page_size: int = 200

    class Config:
        env_prefix = "STOREFRONT_"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
