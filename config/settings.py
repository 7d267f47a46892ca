"""Application settings and configuration."""

from pathlib import Path
from dataclasses import dataclass, field
from typing import Optional
import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Project root directory
PROJECT_ROOT = Path(__file__).parent.parent


def _env_int(name: str, default: int) -> int:
    """Read an integer environment variable, falling back on bad values."""
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_path(name: str) -> Optional[Path]:
    """Read an optional path environment variable."""
    raw = os.getenv(name)
    return Path(raw) if raw else None


@dataclass
class FilterConfig:
    """Faceted filter behaviour settings."""

    debounce_ms: int = field(default_factory=lambda: _env_int("FILTER_DEBOUNCE_MS", 500))
    facet_catalog_path: Optional[Path] = field(
        default_factory=lambda: _env_path("FACET_CATALOG_PATH")
    )
    release_year_window: int = 10

    @property
    def debounce_seconds(self) -> float:
        """Debounce window in seconds (never negative)."""
        return max(self.debounce_ms, 0) / 1000.0


@dataclass
class CatalogConfig:
    """Catalog database settings."""

    db_path: Optional[Path] = field(default_factory=lambda: _env_path("CATALOG_DB_PATH"))
    default_page_size: int = field(
        default_factory=lambda: _env_int("CATALOG_PAGE_SIZE", 24)
    )


@dataclass
class AppConfig:
    """Application configuration settings."""

    name: str = field(default_factory=lambda: os.getenv("APP_NAME", "Storefront Catalog"))
    version: str = field(default_factory=lambda: os.getenv("APP_VERSION", "1.0.0"))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))


@dataclass
class Config:
    """Main configuration container."""

    filters: FilterConfig = field(default_factory=FilterConfig)
    catalog: CatalogConfig = field(default_factory=CatalogConfig)
    app: AppConfig = field(default_factory=AppConfig)


# Global config instance
config = Config()
