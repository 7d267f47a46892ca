"""Configuration module for Storefront Catalog.

All filter defaults are empty ("all games") - no facet value is preselected.
"""

from .settings import config, FilterConfig, CatalogConfig, AppConfig, Config
from .constants import (
    # Domains
    PRICE_MIN,
    PRICE_MAX,
    DEFAULT_PRICE_RANGE,
    RATING_MAX,
    RATING_OPTIONS,
    ANY_VALUE,
    # Sorting
    DEFAULT_SORT,
    SORT_OPTIONS,
    # Facet options
    GENRES,
    PLATFORMS,
    PUBLISHERS,
    FACET_OPTIONS,
    FACET_TITLES,
    # Helper functions
    get_release_years,
)

__all__ = [
    # Settings
    "config",
    "FilterConfig",
    "CatalogConfig",
    "AppConfig",
    "Config",
    # Domains
    "PRICE_MIN",
    "PRICE_MAX",
    "DEFAULT_PRICE_RANGE",
    "RATING_MAX",
    "RATING_OPTIONS",
    "ANY_VALUE",
    # Sorting
    "DEFAULT_SORT",
    "SORT_OPTIONS",
    # Facet options
    "GENRES",
    "PLATFORMS",
    "PUBLISHERS",
    "FACET_OPTIONS",
    "FACET_TITLES",
    # Helper functions
    "get_release_years",
]
