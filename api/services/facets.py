"""Facet catalog service for FastAPI."""

from functools import lru_cache

from src.filters.facets import FacetCatalog, load_facet_catalog


@lru_cache
def get_facet_catalog() -> FacetCatalog:
    """Get the facet catalog, loaded once per process."""
    return load_facet_catalog()
