"""API services."""

from api.services.database import get_db, DatabaseService
from api.services.facets import get_facet_catalog

__all__ = ["get_db", "DatabaseService", "get_facet_catalog"]
