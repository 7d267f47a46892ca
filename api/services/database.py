"""Catalog database service for FastAPI."""

import duckdb
from typing import Optional
from pathlib import Path

from api.config import get_settings
from config.logging_config import get_logger
from src.catalog.schema import initialize_catalog

logger = get_logger("api.database")


class DatabaseService:
    """Manages the DuckDB catalog connection for FastAPI."""

    def __init__(self, db_path: Optional[Path] = None):
        """Initialize database service.

        Args:
            db_path: Path to database file; in-memory sample catalog when None.
        """
        settings = get_settings()
        self.db_path = db_path or settings.database_path
        self._connection: Optional[duckdb.DuckDBPyConnection] = None

    def connect(self) -> duckdb.DuckDBPyConnection:
        """Get or create database connection, seeding an empty catalog."""
        if self._connection is None:
            target = str(self.db_path) if self.db_path else ":memory:"
            self._connection = duckdb.connect(target)
            initialize_catalog(self._connection)
            logger.info(f"Catalog ready: {target}")
        return self._connection

    def execute(self, query: str, params: Optional[list] = None):
        """Execute a query and return results."""
        conn = self.connect()
        if params:
            return conn.execute(query, params)
        return conn.execute(query)

    def fetch_one(self, query: str, params: Optional[list] = None):
        """Execute query and fetch one result."""
        return self.execute(query, params).fetchone()

    def close(self) -> None:
        """Close the database connection."""
        if self._connection:
            self._connection.close()
            self._connection = None


# Global database instance
_db_service: Optional[DatabaseService] = None


def get_db() -> DatabaseService:
    """Get global database service instance."""
    global _db_service
    if _db_service is None:
        _db_service = DatabaseService()
    return _db_service


def close_db() -> None:
    """Close the global database connection."""
    global _db_service
    if _db_service is not None:
        _db_service.close()
        _db_service = None
