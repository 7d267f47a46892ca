"""DuckDB connection management for the game catalog."""

import duckdb
from pathlib import Path
from typing import Optional
from contextlib import contextmanager
import sys

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from config import config
from config.logging_config import get_logger

logger = get_logger("catalog")

MEMORY_DATABASE = ":memory:"


class CatalogConnection:
    """Manages DuckDB catalog connections."""

    def __init__(self, db_path: Optional[Path] = None, read_only: bool = False):
        """
        Initialize catalog connection manager.

        Args:
            db_path: Path to database file. Defaults to config setting,
                or an in-memory database when none is configured.
            read_only: Open database in read-only mode.
        """
        self.db_path = db_path or config.catalog.db_path
        self.read_only = read_only
        self._connection: Optional[duckdb.DuckDBPyConnection] = None

    @property
    def is_memory(self) -> bool:
        return self.db_path is None

    def connect(self) -> duckdb.DuckDBPyConnection:
        """
        Establish connection to the database.

        Returns:
            DuckDB connection object.
        """
        if self._connection is not None:
            return self._connection

        if self.is_memory:
            self._connection = duckdb.connect(MEMORY_DATABASE)
            logger.info("Connected to in-memory catalog")
        else:
            # Ensure parent directory exists
            self.db_path.parent.mkdir(parents=True, exist_ok=True)
            self._connection = duckdb.connect(
                str(self.db_path),
                read_only=self.read_only,
            )
            logger.info(f"Connected to catalog: {self.db_path}")

        return self._connection

    def close(self) -> None:
        """Close the database connection."""
        if self._connection is not None:
            self._connection.close()
            self._connection = None
            logger.info("Catalog connection closed")

    @property
    def connection(self) -> duckdb.DuckDBPyConnection:
        """Get the current connection, establishing if needed."""
        if self._connection is None:
            return self.connect()
        return self._connection

    def execute(self, query: str, parameters: Optional[list] = None):
        """
        Execute a SQL query.

        Args:
            query: SQL query string.
            parameters: Optional query parameters.

        Returns:
            Query result.
        """
        conn = self.connection
        if parameters:
            return conn.execute(query, parameters)
        return conn.execute(query)

    def __enter__(self):
        """Context manager entry."""
        self.connect()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
        return False


@contextmanager
def get_connection(
    db_path: Optional[Path] = None, read_only: bool = False
) -> duckdb.DuckDBPyConnection:
    """
    Context manager for catalog connections.

    Args:
        db_path: Path to database file.
        read_only: Open in read-only mode.

    Yields:
        DuckDB connection object.

    Example:
        with get_connection() as conn:
            games = search_games(conn, state)
    """
    db = CatalogConnection(db_path, read_only)
    try:
        yield db.connect()
    finally:
        db.close()


def get_memory_connection() -> duckdb.DuckDBPyConnection:
    """
    Get an in-memory database connection.

    Returns:
        In-memory DuckDB connection.
    """
    return duckdb.connect(MEMORY_DATABASE)
