"""Game catalog backed by DuckDB: the query service behind the listing filters."""

from .connection import (
    CatalogConnection,
    get_connection,
    get_memory_connection,
)
from .schema import (
    create_tables,
    load_games,
    initialize_catalog,
    get_table_counts,
)
from .queries import (
    build_filter_clause,
    build_order_clause,
    search_games,
    count_games,
    get_game,
    to_records,
)

__all__ = [
    # Connection
    "CatalogConnection",
    "get_connection",
    "get_memory_connection",
    # Schema
    "create_tables",
    "load_games",
    "initialize_catalog",
    "get_table_counts",
    # Queries
    "build_filter_clause",
    "build_order_clause",
    "search_games",
    "count_games",
    "get_game",
    "to_records",
]
