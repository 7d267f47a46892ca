"""DuckDB schema definitions for the game catalog.

- games: one row per purchasable title
- game_genres / game_platforms: facet memberships (many-to-many)
- game_tags: free-form tags, searched alongside title and description
"""

from datetime import date
from typing import Any, Dict, Iterable, List, Optional
import duckdb

from config.logging_config import get_logger
from src.catalog.seed_data import SAMPLE_GAMES

logger = get_logger("catalog.schema")

CREATE_GAMES = """
CREATE TABLE IF NOT EXISTS games (
    id VARCHAR PRIMARY KEY,
    title VARCHAR NOT NULL,
    description VARCHAR,
    price DOUBLE NOT NULL CHECK (price >= 0),
    discount INTEGER DEFAULT 0 CHECK (discount BETWEEN 0 AND 100),
    developer VARCHAR,
    publisher_id VARCHAR,
    release_date DATE,
    rating DOUBLE,
    listing_order INTEGER
)
"""

CREATE_GAME_GENRES = """
CREATE TABLE IF NOT EXISTS game_genres (
    game_id VARCHAR NOT NULL,
    genre_id VARCHAR NOT NULL
)
"""

CREATE_GAME_PLATFORMS = """
CREATE TABLE IF NOT EXISTS game_platforms (
    game_id VARCHAR NOT NULL,
    platform_id VARCHAR NOT NULL
)
"""

CREATE_GAME_TAGS = """
CREATE TABLE IF NOT EXISTS game_tags (
    game_id VARCHAR NOT NULL,
    tag VARCHAR NOT NULL
)
"""

TABLES = [
    ("games", CREATE_GAMES),
    ("game_genres", CREATE_GAME_GENRES),
    ("game_platforms", CREATE_GAME_PLATFORMS),
    ("game_tags", CREATE_GAME_TAGS),
]


def create_tables(conn: duckdb.DuckDBPyConnection) -> None:
    """
    Create all catalog tables.

    Args:
        conn: DuckDB connection.
    """
    for table_name, create_sql in TABLES:
        try:
            conn.execute(create_sql)
            logger.debug(f"Created table: {table_name}")
        except duckdb.Error as e:
            logger.error(f"Error creating table {table_name}: {e}")
            raise


def _as_date(value: Any) -> Optional[date]:
    if value is None or isinstance(value, date):
        return value
    return date.fromisoformat(str(value))


def load_games(conn: duckdb.DuckDBPyConnection, games: Iterable[Dict[str, Any]]) -> int:
    """
    Insert games and their facet memberships.

    Args:
        conn: DuckDB connection.
        games: Game records (see ``SAMPLE_GAMES`` for the layout).

    Returns:
        Number of games inserted.
    """
    start = conn.execute("SELECT COALESCE(MAX(listing_order), 0) FROM games").fetchone()[0]

    game_rows: List[tuple] = []
    genre_rows: List[tuple] = []
    platform_rows: List[tuple] = []
    tag_rows: List[tuple] = []

    for offset, game in enumerate(games, start=1):
        game_id = str(game["id"])
        game_rows.append((
            game_id,
            game["title"],
            game.get("description"),
            float(game["price"]),
            int(game.get("discount") or 0),
            game.get("developer"),
            game.get("publisher_id"),
            _as_date(game.get("release_date")),
            game.get("rating"),
            start + offset,
        ))
        genre_rows.extend((game_id, g) for g in game.get("genres", []))
        platform_rows.extend((game_id, p) for p in game.get("platforms", []))
        tag_rows.extend((game_id, t) for t in game.get("tags", []))

    if not game_rows:
        return 0

    conn.executemany("INSERT INTO games VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?)", game_rows)
    if genre_rows:
        conn.executemany("INSERT INTO game_genres VALUES (?, ?)", genre_rows)
    if platform_rows:
        conn.executemany("INSERT INTO game_platforms VALUES (?, ?)", platform_rows)
    if tag_rows:
        conn.executemany("INSERT INTO game_tags VALUES (?, ?)", tag_rows)

    logger.info(f"Loaded {len(game_rows)} games")
    return len(game_rows)


def initialize_catalog(
    conn: duckdb.DuckDBPyConnection,
    games: Optional[Iterable[Dict[str, Any]]] = None,
) -> None:
    """
    Create the catalog tables and seed them if empty.

    Args:
        conn: DuckDB connection.
        games: Records to seed with; defaults to the sample catalog.
    """
    create_tables(conn)

    existing = conn.execute("SELECT COUNT(*) FROM games").fetchone()[0]
    if existing:
        logger.debug(f"Catalog already holds {existing} games, not seeding")
        return

    load_games(conn, SAMPLE_GAMES if games is None else games)


def get_table_counts(conn: duckdb.DuckDBPyConnection) -> Dict[str, int]:
    """
    Get row counts for all catalog tables.

    Args:
        conn: DuckDB connection.

    Returns:
        Dictionary mapping table names to row counts.
    """
    counts = {}
    for table, _ in TABLES:
        try:
            result = conn.execute(f"SELECT COUNT(*) FROM {table}").fetchone()
            counts[table] = result[0] if result else 0
        except duckdb.Error:
            counts[table] = 0

    return counts
