"""Catalog queries driven by a settled FilterState.

This is the listing consumer's side of the filters: it translates a FilterState
into SQL against the DuckDB catalog and returns DataFrames for the grid.
"""

from datetime import date, datetime
from typing import Any, Dict, List, Optional, Tuple

import duckdb
import pandas as pd

from config.constants import DEFAULT_SORT, PRICE_MAX, PRICE_MIN
from config.logging_config import get_logger
from src.filters.state import FilterState

logger = get_logger("catalog.queries")


def discounted_price_sql(table_alias: str = "g") -> str:
    """SQL expression for the unrounded price after discount, used to filter and sort."""
    return (
        f"(CASE WHEN {table_alias}.discount > 0 "
        f"THEN {table_alias}.price * (1 - {table_alias}.discount / 100.0) "
        f"ELSE {table_alias}.price END)"
    )


def final_price_sql(table_alias: str = "g") -> str:
    """SQL expression for the displayed price after discount, rounded to cents."""
    return f"ROUND({discounted_price_sql(table_alias)}, 2)"


# Sort order -> ORDER BY template; listing order breaks ties
SORT_ORDERS: Dict[str, str] = {
    "relevance": "{a}.listing_order ASC",
    "price-asc": "{price} ASC, {a}.listing_order ASC",
    "price-desc": "{price} DESC, {a}.listing_order ASC",
    "name-asc": "{a}.title ASC, {a}.listing_order ASC",
    "name-desc": "{a}.title DESC, {a}.listing_order ASC",
    "rating-desc": "COALESCE({a}.rating, 0) DESC, {a}.listing_order ASC",
    "release-desc": "{a}.release_date DESC NULLS LAST, {a}.listing_order ASC",
    "discount-desc": "{a}.discount DESC, {a}.listing_order ASC",
}


def _in_clause(values: List[str]) -> str:
    return ", ".join(["?" for _ in values])


def build_filter_clause(state: FilterState, table_alias: str = "g") -> Tuple[str, List[Any]]:
    """Build WHERE clause and parameters for game filtering.

    Args:
        state: Settled filter state.
        table_alias: SQL alias of the games table.

    Returns:
        Tuple of (WHERE clause string, list of parameters).
    """
    a = table_alias
    conditions = []
    params: List[Any] = []

    search = state.search.strip().lower()
    if search:
        conditions.append(f"""(
            contains(LOWER({a}.title), ?)
            OR contains(LOWER(COALESCE({a}.description, '')), ?)
            OR EXISTS (
                SELECT 1 FROM game_tags t
                WHERE t.game_id = {a}.id AND contains(LOWER(t.tag), ?)
            )
        )""")
        params.extend([search, search, search])

    if state.genres:
        genres = sorted(state.genres)
        conditions.append(f"""
            EXISTS (
                SELECT 1 FROM game_genres gg
                WHERE gg.game_id = {a}.id AND gg.genre_id IN ({_in_clause(genres)})
            )
        """)
        params.extend(genres)

    if state.platforms:
        platforms = sorted(state.platforms)
        conditions.append(f"""
            EXISTS (
                SELECT 1 FROM game_platforms gp
                WHERE gp.game_id = {a}.id AND gp.platform_id IN ({_in_clause(platforms)})
            )
        """)
        params.extend(platforms)

    if state.publishers:
        publishers = sorted(state.publishers)
        conditions.append(f"{a}.publisher_id IN ({_in_clause(publishers)})")
        params.extend(publishers)

    # Bounds at the domain edges mean "no limit" (bundles cost more than the slider max)
    low, high = state.price_range
    if low > PRICE_MIN:
        conditions.append(f"{discounted_price_sql(a)} >= ?")
        params.append(float(low))
    if high < PRICE_MAX:
        conditions.append(f"{discounted_price_sql(a)} <= ?")
        params.append(float(high))

    if state.rating is not None:
        conditions.append(f"COALESCE({a}.rating, 0) >= ?")
        params.append(float(state.rating))

    if state.release_year is not None:
        conditions.append(f"year({a}.release_date) = ?")
        params.append(int(state.release_year))

    if state.on_sale:
        conditions.append(f"{a}.discount > 0")

    where_clause = " AND ".join(conditions) if conditions else "1=1"
    return where_clause, params


def build_order_clause(sort_by: str, table_alias: str = "g") -> str:
    """Build the ORDER BY expression for a sort order (relevance if unknown)."""
    template = SORT_ORDERS.get(sort_by, SORT_ORDERS[DEFAULT_SORT])
    return template.format(a=table_alias, price=discounted_price_sql(table_alias))


def _select_sql(table_alias: str = "g") -> str:
    a = table_alias
    return f"""
        SELECT
            {a}.id,
            {a}.title,
            {a}.description,
            {a}.price,
            {a}.discount,
            {final_price_sql(a)} AS final_price,
            {a}.developer,
            {a}.publisher_id,
            {a}.release_date,
            {a}.rating,
            (SELECT string_agg(gg.genre_id, ',') FROM game_genres gg
             WHERE gg.game_id = {a}.id) AS genre_ids,
            (SELECT string_agg(gp.platform_id, ',') FROM game_platforms gp
             WHERE gp.game_id = {a}.id) AS platform_ids
        FROM games {a}
    """


def _split_ids(value: Any) -> List[str]:
    if isinstance(value, str) and value:
        return sorted(value.split(","))
    return []


def _finish(df: pd.DataFrame) -> pd.DataFrame:
    for column in ("genre_ids", "platform_ids"):
        if column in df.columns:
            df[column] = df[column].apply(_split_ids)
    return df


def search_games(
    conn: duckdb.DuckDBPyConnection,
    state: FilterState,
    limit: Optional[int] = None,
    offset: int = 0,
) -> pd.DataFrame:
    """
    Get the games matching a filter state, in its sort order.

    Args:
        conn: DuckDB connection.
        state: Settled filter state.
        limit: Maximum rows to return (all if None).
        offset: Rows to skip.

    Returns:
        DataFrame with one row per matching game.
    """
    where_clause, params = build_filter_clause(state)
    sql = f"{_select_sql()} WHERE {where_clause} ORDER BY {build_order_clause(state.sort_by)}"
    if limit is not None:
        sql += f" LIMIT {int(limit)} OFFSET {max(int(offset), 0)}"

    logger.debug(f"Searching games: {state.get_summary()}")
    return _finish(conn.execute(sql, params).df())


def count_games(conn: duckdb.DuckDBPyConnection, state: FilterState) -> int:
    """Count the games matching a filter state."""
    where_clause, params = build_filter_clause(state)
    result = conn.execute(f"SELECT COUNT(*) FROM games g WHERE {where_clause}", params).fetchone()
    return int(result[0]) if result else 0


def get_game(conn: duckdb.DuckDBPyConnection, game_id: str) -> Optional[Dict[str, Any]]:
    """
    Get a single game by id.

    Returns:
        Game record, or None if no such game exists.
    """
    df = _finish(conn.execute(f"{_select_sql()} WHERE g.id = ?", [game_id]).df())
    records = to_records(df)
    return records[0] if records else None


def _plain(value: Any) -> Any:
    if isinstance(value, (list, tuple)):
        return list(value)
    if value is None or (not isinstance(value, str) and pd.isna(value)):
        return None
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    if hasattr(value, "item"):
        return value.item()
    return value


def to_records(df: pd.DataFrame) -> List[Dict[str, Any]]:
    """Convert a games DataFrame to JSON-friendly records."""
    return [
        {key: _plain(value) for key, value in row.items()}
        for row in df.to_dict(orient="records")
    ]
