"""Tests for catalog schema and filter-driven queries."""

import duckdb
import pandas as pd
import pytest

from src.catalog.queries import (
    build_filter_clause,
    build_order_clause,
    count_games,
    get_game,
    search_games,
    to_records,
)
from src.catalog.schema import get_table_counts, initialize_catalog, load_games
from src.catalog.seed_data import SAMPLE_GAMES
from src.filters.state import DEFAULT_FILTER_STATE, FilterState


def _ids(df: pd.DataFrame) -> set:
    return set(df["id"])


class TestSchema:
    """Tests for catalog setup."""

    def test_seeded_counts(self, catalog_db):
        counts = get_table_counts(catalog_db)

        assert counts["games"] == len(SAMPLE_GAMES)
        assert counts["game_genres"] == sum(len(g["genres"]) for g in SAMPLE_GAMES)
        assert counts["game_platforms"] == sum(len(g["platforms"]) for g in SAMPLE_GAMES)

    def test_initialize_does_not_reseed(self, catalog_db):
        initialize_catalog(catalog_db)
        assert get_table_counts(catalog_db)["games"] == len(SAMPLE_GAMES)

    def test_load_games_appends_in_order(self, catalog_db):
        added = load_games(
            catalog_db,
            [{"id": "99", "title": "Zzz", "price": 1.0, "genres": ["casual"]}],
        )
        last = catalog_db.execute(
            "SELECT id FROM games ORDER BY listing_order DESC LIMIT 1"
        ).fetchone()[0]

        assert added == 1
        assert last == "99"

    def test_counts_without_tables(self):
        conn = duckdb.connect(":memory:")
        assert get_table_counts(conn)["games"] == 0
        conn.close()


class TestFilterClause:
    """Tests for build_filter_clause."""

    def test_default_state_matches_everything(self):
        where, params = build_filter_clause(DEFAULT_FILTER_STATE)
        assert where == "1=1"
        assert params == []

    def test_parameters_are_bound(self):
        state = FilterState(genres=frozenset({"rpg'; DROP TABLE games; --"}))
        where, params = build_filter_clause(state)

        assert "DROP" not in where
        assert params == ["rpg'; DROP TABLE games; --"]

    def test_full_price_domain_adds_no_bounds(self):
        where, _ = build_filter_clause(FilterState(price_range=(0, 100)))
        assert "price" not in where

    def test_unknown_sort_falls_back(self):
        assert build_order_clause("bogus") == build_order_clause("relevance")


class TestSearchGames:
    """Tests for search_games and count_games against the sample catalog."""

    def test_default_returns_all(self, catalog_db):
        df = search_games(catalog_db, DEFAULT_FILTER_STATE)

        assert len(df) == len(SAMPLE_GAMES)
        assert count_games(catalog_db, DEFAULT_FILTER_STATE) == len(SAMPLE_GAMES)
        assert list(df["id"][:3]) == ["1", "2", "3"]

    def test_genre(self, catalog_db):
        df = search_games(catalog_db, FilterState(genres=frozenset({"rpg"})))
        assert _ids(df) == {"1", "2", "5", "6", "8", "9", "12"}

    def test_genres_match_any(self, catalog_db):
        state = FilterState(genres=frozenset({"shooter", "simulation"}))
        assert _ids(search_games(catalog_db, state)) == {"8", "10"}

    def test_platform(self, catalog_db):
        df = search_games(catalog_db, FilterState(platforms=frozenset({"gog"})))
        assert _ids(df) == {"1", "5", "8"}

    def test_publisher(self, catalog_db):
        df = search_games(catalog_db, FilterState(publishers=frozenset({"sony"})))
        assert _ids(df) == {"3", "6", "11"}

    def test_on_sale(self, catalog_db):
        assert count_games(catalog_db, FilterState(on_sale=True)) == 10

    def test_genre_and_sale(self, catalog_db):
        state = FilterState(genres=frozenset({"rpg"}), on_sale=True)
        assert _ids(search_games(catalog_db, state)) == {"1", "5", "6", "9", "12"}

    def test_max_price_uses_discounted_price(self, catalog_db):
        df = search_games(catalog_db, FilterState(price_range=(0, 20)))
        assert _ids(df) == {"5", "7", "8"}

    def test_min_price_without_cap(self, catalog_db):
        df = search_games(catalog_db, FilterState(price_range=(50, 100)))
        assert _ids(df) == {"2", "11", "13"}

    def test_price_bounds_use_unrounded_price(self, catalog_db):
        """Test that bounds compare the exact discounted price, not the displayed one."""
        load_games(catalog_db, [{"id": "50", "title": "Odd Cents", "price": 10.004}])

        above = search_games(catalog_db, FilterState(price_range=(10.002, 100)))
        below = search_games(catalog_db, FilterState(price_range=(0, 10.002)))

        assert "50" in _ids(above)
        assert "50" not in _ids(below)
        assert get_game(catalog_db, "50")["final_price"] == pytest.approx(10.0)

    def test_rating(self, catalog_db):
        df = search_games(catalog_db, FilterState(rating=4.8))
        assert _ids(df) == {"2", "5", "7", "11"}

    def test_release_year(self, catalog_db):
        df = search_games(catalog_db, FilterState(release_year="2020"))
        assert _ids(df) == {"1", "6", "7", "9"}

    def test_search_title(self, catalog_db):
        df = search_games(catalog_db, FilterState(search="  Witcher "))
        assert _ids(df) == {"5"}

    def test_search_is_case_insensitive_over_tags(self, catalog_db):
        df = search_games(catalog_db, FilterState(search="FANTASY"))
        assert _ids(df) == {"2", "5", "12"}

    def test_no_matches(self, catalog_db):
        state = FilterState(genres=frozenset({"horror"}))
        assert search_games(catalog_db, state).empty
        assert count_games(catalog_db, state) == 0

    @pytest.mark.parametrize(
        "sort_by,first_id",
        [
            ("price-asc", "5"),
            ("price-desc", "13"),
            ("name-asc", "9"),
            ("rating-desc", "5"),
            ("release-desc", "13"),
            ("discount-desc", "5"),
        ],
    )
    def test_sort_orders(self, catalog_db, sort_by, first_id):
        df = search_games(catalog_db, FilterState(sort_by=sort_by))
        assert df["id"].iloc[0] == first_id

    def test_pagination(self, catalog_db):
        page = search_games(catalog_db, DEFAULT_FILTER_STATE, limit=5, offset=10)
        assert list(page["id"]) == ["11", "12", "13"]

    def test_facet_id_lists(self, catalog_db):
        df = search_games(catalog_db, FilterState(search="witcher"))
        row = df.iloc[0]

        assert row["genre_ids"] == ["open-world", "rpg"]
        assert row["platform_ids"] == ["epic", "gog", "steam"]
        assert row["final_price"] == pytest.approx(12.0)


class TestGetGame:
    """Tests for get_game and record conversion."""

    def test_get_game(self, catalog_db):
        game = get_game(catalog_db, "5")

        assert game["title"] == "The Witcher 3: Wild Hunt"
        assert game["final_price"] == pytest.approx(12.0)
        assert game["discount"] == 70
        assert isinstance(game["discount"], int)
        assert game["release_date"] == "2015-05-19"
        assert game["genre_ids"] == ["open-world", "rpg"]

    def test_missing_rating_is_none(self, catalog_db):
        assert get_game(catalog_db, "13")["rating"] is None

    def test_missing_game(self, catalog_db):
        assert get_game(catalog_db, "nope") is None

    def test_to_records_empty(self):
        assert to_records(pd.DataFrame()) == []


class TestConnection:
    """Tests for catalog connection management."""

    def test_memory_connection(self):
        from src.catalog.connection import CatalogConnection

        db = CatalogConnection()
        db.db_path = None

        with db:
            assert db.is_memory
            assert db.execute("SELECT 1").fetchone()[0] == 1
        assert db._connection is None

    def test_file_connection(self, tmp_path):
        from src.catalog.connection import get_connection

        db_path = tmp_path / "nested" / "catalog.duckdb"
        with get_connection(db_path) as conn:
            initialize_catalog(conn)

        with get_connection(db_path, read_only=True) as conn:
            assert count_games(conn, DEFAULT_FILTER_STATE) == len(SAMPLE_GAMES)

    def test_get_memory_connection(self):
        from src.catalog.connection import get_memory_connection

        conn = get_memory_connection()
        initialize_catalog(conn)
        assert get_table_counts(conn)["games"] == len(SAMPLE_GAMES)
        conn.close()
