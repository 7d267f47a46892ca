"""Tests for the FilterState query-string codec."""

import pytest

from src.filters.facets import DEFAULT_CATALOG, FacetCatalog, FacetOption
from src.filters.state import DEFAULT_FILTER_STATE, FilterState
from src.filters.url_params import (
    build_url,
    from_query,
    has_filter_params,
    to_query_params,
    to_query_string,
)


class TestSerialize:
    """Tests for to_query_params, to_query_string and build_url."""

    def test_default_state_is_empty(self):
        assert to_query_params(DEFAULT_FILTER_STATE) == []
        assert to_query_string(DEFAULT_FILTER_STATE) == ""
        assert build_url(DEFAULT_FILTER_STATE, "/games") == "/games"

    def test_genre_and_sale(self):
        state = FilterState(genres=frozenset({"rpg"}), on_sale=True)
        assert to_query_string(state) == "genre=rpg&sale=true"

    def test_repeated_keys_sorted(self):
        state = FilterState(genres=frozenset({"rpg", "action"}), platforms=frozenset({"steam"}))
        assert to_query_params(state) == [
            ("genre", "action"),
            ("genre", "rpg"),
            ("platform", "steam"),
        ]

    def test_price_bounds_omitted_at_defaults(self):
        assert to_query_params(FilterState(price_range=(0, 40))) == [("max", "40")]
        assert to_query_params(FilterState(price_range=(10.5, 100))) == [("min", "10.5")]

    def test_full_state(self):
        state = FilterState(
            search="dark souls",
            publishers=frozenset({"bandai-namco"}),
            price_range=(10.0, 60.0),
            rating=4.0,
            release_year="2022",
            on_sale=True,
            sort_by="price-asc",
        )
        assert to_query_string(state) == (
            "q=dark+souls&publisher=bandai-namco&min=10&max=60"
            "&rating=4&year=2022&sale=true&sort=price-asc"
        )

    def test_relevance_sort_omitted(self):
        assert to_query_params(FilterState(sort_by="relevance")) == []
        assert to_query_params(FilterState(sort_by="name-asc")) == [("sort", "name-asc")]

    def test_build_url(self):
        state = FilterState(genres=frozenset({"rpg"}))
        assert build_url(state, "/games") == "/games?genre=rpg"
        assert build_url(state) == "?genre=rpg"


class TestParse:
    """Tests for from_query."""

    def test_genre_and_sale(self):
        """Test the canonical shared-link example."""
        state = from_query("?genre=rpg&sale=true")

        assert state.genres == frozenset({"rpg"})
        assert state.on_sale is True
        assert state.platforms == frozenset()
        assert state.publishers == frozenset()
        assert state.price_range == (0, 100)
        assert state.rating is None
        assert state.release_year is None
        assert state.search == ""
        assert state.sort_by == "relevance"

    def test_empty_query(self):
        assert from_query("") is DEFAULT_FILTER_STATE
        assert from_query(None) is DEFAULT_FILTER_STATE
        assert from_query({}) is DEFAULT_FILTER_STATE

    def test_repeated_keys(self):
        state = from_query("genre=rpg&genre=indie&platform=steam&platform=gog")
        assert state.genres == frozenset({"rpg", "indie"})
        assert state.platforms == frozenset({"steam", "gog"})

    def test_mapping_with_lists(self):
        state = from_query({"genre": ["rpg", "action"], "q": "hades", "sale": "1"})
        assert state.genres == frozenset({"rpg", "action"})
        assert state.search == "hades"
        assert state.on_sale is True

    def test_pairs(self):
        state = from_query([("publisher", "sony"), ("year", "2020")])
        assert state.publishers == frozenset({"sony"})
        assert state.release_year == "2020"

    def test_price_swapped_and_clamped(self):
        assert from_query("min=80&max=20").price_range == (20, 80)
        assert from_query("min=-5&max=500").price_range == (0, 100)
        assert from_query("max=35.5").price_range == (0, 35.5)

    def test_search_decoded(self):
        assert from_query("q=dark%20souls%3A+remastered").search == "dark souls: remastered"

    def test_first_value_wins_for_single_keys(self):
        assert from_query("sort=name-asc&sort=price-asc").sort_by == "name-asc"

    def test_unknown_ids_dropped(self):
        state = from_query("genre=rpg&genre=not-a-genre&publisher=nobody")
        assert state.genres == frozenset({"rpg"})
        assert state.publishers == frozenset()

    def test_no_catalog_keeps_ids(self):
        state = from_query("genre=anything", catalog=None)
        assert state.genres == frozenset({"anything"})

    def test_custom_catalog(self):
        catalog = FacetCatalog(genres=(FacetOption("jrpg", "JRPG"),))
        state = from_query("genre=jrpg&genre=rpg", catalog=catalog)
        assert state.genres == frozenset({"jrpg"})

    @pytest.mark.parametrize(
        "query",
        [
            "min=abc&max=",
            "rating=excellent",
            "rating=0",
            "rating=7",
            "year=99",
            "year=twenty",
            "sort=cheapest",
            "sale=maybe",
            "sale=false",
            "genre=",
            "unknown=1&utm_source=newsletter",
            "%%%&&==",
        ],
    )
    def test_malformed_values_fall_back_to_defaults(self, query):
        """Test that malformed parameters never raise and read as absent."""
        assert from_query(query) == DEFAULT_FILTER_STATE

    def test_malformed_value_does_not_affect_others(self):
        state = from_query("genre=rpg&rating=lots&min=abc&sale=true")
        assert state.genres == frozenset({"rpg"})
        assert state.rating is None
        assert state.price_range == (0, 100)
        assert state.on_sale is True

    def test_malformed_pairs_skipped(self):
        state = from_query([("genre", "rpg"), ("broken",), None])
        assert state.genres == frozenset({"rpg"})

    def test_bare_string_items_skipped(self):
        """Test that a two-character string is not unpacked as a key and value."""
        assert from_query(["qx"], catalog=None) is DEFAULT_FILTER_STATE
        state = from_query(["qx", ("platform", "gog")])
        assert state == FilterState(platforms=frozenset({"gog"}))

    def test_unprintable_value_skipped(self):
        state = from_query({"genre": [10**5000, "rpg"]})
        assert state.genres == frozenset({"rpg"})


class TestRoundTrip:
    """Tests that serialize-then-parse gives back the state."""

    @pytest.mark.parametrize(
        "state",
        [
            DEFAULT_FILTER_STATE,
            FilterState(genres=frozenset({"rpg"}), on_sale=True),
            FilterState(
                search="tom & jerry's = fun?",
                genres=frozenset({"action", "indie"}),
                platforms=frozenset({"steam", "gog"}),
                publishers=frozenset({"sony"}),
                price_range=(12.5, 60.0),
                rating=4.5,
                release_year="2021",
                on_sale=True,
                sort_by="rating-desc",
            ),
        ],
    )
    def test_round_trip(self, state):
        assert from_query(to_query_string(state), DEFAULT_CATALOG) == state

    def test_canonical_string_is_stable(self):
        query = "sale=true&genre=rpg&genre=action"
        canonical = to_query_string(from_query(query))

        assert canonical == "genre=action&genre=rpg&sale=true"
        assert to_query_string(from_query(canonical)) == canonical


class TestHasFilterParams:
    """Tests for has_filter_params."""

    def test_detects_filter_keys(self):
        assert has_filter_params("genre=rpg")
        assert has_filter_params({"sort": "price-asc"})

    def test_ignores_other_keys(self):
        assert not has_filter_params("utm_source=mail")
        assert not has_filter_params("")
