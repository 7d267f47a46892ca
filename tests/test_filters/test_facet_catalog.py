"""Tests for the facet option catalog."""

import json

import pytest

from config import config
from config.constants import GENRES, PLATFORMS, PUBLISHERS
from src.filters.facets import (
    DEFAULT_CATALOG,
    FACETS,
    FacetCatalog,
    FacetOption,
    load_facet_catalog,
)
from src.filters.state import FilterState


class TestDefaultCatalog:
    """Tests for the built-in catalog."""

    def test_option_counts(self):
        assert len(DEFAULT_CATALOG.genres) == len(GENRES)
        assert len(DEFAULT_CATALOG.platforms) == len(PLATFORMS)
        assert len(DEFAULT_CATALOG.publishers) == len(PUBLISHERS)

    def test_display_order_kept(self):
        assert [o.id for o in DEFAULT_CATALOG.options("genres")][:3] == ["action", "adventure", "rpg"]

    def test_lookup(self):
        assert DEFAULT_CATALOG.is_valid("genres", "rpg")
        assert not DEFAULT_CATALOG.is_valid("genres", "steam")
        assert DEFAULT_CATALOG.name_for("platforms", "gog") == "GOG"
        assert DEFAULT_CATALOG.name_for("platforms", "mystery") == "mystery"

    def test_unknown_facet(self):
        assert DEFAULT_CATALOG.options("tags") == ()
        assert DEFAULT_CATALOG.ids("tags") == frozenset()

    def test_to_dict(self):
        data = DEFAULT_CATALOG.to_dict()
        assert set(data) == set(FACETS)
        assert {"id": "rpg", "name": "RPG"} in data["genres"]


class TestSanitize:
    """Tests for FacetCatalog.sanitize."""

    def test_valid_state_returned_unchanged(self):
        state = FilterState(genres=frozenset({"rpg"}), platforms=frozenset({"steam"}))
        assert DEFAULT_CATALOG.sanitize(state) is state

    def test_unknown_ids_dropped(self):
        state = FilterState(
            genres=frozenset({"rpg", "nope"}),
            publishers=frozenset({"ghost"}),
            on_sale=True,
        )
        clean = DEFAULT_CATALOG.sanitize(state)

        assert clean.genres == frozenset({"rpg"})
        assert clean.publishers == frozenset()
        assert clean.on_sale is True


class TestFromMapping:
    """Tests for building catalogs from data."""

    def test_dict_layout(self):
        catalog = FacetCatalog.from_mapping({"genres": {"rpg": "Role-Playing"}})
        assert catalog.genres == (FacetOption("rpg", "Role-Playing"),)
        assert catalog.platforms == ()

    def test_record_layout(self):
        catalog = FacetCatalog.from_mapping(
            {
                "platforms": [
                    {"id": "steam", "name": "Steam"},
                    {"id": "steam", "name": "Duplicate"},
                    {"name": "No id"},
                    {"id": "itch"},
                ]
            }
        )
        assert catalog.platforms == (FacetOption("steam", "Steam"), FacetOption("itch", "itch"))


class TestLoadFacetCatalog:
    """Tests for load_facet_catalog."""

    def test_defaults_without_file(self, monkeypatch):
        monkeypatch.setattr(config.filters, "facet_catalog_path", None)
        assert load_facet_catalog() is DEFAULT_CATALOG

    def test_file_overrides_listed_facets(self, tmp_path):
        path = tmp_path / "facets.json"
        path.write_text(json.dumps({"genres": [{"id": "jrpg", "name": "JRPG"}]}))

        catalog = load_facet_catalog(path)

        assert catalog.ids("genres") == frozenset({"jrpg"})
        assert catalog.platforms == DEFAULT_CATALOG.platforms

    def test_configured_path(self, tmp_path, monkeypatch):
        path = tmp_path / "facets.json"
        path.write_text(json.dumps({"publishers": {"indie-co": "Indie Co"}}))
        monkeypatch.setattr(config.filters, "facet_catalog_path", path)

        assert load_facet_catalog().ids("publishers") == frozenset({"indie-co"})

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_facet_catalog(tmp_path / "missing.json")
