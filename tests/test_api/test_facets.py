"""Tests for facets API endpoint and app-level routes."""

from config.constants import GENRES, PLATFORMS, PUBLISHERS, SORT_OPTIONS


class TestListFacets:
    """Tests for GET /api/facets endpoint."""

    def test_list_facets(self, client):
        response = client.get("/api/facets")
        assert response.status_code == 200

        data = response.json()
        assert len(data["genres"]) == len(GENRES)
        assert len(data["platforms"]) == len(PLATFORMS)
        assert len(data["publishers"]) == len(PUBLISHERS)
        assert {"id": "rpg", "name": "RPG"} in data["genres"]

    def test_choice_lists(self, client):
        data = client.get("/api/facets").json()

        assert [o["value"] for o in data["sort_options"]] == list(SORT_OPTIONS)
        assert data["rating_options"][0] == {"value": "any", "label": "Any rating"}
        assert len(data["release_years"]) == 10
        assert data["price_min"] == 0
        assert data["price_max"] == 100

    def test_cache_header(self, client):
        response = client.get("/api/facets")
        assert response.headers["cache-control"] == "public, max-age=3600"


class TestRootAndHealth:
    """Tests for root and health endpoints."""

    def test_root(self, client):
        data = client.get("/").json()
        assert data["endpoints"]["games"] == "/api/games"
        assert data["docs"] == "/docs"

    def test_health(self, client):
        data = client.get("/health").json()
        assert data["status"] == "healthy"
        assert data["total_games"] == 13
