"""Tests for games API endpoints."""

import pytest


class TestListGames:
    """Tests for GET /api/games endpoint."""

    def test_list_games_default(self, client):
        """Test listing games with no filters."""
        response = client.get("/api/games")
        assert response.status_code == 200

        data = response.json()
        assert data["total"] == 13
        assert data["page"] == 1
        assert data["query"] == ""
        assert data["active_filter_count"] == 0
        assert len(data["games"]) == 13

    def test_shared_link_parameters(self, client):
        """Test that a storefront URL query replays unchanged."""
        response = client.get("/api/games?genre=rpg&sale=true")
        assert response.status_code == 200

        data = response.json()
        assert data["total"] == 5
        assert data["query"] == "genre=rpg&sale=true"
        assert data["filters"]["genres"] == ["rpg"]
        assert data["filters"]["on_sale"] is True
        assert data["active_filter_count"] == 2
        for game in data["games"]:
            assert "rpg" in game["genre_ids"]
            assert game["discount"] > 0

    def test_repeated_facet_keys(self, client):
        response = client.get("/api/games?platform=gog&platform=nintendo")
        data = response.json()

        assert data["filters"]["platforms"] == ["gog", "nintendo"]
        assert {g["id"] for g in data["games"]} == {"1", "5", "7", "8"}

    def test_malformed_parameters_ignored(self, client):
        """Test that bad values are dropped rather than rejected."""
        response = client.get(
            "/api/games",
            params={"genre": "bogus", "min": "abc", "rating": "9", "sort": "nope", "year": "20"},
        )
        assert response.status_code == 200

        data = response.json()
        assert data["total"] == 13
        assert data["query"] == ""

    def test_canonical_query(self, client):
        response = client.get("/api/games?sort=price-asc&max=20&genre=indie&genre=rpg")
        data = response.json()

        assert data["query"] == "genre=indie&genre=rpg&max=20&sort=price-asc"
        assert [g["id"] for g in data["games"]] == ["5", "8", "7"]

    def test_sorted_results(self, client):
        data = client.get("/api/games", params={"sort": "price-asc"}).json()
        prices = [g["final_price"] for g in data["games"]]
        assert prices == sorted(prices)

    def test_pagination(self, client):
        response = client.get("/api/games", params={"page": 3, "page_size": 5})
        data = response.json()

        assert data["page"] == 3
        assert data["page_size"] == 5
        assert data["total"] == 13
        assert len(data["games"]) == 3

    @pytest.mark.parametrize("params", [{"page": 0}, {"page_size": 0}, {"page_size": 1000}])
    def test_invalid_pagination(self, client, params):
        response = client.get("/api/games", params=params)
        assert response.status_code == 422

    def test_cache_header(self, client):
        response = client.get("/api/games")
        assert response.headers["cache-control"] == "public, max-age=60"


class TestGetGame:
    """Tests for GET /api/games/{game_id} endpoint."""

    def test_get_game(self, client):
        response = client.get("/api/games/5")
        assert response.status_code == 200

        data = response.json()
        assert data["title"] == "The Witcher 3: Wild Hunt"
        assert data["final_price"] == pytest.approx(12.0)
        assert data["release_date"] == "2015-05-19"

    def test_missing_game(self, client):
        response = client.get("/api/games/does-not-exist")
        assert response.status_code == 404
        assert response.headers["cache-control"] == "no-cache"
