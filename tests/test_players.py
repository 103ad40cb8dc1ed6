"""Tests for the player registry endpoints."""

import pytest


class TestListPlayers:
    def test_empty_registry(self, client):
        response = client.get("/api/players")

        assert response.status_code == 200
        assert response.json() == []

    def test_lists_in_insertion_order(self, client):
        for name, number in [("Ana", 7), ("Bruna", 3), ("Carla", 11)]:
            client.post("/api/players", json={"name": name, "jersey_number": number})

        names = [p["name"] for p in client.get("/api/players").json()]

        assert names == ["Ana", "Bruna", "Carla"]


class TestAddPlayer:
    def test_returns_player_with_assigned_id(self, client):
        response = client.post("/api/players", json={"name": "Ana", "jersey_number": 7})

        assert response.status_code == 201
        data = response.json()
        assert data["id"] >= 1
        assert data["name"] == "Ana"
        assert data["jersey_number"] == 7

    def test_strips_name(self, client):
        response = client.post("/api/players", json={"name": "  Ana  ", "jersey_number": 7})

        assert response.json()["name"] == "Ana"

    @pytest.mark.parametrize(
        "payload",
        [
            {"name": "", "jersey_number": 7},
            {"name": "   ", "jersey_number": 7},
            {"jersey_number": 7},
            {"name": "Ana"},
            {"name": "Ana", "jersey_number": "seven"},
            {"name": "Ana", "jersey_number": True},
            {"name": "Ana", "jersey_number": "7"},
            {"name": "Ana", "jersey_number": 0},
            {"name": "Ana", "jersey_number": -4},
        ],
    )
    def test_rejects_invalid_input_and_leaves_registry_unchanged(self, client, payload):
        response = client.post("/api/players", json=payload)

        assert response.status_code == 400
        assert client.get("/api/players").json() == []


class TestUpdatePlayer:
    def test_overwrites_both_fields(self, client, ana):
        response = client.put(f"/api/players/{ana['id']}", json={"name": "Ana Paula", "jersey_number": 8})

        assert response.status_code == 200
        assert response.json() == {"id": ana["id"], "name": "Ana Paula", "jersey_number": 8}
        assert client.get("/api/players").json()[0]["jersey_number"] == 8

    def test_unknown_player_is_404(self, client):
        response = client.put("/api/players/999", json={"name": "Ghost", "jersey_number": 1})

        assert response.status_code == 404

    def test_rejects_empty_name(self, client, ana):
        response = client.put(f"/api/players/{ana['id']}", json={"name": "", "jersey_number": 8})

        assert response.status_code == 400
        assert client.get("/api/players").json()[0]["name"] == "Ana"


class TestDeletePlayer:
    def test_deletes_existing_player(self, client, ana):
        response = client.delete(f"/api/players/{ana['id']}")

        assert response.status_code == 200
        assert response.json() == {"message": "Player deleted successfully", "deleted": True}
        assert client.get("/api/players").json() == []

    def test_deleting_absent_player_is_silent_success(self, client):
        response = client.delete("/api/players/42")

        assert response.status_code == 200
        assert response.json()["deleted"] is False

    def test_removes_players_passes(self, client, ana, session_id):
        client.post("/api/pass_stats", json={"session_id": session_id, "player_id": ana["id"], "rating": 3})

        client.delete(f"/api/players/{ana['id']}")
        bruna = client.post("/api/players", json={"name": "Bruna", "jersey_number": 3}).json()

        stats = client.get(f"/api/session/{session_id}/stats").json()
        assert stats == [
            {"player_id": bruna["id"], "name": "Bruna", "jersey_number": 3, "total_passes": 0, "average_rating": 0.0}
        ]
