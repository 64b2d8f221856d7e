"""
Tests for the web API.
"""

import pytest
from fastapi.testclient import TestClient

from teeup.web.app import app, build_participants
from teeup.web.models import ParticipantIn, DrawRequest
from teeup.grouping.models import Category, Strategy
from teeup.utils.constants import TEAM_NAME_POOL

ROSTER_TEXT = "Kim, 1\nLee, 2\nPark, 3\nChoi, 4\nJung, 5\nKang, 6"


@pytest.fixture
def client():
    return TestClient(app)


class TestModels:
    """Tests for request models and conversion."""

    def test_draw_request_defaults(self):
        request = DrawRequest(roster_text="Kim")
        assert request.group_size == 4
        assert request.strategy is Strategy.UNIFORM_RANDOM
        assert request.fold_remainder is False

    def test_strategy_from_string(self):
        assert DrawRequest(strategy="balanced").strategy is Strategy.HANDICAP_BALANCED

    def test_build_participants_default_ids(self):
        items = [ParticipantIn(display_name="Kim"), ParticipantIn(display_name="Lee", id=7, category="B")]
        players = build_participants(items)
        assert [p.id for p in players] == [1, 7]
        assert players[1].category is Category.B


class TestDrawEndpoint:
    """Tests for POST /api/draws."""

    def test_balanced_from_text(self, client):
        response = client.post("/api/draws", json={
            "roster_text": ROSTER_TEXT,
            "group_size": 2,
            "strategy": "balanced",
            "seed": 4
        })
        assert response.status_code == 200
        data = response.json()

        assert data["strategy"] == "balanced"
        assert data["total_count"] == 6
        assert len(data["groups"]) == 3
        members = [[m["display_name"] for m in g["members"]] for g in data["groups"]]
        assert members == [["Kim", "Kang"], ["Lee", "Jung"], ["Park", "Choi"]]
        assert [g["average_rating"] for g in data["groups"]] == [3.5, 3.5, 3.5]
        assert data["report"].startswith("=== TEE TIME GROUPS ===")

    def test_participant_list(self, client):
        response = client.post("/api/draws", json={
            "participants": [
                {"display_name": "Kim", "skill_rating": 10, "category": "A"},
                {"display_name": "Lee", "category": "B"},
                {"display_name": "Park"},
            ],
            "group_size": 2,
            "strategy": "stratified"
        })
        assert response.status_code == 200
        data = response.json()
        ids = sorted(m["id"] for g in data["groups"] for m in g["members"])
        assert ids == [1, 2, 3]

    def test_seeded_draws_repeat(self, client):
        body = {"roster_text": ROSTER_TEXT, "group_size": 4, "seed": 99}
        first = client.post("/api/draws", json=body).json()
        second = client.post("/api/draws", json=body).json()
        assert first == second

    def test_empty_roster(self, client):
        response = client.post("/api/draws", json={"roster_text": "\n"})
        assert response.status_code == 400

    def test_invalid_group_size(self, client):
        response = client.post("/api/draws", json={"roster_text": ROSTER_TEXT, "group_size": 0})
        assert response.status_code == 400
        assert "Group size" in response.json()["detail"]

    def test_duplicate_ids(self, client):
        response = client.post("/api/draws", json={
            "participants": [{"id": 1, "display_name": "Kim"}, {"id": 1, "display_name": "Lee"}]
        })
        assert response.status_code == 400

    def test_both_inputs_rejected(self, client):
        response = client.post("/api/draws", json={
            "roster_text": ROSTER_TEXT,
            "participants": [{"display_name": "Kim"}]
        })
        assert response.status_code == 400

    def test_unknown_strategy(self, client):
        response = client.post("/api/draws", json={"roster_text": ROSTER_TEXT, "strategy": "alphabetical"})
        assert response.status_code == 422


class TestReferenceEndpoints:
    """Tests for reference data endpoints."""

    def test_strategies(self, client):
        data = client.get("/api/strategies").json()
        assert [s["id"] for s in data["strategies"]] == ["random", "stratified", "balanced"]

    def test_names(self, client):
        data = client.get("/api/names").json()
        assert data["pool"] == TEAM_NAME_POOL
        assert data["fallback"] == "Group N"

    def test_index(self, client):
        assert client.get("/").json()["status"] == "ok"


class TestNonFiniteRatings:
    """Ratings that are not finite numbers are treated as unknown."""

    def test_nan_rating_is_unknown(self, client):
        body = (
            '{"participants": ['
            '{"display_name": "A", "skill_rating": NaN}, '
            '{"display_name": "B", "skill_rating": 3}, '
            '{"display_name": "C", "skill_rating": 1}, '
            '{"display_name": "D", "skill_rating": 2}], '
            '"group_size": 2, "strategy": "balanced"}'
        )
        response = client.post("/api/draws", content=body,
                               headers={"Content-Type": "application/json"})
        assert response.status_code == 200
        data = response.json()

        ids = [[m["id"] for m in g["members"]] for g in data["groups"]]
        assert ids == [[3, 1], [4, 2]]
        assert data["groups"][0]["members"][1]["skill_rating"] is None
        assert "nan" not in data["report"].lower()

    def test_build_participants_drops_infinite(self):
        players = build_participants([ParticipantIn(display_name="A", skill_rating=float("inf"))])
        assert players[0].skill_rating is None
