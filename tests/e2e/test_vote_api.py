"""End-to-end tests for the vote endpoint."""

from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from punchline.domain.error import StoreUnavailableError
from punchline.domain.service import ScoringService
from punchline.interface.api.app import create_app
from tests.di import build_test_container


@pytest.fixture
def client():
    """Create test client with test container."""
    app_instance = create_app(build_test_container(with_fastapi=True), instrument=False)
    return TestClient(app_instance)


def vote_body(points: int, voter_id: str = "voter-1", **kwargs) -> dict:
    return {
        "author_id": "author-1",
        "author_name": "alice",
        "content": "I used to play piano by ear. Now I use my hands.",
        "voter_id": voter_id,
        "points": points,
        **kwargs,
    }


class TestCastVote:
    """Tests for POST /jokes/{joke_id}/votes."""

    def test_accepted_vote(self, client):
        # Act
        response = client.post("/jokes/joke-1/votes", json=vote_body(40))

        # Assert
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "accepted"
        assert data["accepted"] is True
        assert data["joke_score"] == 40
        assert data["user_score"] == 40
        assert data["user_rank"] == "Bronze"
        assert data["transition"] is None

    def test_repeat_vote_is_not_an_error(self, client):
        client.post("/jokes/joke-1/votes", json=vote_body(40))

        response = client.post("/jokes/joke-1/votes", json=vote_body(10))

        assert response.status_code == 200
        assert response.json()["status"] == "already_voted"
        assert response.json()["accepted"] is False

    def test_votes_accumulate(self, client):
        client.post("/jokes/joke-1/votes", json=vote_body(40, voter_id="a"))

        response = client.post("/jokes/joke-1/votes", json=vote_body(-15, voter_id="b"))

        assert response.json()["joke_score"] == 25

    @pytest.mark.parametrize("points", [0, 101, -101])
    def test_invalid_points(self, client, points):
        response = client.post("/jokes/joke-1/votes", json=vote_body(points))

        assert response.status_code == 400

    def test_self_vote_forbidden(self, client):
        response = client.post("/jokes/joke-1/votes", json=vote_body(10, voter_id="author-1"))

        assert response.status_code == 403

    def test_bot_joke_forbidden(self, client):
        response = client.post(
            "/jokes/joke-1/votes", json=vote_body(10, author_is_bot=True)
        )

        assert response.status_code == 403

    def test_missing_fields(self, client):
        response = client.post("/jokes/joke-1/votes", json={"points": 10})

        assert response.status_code == 422

    def test_store_unavailable(self, client, monkeypatch):
        monkeypatch.setattr(
            ScoringService,
            "apply_vote",
            AsyncMock(side_effect=StoreUnavailableError("votes.try_record", "OperationalError")),
        )

        response = client.post("/jokes/joke-1/votes", json=vote_body(10))

        assert response.status_code == 503
        assert "OperationalError" not in response.text

    def test_overlong_joke_id_rejected(self, client):
        response = client.post(f"/jokes/{'j' * 65}/votes", json=vote_body(10))

        assert response.status_code == 422
