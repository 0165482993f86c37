"""End-to-end tests for the read endpoints."""

import pytest
from fastapi.testclient import TestClient

from punchline.interface.api.app import create_app
from tests.di import build_test_container


@pytest.fixture
def client():
    """Create test client with test container."""
    app_instance = create_app(build_test_container(with_fastapi=True), instrument=False)
    return TestClient(app_instance)


def vote(client: TestClient, joke_id: str, author_id: str, points: int, voter_id: str = "v"):
    response = client.post(
        f"/jokes/{joke_id}/votes",
        json={
            "author_id": author_id,
            "author_name": f"name-{author_id}",
            "content": f"joke {joke_id}",
            "voter_id": voter_id,
            "points": points,
        },
    )
    assert response.status_code == 200
    return response.json()


class TestHealth:
    """Tests for GET /health."""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestJokes:
    """Tests for the joke endpoints."""

    def test_no_jokes(self, client):
        assert client.get("/jokes/random").status_code == 404
        assert client.get("/jokes/best").status_code == 404

    def test_best_joke(self, client):
        vote(client, "j1", "a1", 20)
        vote(client, "j2", "a2", 80)
        vote(client, "j3", "a3", -30)

        response = client.get("/jokes/best")

        assert response.status_code == 200
        data = response.json()
        assert data["joke_id"] == "j2"
        assert data["score"] == 80
        assert data["content"] == "joke j2"

    def test_random_joke(self, client):
        vote(client, "j1", "a1", 20)

        response = client.get("/jokes/random")

        assert response.status_code == 200
        assert response.json()["joke_id"] == "j1"


class TestUsers:
    """Tests for the user endpoints."""

    def test_leaderboard_default_size(self, client):
        for i in range(7):
            vote(client, f"j{i}", f"a{i}", i + 1)

        response = client.get("/users/leaderboard")

        assert response.status_code == 200
        entries = response.json()["entries"]
        assert len(entries) == 5
        assert entries[0]["user_id"] == "a6"
        assert entries[0]["position"] == 1

    def test_leaderboard_limit(self, client):
        vote(client, "j1", "a1", 10)
        vote(client, "j2", "a2", 20)

        response = client.get("/users/leaderboard", params={"limit": 1})

        assert [entry["user_id"] for entry in response.json()["entries"]] == ["a2"]

    def test_leaderboard_limit_validated(self, client):
        assert client.get("/users/leaderboard", params={"limit": 0}).status_code == 422

    def test_user_rank(self, client):
        vote(client, "j1", "a1", 60, voter_id="v1")
        vote(client, "j2", "a1", 40, voter_id="v1")

        response = client.get("/users/a1")

        assert response.status_code == 200
        assert response.json() == {
            "user_id": "a1",
            "display_name": "name-a1",
            "score": 100,
            "rank": "Bronze",
            "joke_count": 2,
        }

    def test_unknown_user(self, client):
        assert client.get("/users/nobody").status_code == 404
