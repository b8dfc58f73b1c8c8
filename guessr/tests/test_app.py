"""
Tests for the FastAPI application.

Exercises the HTTP contract end to end through TestClient.
"""

import pytest
from fastapi.testclient import TestClient

from ..api.app import create_app
from ..api.service import APIService
from ..config import GameConfig
from ..session import SessionManager
from .conftest import FixedRandom


@pytest.fixture
def client(service) -> TestClient:
    return TestClient(create_app(service=service))


@pytest.fixture
def strict_client() -> TestClient:
    service = APIService(
        session_manager=SessionManager(config=GameConfig(strict_range=True), rng=FixedRandom(42))
    )
    return TestClient(create_app(service=service))


class TestSessionEndpoints:
    """Tests for /api/v1/sessions."""

    def test_start_game(self, client):
        response = client.post("/api/v1/sessions")

        assert response.status_code == 201
        data = response.json()
        assert data["status"] == "active"
        assert data["attempts"] == 0
        assert data["message"] == "Game started! Guess a number between 1 and 100"
        assert "target" not in data
        assert "target_number" not in data

    def test_start_game_replaces_previous(self, client):
        first = client.post("/api/v1/sessions").json()["session_id"]
        second = client.post(
            "/api/v1/sessions", json={"previous_session_id": first}
        ).json()["session_id"]

        assert client.get(f"/api/v1/sessions/{first}").status_code == 404
        assert client.get(f"/api/v1/sessions/{second}").status_code == 200

    def test_get_session(self, client):
        session_id = client.post("/api/v1/sessions").json()["session_id"]

        data = client.get(f"/api/v1/sessions/{session_id}").json()

        assert data["session_id"] == session_id
        assert data["attempts"] == 0
        assert "target" not in data

    def test_get_missing_session(self, client):
        response = client.get("/api/v1/sessions/nonexistent-id")

        assert response.status_code == 404
        assert response.json()["error_code"] == "SESSION_NOT_FOUND"

    def test_idle_session_swept_on_start(self, service):
        """Starting a game drops sessions idle longer than the max age."""
        client = TestClient(create_app(service=service, session_max_age=60))
        idle = client.post("/api/v1/sessions").json()["session_id"]
        won = client.post("/api/v1/sessions").json()["session_id"]
        client.post(f"/api/v1/sessions/{won}/guesses", json={"guess": 42})
        for session_id in (idle, won):
            service.session_manager.get_session(session_id).updated_at = 0.0

        fresh = client.post("/api/v1/sessions").json()["session_id"]

        assert client.get(f"/api/v1/sessions/{idle}").status_code == 404
        assert client.get(f"/api/v1/sessions/{won}").status_code == 404
        assert client.get(f"/api/v1/sessions/{fresh}").status_code == 200
        assert len(service.session_manager) == 1

    def test_list_and_end(self, client):
        session_id = client.post("/api/v1/sessions").json()["session_id"]

        listed = client.get("/api/v1/sessions").json()
        assert listed["sessions"] == [session_id]
        assert listed["count"] == 1

        ended = client.delete(f"/api/v1/sessions/{session_id}").json()
        assert ended["success"] is True
        assert client.get("/api/v1/sessions").json()["count"] == 0


class TestGuessEndpoint:
    """Tests for /api/v1/sessions/{id}/guesses."""

    def test_scenario(self, client):
        session_id = client.post("/api/v1/sessions").json()["session_id"]
        url = f"/api/v1/sessions/{session_id}/guesses"

        low = client.post(url, json={"guess": 10}).json()
        high = client.post(url, json={"guess": 99}).json()
        win = client.post(url, json={"guess": 42}).json()

        assert (low["message"], low["attempts"], low["outcome"]) == ("Too low! Attempt 1", 1, "too_low")
        assert (high["message"], high["attempts"], high["outcome"]) == ("Too high! Attempt 2", 2, "too_high")
        assert win["message"] == "Congratulations! You guessed the number in 3 attempts!"
        assert win["attempts"] == 3
        assert win["status"] == "won"

    def test_guess_after_win(self, client):
        session_id = client.post("/api/v1/sessions").json()["session_id"]
        url = f"/api/v1/sessions/{session_id}/guesses"
        client.post(url, json={"guess": 42})

        data = client.post(url, json={"guess": 42}).json()

        assert data["outcome"] == "already_won"
        assert data["attempts"] == 1

    def test_guess_missing_session(self, client):
        response = client.post("/api/v1/sessions/nonexistent-id/guesses", json={"guess": 5})

        assert response.status_code == 404
        body = response.json()
        assert body["error_code"] == "SESSION_NOT_FOUND"
        assert body["error"] == "Please start a new game first"

    @pytest.mark.parametrize("body", [{"guess": -1}, {"guess": "abc"}, {}])
    def test_malformed_guess(self, client, body):
        session_id = client.post("/api/v1/sessions").json()["session_id"]

        response = client.post(f"/api/v1/sessions/{session_id}/guesses", json=body)

        assert response.status_code == 422
        assert response.json()["error_code"] == "VALIDATION_ERROR"

    def test_strict_range_rejection(self, strict_client):
        session_id = strict_client.post("/api/v1/sessions").json()["session_id"]

        response = strict_client.post(
            f"/api/v1/sessions/{session_id}/guesses", json={"guess": 101}
        )

        assert response.status_code == 400
        assert response.json()["error_code"] == "INVALID_GUESS"


class TestSystemEndpoints:
    """Tests for health and root."""

    def test_health(self, client):
        data = client.get("/health").json()
        assert data["status"] == "healthy"
        assert data["service"] == "guessr"

    def test_root(self, client):
        assert client.get("/").json()["docs"] == "/api/docs"
