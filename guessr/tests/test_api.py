"""
Tests for API layer.

Tests:
- API service methods
- Session lifecycle via API
- Error handling
"""

import dataclasses

from ..api.models import (
    StartGameRequest,
    MakeGuessRequest,
    GuessResponse,
    ErrorResponse,
    SessionStatus,
    GuessOutcome,
    SessionListResponse,
)
from ..api.service import APIService
from ..config import GameConfig
from ..session import SessionManager


class TestAPIService:
    """Tests for APIService."""

    def test_start_game(self, service):
        response = service.start_game(StartGameRequest())

        assert response.session_id
        assert response.status == SessionStatus.ACTIVE
        assert response.attempts == 0
        assert (response.min_value, response.max_value) == (1, 100)
        assert response.message == "Game started! Guess a number between 1 and 100"

    def test_start_game_hides_target(self, service):
        """No serialized field carries the target."""
        response = service.start_game()
        data = dataclasses.asdict(response)

        assert "target" not in data
        assert "target_number" not in data

    def test_start_replaces_previous(self, service):
        first = service.start_game()
        second = service.start_game(StartGameRequest(previous_session_id=first.session_id))

        assert second.session_id != first.session_id
        assert hasattr(service.get_session(first.session_id), "error")
        assert service.get_session(second.session_id).attempts == 0

    def test_scenario(self, service):
        session_id = service.start_game().session_id

        low = service.make_guess(MakeGuessRequest(session_id, 10))
        high = service.make_guess(MakeGuessRequest(session_id, 99))
        win = service.make_guess(MakeGuessRequest(session_id, 42))

        assert (low.message, low.attempts) == ("Too low! Attempt 1", 1)
        assert (high.message, high.attempts) == ("Too high! Attempt 2", 2)
        assert (win.message, win.attempts) == (
            "Congratulations! You guessed the number in 3 attempts!", 3
        )
        assert low.status == SessionStatus.ACTIVE
        assert win.status == SessionStatus.WON
        assert win.outcome == GuessOutcome.CORRECT

    def test_guess_after_win(self, service):
        session_id = service.start_game().session_id
        service.make_guess(MakeGuessRequest(session_id, 42))

        response = service.make_guess(MakeGuessRequest(session_id, 5))

        assert isinstance(response, GuessResponse)
        assert response.outcome == GuessOutcome.ALREADY_WON
        assert response.status == SessionStatus.WON
        assert response.attempts == 1

    def test_guess_without_session(self, service):
        response = service.make_guess(MakeGuessRequest("nonexistent-id", 50))

        assert isinstance(response, ErrorResponse)
        assert response.error_code == "SESSION_NOT_FOUND"
        assert response.error == "Please start a new game first"

    def test_invalid_guess(self, fixed_rng):
        service = APIService(
            session_manager=SessionManager(config=GameConfig(strict_range=True), rng=fixed_rng)
        )
        session_id = service.start_game().session_id

        response = service.make_guess(MakeGuessRequest(session_id, 150))

        assert isinstance(response, ErrorResponse)
        assert response.error_code == "INVALID_GUESS"
        assert response.details == {"guess": 150}
        assert service.get_session(session_id).attempts == 0

    def test_get_session(self, service):
        session_id = service.start_game().session_id
        service.make_guess(MakeGuessRequest(session_id, 1))

        response = service.get_session(session_id)

        assert response.session_id == session_id
        assert response.attempts == 1
        assert response.status == SessionStatus.ACTIVE

    def test_get_nonexistent_session(self, service):
        response = service.get_session("nonexistent-id")

        assert hasattr(response, "error")
        assert response.error_code == "SESSION_NOT_FOUND"

    def test_end_session(self, service):
        session_id = service.start_game().session_id

        assert service.end_session(session_id)
        assert hasattr(service.get_session(session_id), "error")

    def test_list_sessions(self, service):
        for _ in range(3):
            service.start_game()

        assert len(service.list_sessions()) == 3

    def test_cleanup(self, service):
        session_id = service.start_game().session_id
        service.session_manager.get_session(session_id).updated_at = 0.0

        assert service.cleanup(max_age_seconds=60) == 1
        assert service.list_sessions() == []


class TestAPIModels:
    """Tests for API model helpers."""

    def test_session_list_count(self):
        assert SessionListResponse(sessions=["a", "b"]).count == 2

    def test_error_response_version(self):
        error = ErrorResponse(error="Session not found", error_code="SESSION_NOT_FOUND")
        assert error.api_version == "v1"
