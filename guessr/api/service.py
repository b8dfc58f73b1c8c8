"""
API Service - Business logic layer between API and engine.

The service:
1. Translates API requests to engine calls
2. Manages sessions
3. Turns engine errors into structured error responses
4. Formats responses for front-ends

This layer is framework-agnostic (can be used with FastAPI, a CLI, etc.)
"""

from __future__ import annotations
from dataclasses import dataclass, field
import logging

from .models import (
    # Requests
    StartGameRequest,
    MakeGuessRequest,
    # Responses
    StartGameResponse,
    SessionResponse,
    GuessResponse,
    ErrorResponse,
    # Enums
    SessionStatus,
    GuessOutcome,
)
from ..session import SessionManager, Session
from ..engine_core.errors import GuessError, NoActiveSession

logger = logging.getLogger(__name__)


@dataclass
class APIService:
    """
    Main API service.

    Usage:
        service = APIService()

        # Start a game
        started = service.start_game(StartGameRequest())

        # Guess
        response = service.make_guess(MakeGuessRequest(started.session_id, 50))
    """
    session_manager: SessionManager = field(default_factory=SessionManager)

    def start_game(self, request: StartGameRequest | None = None) -> StartGameResponse:
        """
        Start a new game.

        Replaces the previous session when one is named in the request.
        """
        request = request or StartGameRequest()
        if request.previous_session_id:
            self.session_manager.end_session(request.previous_session_id, reason="replaced")

        session = self.session_manager.create_session()
        config = session.game.config

        return StartGameResponse(
            session_id=session.session_id,
            status=self._session_status(session),
            attempts=session.game.attempts,
            min_value=config.min_value,
            max_value=config.max_value,
            message=f"Game started! Guess a number between {config.min_value} and {config.max_value}",
            created_at=session.created_at,
        )

    def make_guess(self, request: MakeGuessRequest) -> GuessResponse | ErrorResponse:
        """
        Evaluate a guess in an existing session.
        """
        try:
            result = self.session_manager.guess(request.session_id, request.guess)
        except NoActiveSession as e:
            return ErrorResponse(
                error=e.message,
                error_code=e.error_code,
                details={"session_id": request.session_id},
            )
        except GuessError as e:
            logger.warning("Rejected guess %r for session %s: %s", request.guess, request.session_id, e)
            return ErrorResponse(
                error=e.message,
                error_code=e.error_code,
                details={"guess": request.guess},
            )

        outcome = GuessOutcome(result.outcome.value)
        won = outcome in (GuessOutcome.CORRECT, GuessOutcome.ALREADY_WON)
        return GuessResponse(
            session_id=request.session_id,
            message=result.message,
            attempts=result.attempts,
            outcome=outcome,
            status=SessionStatus.WON if won else SessionStatus.ACTIVE,
        )

    def get_session(self, session_id: str) -> SessionResponse | ErrorResponse:
        """
        Get session status.
        """
        session = self.session_manager.get_session(session_id)
        if not session:
            return ErrorResponse(
                error="Session not found",
                error_code=NoActiveSession.error_code,
            )
        return self._session_to_response(session)

    def end_session(self, session_id: str, reason: str = "user_ended") -> bool:
        """
        End a game session.
        """
        return self.session_manager.end_session(session_id, reason)

    def list_sessions(self) -> list[str]:
        """
        List active session IDs.
        """
        return self.session_manager.list_active_sessions()

    def cleanup(self, max_age_seconds: int) -> int:
        """
        Drop sessions idle longer than max_age_seconds.
        """
        return self.session_manager.cleanup_stale_sessions(max_age_seconds)

    # =========================================================================
    # Helper methods
    # =========================================================================

    def _session_to_response(self, session: Session) -> SessionResponse:
        config = session.game.config
        return SessionResponse(
            session_id=session.session_id,
            status=self._session_status(session),
            attempts=session.game.attempts,
            min_value=config.min_value,
            max_value=config.max_value,
            created_at=session.created_at,
            updated_at=session.updated_at,
        )

    def _session_status(self, session: Session) -> SessionStatus:
        if session.is_active():
            return SessionStatus.ACTIVE
        return SessionStatus.WON
