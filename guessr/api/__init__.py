"""
API Module - Front-end interface.

Exposes the engine to a front-end:
1. Start a game (receives an opaque session id)
2. Submit guesses against that session id
3. Read session status, end sessions

All state is session-scoped and held server-side.
"""

from .models import (
    # Requests
    StartGameRequest,
    MakeGuessRequest,
    # Responses
    StartGameResponse,
    SessionResponse,
    GuessResponse,
    ErrorResponse,
    SessionListResponse,
    # Enums
    SessionStatus,
    GuessOutcome,
)
from .service import APIService
from .app import create_app

__all__ = [
    # Requests
    "StartGameRequest",
    "MakeGuessRequest",
    # Responses
    "StartGameResponse",
    "SessionResponse",
    "GuessResponse",
    "ErrorResponse",
    "SessionListResponse",
    # Enums
    "SessionStatus",
    "GuessOutcome",
    # Service
    "APIService",
    "create_app",
]
