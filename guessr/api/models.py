"""
API Models - Request and response schemas for front-ends.

These models define the contract between a front-end and the engine.
All models are serializable to JSON.

Design principles:
- Opaque handles (session_id), never the target
- Self-describing (range included so the UI can validate input)
- Versioned (API version in responses)
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


# =============================================================================
# Enums for API
# =============================================================================

class APIVersion(Enum):
    V1 = "v1"


class SessionStatus(Enum):
    ACTIVE = "active"
    WON = "won"


class GuessOutcome(Enum):
    TOO_LOW = "too_low"
    TOO_HIGH = "too_high"
    CORRECT = "correct"
    ALREADY_WON = "already_won"


# =============================================================================
# Requests
# =============================================================================

@dataclass
class StartGameRequest:
    """
    Request to start a new game.

    If previous_session_id is set, that session is discarded first.
    """
    previous_session_id: str | None = None


@dataclass
class MakeGuessRequest:
    """Request to evaluate a guess in a session."""
    session_id: str
    guess: int


# =============================================================================
# Responses
# =============================================================================

@dataclass
class StartGameResponse:
    """Response after starting a game."""
    session_id: str
    status: SessionStatus
    attempts: int
    min_value: int
    max_value: int
    message: str
    created_at: float
    api_version: str = APIVersion.V1.value


@dataclass
class SessionResponse:
    """Current status of a session."""
    session_id: str
    status: SessionStatus
    attempts: int
    min_value: int
    max_value: int
    created_at: float
    updated_at: float
    api_version: str = APIVersion.V1.value


@dataclass
class GuessResponse:
    """Response after a guess."""
    session_id: str
    message: str
    attempts: int
    outcome: GuessOutcome
    status: SessionStatus
    api_version: str = APIVersion.V1.value


@dataclass
class ErrorResponse:
    """
    Error response.

    Returned for any 4xx or 5xx status.
    """
    error: str
    error_code: str
    details: dict[str, Any] | None = None
    api_version: str = APIVersion.V1.value


@dataclass
class SessionListResponse:
    """Ids of active sessions."""
    sessions: list[str] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.sessions)
