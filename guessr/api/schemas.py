"""
Pydantic Schemas for API - Request/response models for OpenAPI.

These models define the exact contract between a front-end and the engine.
The target number is never part of any response.

Error Codes:
- SESSION_NOT_FOUND: Session does not exist, was ended, or expired
- INVALID_GUESS: Guess rejected (strict range checking)
- VALIDATION_ERROR: Request body or parameters malformed (HTTP 422)
"""

from enum import Enum
from typing import Optional, Any
from pydantic import BaseModel, Field


# =============================================================================
# Enums
# =============================================================================

class SessionStatus(str, Enum):
    """Session status values."""
    ACTIVE = "active"
    WON = "won"


class GuessOutcome(str, Enum):
    """How a guess compared against the target."""
    TOO_LOW = "too_low"
    TOO_HIGH = "too_high"
    CORRECT = "correct"
    ALREADY_WON = "already_won"


class ErrorCode(str, Enum):
    """Structured error codes."""
    SESSION_NOT_FOUND = "SESSION_NOT_FOUND"
    INVALID_GUESS = "INVALID_GUESS"
    VALIDATION_ERROR = "VALIDATION_ERROR"


# =============================================================================
# Request Models
# =============================================================================

class StartGameRequest(BaseModel):
    """Request body for starting a game."""
    previous_session_id: Optional[str] = Field(
        default=None,
        description="Session to discard before starting the new one",
    )


class GuessRequest(BaseModel):
    """Request body for a guess."""
    guess: int = Field(ge=0, description="The player's guess")


# =============================================================================
# Response Models
# =============================================================================

class StartGameResponse(BaseModel):
    """Response after starting a game."""
    session_id: str
    status: SessionStatus
    attempts: int = 0
    min_value: int
    max_value: int
    message: str
    created_at: float
    api_version: str = "v1"


class SessionResponse(BaseModel):
    """Current status of a session."""
    session_id: str
    status: SessionStatus
    attempts: int
    min_value: int
    max_value: int
    created_at: float
    updated_at: float
    api_version: str = "v1"

    model_config = {"from_attributes": True}


class GuessResponse(BaseModel):
    """Response after a guess."""
    session_id: str
    message: str
    attempts: int
    outcome: GuessOutcome
    status: SessionStatus
    api_version: str = "v1"


class ErrorResponse(BaseModel):
    """Standard error response."""
    error: str
    error_code: ErrorCode
    details: Optional[dict[str, Any]] = None
    api_version: str = "v1"


class SessionListResponse(BaseModel):
    """List of active session IDs."""
    sessions: list[str] = Field(default_factory=list)
    count: int = 0


class EndSessionResponse(BaseModel):
    """Response after ending a session."""
    success: bool
    session_id: str
    message: str = "Session ended"


class HealthResponse(BaseModel):
    """Health check response."""
    status: str = "healthy"
    service: str = "guessr"
    version: str
