"""
Errors raised by the engine.

Every error carries an `error_code` so boundary layers can turn it into a
structured response without inspecting messages.
"""

from __future__ import annotations


class GuessError(Exception):
    """Base class for guess-related failures."""

    error_code = "GUESS_ERROR"

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidGuess(GuessError):
    """Raised when a guess is not an acceptable value."""

    error_code = "INVALID_GUESS"

    def __init__(self, message: str, value: object = None):
        self.value = value
        super().__init__(message)


class NoActiveSession(GuessError):
    """Raised when a guess targets a session that does not exist."""

    error_code = "SESSION_NOT_FOUND"

    def __init__(self, session_id: str | None = None):
        self.session_id = session_id
        super().__init__("Please start a new game first")
