"""
Configuration - Game range and environment-driven settings.

Environment variables:
    GUESSR_ENV              Deployment environment name (default: development)
    GUESSR_LOG_LEVEL        Logging level name (default: INFO)
    GUESSR_STRICT_RANGE     Reject guesses outside the range (default: off)
    GUESSR_SESSION_MAX_AGE  Idle seconds before a session is stale (default: 3600)
    ALLOWED_ORIGINS         Comma-separated CORS origins (default: *)
"""

from __future__ import annotations
from dataclasses import dataclass
import os

DEFAULT_MIN_VALUE = 1
DEFAULT_MAX_VALUE = 100

GUESSR_ENV = os.getenv("GUESSR_ENV", "development")
GUESSR_LOG_LEVEL = os.getenv("GUESSR_LOG_LEVEL", "INFO")
GUESSR_SESSION_MAX_AGE = int(os.getenv("GUESSR_SESSION_MAX_AGE", "3600"))
ALLOWED_ORIGINS = os.getenv("ALLOWED_ORIGINS", "*").split(",")

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class GameConfig:
    """
    Rules for a game session.

    With `strict_range` off, guesses outside [min_value, max_value] are
    accepted and simply compared against the target.
    """
    min_value: int = DEFAULT_MIN_VALUE
    max_value: int = DEFAULT_MAX_VALUE
    strict_range: bool = False

    def __post_init__(self):
        if self.min_value > self.max_value:
            raise ValueError(
                f"min_value ({self.min_value}) must not exceed max_value ({self.max_value})"
            )

    def in_range(self, value: int) -> bool:
        return self.min_value <= value <= self.max_value

    @classmethod
    def from_env(cls) -> GameConfig:
        """Build a config from GUESSR_* environment variables."""
        strict = os.getenv("GUESSR_STRICT_RANGE", "").strip().lower() in _TRUTHY
        return cls(strict_range=strict)


DEFAULT_CONFIG = GameConfig()
