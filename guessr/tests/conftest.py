"""
Pytest fixtures for Guessr tests.
"""

import random

import pytest

from ..config import GameConfig
from ..engine_core.state import GameSession
from ..session import SessionManager
from ..api.service import APIService


class FixedRandom(random.Random):
    """Random source whose randint always lands on one value."""

    def __init__(self, value: int):
        super().__init__(0)
        self.value = value
        self.calls: list[tuple[int, int]] = []

    def randint(self, a, b):
        self.calls.append((a, b))
        return self.value


@pytest.fixture
def fixed_rng() -> FixedRandom:
    """Random source that always draws 42."""
    return FixedRandom(42)


@pytest.fixture
def session_42(fixed_rng: FixedRandom) -> GameSession:
    """Fresh session whose target is 42."""
    return GameSession.start(rng=fixed_rng)


@pytest.fixture
def strict_config() -> GameConfig:
    return GameConfig(strict_range=True)


@pytest.fixture
def manager(fixed_rng: FixedRandom) -> SessionManager:
    """Session manager drawing 42 for every session."""
    return SessionManager(rng=fixed_rng)


@pytest.fixture
def service(manager: SessionManager) -> APIService:
    """API service over a deterministic manager."""
    return APIService(session_manager=manager)
