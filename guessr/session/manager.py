"""
Session Manager - Creates and manages game sessions.

LIFECYCLE:
1. Front-end asks to start a game -> new session under an opaque id
2. Each guess is applied to the stored session, in place, under the lock
3. Session is ended explicitly, replaced by a new start, or cleaned up
   once stale

PERSISTENCE RULES:
- In-memory only, nothing survives a restart
- The manager's copy is the single source of truth
- The target never leaves this process; callers only see the session id
"""

from __future__ import annotations
from dataclasses import dataclass, field
from threading import RLock
import logging
import random
import time
import uuid

from ..config import GameConfig, DEFAULT_CONFIG
from ..engine_core.state import GameSession, GuessResult
from ..engine_core.errors import NoActiveSession

logger = logging.getLogger(__name__)


@dataclass
class Session:
    """A live game tracked by the manager."""
    session_id: str
    game: GameSession
    created_at: float
    updated_at: float = field(default=0.0)

    def is_active(self) -> bool:
        """Check if the game is still waiting for the winning guess."""
        return not self.game.is_won


class SessionManager:
    """
    Manages game sessions.

    Responsibilities:
    - Create sessions and hand out opaque ids
    - Apply guesses to the stored session under a single lock
    - Forget ended and stale sessions
    """

    def __init__(self, config: GameConfig | None = None, rng: random.Random | None = None):
        self.config = config or DEFAULT_CONFIG
        self.rng = rng
        self._sessions: dict[str, Session] = {}
        self._lock = RLock()

    def create_session(self, rng: random.Random | None = None) -> Session:
        """
        Create a new game session.

        Args:
            rng: Optional random source, overriding the manager's

        Returns:
            New Session with zero attempts
        """
        game = GameSession.start(rng=rng or self.rng, config=self.config)
        now = time.time()
        session = Session(
            session_id=str(uuid.uuid4()),
            game=game,
            created_at=now,
            updated_at=now,
        )

        with self._lock:
            self._sessions[session.session_id] = session

        logger.info("Created session %s", session.session_id)
        return session

    def get_session(self, session_id: str) -> Session | None:
        """Get a session by ID."""
        with self._lock:
            return self._sessions.get(session_id)

    def guess(self, session_id: str, value: int) -> GuessResult:
        """
        Apply a guess to a stored session.

        Raises:
            NoActiveSession: no session with this id
            InvalidGuess: the guess was rejected (attempts unchanged)
        """
        with self._lock:
            session = self._sessions.get(session_id)
            if session is None:
                raise NoActiveSession(session_id)

            result = session.game.guess(value)
            session.updated_at = time.time()

        logger.debug(
            "Session %s guess %s -> %s (attempt %d)",
            session_id, value, result.outcome.value, result.attempts,
        )
        if result.is_winning:
            logger.info("Session %s won in %d attempts", session_id, result.attempts)
        return result

    def end_session(self, session_id: str, reason: str = "completed") -> bool:
        """
        End a session and forget it.

        Returns:
            True if a session was removed
        """
        with self._lock:
            session = self._sessions.pop(session_id, None)

        if session is None:
            return False
        logger.info("Ended session %s (%s)", session_id, reason)
        return True

    def list_active_sessions(self) -> list[str]:
        """List IDs of sessions that have not been won yet."""
        with self._lock:
            return [
                sid for sid, session in self._sessions.items()
                if session.is_active()
            ]

    def cleanup_stale_sessions(self, max_age_seconds: int = 3600) -> int:
        """
        Remove sessions idle for longer than max_age_seconds.

        Returns:
            Number of sessions removed
        """
        cutoff = time.time() - max_age_seconds
        with self._lock:
            stale = [
                sid for sid, session in self._sessions.items()
                if session.updated_at < cutoff
            ]
            for session_id in stale:
                del self._sessions[session_id]

        if stale:
            logger.info("Cleaned up %d stale session(s)", len(stale))
        return len(stale)

    def __len__(self):
        with self._lock:
            return len(self._sessions)
