"""
Game State - The guessing game's state machine.

A GameSession holds a hidden target and an attempt counter:
- The target is drawn once, at start, and never changes
- Each evaluated guess increments the counter by exactly one
- An exact match moves the session from ACTIVE to WON
- WON is terminal: later guesses are answered but not counted
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
import logging
import random

from ..config import GameConfig, DEFAULT_CONFIG
from .errors import InvalidGuess

logger = logging.getLogger(__name__)

# Process-wide generator, seeded from the OS entropy source on import.
_rng = random.Random()


class GamePhase(Enum):
    """Lifecycle phase of a session."""
    ACTIVE = "active"
    WON = "won"


class GuessOutcome(Enum):
    """How a guess compared against the target."""
    TOO_LOW = "too_low"
    TOO_HIGH = "too_high"
    CORRECT = "correct"
    ALREADY_WON = "already_won"


@dataclass(frozen=True)
class GuessResult:
    """
    Result of evaluating a guess.

    Unpacks as `(message, attempts)`:

        message, attempts = session.guess(50)
    """
    message: str
    attempts: int
    outcome: GuessOutcome

    @property
    def is_winning(self) -> bool:
        return self.outcome == GuessOutcome.CORRECT

    def __iter__(self):
        return iter((self.message, self.attempts))


class GameSession:
    """
    One game: a hidden target and the number of guesses evaluated so far.

    Create sessions with `GameSession.start()`. The session is mutated in
    place by `guess()`; the owner is responsible for serializing access.
    """

    __slots__ = ("_target", "_attempts", "_phase", "config")

    def __init__(self, target: int, config: GameConfig = DEFAULT_CONFIG):
        self._target = target
        self._attempts = 0
        self._phase = GamePhase.ACTIVE
        self.config = config

    @classmethod
    def start(
        cls,
        rng: random.Random | None = None,
        config: GameConfig | None = None,
    ) -> GameSession:
        """
        Start a new session with a uniformly drawn target.

        Args:
            rng: Random source (defaults to the process-wide generator)
            config: Range and validation rules

        Returns:
            A fresh session with zero attempts
        """
        config = config or DEFAULT_CONFIG
        rng = rng or _rng
        target = rng.randint(config.min_value, config.max_value)
        logger.debug("Drew target %d in [%d, %d]", target, config.min_value, config.max_value)
        return cls(target, config=config)

    @property
    def target(self) -> int:
        return self._target

    @property
    def attempts(self) -> int:
        return self._attempts

    @property
    def phase(self) -> GamePhase:
        return self._phase

    @property
    def is_won(self) -> bool:
        return self._phase == GamePhase.WON

    def guess(self, value: int) -> GuessResult:
        """
        Evaluate a guess against the target.

        The value is validated before anything else, so an invalid guess
        raises even once the session is won.

        Raises:
            InvalidGuess: value is not a non-negative integer, or is outside
                the configured range while strict range checking is on
        """
        self._validate(value)

        if self._phase == GamePhase.WON:
            return GuessResult(
                message=(
                    f"You already guessed the number in {self._attempts} attempts! "
                    "Start a new game to play again."
                ),
                attempts=self._attempts,
                outcome=GuessOutcome.ALREADY_WON,
            )

        self._attempts += 1

        if value < self._target:
            outcome = GuessOutcome.TOO_LOW
            message = f"Too low! Attempt {self._attempts}"
        elif value > self._target:
            outcome = GuessOutcome.TOO_HIGH
            message = f"Too high! Attempt {self._attempts}"
        else:
            outcome = GuessOutcome.CORRECT
            message = f"Congratulations! You guessed the number in {self._attempts} attempts!"
            self._phase = GamePhase.WON

        return GuessResult(message=message, attempts=self._attempts, outcome=outcome)

    def _validate(self, value: int):
        # bool is an int subclass; True is not a guess
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidGuess(f"Guess must be an integer, got {value!r}", value=value)
        if value < 0:
            raise InvalidGuess(f"Guess must be non-negative, got {value}", value=value)
        if self.config.strict_range and not self.config.in_range(value):
            raise InvalidGuess(
                f"Please enter a valid number between "
                f"{self.config.min_value} and {self.config.max_value}",
                value=value,
            )

    def __repr__(self):
        # Target deliberately left out
        return f"GameSession(attempts={self._attempts}, phase={self._phase.value})"
