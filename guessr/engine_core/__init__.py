"""
Engine Core - The game state machine.

Contains:
- GameSession: hidden target + attempt counter
- Guess evaluation and its typed results
- Errors raised for rejected guesses and unknown sessions
"""

from .state import GameSession, GamePhase, GuessOutcome, GuessResult
from .errors import GuessError, InvalidGuess, NoActiveSession

__all__ = [
    "GameSession",
    "GamePhase",
    "GuessOutcome",
    "GuessResult",
    "GuessError",
    "InvalidGuess",
    "NoActiveSession",
]
