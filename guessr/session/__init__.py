"""
Session Module - Manages ephemeral game sessions.

A session represents one play-through:
- Created when the player starts a game
- Holds the hidden target and the attempt counter
- Destroyed when ended, replaced, or left idle too long

Sessions are EPHEMERAL: nothing is persisted.
"""

from .manager import SessionManager, Session

__all__ = [
    "SessionManager",
    "Session",
]
