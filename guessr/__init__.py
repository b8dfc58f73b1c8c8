"""
Guessr - Number Guessing Game Engine

A tiny, rules-driven guessing game with a hidden target and an attempt counter.
The engine provides:
- The game session state machine (active -> won)
- In-memory session management behind opaque session ids
- A framework-agnostic service and a FastAPI application for front-ends
- A terminal CLI for interactive play
"""

__version__ = "0.1.0"
