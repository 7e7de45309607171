"""
Session Module - Holds the current state of running games.

A session represents one play-through:
- Created when the user starts a game
- Holds the current game state (the only mutable cell)
- Dispatches actions to the pure reducer
- Dropped when the game is over or abandoned

Sessions are EPHEMERAL: nothing is persisted.
"""

from .manager import SessionManager, GameSession, SessionState

__all__ = [
    "SessionManager",
    "GameSession",
    "SessionState",
]
