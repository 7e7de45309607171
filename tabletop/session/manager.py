"""
Session Manager - Creates and manages game sessions.

A session is the externally-owned "current state" cell around the
pure engine:
1. Created when a game starts (state built from the catalog)
2. Each dispatch runs the reducer and, on success, swaps the cell
3. History of accepted actions is kept for replay
4. Dropped when the game is abandoned or the host goes away

Sessions are in-memory only. Callers serialize dispatches; a session
does no locking of its own.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
import logging
import time
import uuid

from ..engine_core.state import GameState, GamePhase
from ..engine_core.action import Action, ActionResult
from ..engine_core.reducer import Reducer, replay
from ..engine_core.outcome import GameOutcome, determine_outcome
from ..games.splendor.setup import setup_game

logger = logging.getLogger(__name__)


class SessionState(Enum):
    """State of a game session."""
    ACTIVE = "active"  # Game in progress
    GAME_OVER = "game_over"  # Game completed
    ABANDONED = "abandoned"  # Ended before completion


@dataclass
class GameSession:
    """
    One play-through of a game.

    ``state`` is the only mutable thing here: it always points at the
    latest accepted GameState. Every past state stays valid, since
    states are immutable.
    """
    session_id: str
    initial_state: GameState
    created_at: float
    state: GameState | None = None
    status: SessionState = SessionState.ACTIVE
    reducer: Reducer = field(default_factory=Reducer)

    def __post_init__(self):
        if self.state is None:
            self.state = self.initial_state

    @property
    def history(self) -> tuple[Action, ...]:
        return self.state.history

    def is_active(self) -> bool:
        return self.status == SessionState.ACTIVE

    def dispatch(self, action: Action) -> ActionResult:
        """
        Apply one action to the current state.

        On success the cell moves to the new state; a rejection leaves it alone.
        """
        result = self.reducer.apply(self.state, action)
        if result.success:
            self.state = result.new_state
            if self.state.phase == GamePhase.ENDED:
                self.status = SessionState.GAME_OVER
                logger.info("Session %s finished after round %d", self.session_id, self.state.round_number - 1)
        return result

    def outcome(self) -> GameOutcome:
        return determine_outcome(self.state)

    def replay(self) -> GameState:
        """Rebuild the current state from the initial state and the history."""
        return replay(self.initial_state, self.history, self.reducer)


class SessionManager:
    """
    Manages game sessions.

    Responsibilities:
    - Create sessions with a freshly set-up game
    - Track active sessions
    - Clean up finished sessions

    No persistence - sessions are in-memory only.
    """

    def __init__(self):
        self._sessions: dict[str, GameSession] = {}

    def create_session(
        self,
        player_names: list[str],
        random_seed: int | None = None,
    ) -> GameSession:
        """
        Create a new game session.

        Args:
            player_names: Display names in seating order (2-4)
            random_seed: Seed for a reproducible opening board

        Returns:
            New GameSession with the first player to act
        """
        session_id = str(uuid.uuid4())
        initial_state = setup_game(player_names, random_seed=random_seed, game_id=session_id)

        session = GameSession(
            session_id=session_id,
            initial_state=initial_state,
            created_at=time.time(),
        )
        self._sessions[session_id] = session
        logger.info("Created session %s with %d players", session_id, len(player_names))
        return session

    def get_session(self, session_id: str) -> GameSession | None:
        """Get a session by ID."""
        return self._sessions.get(session_id)

    def end_session(self, session_id: str, reason: str = "completed") -> bool:
        """
        End a session and forget it.

        Returns False if there was no such session.
        """
        session = self._sessions.pop(session_id, None)
        if session is None:
            return False
        if session.status == SessionState.ACTIVE:
            session.status = SessionState.ABANDONED
        logger.info("Ended session %s (%s)", session_id, reason)
        return True

    def list_active_sessions(self) -> list[str]:
        """List IDs of active sessions."""
        return [
            sid for sid, session in self._sessions.items()
            if session.is_active()
        ]

    def cleanup_stale_sessions(self, max_age_seconds: int = 3600) -> int:
        """
        Drop finished sessions older than max_age.

        Returns the number of sessions removed.
        """
        current_time = time.time()
        to_remove = [
            session_id for session_id, session in self._sessions.items()
            if current_time - session.created_at > max_age_seconds and not session.is_active()
        ]
        for session_id in to_remove:
            self.end_session(session_id, reason="stale")
        return len(to_remove)
