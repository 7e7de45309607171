"""
API Service - Business logic layer between API and engine.

The service:
1. Translates API requests to engine calls
2. Manages sessions
3. Formats state for the UI
4. Proxies best-move requests to the advisory service

This layer is framework-agnostic (can be used with FastAPI, Flask, etc.)
"""

from __future__ import annotations
from dataclasses import dataclass, field
import logging

from .schemas import (
    # Requests
    CreateSessionRequest,
    ActionRequest,
    AdviceRequest,
    # Responses
    GameStateResponse,
    ActionResponse,
    LegalActionsResponse,
    AdviceResponse,
    ErrorResponse,
    # Enums
    ErrorCode,
    SessionStatus,
    build_state_response,
)
from ..session import SessionManager, GameSession, SessionState
from ..engine_core.action_generator import legal_actions
from ..engine_core.state import GamePhase
from ..games.splendor.metrics import tier_cost_totals
from ..games.shut_the_box.state import D6, ShutTheBoxState, Tile
from ..advisory import AdvisoryClient, AdviceUnavailable

logger = logging.getLogger(__name__)


@dataclass
class APIService:
    """
    Main API service for a UI shell.

    Usage:
        service = APIService()

        # Start a game
        state = service.create_session(CreateSessionRequest(player_names=["Ann", "Bo"]))

        # Dispatch an action
        response = service.apply_action(state.session_id, request)
    """
    session_manager: SessionManager = field(default_factory=SessionManager)
    advisory_client: AdvisoryClient = field(default_factory=AdvisoryClient)

    def create_session(self, request: CreateSessionRequest) -> GameStateResponse:
        """
        Start a new game.

        Raises ValueError if the player list cannot start a game.
        """
        session = self.session_manager.create_session(
            player_names=request.player_names,
            random_seed=request.random_seed,
        )
        return self._state_response(session)

    def get_game_state(self, session_id: str) -> GameStateResponse | ErrorResponse:
        session = self.session_manager.get_session(session_id)
        if session is None:
            return _not_found(session_id)
        return self._state_response(session)

    def apply_action(self, session_id: str, request: ActionRequest) -> ActionResponse | ErrorResponse:
        """Dispatch an action; a rejection comes back with accepted=False."""
        session = self.session_manager.get_session(session_id)
        if session is None:
            return _not_found(session_id)

        result = session.dispatch(request.to_action())
        return ActionResponse(
            session_id=session_id,
            accepted=result.success,
            reason=result.reason.value if result.reason else None,
            error=result.error,
            changes=list(result.state_changes),
            state=self._state_response(session),
        )

    def get_legal_actions(self, session_id: str) -> LegalActionsResponse | ErrorResponse:
        session = self.session_manager.get_session(session_id)
        if session is None:
            return _not_found(session_id)
        return LegalActionsResponse(
            session_id=session_id,
            current_player_id=session.state.current_player.player_id,
            actions=[ActionRequest.from_action(a) for a in legal_actions(session.state)],
        )

    def end_session(self, session_id: str, reason: str = "user_ended") -> bool:
        return self.session_manager.end_session(session_id, reason)

    def list_sessions(self) -> list[str]:
        return self.session_manager.list_active_sessions()

    def get_advice(self, request: AdviceRequest) -> AdviceResponse:
        """Best shut-the-box move; unavailable advice is not an error."""
        state = ShutTheBoxState(
            d1=D6(request.d1),
            d2=D6(request.d2),
            tiles=tuple(Tile(value=i + 1, is_open=o) for i, o in enumerate(request.tiles_open)),
        )
        try:
            action = self.advisory_client.fetch_best_action(state)
        except AdviceUnavailable as e:
            logger.warning("No recommendation available: %s", e)
            return AdviceResponse(action=None, available=False)
        return AdviceResponse(action=action, available=True)

    def _state_response(self, session: GameSession) -> GameStateResponse:
        state = session.state
        ended = state.phase == GamePhase.ENDED
        return build_state_response(
            session_id=session.session_id,
            state=state,
            cost_totals=tier_cost_totals(state),
            outcome=session.outcome() if ended else None,
            status=SessionStatus.GAME_OVER if session.status == SessionState.GAME_OVER else SessionStatus.ACTIVE,
        )


def _not_found(session_id: str) -> ErrorResponse:
    return ErrorResponse(
        error=f"Session {session_id} not found",
        error_code=ErrorCode.SESSION_NOT_FOUND,
    )
