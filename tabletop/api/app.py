"""
FastAPI Application - REST API for a UI shell.

Endpoints:
    GET    /api/v1/health                           Health check
    POST   /api/v1/sessions                         Start a game
    GET    /api/v1/sessions                         List active sessions
    GET    /api/v1/sessions/{id}                    Get game state
    DELETE /api/v1/sessions/{id}                    End session
    GET    /api/v1/sessions/{id}/legal-actions      Actions the active player may take
    POST   /api/v1/sessions/{id}/actions            Dispatch an action
    POST   /api/v1/shut-the-box/advice              Best move for a dice/tile position

A rejected action is a normal 200 response with accepted=false and a
reason code; only unknown sessions and malformed bodies are HTTP errors.
"""

from typing import Annotated, Optional, Union
import logging
import os
import time

from fastapi import FastAPI, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .. import __version__
from .service import APIService
from .schemas import (
    CreateSessionRequest,
    ActionRequest,
    AdviceRequest,
    GameStateResponse,
    ActionResponse,
    LegalActionsResponse,
    AdviceResponse,
    ErrorResponse,
    SessionListResponse,
    EndSessionResponse,
    HealthResponse,
    ErrorCode,
)

logger = logging.getLogger(__name__)

# Environment configuration
TABLETOP_ENV = os.getenv("TABLETOP_ENV", "development")
ALLOWED_ORIGINS = os.getenv("ALLOWED_ORIGINS", "*").split(",")


def create_app(service: Optional[APIService] = None) -> FastAPI:
    """
    Create the FastAPI application.

    Args:
        service: Optional APIService instance (creates new if not provided)

    Returns:
        FastAPI application instance
    """
    app = FastAPI(
        title="Tabletop Engine API",
        description="""
Rules engine for a gem/card game plus best-move advice for shut the box.

## Rejections

Illegal actions are answered with `accepted=false` and one of:

| Reason | Description |
|------|-------------|
| `INVALID_GEM_SELECTION` | Gem take or discard breaks the rules |
| `RESERVE_LIMIT_EXCEEDED` | Player already holds 3 reserved cards |
| `INSUFFICIENT_FUNDS` | Player cannot pay for the card |
| `SLOT_EMPTY` | No card in that face-up slot |
| `TILE_REQUIREMENT_NOT_MET` | Owned cards do not meet the tile |
| `TILE_ALREADY_CLAIMED` | Tile is gone |
| `GAME_ALREADY_ENDED` | Game is over |
| `NO_LEGAL_ACTION` | Pass while another action is legal |
| `NOT_YOUR_TURN` | Action names a player who is not active |
| `INVALID_TARGET` | Tier, slot, index or tile does not exist |
        """,
        version=__version__,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    api_service = service or APIService()

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.time()
        response = await call_next(request)
        logger.info(
            "[HTTP] %s %s - %d - %.3fs",
            request.method, request.url.path, response.status_code, time.time() - start,
        )
        return response

    # =========================================================================
    # Error helpers
    # =========================================================================

    def make_error_response(
        error_code: ErrorCode,
        message: str,
        status_code: int = 400,
        details: Optional[dict] = None,
    ) -> JSONResponse:
        """Create a standardized error response."""
        return JSONResponse(
            status_code=status_code,
            content=ErrorResponse(
                error=message,
                error_code=error_code,
                details=details,
            ).model_dump(mode="json"),
        )

    def not_found(response: ErrorResponse) -> JSONResponse:
        return make_error_response(response.error_code, response.error, status_code=404)

    # =========================================================================
    # Health
    # =========================================================================

    @app.get("/api/v1/health", response_model=HealthResponse, tags=["Meta"])
    async def health() -> HealthResponse:
        return HealthResponse(status="ok", service="tabletop", version=__version__)

    # =========================================================================
    # Session Endpoints
    # =========================================================================

    @app.post(
        "/api/v1/sessions",
        response_model=GameStateResponse,
        responses={400: {"model": ErrorResponse, "description": "Invalid player list"}},
        tags=["Sessions"],
        summary="Start a new game",
    )
    async def create_session(body: CreateSessionRequest) -> Union[GameStateResponse, JSONResponse]:
        """Start a game for 2-4 players and return its opening state."""
        try:
            return api_service.create_session(body)
        except ValueError as e:
            return make_error_response(ErrorCode.INVALID_SETUP, str(e))

    @app.get(
        "/api/v1/sessions",
        response_model=SessionListResponse,
        tags=["Sessions"],
        summary="List active sessions",
    )
    async def list_sessions() -> SessionListResponse:
        sessions = api_service.list_sessions()
        return SessionListResponse(sessions=sessions, count=len(sessions))

    @app.get(
        "/api/v1/sessions/{session_id}",
        response_model=GameStateResponse,
        responses={404: {"model": ErrorResponse}},
        tags=["Sessions"],
        summary="Get game state",
    )
    async def get_session(session_id: str) -> Union[GameStateResponse, JSONResponse]:
        response = api_service.get_game_state(session_id)
        if isinstance(response, ErrorResponse):
            return not_found(response)
        return response

    @app.delete(
        "/api/v1/sessions/{session_id}",
        response_model=EndSessionResponse,
        tags=["Sessions"],
        summary="End a game session",
    )
    async def end_session(
        session_id: str,
        reason: Annotated[str, Query(description="Reason for ending")] = "user_ended",
    ) -> EndSessionResponse:
        success = api_service.end_session(session_id, reason)
        return EndSessionResponse(success=success, session_id=session_id)

    # =========================================================================
    # Game Loop
    # =========================================================================

    @app.get(
        "/api/v1/sessions/{session_id}/legal-actions",
        response_model=LegalActionsResponse,
        responses={404: {"model": ErrorResponse}},
        tags=["Game Loop"],
        summary="Actions the active player may take",
    )
    async def get_legal_actions(session_id: str) -> Union[LegalActionsResponse, JSONResponse]:
        response = api_service.get_legal_actions(session_id)
        if isinstance(response, ErrorResponse):
            return not_found(response)
        return response

    @app.post(
        "/api/v1/sessions/{session_id}/actions",
        response_model=ActionResponse,
        responses={404: {"model": ErrorResponse}},
        tags=["Game Loop"],
        summary="Dispatch an action",
    )
    async def apply_action(session_id: str, body: ActionRequest) -> Union[ActionResponse, JSONResponse]:
        """
        Apply an action for the active player.

        **Request Body:**
        ```json
        {"action_type": "take_gems", "colors": ["blue", "red", "yellow"]}
        ```
        """
        response = api_service.apply_action(session_id, body)
        if isinstance(response, ErrorResponse):
            return not_found(response)
        return response

    # =========================================================================
    # Shut the Box
    # =========================================================================

    @app.post(
        "/api/v1/shut-the-box/advice",
        response_model=AdviceResponse,
        tags=["Shut the Box"],
        summary="Best move for a dice/tile position",
    )
    def get_advice(body: AdviceRequest) -> AdviceResponse:
        return api_service.get_advice(body)

    return app


def get_app() -> FastAPI:
    """Factory for uvicorn --factory."""
    if TABLETOP_ENV == "production" and ALLOWED_ORIGINS == ["*"]:
        logger.warning("ALLOWED_ORIGINS is '*' in production")
    return create_app()
