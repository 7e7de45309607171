"""
API Module - HTTP interface for a UI shell.

Exposes the engine via a REST API. The UI:
1. Starts a game session
2. Reads the game state and legal actions
3. Dispatches actions and renders the result
4. Asks for shut-the-box advice

All state is session-scoped and in memory.
"""

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
    # Shared
    PlayerInfo,
    CardInfo,
    TierRowInfo,
    LocationTileInfo,
)
from .service import APIService
from .app import create_app

__all__ = [
    # Requests
    "CreateSessionRequest",
    "ActionRequest",
    "AdviceRequest",
    # Responses
    "GameStateResponse",
    "ActionResponse",
    "LegalActionsResponse",
    "AdviceResponse",
    "ErrorResponse",
    # Shared
    "PlayerInfo",
    "CardInfo",
    "TierRowInfo",
    "LocationTileInfo",
    # Service
    "APIService",
    "create_app",
]
