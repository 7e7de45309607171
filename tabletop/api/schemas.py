"""
Pydantic Schemas for API - Request/response models for OpenAPI.

These models define the exact contract between a UI shell and the
engine. The UI sends actions as ActionRequest and renders whatever
GameStateResponse says; it never computes rules itself.

Error Codes:
- SESSION_NOT_FOUND: Session does not exist or has been ended
- INVALID_SETUP: Player list cannot start a game
- VALIDATION_ERROR: Request body is malformed
"""

from enum import Enum
from typing import Annotated, Optional, Any
from pydantic import BaseModel, Field

from ..engine_core.action import Action, ActionType
from ..engine_core.gems import GemColor, GemCounts
from ..engine_core.state import Card, GameState, LocationTile, PlayerState, TierRow
from ..engine_core.outcome import GameOutcome


# =============================================================================
# Enums
# =============================================================================

class SessionStatus(str, Enum):
    """Session status values."""
    ACTIVE = "active"
    GAME_OVER = "game_over"


class ErrorCode(str, Enum):
    """Structured error codes."""
    SESSION_NOT_FOUND = "SESSION_NOT_FOUND"
    INVALID_SETUP = "INVALID_SETUP"
    VALIDATION_ERROR = "VALIDATION_ERROR"


# =============================================================================
# Shared Models
# =============================================================================

GemCountMap = dict[GemColor, Annotated[int, Field(ge=0)]]


def _counts(counts: GemCounts, include_gold: bool = True) -> dict[str, int]:
    data = counts.to_dict()
    if not include_gold:
        data.pop(GemColor.GOLD.value)
    return data


class CardInfo(BaseModel):
    """Card information for display."""
    card_id: str
    name: str
    tier: int
    points: int
    reward: str
    cost: dict[str, int]

    @classmethod
    def from_card(cls, card: Card) -> "CardInfo":
        return cls(
            card_id=card.card_id,
            name=card.name,
            tier=card.tier,
            points=card.points,
            reward=card.reward.value,
            cost=_counts(card.cost, include_gold=False),
        )


class TierRowInfo(BaseModel):
    """One tier of the board."""
    tier: int
    pile_size: int
    slots: list[Optional[CardInfo]] = Field(description="Face-up cards; null for an empty slot")
    cost_totals: dict[str, int] = Field(default_factory=dict, description="Summed cost of face-up cards")

    @classmethod
    def from_row(cls, row: TierRow, cost_totals: GemCounts) -> "TierRowInfo":
        return cls(
            tier=row.tier,
            pile_size=len(row.pile),
            slots=[CardInfo.from_card(c) if c is not None else None for c in row.slots],
            cost_totals=_counts(cost_totals, include_gold=False),
        )


class LocationTileInfo(BaseModel):
    """Location tile for display."""
    tile_id: str
    name: str
    requirement: dict[str, int]
    points: int

    @classmethod
    def from_tile(cls, tile: LocationTile) -> "LocationTileInfo":
        return cls(
            tile_id=tile.tile_id,
            name=tile.name,
            requirement={c: n for c, n in _counts(tile.requirement, include_gold=False).items() if n},
            points=tile.points,
        )


class PlayerInfo(BaseModel):
    """Player information for display."""
    player_id: str
    name: str
    is_current_turn: bool = False
    score: int = 0
    gems: dict[str, int] = Field(default_factory=dict)
    bonuses: dict[str, int] = Field(default_factory=dict)
    cards: list[CardInfo] = Field(default_factory=list)
    reserved: list[CardInfo] = Field(default_factory=list)
    tiles: list[LocationTileInfo] = Field(default_factory=list)

    @classmethod
    def from_player(cls, player: PlayerState, is_current_turn: bool) -> "PlayerInfo":
        return cls(
            player_id=player.player_id,
            name=player.name,
            is_current_turn=is_current_turn,
            score=player.score,
            gems=_counts(player.gems),
            bonuses=_counts(player.bonuses(), include_gold=False),
            cards=[CardInfo.from_card(c) for c in player.cards],
            reserved=[CardInfo.from_card(c) for c in player.reserved],
            tiles=[LocationTileInfo.from_tile(t) for t in player.tiles],
        )


class OutcomeInfo(BaseModel):
    """Final ranking."""
    winner_ids: list[str]
    is_draw: bool
    scores: dict[str, int]

    @classmethod
    def from_outcome(cls, outcome: GameOutcome) -> "OutcomeInfo":
        return cls(
            winner_ids=list(outcome.winner_ids),
            is_draw=outcome.is_draw,
            scores=outcome.scores,
        )


# =============================================================================
# Request Models
# =============================================================================

class CreateSessionRequest(BaseModel):
    """Request to start a new game."""
    player_names: list[str] = Field(..., min_length=2, max_length=4, description="Seating order")
    random_seed: Optional[int] = Field(None, description="Seed for a reproducible opening board")


class ActionRequest(BaseModel):
    """
    An action from the UI.

    Only the fields the action type uses need to be set.
    """
    action_type: ActionType
    player_id: Optional[str] = Field(None, description="Acting player; defaults to the active one")
    colors: list[GemColor] = Field(default_factory=list, description="take_gems")
    discards: GemCountMap = Field(default_factory=dict, description="Gems returned to stay at 10")
    tier: Optional[int] = Field(None, description="reserve_card / purchase_card")
    slot: Optional[int] = Field(None, description="reserve_card / purchase_card")
    reserved_index: Optional[int] = Field(None, description="purchase_card from reserved set")
    tile_id: Optional[str] = Field(None, description="claim_location_tile")

    def to_action(self) -> Action:
        """Translate to an engine Action."""
        discards = GemCounts.from_dict(self.discards)
        if self.action_type == ActionType.TAKE_GEMS:
            return Action.take_gems(self.colors, discards=discards, player_id=self.player_id)
        if self.action_type == ActionType.RESERVE_CARD:
            return Action.reserve_card(self.tier, self.slot, discards=discards, player_id=self.player_id)
        if self.action_type == ActionType.PURCHASE_CARD:
            if self.reserved_index is not None:
                return Action.purchase_reserved(self.reserved_index, player_id=self.player_id)
            return Action.purchase_card(self.tier, self.slot, player_id=self.player_id)
        if self.action_type == ActionType.CLAIM_LOCATION_TILE:
            return Action.claim_tile(self.tile_id, player_id=self.player_id)
        return Action.pass_turn(player_id=self.player_id)

    @classmethod
    def from_action(cls, action: Action) -> "ActionRequest":
        p = action.payload
        return cls(
            action_type=action.action_type,
            player_id=p.player_id,
            colors=list(p.colors),
            discards={c: n for c, n in p.discards.items() if n},
            tier=p.tier,
            slot=p.slot,
            reserved_index=p.reserved_index,
            tile_id=p.tile_id,
        )


class AdviceRequest(BaseModel):
    """Shut-the-box position to ask advice for."""
    d1: int = Field(..., ge=1, le=6)
    d2: int = Field(..., ge=1, le=6)
    tiles_open: list[bool] = Field(..., min_length=9, max_length=9)


# =============================================================================
# Response Models
# =============================================================================

class ErrorResponse(BaseModel):
    """Standard error response."""
    error: str = Field(..., description="Human-readable error message")
    error_code: ErrorCode = Field(..., description="Machine-readable error code")
    details: Optional[dict[str, Any]] = Field(None, description="Additional error context")
    api_version: str = Field("v1", description="API version")


class GameStateResponse(BaseModel):
    """Complete game state for display."""
    session_id: str
    status: SessionStatus
    phase: str
    round_number: int
    current_player_id: str
    bank: dict[str, int]
    rows: list[TierRowInfo] = Field(default_factory=list)
    tiles: list[LocationTileInfo] = Field(default_factory=list)
    players: list[PlayerInfo] = Field(default_factory=list)
    history_length: int = 0
    outcome: Optional[OutcomeInfo] = Field(None, description="Set once the game has ended")
    api_version: str = "v1"


class ActionResponse(BaseModel):
    """Result of dispatching an action. A rejection is not an HTTP error."""
    session_id: str
    accepted: bool
    reason: Optional[str] = Field(None, description="Rejection reason code")
    error: Optional[str] = None
    changes: list[str] = Field(default_factory=list)
    state: GameStateResponse
    api_version: str = "v1"


class LegalActionsResponse(BaseModel):
    """Actions the active player may take."""
    session_id: str
    current_player_id: str
    actions: list[ActionRequest]


class AdviceResponse(BaseModel):
    """Best move from the advisory service."""
    action: Optional[list[int]] = Field(None, description="Tile values to shut")
    available: bool = Field(..., description="False if the service gave no usable answer")


class SessionListResponse(BaseModel):
    """Response listing active sessions."""
    sessions: list[str]
    count: int


class EndSessionResponse(BaseModel):
    """Response after ending a session."""
    success: bool
    session_id: str


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    service: str
    version: str


def build_state_response(
    session_id: str,
    state: GameState,
    cost_totals: dict[int, GemCounts],
    outcome: Optional[GameOutcome],
    status: SessionStatus,
) -> GameStateResponse:
    """Flatten a GameState into the display model."""
    return GameStateResponse(
        session_id=session_id,
        status=status,
        phase=state.phase.value,
        round_number=state.round_number,
        current_player_id=state.current_player.player_id,
        bank=_counts(state.bank),
        rows=[TierRowInfo.from_row(row, cost_totals[row.tier]) for row in state.rows],
        tiles=[LocationTileInfo.from_tile(t) for t in state.tiles],
        players=[
            PlayerInfo.from_player(p, i == state.current_player_idx)
            for i, p in enumerate(state.players)
        ],
        history_length=len(state.history),
        outcome=OutcomeInfo.from_outcome(outcome) if outcome else None,
    )
