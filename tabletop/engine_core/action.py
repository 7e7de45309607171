"""
Action System - Actions, payloads, and results.

Actions are plain values built from UI input. The reducer validates
them against the active player and answers with an ActionResult:
either a new state, or a rejection reason echoing the action back.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .gems import GemColor, GemCounts


class ActionType(Enum):
    """Types of player actions."""
    TAKE_GEMS = "take_gems"
    RESERVE_CARD = "reserve_card"
    PURCHASE_CARD = "purchase_card"
    CLAIM_LOCATION_TILE = "claim_location_tile"
    PASS = "pass"


class RejectionReason(str, Enum):
    """Why the reducer refused an action."""
    INVALID_GEM_SELECTION = "INVALID_GEM_SELECTION"
    RESERVE_LIMIT_EXCEEDED = "RESERVE_LIMIT_EXCEEDED"
    INSUFFICIENT_FUNDS = "INSUFFICIENT_FUNDS"
    SLOT_EMPTY = "SLOT_EMPTY"
    TILE_REQUIREMENT_NOT_MET = "TILE_REQUIREMENT_NOT_MET"
    TILE_ALREADY_CLAIMED = "TILE_ALREADY_CLAIMED"
    GAME_ALREADY_ENDED = "GAME_ALREADY_ENDED"
    NO_LEGAL_ACTION = "NO_LEGAL_ACTION"
    NOT_YOUR_TURN = "NOT_YOUR_TURN"
    INVALID_TARGET = "INVALID_TARGET"


@dataclass(frozen=True)
class ActionPayload:
    """
    Parameters of an action.

    Different action types use different fields; validation happens
    in the reducer.
    """
    # Acting player; None means "whoever is active"
    player_id: str | None = None

    # TakeGems
    colors: tuple[GemColor, ...] = ()

    # Gems handed back to stay within the hand limit
    discards: GemCounts = field(default_factory=GemCounts)

    # ReserveCard / PurchaseCard from the board
    tier: int | None = None
    slot: int | None = None

    # PurchaseCard from the reserved set
    reserved_index: int | None = None

    # ClaimLocationTile
    tile_id: str | None = None


@dataclass(frozen=True)
class Action:
    """
    A complete action to be applied to the game state.

    Actions are:
    - Validated before application
    - Applied atomically by the reducer
    - Kept in the state history for replay
    """
    action_type: ActionType
    payload: ActionPayload = field(default_factory=ActionPayload)

    @classmethod
    def take_gems(
        cls,
        colors: list[GemColor] | tuple[GemColor, ...],
        discards: GemCounts | None = None,
        player_id: str | None = None,
    ) -> Action:
        """Factory for taking gems from the bank."""
        return cls(
            action_type=ActionType.TAKE_GEMS,
            payload=ActionPayload(
                player_id=player_id,
                colors=tuple(colors),
                discards=discards or GemCounts(),
            ),
        )

    @classmethod
    def reserve_card(
        cls,
        tier: int,
        slot: int,
        discards: GemCounts | None = None,
        player_id: str | None = None,
    ) -> Action:
        """Factory for reserving a face-up card."""
        return cls(
            action_type=ActionType.RESERVE_CARD,
            payload=ActionPayload(
                player_id=player_id,
                tier=tier,
                slot=slot,
                discards=discards or GemCounts(),
            ),
        )

    @classmethod
    def purchase_card(cls, tier: int, slot: int, player_id: str | None = None) -> Action:
        """Factory for buying a face-up card."""
        return cls(
            action_type=ActionType.PURCHASE_CARD,
            payload=ActionPayload(player_id=player_id, tier=tier, slot=slot),
        )

    @classmethod
    def purchase_reserved(cls, reserved_index: int, player_id: str | None = None) -> Action:
        """Factory for buying one of the player's reserved cards."""
        return cls(
            action_type=ActionType.PURCHASE_CARD,
            payload=ActionPayload(player_id=player_id, reserved_index=reserved_index),
        )

    @classmethod
    def claim_tile(cls, tile_id: str, player_id: str | None = None) -> Action:
        """Factory for claiming a location tile."""
        return cls(
            action_type=ActionType.CLAIM_LOCATION_TILE,
            payload=ActionPayload(player_id=player_id, tile_id=tile_id),
        )

    @classmethod
    def pass_turn(cls, player_id: str | None = None) -> Action:
        """Factory for passing."""
        return cls(
            action_type=ActionType.PASS,
            payload=ActionPayload(player_id=player_id),
        )

    def describe(self) -> str:
        """Short human-readable description."""
        p = self.payload
        if self.action_type == ActionType.TAKE_GEMS:
            text = "take " + ", ".join(c.value for c in p.colors)
        elif self.action_type == ActionType.RESERVE_CARD:
            text = f"reserve tier {p.tier} slot {p.slot}"
        elif self.action_type == ActionType.PURCHASE_CARD:
            if p.reserved_index is not None:
                text = f"purchase reserved card {p.reserved_index}"
            else:
                text = f"purchase tier {p.tier} slot {p.slot}"
        elif self.action_type == ActionType.CLAIM_LOCATION_TILE:
            text = f"claim tile {p.tile_id}"
        else:
            text = "pass"
        if p.discards.total():
            discarded = ", ".join(f"{n} {c.value}" for c, n in p.discards.items() if n)
            text += f" (discard {discarded})"
        return text


@dataclass(frozen=True)
class ActionResult:
    """
    Result of applying an action.

    Contains:
    - Whether the action was accepted
    - New state (if accepted)
    - Rejection reason and message (if rejected)
    - The action itself, echoed back
    """
    success: bool
    action: Action | None = None
    new_state: Any | None = None  # GameState
    reason: RejectionReason | None = None
    error: str | None = None

    # Human-readable changes, for UI/presentation
    state_changes: tuple[str, ...] = ()

    @classmethod
    def rejected(cls, action: Action, reason: RejectionReason, error: str) -> ActionResult:
        """Create a rejection result."""
        return cls(success=False, action=action, reason=reason, error=error)

    @classmethod
    def success_with_state(
        cls,
        action: Action,
        state: Any,
        changes: list[str] | None = None,
    ) -> ActionResult:
        """Create a success result with new state."""
        return cls(
            success=True,
            action=action,
            new_state=state,
            state_changes=tuple(changes or ()),
        )
