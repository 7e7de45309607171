"""
Engine Core - Deterministic rules engine for the gem/card game.

The engine:
1. Holds immutable GameState values
2. Generates legal actions
3. Applies actions via the reducer (accept -> new state, reject -> reason)
4. Determines the winner once the game has ended
"""

from .gems import GemColor, GemCounts, starting_bank
from .state import (
    GameState,
    GamePhase,
    PlayerState,
    TierRow,
    Card,
    LocationTile,
    total_gems,
    check_conservation,
)
from .action import Action, ActionType, ActionPayload, ActionResult, RejectionReason
from .affordability import can_afford, compute_payment
from .reducer import Reducer, apply_action, transition, replay
from .action_generator import legal_actions, has_legal_move
from .outcome import GameOutcome, determine_outcome
from .deck import shuffle, draw_one, draw_n

__all__ = [
    "GemColor",
    "GemCounts",
    "starting_bank",
    "GameState",
    "GamePhase",
    "PlayerState",
    "TierRow",
    "Card",
    "LocationTile",
    "total_gems",
    "check_conservation",
    "Action",
    "ActionType",
    "ActionPayload",
    "ActionResult",
    "RejectionReason",
    "can_afford",
    "compute_payment",
    "Reducer",
    "apply_action",
    "transition",
    "replay",
    "legal_actions",
    "has_legal_move",
    "GameOutcome",
    "determine_outcome",
    "shuffle",
    "draw_one",
    "draw_n",
]
