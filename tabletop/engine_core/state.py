"""
Game State - The single source of truth for a gem/card game.

Design principles:
- Immutable: every dataclass is frozen, all "mutations" return new state
- Replayable: accepted actions are kept in history
- Observable: derived values (score, bonuses) are computed, never stored
"""

from __future__ import annotations
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any

from .gems import GemColor, GemCounts


TIERS = (1, 2, 3)
FACE_UP_SLOTS = 4
MAX_RESERVED_CARDS = 3
WINNING_SCORE = 15


class GamePhase(Enum):
    """High-level game phases."""
    IN_PROGRESS = "in_progress"
    FINAL_ROUND = "final_round"
    ENDED = "ended"


@dataclass(frozen=True)
class Card:
    """
    A purchasable development card.

    Cards never change; only their location does (pile, face-up slot,
    a player's reserved or owned set).
    """
    card_id: str
    name: str
    tier: int
    points: int
    reward: GemColor
    cost: GemCounts


@dataclass(frozen=True)
class LocationTile:
    """A bonus objective claimed once a player owns enough cards per color."""
    tile_id: str
    name: str
    requirement: GemCounts
    points: int


@dataclass(frozen=True)
class PlayerState:
    """State for a single player."""
    player_id: str
    name: str
    gems: GemCounts = field(default_factory=GemCounts)
    cards: tuple[Card, ...] = ()
    reserved: tuple[Card, ...] = ()
    tiles: tuple[LocationTile, ...] = ()

    @property
    def score(self) -> int:
        return sum(c.points for c in self.cards) + sum(t.points for t in self.tiles)

    @property
    def card_count(self) -> int:
        """Owned plus reserved cards (used for tie-breaking)."""
        return len(self.cards) + len(self.reserved)

    @property
    def gem_total(self) -> int:
        return self.gems.total()

    def bonuses(self) -> GemCounts:
        """Owned cards counted by reward color."""
        return GemCounts.of([card.reward for card in self.cards])

    def _copy_with(self, **kwargs: Any) -> PlayerState:
        return replace(self, **kwargs)


@dataclass(frozen=True)
class TierRow:
    """
    One tier of the board: a draw pile plus the face-up offer window.

    The top of the pile is its last card. A slot is None only once the
    pile has run out.
    """
    tier: int
    pile: tuple[Card, ...] = ()
    slots: tuple[Card | None, ...] = (None,) * FACE_UP_SLOTS

    def face_up(self) -> list[Card]:
        """Face-up cards, skipping empty slots."""
        return [card for card in self.slots if card is not None]

    def card_at(self, slot: int) -> Card | None:
        if 0 <= slot < len(self.slots):
            return self.slots[slot]
        return None

    def _copy_with(self, **kwargs: Any) -> TierRow:
        return replace(self, **kwargs)


@dataclass(frozen=True)
class GameState:
    """
    Complete game state at a point in time.

    All state changes go through the reducer; nothing here mutates.
    """
    game_id: str
    bank: GemCounts
    gem_supply: GemCounts
    rows: tuple[TierRow, ...] = ()
    tiles: tuple[LocationTile, ...] = ()
    players: tuple[PlayerState, ...] = ()
    current_player_idx: int = 0
    round_number: int = 1
    phase: GamePhase = GamePhase.IN_PROGRESS

    # Accepted actions, in order (for replay)
    history: tuple[Any, ...] = ()

    @property
    def current_player(self) -> PlayerState:
        return self.players[self.current_player_idx]

    @property
    def num_players(self) -> int:
        return len(self.players)

    def get_player(self, player_id: str) -> PlayerState | None:
        for p in self.players:
            if p.player_id == player_id:
                return p
        return None

    def row(self, tier: int) -> TierRow | None:
        for r in self.rows:
            if r.tier == tier:
                return r
        return None

    def get_tile(self, tile_id: str) -> LocationTile | None:
        for t in self.tiles:
            if t.tile_id == tile_id:
                return t
        return None

    def with_player(self, player: PlayerState) -> GameState:
        """Return new state with updated player."""
        new_players = tuple(
            player if p.player_id == player.player_id else p
            for p in self.players
        )
        return self._copy_with(players=new_players)

    def with_row(self, row: TierRow) -> GameState:
        """Return new state with updated tier row."""
        new_rows = tuple(row if r.tier == row.tier else r for r in self.rows)
        return self._copy_with(rows=new_rows)

    def _copy_with(self, **kwargs: Any) -> GameState:
        """Create a copy with some fields replaced."""
        return replace(self, **kwargs)


def total_gems(state: GameState) -> GemCounts:
    """Sum of the bank and every player's holdings."""
    total = state.bank
    for player in state.players:
        total = total.plus(player.gems)
    return total


def check_conservation(state: GameState) -> bool:
    """True if no gem has been created or lost."""
    return total_gems(state) == state.gem_supply
