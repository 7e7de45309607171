"""
Board metrics - Totals shown next to the board.

Sums the costs of the face-up cards so a player can see which colors
the current offer is hungry for.
"""

from __future__ import annotations
from typing import Iterable

from ...engine_core.gems import GemCounts
from ...engine_core.state import Card, GameState


def total_gem_costs(cards: Iterable[Card]) -> GemCounts:
    total = GemCounts()
    for card in cards:
        total = total.plus(card.cost)
    return total


def tier_cost_totals(state: GameState) -> dict[int, GemCounts]:
    """Total cost of the face-up cards, per tier."""
    return {row.tier: total_gem_costs(row.face_up()) for row in state.rows}
