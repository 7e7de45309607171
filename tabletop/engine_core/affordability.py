"""
Affordability - What a player would pay for a card.

Pure predicates shared by reducer validation, legal action
enumeration and UI affordability hints. Nothing here mutates state.
"""

from __future__ import annotations

from .gems import GemColor, GemCounts
from .state import Card, PlayerState


def effective_cost(player: PlayerState, card: Card) -> GemCounts:
    """Card cost after the owned-card bonus for each color."""
    bonuses = player.bonuses()
    return GemCounts.from_dict({
        color: max(0, card.cost[color] - bonuses[color])
        for color in GemColor.standard()
    })


def gold_needed(player: PlayerState, card: Card) -> int:
    """Sum of per-color shortfalls that gold has to cover."""
    cost = effective_cost(player, card)
    return sum(
        max(0, cost[color] - player.gems[color])
        for color in GemColor.standard()
    )


def compute_payment(player: PlayerState, card: Card) -> GemCounts | None:
    """
    Exact gems the player would hand over for the card.

    Colored gems are spent first; gold covers the remaining shortfall.
    Returns None if the player cannot afford the card.
    """
    cost = effective_cost(player, card)
    shortfall = 0
    spend: dict[GemColor, int] = {}
    for color in GemColor.standard():
        spend[color] = min(cost[color], player.gems[color])
        shortfall += cost[color] - spend[color]

    if shortfall > player.gems[GemColor.GOLD]:
        return None

    spend[GemColor.GOLD] = shortfall
    return GemCounts.from_dict(spend)


def can_afford(player: PlayerState, card: Card) -> bool:
    return gold_needed(player, card) <= player.gems[GemColor.GOLD]
