"""
Development Cards - The purchasable card catalog.

Every color gets the same set of cost patterns per tier, written
relative to the card's own reward color: offset 0 is the reward color,
offset 1 the next color in table order, and so on. This keeps the deck
balanced across colors the way the printed game is.

Catalog size:
- Tier 1: 8 cards per color (40)
- Tier 2: 6 cards per color (30)
- Tier 3: 4 cards per color (20)
"""

from __future__ import annotations

from ...engine_core.gems import GemColor, GemCounts
from ...engine_core.state import Card


# (points, {color offset: count})
TIER_1_PATTERNS: list[tuple[int, dict[int, int]]] = [
    (0, {1: 1, 2: 1, 3: 1, 4: 1}),
    (0, {1: 1, 2: 2, 3: 1, 4: 1}),
    (0, {1: 2, 2: 2, 4: 1}),
    (0, {0: 1, 1: 3, 4: 1}),
    (0, {1: 2, 3: 1}),
    (0, {4: 3}),
    (0, {1: 2, 2: 1}),
    (1, {3: 4}),
]

TIER_2_PATTERNS: list[tuple[int, dict[int, int]]] = [
    (1, {0: 2, 1: 2, 3: 3}),
    (1, {0: 2, 2: 3, 4: 3}),
    (2, {1: 4, 2: 2, 3: 1}),
    (2, {3: 5, 4: 3}),
    (2, {0: 5}),
    (3, {0: 6}),
]

TIER_3_PATTERNS: list[tuple[int, dict[int, int]]] = [
    (3, {1: 3, 2: 3, 3: 5, 4: 3}),
    (4, {4: 7}),
    (4, {0: 3, 3: 3, 4: 6}),
    (5, {0: 3, 4: 7}),
]

PATTERNS_BY_TIER = {
    1: TIER_1_PATTERNS,
    2: TIER_2_PATTERNS,
    3: TIER_3_PATTERNS,
}


def _build_tier(tier: int) -> list[Card]:
    colors = GemColor.standard()
    cards = []
    for color_index, reward in enumerate(colors):
        for number, (points, offsets) in enumerate(PATTERNS_BY_TIER[tier], start=1):
            cost = GemCounts.from_dict({
                colors[(color_index + offset) % len(colors)]: count
                for offset, count in offsets.items()
            })
            cards.append(Card(
                card_id=f"t{tier}-{reward.value}-{number}",
                name=f"{reward.value.title()} {tier}-{number}",
                tier=tier,
                points=points,
                reward=reward,
                cost=cost,
            ))
    return cards


TIER_1_CARDS: list[Card] = _build_tier(1)
TIER_2_CARDS: list[Card] = _build_tier(2)
TIER_3_CARDS: list[Card] = _build_tier(3)

ALL_CARDS: list[Card] = TIER_1_CARDS + TIER_2_CARDS + TIER_3_CARDS


def cards_for_tier(tier: int) -> list[Card]:
    """All catalog cards of a tier."""
    return [card for card in ALL_CARDS if card.tier == tier]


def get_card_by_id(card_id: str) -> Card | None:
    """Look up a card by ID."""
    for card in ALL_CARDS:
        if card.card_id == card_id:
            return card
    return None
