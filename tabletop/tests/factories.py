"""
Builders for hand-made game states.

Tests that need a specific board build it here instead of relying on
the shuffled catalog.
"""

from ..engine_core.gems import GemColor, GemCounts
from ..engine_core.state import (
    Card,
    GamePhase,
    GameState,
    LocationTile,
    PlayerState,
    TierRow,
    FACE_UP_SLOTS,
)


def make_card(card_id, tier=1, points=0, reward=GemColor.BLUE, **cost):
    return Card(
        card_id=card_id,
        name=card_id.replace("_", " ").title(),
        tier=tier,
        points=points,
        reward=reward,
        cost=GemCounts(**cost),
    )


def make_tile(tile_id, points=3, **requirement):
    return LocationTile(
        tile_id=tile_id,
        name=tile_id.title(),
        requirement=GemCounts(**requirement),
        points=points,
    )


def make_row(tier, face_up=(), pile=()):
    face_up = tuple(face_up)
    return TierRow(
        tier=tier,
        pile=tuple(pile),
        slots=face_up + (None,) * (FACE_UP_SLOTS - len(face_up)),
    )


def make_player(player_id, gems=None, cards=(), reserved=(), tiles=()):
    return PlayerState(
        player_id=player_id,
        name=player_id.title(),
        gems=gems or GemCounts(),
        cards=tuple(cards),
        reserved=tuple(reserved),
        tiles=tuple(tiles),
    )


def make_state(
    bank,
    players,
    rows=None,
    tiles=(),
    current_player_idx=0,
    round_number=1,
    phase=GamePhase.IN_PROGRESS,
):
    """Build a state whose gem supply is whatever the bank and players hold."""
    supply = bank
    for player in players:
        supply = supply.plus(player.gems)
    return GameState(
        game_id="test_game",
        bank=bank,
        gem_supply=supply,
        rows=tuple(rows) if rows is not None else (make_row(1), make_row(2), make_row(3)),
        tiles=tuple(tiles),
        players=tuple(players),
        current_player_idx=current_player_idx,
        round_number=round_number,
        phase=phase,
    )


def scoring_cards(points, reward=GemColor.PURPLE, prefix="scored"):
    """Owned cards worth the given points in total (one card per 5 points or part)."""
    cards = []
    remaining = points
    index = 0
    while remaining > 0:
        value = min(5, remaining)
        cards.append(make_card(f"{prefix}_{index}", tier=3, points=value, reward=reward))
        remaining -= value
        index += 1
    return cards
