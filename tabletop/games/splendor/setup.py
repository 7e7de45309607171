"""
Game Setup - Creates the initial game state.

This module handles:
- Creating one shuffled pile per tier
- Dealing the face-up offer window
- Choosing the location tiles in play
- Filling the gem bank for the player count

Shuffling is seeded, so a seed fully determines the opening board.
"""

from __future__ import annotations
import logging
import random

from ...engine_core.deck import shuffle, draw_n
from ...engine_core.gems import starting_bank, GEMS_PER_COLOR
from ...engine_core.state import (
    GameState,
    GamePhase,
    PlayerState,
    TierRow,
    TIERS,
    FACE_UP_SLOTS,
)
from .cards import cards_for_tier
from .locations import LOCATION_TILES

logger = logging.getLogger(__name__)

MIN_PLAYERS = min(GEMS_PER_COLOR)
MAX_PLAYERS = max(GEMS_PER_COLOR)


def setup_game(
    player_names: list[str],
    random_seed: int | None = None,
    game_id: str | None = None,
) -> GameState:
    """
    Set up a new game.

    Args:
        player_names: Display names, in seating order (2-4)
        random_seed: Seed for deterministic shuffling
        game_id: Identifier for the game (derived from the seed if omitted)

    Returns:
        Initial GameState with the first player to act
    """
    num_players = len(player_names)
    if num_players < MIN_PLAYERS or num_players > MAX_PLAYERS:
        raise ValueError(f"Supports {MIN_PLAYERS}-{MAX_PLAYERS} players, got {num_players}")

    rng = random.Random(random_seed)

    players = tuple(
        PlayerState(player_id=f"player_{i + 1}", name=name)
        for i, name in enumerate(player_names)
    )

    rows = tuple(_deal_row(tier, rng) for tier in TIERS)

    # One more tile than players
    tiles = shuffle(LOCATION_TILES, rng)[:num_players + 1]

    bank = starting_bank(num_players)
    state = GameState(
        game_id=game_id or f"game_{random_seed if random_seed is not None else rng.randint(0, 999999)}",
        bank=bank,
        gem_supply=bank,
        rows=rows,
        tiles=tiles,
        players=players,
        current_player_idx=0,
        round_number=1,
        phase=GamePhase.IN_PROGRESS,
    )
    logger.info("Set up %s for %d players", state.game_id, num_players)
    return state


def _deal_row(tier: int, rng: random.Random) -> TierRow:
    """Shuffle a tier's pile and turn up the offer window."""
    pile = shuffle(cards_for_tier(tier), rng)
    pile, face_up = draw_n(pile, FACE_UP_SLOTS)
    slots = face_up + (None,) * (FACE_UP_SLOTS - len(face_up))
    return TierRow(tier=tier, pile=pile, slots=slots)
