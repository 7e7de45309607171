"""
Pytest fixtures for tabletop tests.
"""

import pytest

from ..engine_core.gems import GemColor, GemCounts
from ..engine_core.state import GameState
from ..games.splendor.setup import setup_game
from .factories import make_card, make_player, make_row, make_state, make_tile


@pytest.fixture
def seeded_game() -> GameState:
    """A shuffled 2-player opening board."""
    return setup_game(["Ann", "Bo"], random_seed=7)


@pytest.fixture
def four_player_game() -> GameState:
    return setup_game(["Ann", "Bo", "Cy", "Di"], random_seed=11)


@pytest.fixture
def red_card():
    """Tier 1 card costing four red."""
    return make_card("red_four", tier=1, points=1, reward=GemColor.BLUE, red=4)


@pytest.fixture
def board_state(red_card) -> GameState:
    """
    Hand-built 2-player state.

    Tier 1 shows the red card in slot 0 with two cards left in the pile;
    tier 2 is empty. Ann holds three red and one gold.
    """
    pile = [
        make_card("pile_a", tier=1, yellow=2),
        make_card("pile_b", tier=1, orange=2),
    ]
    rows = [
        make_row(1, [red_card, make_card("cheap_blue", tier=1, blue=1)], pile),
        make_row(2),
        make_row(3, [make_card("big_one", tier=3, points=5, purple=7)]),
    ]
    players = [
        make_player("ann", gems=GemCounts(red=3, gold=1)),
        make_player("bo"),
    ]
    bank = GemCounts(purple=4, red=1, orange=4, blue=4, yellow=4, gold=4)
    tiles = [make_tile("loc-a", blue=2), make_tile("loc-b", red=3, yellow=3)]
    return make_state(bank, players, rows=rows, tiles=tiles)
