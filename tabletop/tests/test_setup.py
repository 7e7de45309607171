"""
Tests for the card catalog, location tiles and game setup.
"""

import pytest

from ..engine_core.gems import GemColor, GemCounts
from ..engine_core.state import GamePhase, check_conservation
from ..games.splendor import (
    ALL_CARDS,
    TIER_1_CARDS,
    TIER_2_CARDS,
    TIER_3_CARDS,
    LOCATION_TILES,
    get_card_by_id,
    get_tile_by_id,
    setup_game,
    tier_cost_totals,
    total_gem_costs,
)


class TestCatalog:
    """Tests for the card and tile catalogs."""

    def test_tier_sizes(self):
        assert len(TIER_1_CARDS) == 40
        assert len(TIER_2_CARDS) == 30
        assert len(TIER_3_CARDS) == 20
        assert len(ALL_CARDS) == 90

    def test_unique_ids(self):
        assert len({c.card_id for c in ALL_CARDS}) == len(ALL_CARDS)

    def test_balanced_rewards(self):
        for tier_cards in (TIER_1_CARDS, TIER_2_CARDS, TIER_3_CARDS):
            per_color = len(tier_cards) // 5
            for color in GemColor.standard():
                assert sum(1 for c in tier_cards if c.reward == color) == per_color

    def test_costs_never_use_gold(self):
        assert all(c.cost[GemColor.GOLD] == 0 for c in ALL_CARDS)
        assert all(c.cost.total() > 0 for c in ALL_CARDS)

    def test_lookup(self):
        card = get_card_by_id("t1-purple-1")

        assert card.tier == 1
        assert card.reward == GemColor.PURPLE
        assert get_card_by_id("nope") is None

    def test_location_tiles(self):
        assert len(LOCATION_TILES) == 10
        assert all(t.points == 3 for t in LOCATION_TILES)
        assert all(t.requirement.total() in (8, 9) for t in LOCATION_TILES)
        assert get_tile_by_id("loc-1") is LOCATION_TILES[0]


class TestSetup:
    """Tests for setup_game()."""

    def test_two_player_layout(self, seeded_game):
        state = seeded_game

        assert state.num_players == 2
        assert state.phase == GamePhase.IN_PROGRESS
        assert state.round_number == 1
        assert state.current_player.player_id == "player_1"
        assert state.current_player.name == "Ann"
        assert len(state.tiles) == 3
        assert state.bank == GemCounts(purple=4, red=4, orange=4, blue=4, yellow=4, gold=5)

    def test_rows(self, seeded_game):
        piles = {1: 36, 2: 26, 3: 16}
        for row in seeded_game.rows:
            assert len(row.face_up()) == 4
            assert len(row.pile) == piles[row.tier]
            assert all(card.tier == row.tier for card in row.face_up())

    def test_every_card_placed_once(self, seeded_game):
        placed = []
        for row in seeded_game.rows:
            placed.extend(row.pile)
            placed.extend(row.face_up())

        assert sorted(c.card_id for c in placed) == sorted(c.card_id for c in ALL_CARDS)

    def test_four_players(self, four_player_game):
        assert four_player_game.bank[GemColor.RED] == 7
        assert len(four_player_game.tiles) == 5
        assert check_conservation(four_player_game)

    def test_seed_is_deterministic(self):
        assert setup_game(["A", "B"], random_seed=3) == setup_game(["A", "B"], random_seed=3)

    def test_seeds_differ(self):
        first = setup_game(["A", "B"], random_seed=3)
        second = setup_game(["A", "B"], random_seed=4)

        assert first.rows != second.rows

    @pytest.mark.parametrize("names", [["Solo"], ["A", "B", "C", "D", "E"]])
    def test_bad_player_count(self, names):
        with pytest.raises(ValueError):
            setup_game(names)


class TestMetrics:
    """Tests for board cost totals."""

    def test_total_gem_costs(self):
        cards = [get_card_by_id("t1-purple-8"), get_card_by_id("t1-red-8")]

        total = total_gem_costs(cards)

        assert total.total() == 8
        assert total == cards[0].cost.plus(cards[1].cost)

    def test_tier_cost_totals(self, seeded_game):
        totals = tier_cost_totals(seeded_game)

        assert set(totals) == {1, 2, 3}
        for row in seeded_game.rows:
            assert totals[row.tier] == total_gem_costs(row.face_up())
