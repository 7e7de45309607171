"""
Tests for gem counts and affordability.
"""

import pytest

from ..engine_core.gems import GemColor, GemCounts, starting_bank
from ..engine_core.affordability import (
    effective_cost,
    gold_needed,
    compute_payment,
    can_afford,
)
from .factories import make_card, make_player


class TestGemCounts:
    """Tests for the GemCounts value type."""

    def test_indexing(self):
        counts = GemCounts(red=2, gold=1)

        assert counts[GemColor.RED] == 2
        assert counts[GemColor.GOLD] == 1
        assert counts.total() == 3
        assert counts.colored_total() == 2

    def test_negative_rejected(self):
        with pytest.raises(ValueError):
            GemCounts(red=-1)

    def test_minus_below_zero_raises(self):
        with pytest.raises(ValueError):
            GemCounts(red=1).minus(GemCounts(red=2))

    def test_arithmetic(self):
        a = GemCounts(red=2, blue=1)
        b = GemCounts(red=1, gold=3)

        assert a.plus(b) == GemCounts(red=3, blue=1, gold=3)
        assert a.plus(b).minus(b) == a
        assert a.covers(GemCounts(red=2))
        assert not a.covers(b)

    def test_from_dict_and_of(self):
        assert GemCounts.from_dict({"red": 2, GemColor.BLUE: 1}) == GemCounts(red=2, blue=1)
        assert GemCounts.of([GemColor.RED, GemColor.RED, GemColor.GOLD]) == GemCounts(red=2, gold=1)
        assert GemCounts(yellow=4).with_count(GemColor.YELLOW, 1) == GemCounts(yellow=1)

    def test_to_dict_has_every_color(self):
        assert set(GemCounts().to_dict()) == {c.value for c in GemColor.all()}

    @pytest.mark.parametrize("players,per_color", [(2, 4), (3, 5), (4, 7)])
    def test_starting_bank(self, players, per_color):
        bank = starting_bank(players)

        assert all(bank[c] == per_color for c in GemColor.standard())
        assert bank[GemColor.GOLD] == 5

    @pytest.mark.parametrize("players", [1, 5])
    def test_starting_bank_bad_count(self, players):
        with pytest.raises(ValueError):
            starting_bank(players)


class TestAffordability:
    """Tests for payment computation."""

    @pytest.fixture
    def card(self):
        return make_card("mixed", red=3, blue=2)

    def test_effective_cost_uses_bonuses(self, card):
        player = make_player("ann", cards=[make_card("r", reward=GemColor.RED)] * 4)

        assert effective_cost(player, card) == GemCounts(blue=2)

    def test_gold_covers_shortfall(self, card):
        player = make_player("ann", gems=GemCounts(red=2, blue=2, gold=1))

        assert gold_needed(player, card) == 1
        assert compute_payment(player, card) == GemCounts(red=2, blue=2, gold=1)
        assert can_afford(player, card)

    def test_colored_spent_before_gold(self, card):
        player = make_player("ann", gems=GemCounts(red=3, blue=2, gold=3))

        assert compute_payment(player, card) == GemCounts(red=3, blue=2)

    def test_cannot_afford(self, card):
        player = make_player("ann", gems=GemCounts(red=1, gold=2))

        assert compute_payment(player, card) is None
        assert not can_afford(player, card)

    def test_free_card(self):
        card = make_card("free")
        player = make_player("ann")

        assert compute_payment(player, card) == GemCounts()
        assert can_afford(player, card)
