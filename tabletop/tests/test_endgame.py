"""
Tests for the end game and winner determination.

Reaching the winning score starts the final round; the round is
played out and the game ends when turn order wraps to the first player.
"""

import pytest

from ..engine_core.gems import GemColor, GemCounts
from ..engine_core.state import GamePhase
from ..engine_core.action import Action, RejectionReason
from ..engine_core.action_generator import legal_actions, has_legal_move
from ..engine_core.reducer import apply_action
from ..engine_core.outcome import determine_outcome
from .factories import make_card, make_player, make_row, make_state, scoring_cards


BANK = GemCounts(purple=4, red=4, orange=4, blue=4, yellow=4, gold=5)


@pytest.fixture
def near_win(red_card):
    """Ann sits on 14 points and can buy a 1-point card."""
    ann = make_player("ann", gems=GemCounts(red=4), cards=scoring_cards(14))
    return make_state(
        BANK,
        [ann, make_player("bo"), make_player("cy")],
        rows=[make_row(1, [red_card]), make_row(2), make_row(3)],
    )


class TestFinalRound:
    """Tests for the final round trigger and end of game."""

    def test_reaching_threshold_starts_final_round(self, near_win):
        result = apply_action(near_win, Action.purchase_card(1, 0))

        assert result.success
        assert result.new_state.get_player("ann").score == 15
        assert result.new_state.phase == GamePhase.FINAL_ROUND
        assert result.new_state.current_player.player_id == "bo"

    def test_round_is_played_out(self, near_win):
        """Everyone after the trigger still gets a turn."""
        state = apply_action(near_win, Action.purchase_card(1, 0)).new_state

        state = apply_action(state, Action.take_gems([GemColor.BLUE])).new_state
        assert state.phase == GamePhase.FINAL_ROUND
        assert state.current_player.player_id == "cy"

        state = apply_action(state, Action.take_gems([GemColor.BLUE])).new_state
        assert state.phase == GamePhase.ENDED
        assert state.round_number == 2

    def test_last_seat_trigger_ends_immediately(self, red_card):
        """Triggered by the last player in turn order, the round is already over."""
        bo = make_player("bo", gems=GemCounts(red=4), cards=scoring_cards(14))
        state = make_state(
            BANK,
            [make_player("ann"), bo],
            rows=[make_row(1, [red_card]), make_row(2), make_row(3)],
            current_player_idx=1,
        )

        result = apply_action(state, Action.purchase_card(1, 0))

        assert result.new_state.phase == GamePhase.ENDED

    def test_final_round_latches(self):
        """Phase never goes back to in progress."""
        ann = make_player("ann", cards=scoring_cards(15))
        state = make_state(
            BANK,
            [ann, make_player("bo"), make_player("cy")],
            current_player_idx=1,
            phase=GamePhase.FINAL_ROUND,
        )

        state = apply_action(state, Action.take_gems([GemColor.RED])).new_state

        assert state.phase == GamePhase.FINAL_ROUND

    def test_ended_game_rejects_everything(self):
        state = make_state(BANK, [make_player("ann"), make_player("bo")], phase=GamePhase.ENDED)

        for action in (Action.take_gems([GemColor.RED]), Action.pass_turn()):
            result = apply_action(state, action)
            assert not result.success
            assert result.reason == RejectionReason.GAME_ALREADY_ENDED

        assert legal_actions(state) == []
        assert not has_legal_move(state)


class TestOutcome:
    """Tests for winner determination."""

    def _ended(self, *players):
        return make_state(BANK, list(players), phase=GamePhase.ENDED)

    def test_highest_score_wins(self):
        state = self._ended(
            make_player("ann", cards=scoring_cards(16)),
            make_player("bo", cards=scoring_cards(12)),
        )

        outcome = determine_outcome(state)

        assert outcome.winner_id == "ann"
        assert outcome.scores == {"ann": 16, "bo": 12}
        assert not outcome.is_draw
        assert outcome.is_final

    def test_tie_goes_to_fewer_cards(self):
        """Owned and reserved cards both count."""
        state = self._ended(
            make_player("ann", cards=scoring_cards(15), reserved=[make_card("spare")]),
            make_player("bo", cards=scoring_cards(15)),
        )

        outcome = determine_outcome(state)

        assert outcome.winner_ids == ("bo",)

    def test_full_tie_is_draw(self):
        state = self._ended(
            make_player("ann", cards=scoring_cards(15)),
            make_player("bo", cards=scoring_cards(15)),
            make_player("cy", cards=scoring_cards(3)),
        )

        outcome = determine_outcome(state)

        assert outcome.is_draw
        assert outcome.winner_ids == ("ann", "bo")
        assert outcome.winner_id is None

    def test_outcome_of_running_game_is_not_final(self, seeded_game):
        outcome = determine_outcome(seeded_game)

        assert not outcome.is_final
        assert outcome.is_draw
