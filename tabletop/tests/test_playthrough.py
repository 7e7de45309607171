"""
Seeded random playthroughs.

Plays many turns with randomly chosen legal actions and checks the
invariants that must hold after every accepted action.
"""

import random

import pytest

from ..engine_core.gems import MAX_GEMS_PER_PLAYER
from ..engine_core.state import GamePhase, MAX_RESERVED_CARDS, check_conservation
from ..engine_core.action_generator import legal_actions
from ..engine_core.reducer import apply_action, replay
from ..games.splendor.setup import setup_game


def _play(names, seed, max_turns=300):
    rng = random.Random(seed)
    initial = setup_game(names, random_seed=seed)
    state = initial
    turns = 0
    while state.phase != GamePhase.ENDED and turns < max_turns:
        action = rng.choice(legal_actions(state))
        result = apply_action(state, action)
        assert result.success, f"{action.describe()} rejected: {result.error}"
        state = result.new_state
        turns += 1

        assert check_conservation(state)
        for player in state.players:
            assert player.gem_total <= MAX_GEMS_PER_PLAYER
            assert len(player.reserved) <= MAX_RESERVED_CARDS
        assert len(state.history) == turns
    return initial, state


@pytest.mark.parametrize("names,seed", [
    (["Ann", "Bo"], 1),
    (["Ann", "Bo", "Cy"], 2),
    (["Ann", "Bo", "Cy", "Di"], 3),
])
def test_random_playthrough_keeps_invariants(names, seed):
    _play(names, seed)


def test_playthrough_replays():
    """Replaying the history reproduces the final state exactly."""
    initial, final = _play(["Ann", "Bo", "Cy"], seed=5, max_turns=120)

    assert replay(initial, final.history) == final


def test_round_counter_tracks_turns():
    initial, final = _play(["Ann", "Bo"], seed=9, max_turns=40)

    assert final.round_number == 1 + len(final.history) // 2
