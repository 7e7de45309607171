"""
Outcome - Winner determination.

Computed on demand from a state, never stored per action.
"""

from __future__ import annotations
from dataclasses import dataclass

from .state import GameState, GamePhase


@dataclass(frozen=True)
class GameOutcome:
    """
    Who won.

    A draw is a normal outcome: several winners with identical score
    and card count.
    """
    winner_ids: tuple[str, ...]
    scores: dict[str, int]
    is_draw: bool
    is_final: bool

    @property
    def winner_id(self) -> str | None:
        """The single winner, or None on a draw."""
        if self.is_draw:
            return None
        return self.winner_ids[0]


def determine_outcome(state: GameState) -> GameOutcome:
    """
    Rank players: highest score wins, ties go to fewest owned+reserved cards.

    Can be called on any state; ``is_final`` tells whether the game has ended.
    """
    scores = {p.player_id: p.score for p in state.players}
    best_score = max(scores.values())
    leaders = [p for p in state.players if p.score == best_score]

    fewest_cards = min(p.card_count for p in leaders)
    winners = tuple(p.player_id for p in leaders if p.card_count == fewest_cards)

    return GameOutcome(
        winner_ids=winners,
        scores=scores,
        is_draw=len(winners) > 1,
        is_final=state.phase == GamePhase.ENDED,
    )
