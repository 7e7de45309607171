"""
Reducer - Applies actions to game state.

The reducer is the single point of state change.
All state changes must go through apply_action().

Design principles:
- Pure function: (state, action) -> ActionResult
- Validates before applying; a rejected action leaves state untouched
- Never raises for a well-typed action; rejections are data
- Exactly one turn advance per accepted action
"""

from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Callable, Iterable
import logging

from .state import (
    GameState,
    GamePhase,
    TierRow,
    MAX_RESERVED_CARDS,
    WINNING_SCORE,
)
from .gems import GemColor, GemCounts, MAX_GEMS_PER_PLAYER, DOUBLE_TAKE_MINIMUM
from .action import Action, ActionType, ActionResult, RejectionReason
from .affordability import compute_payment
from .action_generator import has_legal_move
from .deck import draw_one

logger = logging.getLogger(__name__)


@dataclass
class Reducer:
    """
    Reducer applies actions to game state.

    Stateless - all state is in GameState.
    """
    winning_score: int = WINNING_SCORE

    def apply(self, state: GameState, action: Action) -> ActionResult:
        """
        Apply an action to the game state.

        Returns ActionResult with new state or a rejection reason.
        """
        result = self._validate_action(state, action)
        if result is None:
            handler = self._get_handler(action.action_type)
            result = handler(state, action)

        if not result.success:
            logger.debug(
                "Rejected %s for %s: %s",
                action.describe(), state.current_player.player_id, result.reason.value,
            )
            return result

        new_state = self._advance_turn(result.new_state)
        new_state = new_state._copy_with(history=state.history + (action,))
        return replace(result, new_state=new_state)

    def _validate_action(self, state: GameState, action: Action) -> ActionResult | None:
        """
        Checks shared by every action type.

        Returns a rejection, or None if the action may go to its handler.
        """
        if state.phase == GamePhase.ENDED:
            return ActionResult.rejected(
                action, RejectionReason.GAME_ALREADY_ENDED, "Game is over - no actions allowed"
            )

        player_id = action.payload.player_id
        if player_id is not None and player_id != state.current_player.player_id:
            return ActionResult.rejected(
                action, RejectionReason.NOT_YOUR_TURN, f"Not {player_id}'s turn"
            )

        return None

    def _get_handler(self, action_type: ActionType) -> Callable[[GameState, Action], ActionResult]:
        """Get the handler function for an action type."""
        handlers = {
            ActionType.TAKE_GEMS: self._handle_take_gems,
            ActionType.RESERVE_CARD: self._handle_reserve,
            ActionType.PURCHASE_CARD: self._handle_purchase,
            ActionType.CLAIM_LOCATION_TILE: self._handle_claim_tile,
            ActionType.PASS: self._handle_pass,
        }
        return handlers[action_type]

    # =========================================================================
    # Handlers
    # =========================================================================

    def _handle_take_gems(self, state: GameState, action: Action) -> ActionResult:
        """Handle taking gems from the bank."""
        colors = action.payload.colors
        error = _gem_selection_error(state.bank, colors)
        if error:
            return ActionResult.rejected(action, RejectionReason.INVALID_GEM_SELECTION, error)

        player = state.current_player
        taken = GemCounts.of(colors)
        held = player.gems.plus(taken)
        discards = action.payload.discards

        error = _discard_error(held, discards)
        if error:
            return ActionResult.rejected(action, RejectionReason.INVALID_GEM_SELECTION, error)

        new_player = player._copy_with(gems=held.minus(discards))
        new_state = state.with_player(new_player)._copy_with(
            bank=state.bank.minus(taken).plus(discards),
        )

        return ActionResult.success_with_state(
            action,
            new_state,
            changes=[f"{player.name} took " + ", ".join(c.value for c in colors)],
        )

    def _handle_reserve(self, state: GameState, action: Action) -> ActionResult:
        """Handle reserving a face-up card."""
        player = state.current_player
        if len(player.reserved) >= MAX_RESERVED_CARDS:
            return ActionResult.rejected(
                action,
                RejectionReason.RESERVE_LIMIT_EXCEEDED,
                f"{player.name} already holds {MAX_RESERVED_CARDS} reserved cards",
            )

        row = _target_row(state, action)
        if row is None:
            return _invalid_target(action)

        slot = action.payload.slot
        card = row.card_at(slot)
        if card is None:
            return ActionResult.rejected(
                action, RejectionReason.SLOT_EMPTY, f"Tier {row.tier} slot {slot} is empty"
            )

        gold = 1 if state.bank[GemColor.GOLD] > 0 else 0
        granted = GemCounts(gold=gold)
        held = player.gems.plus(granted)
        discards = action.payload.discards

        error = _discard_error(held, discards)
        if error:
            return ActionResult.rejected(action, RejectionReason.INVALID_GEM_SELECTION, error)

        new_player = player._copy_with(
            gems=held.minus(discards),
            reserved=player.reserved + (card,),
        )
        new_state = state.with_player(new_player).with_row(_refill(row, slot))
        new_state = new_state._copy_with(bank=state.bank.minus(granted).plus(discards))

        changes = [f"{player.name} reserved {card.name}"]
        if gold:
            changes.append(f"{player.name} received 1 gold")
        return ActionResult.success_with_state(action, new_state, changes=changes)

    def _handle_purchase(self, state: GameState, action: Action) -> ActionResult:
        """Handle buying a face-up or reserved card."""
        player = state.current_player
        reserved_index = action.payload.reserved_index

        if reserved_index is not None:
            if not 0 <= reserved_index < len(player.reserved):
                return _invalid_target(action)
            row = None
            card = player.reserved[reserved_index]
        else:
            row = _target_row(state, action)
            if row is None:
                return _invalid_target(action)
            card = row.card_at(action.payload.slot)
            if card is None:
                return ActionResult.rejected(
                    action,
                    RejectionReason.SLOT_EMPTY,
                    f"Tier {row.tier} slot {action.payload.slot} is empty",
                )

        payment = compute_payment(player, card)
        if payment is None:
            return ActionResult.rejected(
                action,
                RejectionReason.INSUFFICIENT_FUNDS,
                f"{player.name} cannot afford {card.name}",
            )

        if row is None:
            remaining = player.reserved[:reserved_index] + player.reserved[reserved_index + 1:]
        else:
            remaining = player.reserved

        new_player = player._copy_with(
            gems=player.gems.minus(payment),
            cards=player.cards + (card,),
            reserved=remaining,
        )
        new_state = state.with_player(new_player)._copy_with(bank=state.bank.plus(payment))
        if row is not None:
            new_state = new_state.with_row(_refill(row, action.payload.slot))

        return ActionResult.success_with_state(
            action,
            new_state,
            changes=[f"{player.name} bought {card.name} for {payment.total()} gems"],
        )

    def _handle_claim_tile(self, state: GameState, action: Action) -> ActionResult:
        """Handle claiming a location tile."""
        tile_id = action.payload.tile_id
        player = state.current_player

        tile = state.get_tile(tile_id) if tile_id is not None else None
        if tile is None:
            if any(t.tile_id == tile_id for p in state.players for t in p.tiles):
                return ActionResult.rejected(
                    action,
                    RejectionReason.TILE_ALREADY_CLAIMED,
                    f"Tile {tile_id} has already been claimed",
                )
            return _invalid_target(action)

        if not player.bonuses().covers(tile.requirement):
            return ActionResult.rejected(
                action,
                RejectionReason.TILE_REQUIREMENT_NOT_MET,
                f"{player.name} does not meet the requirement of {tile.name}",
            )

        new_player = player._copy_with(tiles=player.tiles + (tile,))
        new_state = state.with_player(new_player)._copy_with(
            tiles=tuple(t for t in state.tiles if t.tile_id != tile_id),
        )

        return ActionResult.success_with_state(
            action,
            new_state,
            changes=[f"{player.name} claimed {tile.name}"],
        )

    def _handle_pass(self, state: GameState, action: Action) -> ActionResult:
        """Passing is only allowed when nothing else is."""
        if has_legal_move(state):
            return ActionResult.rejected(
                action,
                RejectionReason.NO_LEGAL_ACTION,
                "Cannot pass while a legal action exists",
            )
        return ActionResult.success_with_state(
            action,
            state,
            changes=[f"{state.current_player.name} passed"],
        )

    # =========================================================================
    # Turn structure
    # =========================================================================

    def _advance_turn(self, state: GameState) -> GameState:
        """
        Move to the next player, tracking rounds and the end game.

        Reaching the winning score starts the final round; the game ends
        once that round wraps back to the first player.
        """
        phase = state.phase
        if phase == GamePhase.IN_PROGRESS and any(
            p.score >= self.winning_score for p in state.players
        ):
            phase = GamePhase.FINAL_ROUND

        next_idx = (state.current_player_idx + 1) % state.num_players
        round_number = state.round_number
        if next_idx == 0:
            round_number += 1
            if phase == GamePhase.FINAL_ROUND:
                phase = GamePhase.ENDED

        return state._copy_with(
            current_player_idx=next_idx,
            round_number=round_number,
            phase=phase,
        )


# =============================================================================
# Helpers
# =============================================================================

def _gem_selection_error(bank: GemCounts, colors: tuple[GemColor, ...]) -> str | None:
    """Check a take against the bank. Returns an error message or None."""
    if not colors or len(colors) > 3:
        return "Take between one and three gems"
    if GemColor.GOLD in colors:
        return "Gold cannot be taken from the bank"

    distinct = set(colors)
    if len(distinct) == len(colors):
        empty = [c.value for c in colors if bank[c] < 1]
        if empty:
            return "Bank has no " + ", ".join(empty)
        return None

    if len(colors) == 2:
        color = colors[0]
        if bank[color] < DOUBLE_TAKE_MINIMUM:
            return f"Two {color.value} need at least {DOUBLE_TAKE_MINIMUM} in the bank"
        return None

    return "Take distinct colors, or exactly two of the same color"


def _discard_error(held: GemCounts, discards: GemCounts) -> str | None:
    """Discards must bring the hand back to the limit exactly, and no further."""
    excess = held.total() - MAX_GEMS_PER_PLAYER
    if excess <= 0:
        if discards.total():
            return "Discards are only allowed above the gem limit"
        return None
    if discards.total() != excess:
        return f"Must discard exactly {excess} gem(s) to stay at {MAX_GEMS_PER_PLAYER}"
    if not held.covers(discards):
        return "Cannot discard gems that are not held"
    return None


def _target_row(state: GameState, action: Action) -> TierRow | None:
    """The tier row an action points at, or None if tier/slot are out of range."""
    tier, slot = action.payload.tier, action.payload.slot
    if tier is None or slot is None:
        return None
    row = state.row(tier)
    if row is None or not 0 <= slot < len(row.slots):
        return None
    return row


def _refill(row: TierRow, slot: int) -> TierRow:
    """Empty a face-up slot and refill it from the pile, if any cards remain."""
    pile, card = draw_one(row.pile)
    slots = row.slots[:slot] + (card,) + row.slots[slot + 1:]
    return row._copy_with(pile=pile, slots=slots)


def _invalid_target(action: Action) -> ActionResult:
    return ActionResult.rejected(
        action, RejectionReason.INVALID_TARGET, "Action targets a card or tile that does not exist"
    )


_default_reducer = Reducer()


def apply_action(state: GameState, action: Action) -> ActionResult:
    """Convenience function using the standard rules."""
    return _default_reducer.apply(state, action)


transition = apply_action


def replay(initial: GameState, actions: Iterable[Action], reducer: Reducer | None = None) -> GameState:
    """
    Re-apply a history of accepted actions.

    Raises ValueError if the log contains an action the rules reject.
    """
    reducer = reducer or _default_reducer
    state = initial
    for action in actions:
        result = reducer.apply(state, action)
        if not result.success:
            raise ValueError(f"History does not replay: {action.describe()} ({result.reason.value})")
        state = result.new_state
    return state
