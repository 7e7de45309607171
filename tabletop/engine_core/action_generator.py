"""
Action Generator - Enumerates legal actions for the active player.

Used for:
- UI hints (which buttons to enable)
- Validating Pass (only legal when nothing else is)
- Simulated playthroughs

Every action returned here is accepted by the reducer. Takes and
reserves that push the player above the gem limit come with a
canonical discard attached.
"""

from __future__ import annotations
from itertools import combinations

from .state import GameState, PlayerState, GamePhase, MAX_RESERVED_CARDS
from .gems import GemColor, GemCounts, MAX_GEMS_PER_PLAYER, DOUBLE_TAKE_MINIMUM
from .action import Action
from .affordability import can_afford


def legal_actions(state: GameState) -> list[Action]:
    """All actions the active player may take, Pass only if nothing else."""
    if state.phase == GamePhase.ENDED:
        return []

    player = state.current_player
    actions: list[Action] = []
    actions.extend(_gem_actions(state, player))
    actions.extend(_reserve_actions(state, player))
    actions.extend(_purchase_actions(state, player))
    actions.extend(_claim_actions(state, player))

    if not actions:
        actions.append(Action.pass_turn())
    return actions


def has_legal_move(state: GameState) -> bool:
    """
    True if the active player has any action other than Pass.

    Cheaper than legal_actions: stops at the first hit.
    """
    if state.phase == GamePhase.ENDED:
        return False

    player = state.current_player
    if any(state.bank[c] > 0 for c in GemColor.standard()):
        return True
    if len(player.reserved) < MAX_RESERVED_CARDS and any(
        row.face_up() for row in state.rows
    ):
        return True
    if any(can_afford(player, card) for card in _purchasable(state, player)):
        return True
    bonuses = player.bonuses()
    return any(bonuses.covers(tile.requirement) for tile in state.tiles)


def canonical_discard(held: GemCounts) -> GemCounts:
    """
    Gems to hand back so the player holds exactly the limit.

    Repeatedly returns one gem of the most plentiful color, gold last.
    """
    excess = held.total() - MAX_GEMS_PER_PLAYER
    if excess <= 0:
        return GemCounts()

    remaining = held
    discard: dict[GemColor, int] = {}
    for _ in range(excess):
        color = max(GemColor.standard(), key=lambda c: remaining[c])
        if remaining[color] == 0:
            color = GemColor.GOLD
        discard[color] = discard.get(color, 0) + 1
        remaining = remaining.minus(GemCounts.of([color]))
    return GemCounts.from_dict(discard)


def _gem_actions(state: GameState, player: PlayerState) -> list[Action]:
    available = [c for c in GemColor.standard() if state.bank[c] > 0]

    takes: list[tuple[GemColor, ...]] = []
    for size in (3, 2, 1):
        takes.extend(combinations(available, size))
    takes.extend(
        (c, c) for c in GemColor.standard() if state.bank[c] >= DOUBLE_TAKE_MINIMUM
    )

    actions = []
    for colors in takes:
        held = player.gems.plus(GemCounts.of(colors))
        actions.append(Action.take_gems(colors, discards=canonical_discard(held)))
    return actions


def _reserve_actions(state: GameState, player: PlayerState) -> list[Action]:
    if len(player.reserved) >= MAX_RESERVED_CARDS:
        return []

    gold = GemCounts(gold=1 if state.bank[GemColor.GOLD] > 0 else 0)
    discards = canonical_discard(player.gems.plus(gold))

    actions = []
    for row in state.rows:
        for slot, card in enumerate(row.slots):
            if card is not None:
                actions.append(Action.reserve_card(row.tier, slot, discards=discards))
    return actions


def _purchase_actions(state: GameState, player: PlayerState) -> list[Action]:
    actions = []
    for row in state.rows:
        for slot, card in enumerate(row.slots):
            if card is not None and can_afford(player, card):
                actions.append(Action.purchase_card(row.tier, slot))
    for index, card in enumerate(player.reserved):
        if can_afford(player, card):
            actions.append(Action.purchase_reserved(index))
    return actions


def _claim_actions(state: GameState, player: PlayerState) -> list[Action]:
    bonuses = player.bonuses()
    return [
        Action.claim_tile(tile.tile_id)
        for tile in state.tiles
        if bonuses.covers(tile.requirement)
    ]


def _purchasable(state: GameState, player: PlayerState):
    for row in state.rows:
        yield from row.face_up()
    yield from player.reserved
