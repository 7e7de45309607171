"""
Shut the Box - Dice and tile state.

Two six-sided dice and nine tiles numbered 1-9. On each roll the
player shuts a set of open tiles whose values add up to the dice total.

The UI only edits the state (cycles a die, flips a tile); choosing the
best tiles is left to the advisory service.
"""

from __future__ import annotations
from dataclasses import dataclass, replace
from enum import Enum
from itertools import combinations


TILE_VALUES = tuple(range(1, 10))


class D6(Enum):
    """Faces of a six-sided die."""
    ONE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6

    @property
    def pips(self) -> int:
        return self.value

    def next(self) -> D6:
        """The next face, wrapping from six back to one."""
        return D6(self.value % 6 + 1)


@dataclass(frozen=True)
class Tile:
    value: int
    is_open: bool = True


@dataclass(frozen=True)
class ShutTheBoxState:
    d1: D6
    d2: D6
    tiles: tuple[Tile, ...]

    @property
    def dice_value(self) -> int:
        return self.d1.pips + self.d2.pips

    @property
    def tiles_open(self) -> list[bool]:
        """Open flags indexed 0..8 for tile values 1..9."""
        return [tile.is_open for tile in self.tiles]

    @property
    def score(self) -> int:
        """Sum of the tiles still open (lower is better)."""
        return sum(tile.value for tile in self.tiles if tile.is_open)

    def is_open(self, value: int) -> bool:
        return self.tiles[value - 1].is_open


def create_game_state() -> ShutTheBoxState:
    """All tiles open, dice showing one and two."""
    return ShutTheBoxState(
        d1=D6.ONE,
        d2=D6.TWO,
        tiles=tuple(Tile(value) for value in TILE_VALUES),
    )


def toggle_tile(state: ShutTheBoxState, value: int) -> ShutTheBoxState:
    """Flip one tile open/shut."""
    if value not in TILE_VALUES:
        raise ValueError(f"No tile {value}")
    tiles = tuple(
        replace(tile, is_open=not tile.is_open) if tile.value == value else tile
        for tile in state.tiles
    )
    return replace(state, tiles=tiles)


def set_die(state: ShutTheBoxState, which: int, face: D6) -> ShutTheBoxState:
    """Set die 1 or die 2."""
    if which == 1:
        return replace(state, d1=face)
    if which == 2:
        return replace(state, d2=face)
    raise ValueError(f"No die {which}")


def tile_combos(roll: int) -> list[tuple[int, ...]]:
    """Every set of distinct tile values that adds up to the roll."""
    combos = []
    for size in range(1, len(TILE_VALUES) + 1):
        for combo in combinations(TILE_VALUES, size):
            if sum(combo) == roll:
                combos.append(combo)
    return combos


def legal_tile_actions(state: ShutTheBoxState) -> list[tuple[int, ...]]:
    """Combos for the current roll whose tiles are all open."""
    return [
        combo for combo in tile_combos(state.dice_value)
        if all(state.is_open(value) for value in combo)
    ]


def shut_tiles(state: ShutTheBoxState, values: list[int] | tuple[int, ...]) -> ShutTheBoxState:
    """
    Shut the chosen tiles.

    Raises ValueError unless they are open, distinct and add up to the roll.
    """
    chosen = tuple(sorted(values))
    if chosen not in legal_tile_actions(state):
        raise ValueError(f"Tiles {list(values)} are not a legal move for a roll of {state.dice_value}")
    tiles = tuple(
        replace(tile, is_open=False) if tile.value in chosen else tile
        for tile in state.tiles
    )
    return replace(state, tiles=tiles)
