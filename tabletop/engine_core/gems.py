"""
Gems - Colors, counts and bank supply.

Gem counts are immutable values: every arithmetic operation returns
a new GemCounts. This keeps the conservation law easy to check, since
no state ever shares a mutable counter with another.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Mapping


class GemColor(Enum):
    """Gem colors. GOLD is the joker and is only ever spent."""
    PURPLE = "purple"
    RED = "red"
    ORANGE = "orange"
    BLUE = "blue"
    YELLOW = "yellow"
    GOLD = "gold"

    @classmethod
    def standard(cls) -> tuple[GemColor, ...]:
        """The five non-gold colors in table order."""
        return (cls.PURPLE, cls.RED, cls.ORANGE, cls.BLUE, cls.YELLOW)

    @classmethod
    def all(cls) -> tuple[GemColor, ...]:
        return cls.standard() + (cls.GOLD,)


# Bank supply per player count
GEMS_PER_COLOR = {
    2: 4,
    3: 5,
    4: 7,
}
GOLD_SUPPLY = 5

MAX_GEMS_PER_PLAYER = 10

# Bank count a color needs before two of it may be taken at once
DOUBLE_TAKE_MINIMUM = 4


@dataclass(frozen=True)
class GemCounts:
    """
    Count of gems per color, gold included.

    Index with a GemColor: ``counts[GemColor.RED]``.
    """
    purple: int = 0
    red: int = 0
    orange: int = 0
    blue: int = 0
    yellow: int = 0
    gold: int = 0

    def __post_init__(self):
        for color in GemColor.all():
            if getattr(self, color.value) < 0:
                raise ValueError(f"Negative gem count for {color.value}")

    def __getitem__(self, color: GemColor) -> int:
        return getattr(self, color.value)

    def items(self) -> Iterator[tuple[GemColor, int]]:
        for color in GemColor.all():
            yield color, self[color]

    def total(self) -> int:
        return sum(count for _, count in self.items())

    def colored_total(self) -> int:
        """Total excluding gold."""
        return self.total() - self.gold

    def with_count(self, color: GemColor, count: int) -> GemCounts:
        return GemCounts(**{**self.to_dict(), color.value: count})

    def plus(self, other: GemCounts) -> GemCounts:
        return GemCounts(**{
            color.value: count + other[color] for color, count in self.items()
        })

    def minus(self, other: GemCounts) -> GemCounts:
        """Subtract counts. Raises ValueError if any count goes negative."""
        return GemCounts(**{
            color.value: count - other[color] for color, count in self.items()
        })

    def covers(self, other: GemCounts) -> bool:
        """True if every count is at least the other's."""
        return all(count >= other[color] for color, count in self.items())

    def to_dict(self) -> dict[str, int]:
        return {color.value: count for color, count in self.items()}

    @classmethod
    def from_dict(cls, counts: Mapping[GemColor | str, int]) -> GemCounts:
        """Build from a mapping keyed by GemColor or color name."""
        values: dict[str, int] = {}
        for key, count in counts.items():
            color = key if isinstance(key, GemColor) else GemColor(key)
            values[color.value] = values.get(color.value, 0) + count
        return cls(**values)

    @classmethod
    def of(cls, colors: list[GemColor] | tuple[GemColor, ...]) -> GemCounts:
        """Count occurrences of each color in a sequence."""
        values: dict[str, int] = {}
        for color in colors:
            values[color.value] = values.get(color.value, 0) + 1
        return cls(**values)


def starting_bank(num_players: int) -> GemCounts:
    """Initial bank for a game with the given number of players."""
    if num_players not in GEMS_PER_COLOR:
        raise ValueError(f"Unsupported player count: {num_players}")
    per_color = GEMS_PER_COLOR[num_players]
    return GemCounts(
        purple=per_color,
        red=per_color,
        orange=per_color,
        blue=per_color,
        yellow=per_color,
        gold=GOLD_SUPPLY,
    )
