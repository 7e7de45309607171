"""
Deck utilities - Shuffle and draw over ordered sequences.

No game semantics live here. Decks are tuples; the "top" of a deck is
its last element. Drawing more than a deck holds returns what exists.
"""

from __future__ import annotations
import random
from typing import Sequence, TypeVar

T = TypeVar("T")


def shuffle(deck: Sequence[T], rng: random.Random | int | None = None) -> tuple[T, ...]:
    """
    Return a uniformly random permutation of the deck (Fisher-Yates).

    Args:
        deck: Cards to shuffle (not modified)
        rng: A random.Random, an int seed, or None for fresh randomness
    """
    if not isinstance(rng, random.Random):
        rng = random.Random(rng)

    shuffled = list(deck)
    for i in range(len(shuffled) - 1, 0, -1):
        j = rng.randint(0, i)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return tuple(shuffled)


def draw_one(deck: Sequence[T]) -> tuple[tuple[T, ...], T | None]:
    """Return (remainder, top card); the card is None for an empty deck."""
    if not deck:
        return tuple(deck), None
    return tuple(deck[:-1]), deck[-1]


def draw_n(deck: Sequence[T], n: int) -> tuple[tuple[T, ...], tuple[T, ...]]:
    """
    Return (remainder, drawn) after drawing up to n cards from the top.

    Cards are returned in draw order. A short draw is not an error.
    """
    count = max(0, min(n, len(deck)))
    remainder = tuple(deck[:len(deck) - count])
    drawn = tuple(reversed(deck[len(deck) - count:]))
    return remainder, drawn
