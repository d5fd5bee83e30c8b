"""A single shared random source for the whole game."""

import random
from collections.abc import Iterable
from typing import TypeVar

T = TypeVar("T")

_engine = random.Random()


def seed(value: int | str | bytes | None) -> None:
    """Reseed the shared generator."""
    _engine.seed(value)


def roll_chance(probability: float) -> bool:
    """Return True with the given probability (0 to 1)."""
    if not 0.0 <= probability <= 1.0:
        raise ValueError(f"probability must lie in [0, 1], got {probability}")
    return _engine.random() < probability


def randint(low: int, high: int) -> int:
    """Return a uniformly chosen integer in ``[low, high]``."""
    return _engine.randint(low, high)


def weighted_choice(items: Iterable[tuple[T, float]]) -> T:
    """Pick a value from ``(value, weight)`` pairs, proportionally to weight."""
    pairs = list(items)
    if not pairs:
        raise ValueError("weighted_choice needs at least one item")
    remaining = _engine.random() * sum(weight for _, weight in pairs)
    for value, weight in pairs:
        if remaining < weight:
            return value
        remaining -= weight
    # rounding left a sliver past the last weight
    return pairs[-1][0]