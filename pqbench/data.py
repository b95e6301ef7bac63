"""Generation of benchmark input data."""

from __future__ import annotations

import random


def unique_values(n: int, rng: random.Random | None = None) -> list[int]:
    """Return the integers 0..n-1 in a random order."""
    if n < 0:
        raise ValueError("n must not be negative")
    values = list(range(n))
    (rng if rng is not None else random.Random()).shuffle(values)
    return values