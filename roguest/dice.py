"""Random numbers for the game."""

from __future__ import annotations

import random


def random_between(low, high):
    """Return a random number from ``low`` to ``high``, both included."""
    if low > high:
        raise ValueError(f"empty range: {low} > {high}")
    if isinstance(low, int) and isinstance(high, int):
        return random.randint(low, high)
    return random.uniform(low, high)