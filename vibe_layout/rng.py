"""Seeded pseudo-random source for reproducible layout jitter."""

import math
from typing import Optional, Sequence, TypeVar

import numpy as np

from .constants import LCG_INCREMENT, LCG_MODULUS, LCG_MULTIPLIER

T = TypeVar("T")


class SeededRandom:
    """
    Linear-congruential generator over floats.

        state = (state * 9301 + 49297) mod 233280
        next  = state / 233280

    The remainder is taken with fmod, so negative seeds keep a negative state
    and fractional seeds are used as-is.
    """

    def __init__(self, seed: float):
        self.seed = seed
        self._state = float(seed)

    def next(self) -> float:
        self._state = math.fmod(self._state * LCG_MULTIPLIER + LCG_INCREMENT, LCG_MODULUS)
        return self._state / LCG_MODULUS

    def spread(self, low: float, span: float) -> float:
        """low + next() * span"""
        return low + self.next() * span

    def coin(self) -> bool:
        return self.next() < 0.5

    def choice(self, items: Sequence[T]) -> T:
        return items[math.floor(self.next() * len(items))]


def random_seed(rng: Optional[np.random.RandomState] = None) -> float:
    """Draw a fresh seed in [0, 1) for calls that did not supply one."""
    rng = rng or np.random.RandomState()
    return float(rng.uniform(0, 1))
