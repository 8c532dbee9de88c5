"""
RNG - Seeded Random Streams
===========================

Provides the two independent random streams the demo consumes: one for
physics (spawn offsets, wall nudges) and one purely cosmetic (rock outline
jitter). Drawing a frame never advances the physics stream.
"""

from __future__ import annotations

import random
from typing import Optional, Tuple


class RandomSource:
    """Uniform random scalars from a private, seedable generator."""

    def __init__(self, seed: Optional[int] = None):
        """
        Initialize random source.

        Args:
            seed: Random seed for reproducibility. Random if None.
        """
        self._seed = seed
        self._rng = random.Random(seed)

    @property
    def seed(self) -> Optional[int]:
        """Seed the stream was last (re)started with."""
        return self._seed

    def uniform(self, low: float, high: float) -> float:
        """Random float in [low, high]."""
        return self._rng.uniform(low, high)

    def reset(self, seed: Optional[int] = None) -> None:
        """
        Restart the stream.

        Args:
            seed: New random seed. Keeps current if None.
        """
        if seed is not None:
            self._seed = seed
        self._rng = random.Random(self._seed)


def make_streams(seed: Optional[int] = None) -> Tuple[RandomSource, RandomSource]:
    """
    Build the (physics, cosmetic) stream pair from one seed.

    The cosmetic stream gets a seed derived from the physics seed so a seeded
    run is fully reproducible, while the two sequences stay unrelated.
    """
    if seed is None:
        return RandomSource(), RandomSource()
    return RandomSource(seed), RandomSource(derive_cosmetic_seed(seed))


def derive_cosmetic_seed(seed: int) -> int:
    """Seed for the cosmetic stream of a run seeded with `seed`."""
    return (seed * 0x9E3779B1 + 0x7F4A7C15) & 0xFFFFFFFF
