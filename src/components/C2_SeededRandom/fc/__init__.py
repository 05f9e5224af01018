"""
C2-SeededRandom Functional Core: Reproducible pseudo-randomness.

Maps a float seed (plus an optional per-call offset) to a value in [0, 1)
through a sine hash. The mapping is part of the saved-design contract:
changing it would silently change every stored seed's palette, so the
constants below must stay fixed.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")

SINE_SCALE = 10000.0
"""Amplifies sin(seed) so neighbouring seeds land far apart after frac()."""

SEED_SCALE = 1000.0
OFFSET_PRIME = 7919.0
"""Spread applied to (seed, offset) pairs by seeded_random()."""


def seeded_fraction(seed: float) -> float:
    """Return frac(sin(seed) * 10000), a value in [0, 1)."""
    x = math.sin(seed) * SINE_SCALE
    return x - math.floor(x)


def random_in_range(min_value: float, max_value: float, seed: float) -> float:
    """
    Deterministic value in [min_value, max_value) for a given seed.

    Args:
        min_value: Lower bound (inclusive)
        max_value: Upper bound (exclusive)
        seed: Any float; the same seed always yields the same value

    Returns:
        min_value + seeded_fraction(seed) * (max_value - min_value)
    """
    return min_value + seeded_fraction(seed) * (max_value - min_value)


def seeded_random(seed: float, offset: float = 0.0) -> float:
    """Value in [0, 1) for a (seed, offset) pair; offsets decorrelate draws."""
    return seeded_fraction(seed * SEED_SCALE + offset * OFFSET_PRIME)


def jitter(span: float, seed: float, offset: float) -> float:
    """Symmetric perturbation in [-span, span)."""
    return (seeded_random(seed, offset) * 2 - 1) * span


def roll(probability: float, seed: float, offset: float) -> bool:
    """Seeded Bernoulli trial: True with the given probability."""
    if probability <= 0:
        return False
    return seeded_random(seed, offset) < probability


def pick_option(options: Sequence[T] | None, fallback: T, seed: float, offset: float) -> T:
    """Pick one candidate by seed, or fallback when there are none."""
    if not options:
        return fallback
    index = int(math.floor(seeded_random(seed, offset) * len(options)))
    return options[min(index, len(options) - 1)]
