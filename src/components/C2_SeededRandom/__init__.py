"""
C2-SeededRandom: Seeded generator primitive.

Every generator draws its randomness through this component so that a stored
seed replays the same design.
"""

from src.components.C2_SeededRandom.fc import (
    jitter,
    pick_option,
    random_in_range,
    roll,
    seeded_fraction,
    seeded_random,
)

__all__ = [
    "jitter",
    "pick_option",
    "random_in_range",
    "roll",
    "seeded_fraction",
    "seeded_random",
]
