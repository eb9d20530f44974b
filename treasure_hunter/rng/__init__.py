"""Deterministic RNG seam between gameplay code and the DiceRoller."""

from treasure_hunter.rng.dice_rng_adapter import DiceRngAdapter, RandomSource

__all__ = [
    "DiceRngAdapter",
    "RandomSource",
]
