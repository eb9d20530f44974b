"""
Deterministic RNG adapter for town gameplay.

This adapter wraps the project's DiceRoller to provide the subset of the
random.Random interface the town needs, ensuring every draw goes through
the centralized dice system for:
- Reproducibility via seeding
- Logging for observability
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol

if TYPE_CHECKING:
    from treasure_hunter.data_models import DiceRoller


class RandomSource(Protocol):
    """The draws a Town makes. random.Random satisfies this as well."""

    def random(self) -> float: ...

    def randint(self, a: int, b: int) -> int: ...


class DiceRngAdapter:
    """
    Adapter that makes DiceRoller compatible with random.Random interface.

    Usage:
        from treasure_hunter.rng import DiceRngAdapter
        from treasure_hunter.town import Town

        town = Town(shop, toughness=0.4, rng=DiceRngAdapter("Town"))
    """

    def __init__(
        self,
        reason_prefix: str = "Town",
        dice_roller: Optional["DiceRoller"] = None,
    ):
        """
        Initialize the adapter.

        Args:
            reason_prefix: Prefix for roll reason logging (e.g., "Town")
            dice_roller: Optional DiceRoller instance. If None, uses singleton.
        """
        self._reason_prefix = reason_prefix
        self._dice_roller = dice_roller
        self._roll_count = 0

    def _get_dice_roller(self) -> "DiceRoller":
        """Get the DiceRoller instance (lazy import to avoid circular deps)."""
        if self._dice_roller is not None:
            return self._dice_roller
        from treasure_hunter.data_models import DiceRoller
        return DiceRoller()

    def _make_reason(self, context: str) -> str:
        self._roll_count += 1
        return f"{self._reason_prefix}: {context} (roll #{self._roll_count})"

    def randint(self, a: int, b: int) -> int:
        """
        Return random integer in range [a, b], inclusive.

        Args:
            a: Minimum value (inclusive)
            b: Maximum value (inclusive)

        Returns:
            Random integer in the specified range
        """
        dice = self._get_dice_roller()
        reason = self._make_reason(f"d{b - a + 1}" if a == 1 else f"range({a}-{b})")
        return dice.randint(a, b, reason)

    def random(self) -> float:
        """
        Return a random float in [0.0, 1.0).

        The draw is continuous, so a `<= threshold` check passes with
        probability equal to the threshold.
        """
        dice = self._get_dice_roller()
        return dice.random(self._make_reason("random float"))
