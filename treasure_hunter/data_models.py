"""
Shared data structures for Treasure Hunter.

Holds the centralized dice roller and the small enums that the town, the
hunter and the shop all agree on.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional, Union
import random


# =============================================================================
# ENUMS
# =============================================================================


class TreasureType(str, Enum):
    """Treasures a hunter can dig out of a town."""
    CROWN = "crown"
    TROPHY = "trophy"
    GEM = "gem"


class Difficulty(str, Enum):
    """Game difficulty modes selectable on the command line."""
    EASY = "easy"
    NORMAL = "normal"
    HARD = "hard"


# Toughness passed to each new town for a given difficulty.
# Easy mode is keyed off this exact value by the town.
EASY_MODE_TOUGHNESS = 0.25

DIFFICULTY_TOUGHNESS: dict[Difficulty, float] = {
    Difficulty.EASY: EASY_MODE_TOUGHNESS,
    Difficulty.NORMAL: 0.4,
    Difficulty.HARD: 0.75,
}


# =============================================================================
# DICE AND RANDOMIZATION
# =============================================================================


class DiceRoller:
    """
    Centralized randomization interface.
    All dice rolls must go through this class for reproducibility and logging.
    """

    _instance = None
    _seed: Optional[int] = None
    _roll_log: list = []

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @classmethod
    def set_seed(cls, seed: int) -> None:
        """Set random seed for reproducibility."""
        cls._seed = seed
        random.seed(seed)

    @classmethod
    def randint(cls, a: int, b: int, reason: str = "") -> int:
        """
        Roll an integer in [a, b] inclusive and log it.

        Ranges that do not start at 1 are logged as 'range(a-b)' since
        they are not a real die.
        """
        if a > b:
            raise ValueError(f"Empty range: randint({a}, {b})")
        value = random.randint(a, b)
        notation = f"1d{b}" if a == 1 else f"range({a}-{b})"
        cls._roll_log.append(DiceResult(notation=notation, total=value, reason=reason))
        return value

    @classmethod
    def random(cls, reason: str = "") -> float:
        """Draw a float in [0.0, 1.0) and log it."""
        value = random.random()
        cls._roll_log.append(DiceResult(notation="uniform", total=value, reason=reason))
        return value

    @classmethod
    def get_roll_log(cls) -> list:
        """Get the complete roll log for the session."""
        return cls._roll_log.copy()

    @classmethod
    def clear_roll_log(cls) -> None:
        """Clear the roll log."""
        cls._roll_log = []


@dataclass
class DiceResult:
    """One logged draw."""
    notation: str
    total: Union[int, float]
    reason: str
    timestamp: datetime = field(default_factory=datetime.now)

    def __str__(self) -> str:
        return f"{self.notation} = {self.total} ({self.reason})"
