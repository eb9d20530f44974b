"""
Test helpers for the Treasure Hunter test suite.

Provides:
- ScriptedRng, a random source that replays queued draws so tests can hit
  exact bucket boundaries
- make_town for building a town with a chosen terrain and difficulty
- make_hunter_double, a MagicMock hunter for the town's collaborator calls
"""

from typing import Optional, Sequence, Union
from unittest.mock import MagicMock

from treasure_hunter.town import TerrainKind, Town


Number = Union[int, float]


# =============================================================================
# SCRIPTED RANDOMNESS
# =============================================================================


class ScriptedRng:
    """
    Random source that hands out pre-queued values in order.

    random() and randint() share one queue, so a test lists the draws in
    exactly the order the code under test makes them. Running past the end
    of the script, or scripting a value outside the requested range, fails
    the test loudly.

    Usage:
        rng = ScriptedRng([0, 0.9, 0.9])   # terrain, tough draw, easy draw
        town = Town(shop, 0.4, rng=rng)
    """

    def __init__(self, values: Sequence[Number] = ()):
        self._values: list[Number] = list(values)
        self.calls: list[str] = []

    def queue(self, *values: Number) -> "ScriptedRng":
        self._values.extend(values)
        return self

    def remaining(self) -> int:
        return len(self._values)

    def _next(self, call: str) -> Number:
        self.calls.append(call)
        if not self._values:
            raise AssertionError(f"ScriptedRng exhausted on {call}; calls so far: {self.calls}")
        return self._values.pop(0)

    def random(self) -> float:
        value = self._next("random()")
        assert 0.0 <= value < 1.0, f"Scripted random() value out of range: {value}"
        return float(value)

    def randint(self, a: int, b: int) -> int:
        value = self._next(f"randint({a}, {b})")
        assert a <= value <= b, f"Scripted randint({a}, {b}) value out of range: {value}"
        return int(value)


# =============================================================================
# TOWN BUILDERS
# =============================================================================


def terrain_roll(kind: TerrainKind) -> int:
    """Lowest generator roll that lands on the given terrain."""
    return list(TerrainKind).index(kind) * 20


def make_town(
    toughness: float = 0.4,
    terrain: TerrainKind = TerrainKind.OCEAN,
    tough: bool = False,
    easy: bool = False,
    shop: Optional[object] = None,
) -> tuple[Town, ScriptedRng]:
    """
    Build a town with a fixed terrain and difficulty.

    Queues the three construction draws and returns the rng so the test
    can queue the draws its action will make.
    """
    rng = ScriptedRng([
        terrain_roll(terrain),
        0.0 if tough else 0.999,
        0.0 if easy else 0.999,
    ])
    town = Town(shop if shop is not None else MagicMock(), toughness, rng=rng)
    assert rng.remaining() == 0
    return town, rng


def make_hunter_double(
    name: str = "Tester",
    kit: Sequence[str] = (),
) -> MagicMock:
    """
    A MagicMock hunter whose kit answers membership checks for real.

    Gold changes and item removals are recorded but not applied; every gold
    change reports itself as fully applied.
    """
    hunter = MagicMock()
    items = [item.lower() for item in kit]
    hunter.get_hunter_name.return_value = name
    hunter.get_kit.return_value = tuple(items)
    hunter.has_item_in_kit.side_effect = lambda item: item.lower() in items
    hunter.change_gold.side_effect = lambda delta: delta
    return hunter

