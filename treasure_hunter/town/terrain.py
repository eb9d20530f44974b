"""
Terrain surrounding a town.

Each town is ringed by one kind of terrain, and a hunter needs exactly one
item to cross it. Terrain is rolled once when the town is built and never
changes afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING
import logging

if TYPE_CHECKING:
    from treasure_hunter.rng import RandomSource
    from treasure_hunter.town.town_engine import HunterLike


logger = logging.getLogger(__name__)


class TerrainKind(str, Enum):
    """Terrain types, in generator order."""
    MOUNTAINS = "Mountains"
    OCEAN = "Ocean"
    PLAINS = "Plains"
    DESERT = "Desert"
    JUNGLE = "Jungle"
    MARSH = "Marsh"


# Item needed to cross each terrain
CROSSING_ITEMS: dict[TerrainKind, str] = {
    TerrainKind.MOUNTAINS: "Rope",
    TerrainKind.OCEAN: "Boat",
    TerrainKind.PLAINS: "Horse",
    TerrainKind.DESERT: "Water",
    TerrainKind.JUNGLE: "Machete",
    TerrainKind.MARSH: "Boots",
}

# Width of each generator bucket; six buckets span [0, 120)
TERRAIN_BUCKET_WIDTH = 20
TERRAIN_ROLL_RANGE = TERRAIN_BUCKET_WIDTH * len(TerrainKind)


@dataclass(frozen=True)
class Terrain:
    """The obstacle surrounding a town and the item needed to cross it."""
    name: str
    needed_item: str

    @classmethod
    def of_kind(cls, kind: TerrainKind) -> "Terrain":
        return cls(name=kind.value, needed_item=CROSSING_ITEMS[kind])

    @property
    def kind(self) -> TerrainKind:
        return TerrainKind(self.name)

    def get_terrain_name(self) -> str:
        return self.name

    def get_needed_item(self) -> str:
        return self.needed_item

    def can_cross_terrain(self, hunter: "HunterLike") -> bool:
        """True if the hunter carries the item this terrain demands."""
        return hunter.has_item_in_kit(self.needed_item)

    def __str__(self) -> str:
        return f"{self.name} (needs {self.needed_item})"


def generate_terrain(rng: "RandomSource") -> Terrain:
    """
    Roll the terrain for a new town.

    Draws an integer in [0, 120) and maps it onto six buckets of width 20,
    so every terrain is equally likely.
    """
    roll = rng.randint(0, TERRAIN_ROLL_RANGE - 1)
    kind = list(TerrainKind)[roll // TERRAIN_BUCKET_WIDTH]
    logger.debug(f"Terrain roll {roll} -> {kind.value}")
    return Terrain.of_kind(kind)
