"""Town orchestration: terrain, player actions and state export."""

from treasure_hunter.town.terrain import (
    Terrain,
    TerrainKind,
    CROSSING_ITEMS,
    generate_terrain,
)
from treasure_hunter.town.town_actions import TOWN_ACTIONS, TownActionResult
from treasure_hunter.town.town_engine import (
    Town,
    TownDifficulty,
    DigStatus,
    HunterLike,
    ShopLike,
    NO_TROUBLE_CHANCE,
    NO_HUNTER_MESSAGE,
)
from treasure_hunter.town.town_state_export import (
    TownEvent,
    TownEventBuffer,
    build_town_snapshot,
)

__all__ = [
    # Terrain
    "Terrain",
    "TerrainKind",
    "CROSSING_ITEMS",
    "generate_terrain",
    # Actions
    "TOWN_ACTIONS",
    "TownActionResult",
    # Engine
    "Town",
    "TownDifficulty",
    "DigStatus",
    "HunterLike",
    "ShopLike",
    "NO_TROUBLE_CHANCE",
    "NO_HUNTER_MESSAGE",
    # State export
    "TownEvent",
    "TownEventBuffer",
    "build_town_snapshot",
]
