"""
The hunter: a name, a purse of gold, a kit of at most eight items and the
treasures collected so far.
"""

from dataclasses import dataclass, field
import logging

from treasure_hunter.data_models import TreasureType


logger = logging.getLogger(__name__)


# Kit capacity; a full kit also wins every brawl
KIT_SIZE = 8


@dataclass
class Hunter:
    """
    Player-controlled hunter.

    Item names are compared case-insensitively so a terrain asking for a
    "Rope" is satisfied by the shop's "rope".
    """
    name: str
    gold: int = 0
    kit: list[str] = field(default_factory=list)
    treasures: list[str] = field(default_factory=list)

    def __post_init__(self):
        if self.gold < 0:
            raise ValueError(f"Starting gold cannot be negative: {self.gold}")
        if len(self.kit) > KIT_SIZE:
            raise ValueError(f"A kit holds at most {KIT_SIZE} items")
        self.kit = [item.lower() for item in self.kit]

    # =========================================================================
    # CAPABILITIES USED BY THE TOWN
    # =========================================================================

    def get_hunter_name(self) -> str:
        return self.name

    def get_kit(self) -> tuple[str, ...]:
        return tuple(self.kit)

    def has_item_in_kit(self, item: str) -> bool:
        return item.lower() in self.kit

    def remove_item_from_kit(self, item: str) -> None:
        """Remove an item if held; removing a missing item does nothing."""
        key = item.lower()
        if key in self.kit:
            self.kit.remove(key)
            logger.debug(f"{self.name} lost {key}")

    def change_gold(self, delta: int) -> int:
        """
        Add or subtract gold. The purse never goes below zero.

        Returns:
            The change actually applied, which is smaller than a loss
            when the purse runs out
        """
        before = self.gold
        self.gold = max(0, self.gold + delta)
        return self.gold - before

    # =========================================================================
    # KIT AND TREASURE MANAGEMENT
    # =========================================================================

    def is_kit_full(self) -> bool:
        return len(self.kit) >= KIT_SIZE

    def add_item(self, item: str) -> bool:
        """
        Put an item in the kit.

        Returns:
            False if the kit is full or the item is already held
        """
        key = item.lower()
        if self.is_kit_full() or key in self.kit:
            return False
        self.kit.append(key)
        return True

    def add_treasure(self, treasure: str) -> bool:
        """Add a treasure to the collection; False if it was already collected."""
        if treasure in self.treasures:
            return False
        self.treasures.append(treasure)
        logger.info(f"{self.name} collected a {treasure}")
        return True

    def has_all_treasures(self) -> bool:
        return all(t.value in self.treasures for t in TreasureType)

    def info_string(self) -> str:
        kit = " ".join(self.kit) if self.kit else "none"
        treasures = ", ".join(self.treasures) if self.treasures else "none"
        return (
            f"{self.name} has {self.gold} gold\n"
            f"Kit: {kit}\n"
            f"Treasures found: {treasures}"
        )
