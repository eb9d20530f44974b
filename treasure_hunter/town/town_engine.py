"""
Town Engine for Treasure Hunter.

The town is where it all happens: it manages everything a hunter can do
while visiting.

Town actions:
- hunter_arrives: bind the visiting hunter
- enter_shop: buy or sell through the town's shop
- dig_for_gold: one dig per town, needs a shovel
- look_for_trouble: maybe start a brawl for gold
- get_treasure: search for a crown, trophy or gem
- leave_town: cross the surrounding terrain (ends the visit)

Every action returns a TownActionResult and also records its message as the
town's latest news.
"""

from enum import Enum
from typing import Optional, Protocol, Sequence
import logging

from treasure_hunter.data_models import EASY_MODE_TOUGHNESS, TreasureType
from treasure_hunter.rng import DiceRngAdapter, RandomSource
from treasure_hunter.town.terrain import Terrain, generate_terrain
from treasure_hunter.town.town_actions import TownActionResult
from treasure_hunter.town.town_state_export import TownEventBuffer


logger = logging.getLogger(__name__)


class HunterLike(Protocol):
    """What the town needs from a visiting hunter."""

    def get_hunter_name(self) -> str: ...

    def has_item_in_kit(self, item: str) -> bool: ...

    def remove_item_from_kit(self, item: str) -> None: ...

    def change_gold(self, delta: int) -> int: ...

    def get_kit(self) -> Sequence[str]: ...


class ShopLike(Protocol):
    """The single call the town makes into its shop."""

    def enter(self, hunter: HunterLike, choice: str) -> str: ...


class TownDifficulty(str, Enum):
    """How rough a town is; decides brawl odds."""
    TOUGH = "tough"
    EASY = "easy"
    NORMAL = "normal"


class DigStatus(str, Enum):
    """Per-town dig state. Only ever moves NOT_DUG -> DUG."""
    NOT_DUG = "not_dug"
    DUG = "dug"


# Chance of finding no trouble at all, per town difficulty
NO_TROUBLE_CHANCE: dict[TownDifficulty, float] = {
    TownDifficulty.TOUGH: 0.60,
    TownDifficulty.EASY: 0.10,
    TownDifficulty.NORMAL: 0.30,
}

ITEM_BREAK_CHANCE = 0.5
FULL_KIT_SIZE = 8
MAX_DIG_GOLD = 20
MAX_BRAWL_STAKE = 10

# Treasure search draws in [0, 40); each treasure owns a bucket of 10,
# anything past the last bucket is dust.
TREASURE_ROLL_RANGE = 40
TREASURE_BUCKET_WIDTH = 10
TREASURE_BUCKETS: list[TreasureType] = [
    TreasureType.CROWN,
    TreasureType.TROPHY,
    TreasureType.GEM,
]

NO_HUNTER_MESSAGE = "There is no hunter in town."


class Town:
    """
    A single town visited by at most one hunter at a time.

    Usage:
        town = Town(shop, toughness=0.4)
        town.hunter_arrives(hunter)
        result = town.look_for_trouble()
        print(result.message)
    """

    def __init__(
        self,
        shop: ShopLike,
        toughness: float,
        rng: Optional[RandomSource] = None,
    ):
        """
        Build a town and roll everything fixed for its lifetime.

        Args:
            shop: The town's shop, shared with other towns
            toughness: Probability in [0, 1]; higher means rougher towns.
                Exactly 0.25 turns on easy mode (items never break).
            rng: Source of every random draw. Defaults to a DiceRngAdapter
                so draws are seeded and logged by the DiceRoller.
        """
        if not 0.0 <= toughness <= 1.0:
            raise ValueError(f"toughness must be within [0, 1], got {toughness}")

        self._shop = shop
        self._rng: RandomSource = rng if rng is not None else DiceRngAdapter("Town")
        self._hunter: Optional[HunterLike] = None

        self._terrain = generate_terrain(self._rng)

        # Two independent draws with the same odds: a town may be both
        self._tough_town = self._rng.random() < toughness
        self._easy_town = self._rng.random() < toughness
        if self._tough_town:
            self._difficulty = TownDifficulty.TOUGH
        elif self._easy_town:
            self._difficulty = TownDifficulty.EASY
        else:
            self._difficulty = TownDifficulty.NORMAL

        self._toughness = toughness
        self._is_easy_mode = toughness == EASY_MODE_TOUGHNESS

        self._dig_status = DigStatus.NOT_DUG
        self._searched = False
        self._treasure = ""
        self._print_message = ""

        self.events = TownEventBuffer()

        logger.debug(
            f"Town built: terrain={self._terrain.name}, "
            f"difficulty={self._difficulty.value}, easy_mode={self._is_easy_mode}"
        )

    # =========================================================================
    # STATE ACCESS
    # =========================================================================

    @property
    def terrain(self) -> Terrain:
        return self._terrain

    @property
    def hunter(self) -> Optional[HunterLike]:
        return self._hunter

    @property
    def shop(self) -> ShopLike:
        return self._shop

    @property
    def toughness(self) -> float:
        return self._toughness

    @property
    def difficulty(self) -> TownDifficulty:
        return self._difficulty

    @property
    def tough_town(self) -> bool:
        return self._tough_town

    @property
    def easy_town(self) -> bool:
        return self._easy_town

    @property
    def is_easy_mode(self) -> bool:
        return self._is_easy_mode

    @property
    def dig_status(self) -> DigStatus:
        return self._dig_status

    @property
    def has_dug(self) -> bool:
        return self._dig_status == DigStatus.DUG

    @property
    def latest_news(self) -> str:
        return self._print_message

    @property
    def searched(self) -> bool:
        return self._searched

    @searched.setter
    def searched(self, value: bool) -> None:
        self._searched = value

    def get_terrain(self) -> Terrain:
        return self._terrain

    def get_latest_news(self) -> str:
        return self._print_message

    def get_current_treasure(self) -> str:
        """The last treasure found here, or an empty string."""
        return self._treasure

    def get_searched(self) -> bool:
        return self._searched

    def set_searched(self, searched: bool) -> None:
        self._searched = searched

    def info_string(self) -> str:
        return f"This nice little town is surrounded by {self._terrain.name}."

    # =========================================================================
    # ACTIONS
    # =========================================================================

    def hunter_arrives(self, hunter: HunterLike) -> TownActionResult:
        """
        Bind the arriving hunter and greet them.

        Args:
            hunter: The arriving hunter

        Returns:
            TownActionResult with the two-line welcome
        """
        self._hunter = hunter
        name = hunter.get_hunter_name()
        message = f"Welcome to town, {name}."
        if self._tough_town:
            message += "\nIt's pretty rough around here, so watch yourself."
        else:
            message += "\nWe're just a sleepy little town with mild mannered folk."

        logger.info(f"{name} arrived in a {self._difficulty.value} town")
        self.events.emit("town:arrive", {"hunter": name, "terrain": self._terrain.name})
        return self._report(TownActionResult(action="town:arrive", message=message))

    def leave_town(self) -> TownActionResult:
        """
        Try to cross the surrounding terrain.

        The needed item may break on the way (never in easy mode). This is
        the only action that ends a visit.

        Returns:
            TownActionResult; success is True if the hunter left town
        """
        hunter = self._require_hunter("town:leave")
        if hunter is None:
            return self._no_hunter("town:leave")

        item = self._terrain.needed_item
        if not self._terrain.can_cross_terrain(hunter):
            message = (
                f"You can't leave town, {hunter.get_hunter_name()}. "
                f"You don't have a {item}."
            )
            return self._report(TownActionResult(
                action="town:leave",
                message=message,
                success=False,
                details={"needed_item": item},
            ))

        result = TownActionResult(
            action="town:leave",
            message=f"You used your {item} to cross the {self._terrain.name}.",
            details={"needed_item": item},
        )
        if self.check_item_break():
            hunter.remove_item_from_kit(item)
            result.message += f"\nUnfortunately, you lost your {item}"
            result.item_lost = item

        logger.info(f"{hunter.get_hunter_name()} crossed the {self._terrain.name}")
        self.events.emit("town:leave", {"terrain": self._terrain.name, "item_lost": result.item_lost})
        return self._report(result)

    def dig_for_gold(self) -> TownActionResult:
        """
        Dig once for gold. Needs a shovel; a second dig is always refused.

        Returns:
            TownActionResult with any gold awarded in gold_change
        """
        hunter = self._require_hunter("town:dig")
        if hunter is None:
            return self._no_hunter("town:dig")

        if self._dig_status == DigStatus.DUG:
            return self._report(TownActionResult(
                action="town:dig",
                message="You already dug for gold in this town.",
                success=False,
            ))

        if not hunter.has_item_in_kit("shovel"):
            return self._report(TownActionResult(
                action="town:dig",
                message="You can't dig for gold without a shovel",
                success=False,
            ))

        result = TownActionResult(action="town:dig", message="")
        if self._rng.randint(1, 2) == 1:
            gold = self._rng.randint(1, MAX_DIG_GOLD)
            result.gold_change = hunter.change_gold(gold)
            result.message = f"You dug up {gold} gold!"
        else:
            result.message = "You dug but only found dirt"

        self._dig_status = DigStatus.DUG
        logger.debug(f"Dig result: {result.gold_change} gold")
        self.events.emit("town:dig", {"gold": result.gold_change})
        return self._report(result)

    def enter_shop(self, choice: str) -> TownActionResult:
        """
        Hand the hunter over to the shop.

        Args:
            choice: What the hunter wants to do at the shop

        Returns:
            TownActionResult carrying the shop's message verbatim
        """
        hunter = self._require_hunter("town:shop")
        if hunter is None:
            return self._no_hunter("town:shop")

        message = self._shop.enter(hunter, choice)
        self.events.emit("town:shop", {"choice": choice})
        return self._report(TownActionResult(
            action="town:shop",
            message=message,
            details={"choice": choice},
        ))

    def check_item_break(self) -> bool:
        """
        Determine whether a used item has broken.

        Returns:
            True if the item broke. Always False in easy mode.
        """
        if self._is_easy_mode:
            return False
        return self._rng.random() < ITEM_BREAK_CHANCE

    def look_for_trouble(self) -> TownActionResult:
        """
        Give the hunter a chance to brawl for some gold.

        The tougher the town, the less likely trouble is found but the harder
        the brawl is to win. A sword or a full kit always wins.

        Returns:
            TownActionResult; gold_change is what the hunter's purse actually
            gained or lost, details["stake"] is the amount fought over
        """
        hunter = self._require_hunter("town:look_for_trouble")
        if hunter is None:
            return self._no_hunter("town:look_for_trouble")

        no_trouble_chance = NO_TROUBLE_CHANCE[self._difficulty]
        if self._rng.random() <= no_trouble_chance:
            return self._report(TownActionResult(
                action="town:look_for_trouble",
                message="You couldn't find any trouble",
                details={"brawl": False},
            ))

        message = "You want trouble, stranger!  You got it!\nOof! Umph! Ow!\n"
        stake = self._rng.randint(1, MAX_BRAWL_STAKE)
        out_fought = self._rng.random() > no_trouble_chance
        has_sword = hunter.has_item_in_kit("sword")
        full_kit = len(hunter.get_kit()) == FULL_KIT_SIZE

        if out_fought or has_sword or full_kit:
            if has_sword:
                message += (
                    "The brawler, seeing your sword, realizes he picked a losing "
                    "fight and gives you his gold."
                )
            message += "Okay, stranger! You proved yer mettle. Here, take my gold."
            message += f"\nYou won the brawl and receive {stake} gold."
            won = True
            gold_change = hunter.change_gold(stake)
        else:
            message += "That'll teach you to go lookin' fer trouble in MY town! Now pay up!"
            message += f"\nYou lost the brawl and pay {stake} gold."
            won = False
            gold_change = hunter.change_gold(-stake)

        logger.debug(
            f"Brawl: stake={stake}, won={won}, "
            f"sword={has_sword}, full_kit={full_kit}"
        )
        self.events.emit("town:look_for_trouble", {"stake": stake, "won": won})
        return self._report(TownActionResult(
            action="town:look_for_trouble",
            message=message,
            gold_change=gold_change,
            details={"brawl": True, "stake": stake, "won": won},
        ))

    def get_treasure(self) -> TownActionResult:
        """
        Search the town for treasure.

        A quarter of searches turn up only dust and leave the current
        treasure alone; otherwise the find replaces it.

        Returns:
            TownActionResult; treasure is set when something was found
        """
        roll = self._rng.randint(0, TREASURE_ROLL_RANGE - 1)
        bucket = roll // TREASURE_BUCKET_WIDTH
        logger.debug(f"Treasure roll {roll}")

        if bucket >= len(TREASURE_BUCKETS):
            return self._report(TownActionResult(
                action="town:search_treasure",
                message="You found dust! Useless!",
                success=False,
            ))

        treasure = TREASURE_BUCKETS[bucket].value
        self._treasure = treasure
        self.events.emit("town:search_treasure", {"treasure": treasure})
        return self._report(TownActionResult(
            action="town:search_treasure",
            message=f"You found a {treasure}!",
            treasure=treasure,
        ))

    # =========================================================================
    # HELPERS
    # =========================================================================

    def _report(self, result: TownActionResult) -> TownActionResult:
        self._print_message = result.message
        return result

    def _require_hunter(self, action: str) -> Optional[HunterLike]:
        if self._hunter is None:
            logger.warning(f"{action} called with no hunter in town")
        return self._hunter

    def _no_hunter(self, action: str) -> TownActionResult:
        return self._report(TownActionResult(
            action=action,
            message=NO_HUNTER_MESSAGE,
            success=False,
            error="no_hunter",
        ))
