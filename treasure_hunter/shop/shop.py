"""
The shop shared by every town.

Choices are plain text so the driving loop can pass player input straight
through:
- "buy" / "sell" on their own list the stock
- "buy rope" / "b rope" buys an item
- "sell rope" / "s rope" sells one back at half price
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional
import logging
import re

if TYPE_CHECKING:
    from treasure_hunter.hunter import Hunter


logger = logging.getLogger(__name__)


# Base prices in gold
DEFAULT_PRICES: dict[str, int] = {
    "water": 2,
    "rope": 4,
    "machete": 6,
    "horse": 12,
    "boat": 20,
    "boots": 8,
    "shovel": 8,
    "sword": 10,
}

# Fraction of the price paid back when selling
SELL_MARKDOWN = 0.5

_CHOICE_RE = re.compile(r"^\s*(?P<verb>b|buy|s|sell)\b\s*(?P<item>.*?)\s*$", flags=re.I)


@dataclass
class ShopChoice:
    verb: str  # "buy" or "sell"
    item: str  # empty when only the stock was asked for


def parse_shop_choice(choice: str) -> Optional[ShopChoice]:
    """
    Parse a shop choice like "buy rope" or "s boat".

    Returns None if the choice is neither a buy nor a sell.
    """
    m = _CHOICE_RE.match(choice or "")
    if not m:
        return None
    verb = "buy" if m.group("verb").lower().startswith("b") else "sell"
    return ShopChoice(verb=verb, item=m.group("item").lower())


class Shop:
    """
    Buys and sells kit items for gold.

    Usage:
        shop = Shop()
        message = shop.enter(hunter, "buy shovel")
    """

    def __init__(
        self,
        prices: Optional[dict[str, int]] = None,
        markdown: float = SELL_MARKDOWN,
    ):
        self._prices = {k.lower(): v for k, v in (prices or DEFAULT_PRICES).items()}
        self._markdown = markdown

    def get_cost(self, item: str) -> Optional[int]:
        return self._prices.get(item.lower())

    def get_buyback_cost(self, item: str) -> Optional[int]:
        cost = self.get_cost(item)
        if cost is None:
            return None
        return int(cost * self._markdown)

    def inventory(self, selling: bool = False) -> str:
        """One line per item with the price the hunter would pay or receive."""
        lines = []
        for item in self._prices:
            price = self.get_buyback_cost(item) if selling else self.get_cost(item)
            lines.append(f"{item.capitalize()}: {price} gold")
        return "\n".join(lines)

    def enter(self, hunter: "Hunter", choice: str) -> str:
        """
        Run one shop transaction.

        Args:
            hunter: The customer
            choice: What the customer wants (see module docstring)

        Returns:
            The shopkeeper's reply
        """
        parsed = parse_shop_choice(choice)
        if parsed is None:
            return "The shopkeeper stares at you. \"Buyin' or sellin'?\""

        if not parsed.item:
            if parsed.verb == "buy":
                return "Welcome to the shop! We have the finest wares in town.\n" + self.inventory()
            return "What're you lookin' to sell?\n" + self.inventory(selling=True)

        if parsed.verb == "buy":
            return self._buy(hunter, parsed.item)
        return self._sell(hunter, parsed.item)

    def _buy(self, hunter: "Hunter", item: str) -> str:
        cost = self.get_cost(item)
        if cost is None:
            return f"We ain't got none of those. ({item})"
        if hunter.has_item_in_kit(item):
            return f"You already have a {item}."
        if hunter.gold < cost:
            return f"Hmm, come back when you have {cost} gold for that {item}."
        if not hunter.add_item(item):
            return "Your kit is full. Sell something first."
        hunter.change_gold(-cost)
        logger.info(f"{hunter.get_hunter_name()} bought {item} for {cost} gold")
        return f"Ye' got yerself a {item}. Come again soon."

    def _sell(self, hunter: "Hunter", item: str) -> str:
        buyback = self.get_buyback_cost(item)
        if buyback is None:
            return f"We don't want none of those. ({item})"
        if not hunter.has_item_in_kit(item):
            return f"You don't have a {item} to sell."
        hunter.remove_item_from_kit(item)
        hunter.change_gold(buyback)
        logger.info(f"{hunter.get_hunter_name()} sold {item} for {buyback} gold")
        return f"Pleasure doin' business with you. Here's {buyback} gold for the {item}."
