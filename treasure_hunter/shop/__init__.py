"""The shop: buying and selling kit items."""

from treasure_hunter.shop.shop import (
    Shop,
    ShopChoice,
    DEFAULT_PRICES,
    SELL_MARKDOWN,
    parse_shop_choice,
)

__all__ = [
    "Shop",
    "ShopChoice",
    "DEFAULT_PRICES",
    "SELL_MARKDOWN",
    "parse_shop_choice",
]
