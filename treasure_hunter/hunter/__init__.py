"""The hunter and their kit."""

from treasure_hunter.hunter.hunter import Hunter, KIT_SIZE

__all__ = [
    "Hunter",
    "KIT_SIZE",
]
