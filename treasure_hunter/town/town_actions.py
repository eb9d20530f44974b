"""
Town action IDs and the result every town action returns.

Key principle:
- Every action reports through a TownActionResult; the town's latest news
  is only a copy of the last result's message.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


# Stable action IDs (string-based for UI safety)
TOWN_ACTIONS = {
    "town:arrive",
    "town:leave",
    "town:dig",
    "town:shop",
    "town:look_for_trouble",
    "town:search_treasure",
}


@dataclass
class TownActionResult:
    """Outcome of one town action."""

    action: str
    message: str
    success: bool = True
    gold_change: int = 0
    item_lost: Optional[str] = None
    treasure: Optional[str] = None
    error: Optional[str] = None
    details: dict[str, Any] = field(default_factory=dict)

    def __bool__(self) -> bool:
        return self.success

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        result = {
            "action": self.action,
            "message": self.message,
            "success": self.success,
            "gold_change": self.gold_change,
            "details": self.details,
        }
        if self.item_lost:
            result["item_lost"] = self.item_lost
        if self.treasure:
            result["treasure"] = self.treasure
        if self.error:
            result["error"] = self.error
        return result
