"""
Town snapshot + event export.

- snapshot: what the town looks like right now
- events: what happened since the driver last flushed, keyed by action id
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from treasure_hunter.town.town_actions import TOWN_ACTIONS

if TYPE_CHECKING:
    from treasure_hunter.town.town_engine import Town


@dataclass
class TownEvent:
    type: str
    payload: dict[str, Any]

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "payload": self.payload}


@dataclass
class TownEventBuffer:
    _events: list[TownEvent] = field(default_factory=list)

    def emit(self, type: str, payload: dict[str, Any]) -> None:
        if type not in TOWN_ACTIONS:
            raise ValueError(f"Unknown town action: {type}")
        self._events.append(TownEvent(type=type, payload=payload))

    def pending(self) -> int:
        return len(self._events)

    def flush(self) -> list[dict[str, Any]]:
        out = [e.to_dict() for e in self._events]
        self._events.clear()
        return out


def build_town_snapshot(town: "Town") -> dict[str, Any]:
    """
    Return a pure-JSON snapshot of a town suitable for CLI display.

    No live objects leak out; the hunter is reduced to a name.
    """
    hunter = town.hunter
    return {
        "version": 1,
        "terrain": town.terrain.name,
        "needed_item": town.terrain.needed_item,
        "difficulty": town.difficulty.value,
        "tough_town": town.tough_town,
        "easy_town": town.easy_town,
        "easy_mode": town.is_easy_mode,
        "dig_status": town.dig_status.value,
        "searched": town.searched,
        "treasure": town.get_current_treasure(),
        "hunter": hunter.get_hunter_name() if hunter is not None else None,
        "latest_news": town.get_latest_news(),
    }
