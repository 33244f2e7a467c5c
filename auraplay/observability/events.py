"""
Adaptation decision events.

Every rule that fires emits one AdaptationEvent describing the adjustment
and the before/after values. Sinks are purely diagnostic: nothing they do
feeds back into the settings.

Sinks:
    - NullEventSink: drops everything (unit tests, pure calls)
    - ConsoleEventSink: "[Adaptive] ..." lines on stdout
    - JsonlEventSink: one JSON object per line, daily rotation
    - CollectingEventSink: keeps events in memory (API traces)
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Protocol, Tuple


@dataclass
class AdaptationEvent:
    """One fired adaptation rule."""
    game: str
    rule: str
    message: str
    changes: Dict[str, Tuple[Any, Any]] = field(default_factory=dict)
    inputs: Dict[str, Any] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "game": self.game,
            "rule": self.rule,
            "message": self.message,
            "changes": {
                name: {"before": before, "after": after}
                for name, (before, after) in self.changes.items()
            },
            "inputs": self.inputs,
            "timestamp": self.timestamp.isoformat(),
        }


class EventSink(Protocol):
    """Anything that consumes adaptation events."""
    def emit(self, event: AdaptationEvent) -> None: ...


class NullEventSink:
    def emit(self, event: AdaptationEvent) -> None:
        return None


class ConsoleEventSink:
    """Prints events the way the games' debug console shows them."""

    def __init__(self, prefix: str = "[Adaptive]"):
        self.prefix = prefix

    def emit(self, event: AdaptationEvent) -> None:
        print(f"{self.prefix} {event.message}")


class CollectingEventSink:
    """Keeps every event in order of emission."""

    def __init__(self):
        self.events: List[AdaptationEvent] = []

    def emit(self, event: AdaptationEvent) -> None:
        self.events.append(event)

    def for_game(self, game: str) -> List[AdaptationEvent]:
        return [e for e in self.events if e.game == game]

    def to_list(self) -> List[Dict[str, Any]]:
        return [e.to_dict() for e in self.events]

    def clear(self) -> None:
        self.events.clear()


class JsonlEventSink:
    """
    Logs adaptation events for offline review of tuning decisions.

    Log files are stored in log_dir with daily rotation.
    Each line is AdaptationEvent.to_dict().
    """

    def __init__(self, log_dir: str = "logs/adaptation"):
        self.log_dir = log_dir
        self._ensure_dir()

    def _ensure_dir(self):
        os.makedirs(self.log_dir, exist_ok=True)

    def _get_log_path(self, when: Optional[datetime] = None) -> str:
        date_str = (when or datetime.now()).strftime("%Y-%m-%d")
        return os.path.join(self.log_dir, f"adaptation_{date_str}.jsonl")

    def emit(self, event: AdaptationEvent) -> None:
        try:
            with open(self._get_log_path(event.timestamp), "a", encoding="utf-8") as f:
                f.write(json.dumps(event.to_dict(), ensure_ascii=False, default=str) + "\n")
        except Exception as e:
            print(f"[JsonlEventSink] Failed to write log: {e}")


NULL_SINK = NullEventSink()


def make_event_sink(name: str, log_dir: str = "logs/adaptation") -> EventSink:
    """Build a sink from its configured name (none, console, jsonl)."""
    name = (name or "none").strip().lower()
    if name == "console":
        return ConsoleEventSink()
    if name == "jsonl":
        return JsonlEventSink(log_dir)
    if name == "none":
        return NULL_SINK
    raise ValueError(f"Unknown event sink: {name!r}")
