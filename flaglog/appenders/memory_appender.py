"""In-memory appender, mostly for tests and inspection"""

from typing import List

from flaglog.core.event import Event
from flaglog.core.level import Level


class MemoryAppender:
    """Keep every received event in a list."""

    def __init__(self, name: str = "memory", levels: Level = Level.ALL):
        self.name = name
        self.levels = levels if isinstance(levels, Level) else Level(levels)
        self.events: List[Event] = []

    def append(self, event: Event) -> None:
        self.events.append(event)

    @property
    def messages(self) -> list:
        """Payloads of the received events, in arrival order."""
        return [event.message for event in self.events]

    def clear(self) -> None:
        self.events.clear()

    def __len__(self) -> int:
        return len(self.events)

    def __repr__(self) -> str:
        return f"MemoryAppender(name={self.name!r}, events={len(self.events)})"
