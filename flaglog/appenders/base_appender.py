"""
Appender interface

Any object with name, levels and append(event) can receive events.
"""

from abc import ABC, abstractmethod
from typing import Optional, Protocol, runtime_checkable

from flaglog.core.event import Event
from flaglog.core.level import Level
from flaglog.formatters.base_formatter import BaseFormatter
from flaglog.formatters.text_formatter import TextFormatter


@runtime_checkable
class Appender(Protocol):
    """
    Structural contract for log destinations.

    append() returns nothing and reports nothing back to the logger.
    flush() and close() are optional and called only if defined.
    """

    name: str
    levels: Level

    def append(self, event: Event) -> None:
        ...


class BaseAppender(ABC):
    """
    Convenience base class for appenders that render events as text.

    Inheriting from it is optional; the logger only relies on the
    Appender contract.
    """

    def __init__(
        self,
        name: str,
        levels: Level = Level.ALL,
        formatter: Optional[BaseFormatter] = None,
    ):
        """
        Initialize appender.

        Args:
            name: Human-readable appender name
            levels: Ranks this appender wants to receive
            formatter: Event formatter (default: TextFormatter)
        """
        if not isinstance(levels, Level):
            levels = Level(levels)
        self.name = name
        self.levels = levels
        self.formatter = formatter or TextFormatter()

    def format(self, event: Event) -> str:
        """Render an event with this appender's formatter."""
        return self.formatter.format(event)

    @abstractmethod
    def append(self, event: Event) -> None:
        """
        Deliver one event.

        Args:
            event: The event to write
        """
        pass

    def __repr__(self) -> str:
        """String representation."""
        return f"{type(self).__name__}(name={self.name!r}, levels={self.levels})"
