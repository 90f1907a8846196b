"""
Compact formatter for minimal log output

Produces concise single-line events
"""

from flaglog.core.event import Event
from flaglog.core.level import Level
from flaglog.formatters.base_formatter import BaseFormatter

LEVEL_ABBREVIATIONS = {
    Level.TRACE: "TRC",
    Level.DEBUG: "DBG",
    Level.INFO: "INF",
    Level.WARNING: "WRN",
    Level.ERROR: "ERR",
    Level.FATAL: "FTL",
}


class CompactFormatter(BaseFormatter):
    """Format events in a compact single-line format."""

    def __init__(self, include_timestamp: bool = True, include_logger: bool = False):
        """
        Initialize compact formatter.

        Args:
            include_timestamp: Include timestamp in output
            include_logger: Include logger name in output

        Example:
            # Minimal format: "INF: message"
            formatter = CompactFormatter(include_timestamp=False)

            # With timestamp: "12:34:56 INF: message"
            formatter = CompactFormatter()

            # With logger: "12:34:56 [myapp] INF: message"
            formatter = CompactFormatter(include_logger=True)
        """
        self.include_timestamp = include_timestamp
        self.include_logger = include_logger

    def format(self, event: Event) -> str:
        """
        Format event in compact format.

        Args:
            event: Event to format

        Returns:
            Compact formatted string
        """
        parts = []

        if self.include_timestamp:
            parts.append(event.time.strftime("%H:%M:%S"))

        if self.include_logger and event.name:
            parts.append(f"[{event.name}]")

        abbrev = LEVEL_ABBREVIATIONS.get(event.level, event.level.label[:3])
        parts.append(f"{abbrev}:")

        parts.append(self.render_message(event))

        error = self.render_error(event)
        if error:
            parts.append(f"({error})")

        return " ".join(parts)

    def __repr__(self) -> str:
        """String representation."""
        return f"CompactFormatter(timestamp={self.include_timestamp}, logger={self.include_logger})"
