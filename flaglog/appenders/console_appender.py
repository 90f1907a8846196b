"""Console appender with optional ANSI colors"""

import sys
from typing import Optional, TextIO

from flaglog.appenders.base_appender import BaseAppender
from flaglog.core.event import Event
from flaglog.core.level import Level
from flaglog.formatters.base_formatter import BaseFormatter


class ConsoleAppender(BaseAppender):
    """Write events to standard output, one line each."""

    def __init__(
        self,
        name: str = "console",
        levels: Level = Level.ALL,
        colored: bool = False,
        stream: Optional[TextIO] = None,
        formatter: Optional[BaseFormatter] = None,
    ):
        """
        Initialize console appender.

        Args:
            name: Appender name
            levels: Ranks to receive (default: all)
            colored: Wrap lines in the rank's ANSI color
            stream: Output stream (default: sys.stdout at write time)
            formatter: Event formatter (default: TextFormatter)
        """
        super().__init__(name, levels, formatter)
        self.colored = colored
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        """Target stream; sys.stdout is looked up on every access."""
        return self._stream if self._stream is not None else sys.stdout

    def append(self, event: Event) -> None:
        """Write event to the console."""
        msg = self.format(event)

        if self.colored:
            msg = f"{event.level.color_code}{msg}{event.level.reset_code}"

        stream = self.stream
        stream.write(msg + "\n")
        stream.flush()

    def flush(self) -> None:
        """Flush stream."""
        self.stream.flush()
