"""File appender"""

from pathlib import Path
from typing import Optional, Union

from flaglog.appenders.base_appender import BaseAppender
from flaglog.core.event import Event
from flaglog.core.level import Level
from flaglog.formatters.base_formatter import BaseFormatter


class FileAppender(BaseAppender):
    """Append events to a text file."""

    def __init__(
        self,
        filepath: Union[str, Path],
        name: str = "file",
        levels: Level = Level.ALL,
        mode: str = "a",
        encoding: str = "utf-8",
        formatter: Optional[BaseFormatter] = None,
    ):
        """
        Initialize file appender.

        Args:
            filepath: Path to log file (parent directories are created)
            name: Appender name
            levels: Ranks to receive (default: all)
            mode: File open mode (default: 'a' for append)
            encoding: File encoding (default: 'utf-8')
            formatter: Event formatter (default: TextFormatter)
        """
        super().__init__(name, levels, formatter)
        self.filepath = Path(filepath)
        self.mode = mode
        self.encoding = encoding
        self._file = None
        self._open()

    def _open(self):
        """Open log file."""
        self.filepath.parent.mkdir(parents=True, exist_ok=True)
        self._file = open(self.filepath, self.mode, encoding=self.encoding)

    @property
    def closed(self) -> bool:
        return self._file is None

    def append(self, event: Event) -> None:
        """Write event to file. Events arriving after close() are dropped."""
        if self._file:
            self._file.write(self.format(event) + "\n")

    def flush(self) -> None:
        """Flush file buffer."""
        if self._file:
            self._file.flush()

    def close(self) -> None:
        """Close file."""
        if self._file:
            self._file.close()
            self._file = None
