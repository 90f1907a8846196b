"""
Main Logger class - synchronous fan-out to appenders

Each call builds one Event and hands it, in registration order, to
every appender whose level mask matches the event's rank.
"""

from __future__ import annotations
from typing import TYPE_CHECKING, Any, Iterable, Optional, Tuple
import sys
import threading

from flaglog.core.level import Level
from flaglog.core.location import LocationInfo
from flaglog.core.event import Event

if TYPE_CHECKING:
    from flaglog.appenders.base_appender import Appender
    from flaglog.core.logger_config import LoggerConfig


DEFAULT_NAME = "Logger"


class Logger:
    """
    Main logger class.

    Filtering happens here: an appender is called only when
    appender.levels matches the event level. Appender failures are
    reported on stderr and never reach the caller.

    Thread Safety:
        add_appender/remove_appender swap an immutable tuple under a
        lock; dispatch reads a snapshot without locking. Appenders are
        not serialized and must guard themselves if shared across
        threads.
    """

    def __init__(
        self,
        name: str = DEFAULT_NAME,
        appenders: Optional[Iterable["Appender"]] = None,
    ):
        """
        Initialize logger.

        Args:
            name: Logger name, copied into every event
            appenders: Ordered appenders. None installs one
                       ConsoleAppender; an empty iterable installs none.
        """
        if appenders is None:
            from flaglog.appenders.console_appender import ConsoleAppender
            appenders = [ConsoleAppender()]

        self.name = name
        self._lock = threading.Lock()
        self._appenders: Tuple["Appender", ...] = ()
        self._metrics = {"logged": 0, "dispatched": 0, "filtered": 0, "failed": 0}

        for appender in appenders:
            self.add_appender(appender)

    @classmethod
    def from_config(cls, config: "LoggerConfig") -> "Logger":
        """Create a logger from a LoggerConfig."""
        return cls(name=config.name, appenders=config.create_appenders())

    @property
    def appenders(self) -> Tuple["Appender", ...]:
        """Registered appenders in dispatch order."""
        return self._appenders

    def add_appender(self, appender: "Appender") -> None:
        """
        Add an appender at the end of the dispatch order.

        Raises:
            TypeError: If the object lacks name, levels or append()
        """
        for attr in ("name", "levels"):
            if not hasattr(appender, attr):
                raise TypeError(f"appender must define {attr!r}")
        if not callable(getattr(appender, "append", None)):
            raise TypeError("appender must define append(event)")

        with self._lock:
            self._appenders = self._appenders + (appender,)

    def remove_appender(self, name: str) -> bool:
        """
        Remove the first appender with the given name.

        Returns:
            True if an appender was removed, False if not found
        """
        with self._lock:
            for i, appender in enumerate(self._appenders):
                if appender.name == name:
                    self._appenders = self._appenders[:i] + self._appenders[i + 1:]
                    return True
            return False

    def log(
        self,
        level: Level,
        message: Any = None,
        error: Optional[BaseException] = None,
        *,
        location: Optional[LocationInfo] = None,
        stacklevel: int = 1,
    ) -> None:
        """
        Log a message at an explicit rank.

        Args:
            level: A single rank
            message: Payload; anything renderable as text
            error: Exception associated with the event
            location: Call site; captured from the stack if omitted
            stacklevel: Frames above the caller to attribute the call to

        Raises:
            ValueError: If level is not a single rank
        """
        if not isinstance(level, Level):
            level = Level(level)
        if not level.is_rank:
            raise ValueError(f"level must be a single rank, got {level}")
        if location is None:
            location = LocationInfo.capture(stacklevel)
        self._dispatch(level, message, error, location)

    def _log(self, level, message, error, location, stacklevel):
        if location is None:
            # _log <- rank method <- caller
            location = LocationInfo.capture(stacklevel + 1)
        self._dispatch(level, message, error, location)

    def _dispatch(self, level, message, error, location):
        """Build the event and hand it to each matching appender."""
        event = Event.create(
            level=level,
            logger=self,
            location_info=location,
            message=message,
            error=error,
        )
        self._metrics["logged"] += 1

        for appender in self._appenders:
            try:
                if not level.matches(appender.levels):
                    self._metrics["filtered"] += 1
                    continue
                appender.append(event)
                self._metrics["dispatched"] += 1
            except Exception as e:
                self._metrics["failed"] += 1
                print(f"Appender '{appender.name}' error: {e}", file=sys.stderr)

    def trace(self, message: Any = None, error: Optional[BaseException] = None, *,
              location: Optional[LocationInfo] = None, stacklevel: int = 1) -> None:
        """Log trace message."""
        self._log(Level.TRACE, message, error, location, stacklevel)

    def debug(self, message: Any = None, error: Optional[BaseException] = None, *,
              location: Optional[LocationInfo] = None, stacklevel: int = 1) -> None:
        """Log debug message."""
        self._log(Level.DEBUG, message, error, location, stacklevel)

    def info(self, message: Any = None, error: Optional[BaseException] = None, *,
             location: Optional[LocationInfo] = None, stacklevel: int = 1) -> None:
        """Log info message."""
        self._log(Level.INFO, message, error, location, stacklevel)

    def warning(self, message: Any = None, error: Optional[BaseException] = None, *,
                location: Optional[LocationInfo] = None, stacklevel: int = 1) -> None:
        """Log warning message."""
        self._log(Level.WARNING, message, error, location, stacklevel)

    def error(self, message: Any = None, error: Optional[BaseException] = None, *,
              location: Optional[LocationInfo] = None, stacklevel: int = 1) -> None:
        """Log error message."""
        self._log(Level.ERROR, message, error, location, stacklevel)

    def fatal(self, message: Any = None, error: Optional[BaseException] = None, *,
              location: Optional[LocationInfo] = None, stacklevel: int = 1) -> None:
        """Log fatal message."""
        self._log(Level.FATAL, message, error, location, stacklevel)

    def _call_each(self, method_name: str) -> None:
        """Call an optional method on every appender; failures are reported."""
        for appender in self._appenders:
            try:
                method = getattr(appender, method_name, None)
                if method is not None:
                    method()
            except Exception as e:
                print(f"Appender '{appender.name}' {method_name} error: {e}", file=sys.stderr)

    def flush(self) -> None:
        """Flush every appender that supports it."""
        self._call_each("flush")

    def close(self) -> None:
        """Close every appender that supports it."""
        self._call_each("close")

    def get_metrics(self) -> dict:
        """Get dispatch counters."""
        return self._metrics.copy()

    def __repr__(self) -> str:
        """String representation."""
        names = [appender.name for appender in self._appenders]
        return f"Logger(name={self.name!r}, appenders={names})"
