"""
Log event data structure

One immutable record per log call, shared by every appender that
receives it.
"""

from __future__ import annotations

import time
import weakref
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING, Any, Dict, Optional

from flaglog.core.level import Level
from flaglog.core.location import LocationInfo

if TYPE_CHECKING:
    from flaglog.core.logger import Logger


_last_seconds = 0


def current_timestamp() -> str:
    """
    Whole seconds since the epoch, as a string.

    Never lower than the previous stamp, so a wall clock stepping
    backwards repeats the last second instead.
    """
    global _last_seconds
    _last_seconds = max(_last_seconds, int(time.time()))
    return str(_last_seconds)


def render_message(message: Any) -> str:
    """
    Render a payload as text.

    Args:
        message: None, str, bytes, a mapping, or any object with __str__

    Returns:
        '' for None, the string itself, UTF-8 decoded bytes,
        'key=value' pairs for mappings, str(message) otherwise
    """
    if message is None:
        return ""
    if isinstance(message, str):
        return message
    if isinstance(message, (bytes, bytearray)):
        return bytes(message).decode("utf-8", errors="replace")
    if isinstance(message, Mapping):
        return " ".join(f"{key}={value}" for key, value in message.items())
    return str(message)


@dataclass(frozen=True)
class Event:
    """
    Log event data structure.

    Contains everything known about a single log occurrence. The
    owning logger is held through a weak reference so events kept by
    appenders never extend the logger's lifetime.
    """

    location_info: LocationInfo
    timestamp: str
    level: Level
    name: str
    logger_ref: Optional[weakref.ReferenceType] = field(
        default=None, repr=False, compare=False
    )
    message: Any = None
    error: Optional[BaseException] = None

    def __post_init__(self):
        """Validate event after initialization."""
        if not isinstance(self.level, Level):
            raise TypeError("level must be a Level")
        if not self.level.is_rank:
            raise ValueError(f"event level must be a single rank, got {self.level}")

    @classmethod
    def create(
        cls,
        level: Level,
        logger: "Logger",
        location_info: LocationInfo,
        message: Any = None,
        error: Optional[BaseException] = None,
    ) -> "Event":
        """Create an event stamped with the current time and logger name."""
        return cls(
            location_info=location_info,
            timestamp=current_timestamp(),
            level=level,
            name=logger.name,
            logger_ref=weakref.ref(logger),
            message=message,
            error=error,
        )

    @property
    def logger(self) -> Optional["Logger"]:
        """The logger that produced this event, or None once it is gone."""
        if self.logger_ref is None:
            return None
        return self.logger_ref()

    @property
    def time(self) -> datetime:
        """Timestamp as a local datetime."""
        return datetime.fromtimestamp(int(self.timestamp))

    @property
    def text(self) -> str:
        """Payload rendered as text."""
        return render_message(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert event to dictionary.

        Returns:
            Dictionary representation (message and error left as-is)
        """
        return {
            "timestamp": self.timestamp,
            "level": self.level.label,
            "name": self.name,
            "file": self.location_info.file,
            "line": self.location_info.line,
            "column": self.location_info.column,
            "function": self.location_info.function,
            "message": self.message,
            "error": self.error,
        }

    def __str__(self) -> str:
        """String representation."""
        text = (
            f"[{self.time.strftime('%Y-%m-%d %H:%M:%S')}] "
            f"[{self.level.label:7}] "
            f"[{self.name}] "
            f"{self.text}"
        )
        if self.error is not None:
            text += f" ({type(self.error).__name__}: {self.error})"
        return text
