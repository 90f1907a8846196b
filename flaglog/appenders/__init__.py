"""Appenders module - Log event destinations"""

from flaglog.appenders.base_appender import Appender, BaseAppender
from flaglog.appenders.console_appender import ConsoleAppender
from flaglog.appenders.file_appender import FileAppender
from flaglog.appenders.memory_appender import MemoryAppender

__all__ = [
    "Appender",
    "BaseAppender",
    "ConsoleAppender",
    "FileAppender",
    "MemoryAppender",
]
