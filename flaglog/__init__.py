"""
BSD 3-Clause License

Copyright (c) 2021, 🍀☀🌕🌥 🌊
All rights reserved.

flaglog - A minimal structured logging library
Events are fanned out synchronously to pluggable appenders
"""

__version__ = "1.0.0"
__author__ = "kcenon"
__email__ = "kcenon@naver.com"

from flaglog.core.level import Level
from flaglog.core.location import LocationInfo
from flaglog.core.event import Event
from flaglog.core.logger import Logger
from flaglog.core.logger_builder import LoggerBuilder
from flaglog.core.logger_config import LoggerConfig
from flaglog.appenders import Appender, BaseAppender, ConsoleAppender, FileAppender, MemoryAppender

# Import submodules (not all classes by default)
from flaglog import formatters

__all__ = [
    "Level",
    "LocationInfo",
    "Event",
    "Logger",
    "LoggerBuilder",
    "LoggerConfig",
    "Appender",
    "BaseAppender",
    "ConsoleAppender",
    "FileAppender",
    "MemoryAppender",
    "formatters",
]
