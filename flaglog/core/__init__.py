"""
Core module for logger system

This module contains the fundamental classes:
- Level: Severity bitmask
- LocationInfo: Call-site location
- Event: Immutable log event
- Logger: Main logger class
- LoggerConfig: Configuration management
- LoggerBuilder: Builder pattern for logger construction
"""

from flaglog.core.level import Level
from flaglog.core.location import LocationInfo
from flaglog.core.event import Event
from flaglog.core.logger import Logger
from flaglog.core.logger_config import LoggerConfig
from flaglog.core.logger_builder import LoggerBuilder

__all__ = ["Level", "LocationInfo", "Event", "Logger", "LoggerConfig", "LoggerBuilder"]
