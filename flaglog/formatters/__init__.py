"""
Event formatters module

Provides formatter implementations for controlling appender output.
"""

from flaglog.formatters.base_formatter import BaseFormatter
from flaglog.formatters.text_formatter import TextFormatter
from flaglog.formatters.compact_formatter import CompactFormatter

__all__ = [
    "BaseFormatter",
    "TextFormatter",
    "CompactFormatter",
]
