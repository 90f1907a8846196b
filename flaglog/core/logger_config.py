"""
Logger configuration management

Plain dataclass presets; no environment variables or config files.
"""

from dataclasses import dataclass
from typing import List, Optional, Union

from flaglog.core.level import Level


@dataclass
class LoggerConfig:
    """Logger configuration."""

    # Basic settings
    name: str = "Logger"

    # Console settings
    console_output: bool = True
    colored_output: bool = False
    console_levels: Union[Level, str, int] = Level.ALL

    # Format settings
    template: Optional[str] = None
    timestamp_format: str = "%Y-%m-%d %H:%M:%S"
    compact: bool = False

    def __post_init__(self):
        """Validate configuration after initialization."""
        if not isinstance(self.name, str):
            raise TypeError("name must be a string")
        if self.template is not None and self.compact:
            raise ValueError("template cannot be combined with compact output")

        # Accept 'error|fatal' style strings and raw masks
        if isinstance(self.console_levels, str):
            self.console_levels = Level.from_string(self.console_levels)
        elif not isinstance(self.console_levels, Level):
            self.console_levels = Level(self.console_levels)

        if int(self.console_levels) == 0:
            raise ValueError("console_levels must enable at least one rank")

    def create_formatter(self):
        """Build the formatter described by this configuration."""
        from flaglog.formatters.compact_formatter import CompactFormatter
        from flaglog.formatters.text_formatter import TextFormatter

        if self.compact:
            return CompactFormatter(include_logger=True)
        return TextFormatter(self.template, timestamp_format=self.timestamp_format)

    def create_appenders(self) -> List:
        """Build the appenders described by this configuration."""
        from flaglog.appenders.console_appender import ConsoleAppender

        appenders = []
        if self.console_output:
            appenders.append(ConsoleAppender(
                levels=self.console_levels,
                colored=self.colored_output,
                formatter=self.create_formatter(),
            ))
        return appenders

    @classmethod
    def default(cls) -> "LoggerConfig":
        """Create default configuration."""
        return cls()

    @classmethod
    def debug_config(cls) -> "LoggerConfig":
        """Create configuration for debugging."""
        return cls(
            colored_output=True,
            console_levels=Level.ALL,
        )

    @classmethod
    def production_config(cls) -> "LoggerConfig":
        """Create configuration for production."""
        return cls(
            console_levels=Level.WARNING | Level.ERROR | Level.FATAL,
            colored_output=False,
            compact=True,
        )
