"""Logger builder pattern"""

from dataclasses import replace
from pathlib import Path
from typing import List, Optional, Tuple, Union

from flaglog.core.logger import Logger
from flaglog.core.logger_config import LoggerConfig
from flaglog.core.level import Level
from flaglog.appenders.console_appender import ConsoleAppender
from flaglog.appenders.file_appender import FileAppender
from flaglog.formatters.base_formatter import BaseFormatter


class LoggerBuilder:
    """
    Builder pattern for logger construction.

    Appenders are registered in the order they are configured: console
    first, then files, then custom appenders. A builder with nothing
    configured produces the Logger default (one console appender),
    unless a configuration was applied with with_config().
    """

    def __init__(self):
        self._config = LoggerConfig(console_output=False)
        self._console_enabled = False
        self._console_levels = Level.ALL
        self._formatter: Optional[BaseFormatter] = None
        self._files: List[Tuple[Path, Level]] = []
        self._custom_appenders = []
        self._from_config = False

    def with_config(self, config: LoggerConfig) -> "LoggerBuilder":
        """Start from a copy of an existing configuration."""
        self._config = replace(config)
        self._from_config = True
        self._console_enabled = config.console_output
        self._console_levels = config.console_levels
        return self

    def with_name(self, name: str) -> "LoggerBuilder":
        """Set logger name."""
        self._config.name = name
        return self

    def with_console(
        self,
        colored: bool = False,
        levels: Union[Level, str] = Level.ALL,
    ) -> "LoggerBuilder":
        """Enable console output."""
        if isinstance(levels, str):
            levels = Level.from_string(levels)
        self._console_enabled = True
        self._console_levels = levels
        self._config.colored_output = colored
        return self

    def with_file(
        self,
        filepath: Union[str, Path],
        levels: Union[Level, str] = Level.ALL,
    ) -> "LoggerBuilder":
        """Add file output. May be called more than once."""
        if isinstance(levels, str):
            levels = Level.from_string(levels)
        self._files.append((Path(filepath), levels))
        return self

    def with_formatter(self, formatter: BaseFormatter) -> "LoggerBuilder":
        """Use one formatter for the console and file appenders."""
        self._formatter = formatter
        return self

    def add_appender(self, appender) -> "LoggerBuilder":
        """
        Add a custom appender.

        Args:
            appender: Any object with name, levels and append(event)

        Returns:
            Self for method chaining
        """
        self._custom_appenders.append(appender)
        return self

    def build(self) -> Logger:
        """Build and return configured logger."""
        formatter = self._formatter or self._config.create_formatter()
        appenders = []

        if self._console_enabled:
            appenders.append(ConsoleAppender(
                levels=self._console_levels,
                colored=self._config.colored_output,
                formatter=formatter,
            ))

        for index, (path, levels) in enumerate(self._files):
            name = "file" if index == 0 else f"file-{index}"
            appenders.append(FileAppender(path, name=name, levels=levels, formatter=formatter))

        appenders.extend(self._custom_appenders)

        if not appenders and not self._from_config:
            return Logger(self._config.name)
        return Logger(self._config.name, appenders)
