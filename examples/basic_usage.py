#!/usr/bin/env python3
"""Basic usage example"""

from flaglog import Level, Logger, LoggerBuilder, MemoryAppender


class ErrorCollector:
    """Any object with name, levels and append() is an appender."""

    name = "errors"
    levels = Level.ERROR | Level.FATAL

    def __init__(self):
        self.seen = []

    def append(self, event):
        self.seen.append(f"{event.level}: {event.text}")


def main():
    # Default logger: one console appender receiving every rank
    Logger("example").info("Application started")

    collector = ErrorCollector()
    memory = MemoryAppender()

    # Builder: console for info and above, file for errors, custom appenders
    logger = (LoggerBuilder()
        .with_name("example")
        .with_console(colored=True, levels="info|warning|error|fatal")
        .with_file("logs/example.log", levels=Level.ERROR | Level.FATAL)
        .add_appender(collector)
        .add_appender(memory)
        .build())

    logger.trace("This is trace")
    logger.debug({"step": "init", "items": 3})
    logger.info("This is info")
    logger.warning("This is warning")
    try:
        {}["missing"]
    except KeyError as e:
        logger.error("Lookup failed", e)
    logger.fatal("This is fatal")

    print(f"collected {len(collector.seen)} errors, {len(memory)} events in memory")

    logger.close()


if __name__ == "__main__":
    main()
