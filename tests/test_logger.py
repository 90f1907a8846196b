"""Tests for the logger dispatch loop"""

import inspect
import threading
from unittest.mock import Mock

import pytest

from flaglog import ConsoleAppender, Level, LocationInfo, Logger, MemoryAppender


RANK_METHODS = [
    ("trace", Level.TRACE),
    ("debug", Level.DEBUG),
    ("info", Level.INFO),
    ("warning", Level.WARNING),
    ("error", Level.ERROR),
    ("fatal", Level.FATAL),
]


class RecordingAppender:
    """Appender that records calls into a shared list."""

    def __init__(self, name, calls, levels=Level.ALL):
        self.name = name
        self.levels = levels
        self.calls = calls

    def append(self, event):
        self.calls.append((self.name, event))


class FailingAppender:
    """Appender whose append always raises."""

    name = "broken"
    levels = Level.ALL

    def append(self, event):
        raise IOError("disk full")


class BrokenLevelsAppender:
    """Appender whose levels cannot be read as a mask."""

    name = "no-levels"
    levels = None

    def append(self, event):
        pass


class FailingFlushAppender:
    """Appender whose flush and close always raise."""

    name = "stuck"
    levels = Level.ALL

    def append(self, event):
        pass

    def flush(self):
        raise OSError("flush failed")

    def close(self):
        raise OSError("close failed")


class TestConstruction:

    def test_defaults_to_one_console_appender(self):
        logger = Logger()
        assert logger.name == "Logger"
        assert len(logger.appenders) == 1
        assert isinstance(logger.appenders[0], ConsoleAppender)

    def test_empty_list_means_no_appenders(self):
        logger = Logger("quiet", appenders=[])
        assert logger.appenders == ()

    def test_keeps_insertion_order(self):
        a, b, c = MemoryAppender("a"), MemoryAppender("b"), MemoryAppender("c")
        logger = Logger(appenders=[a, b, c])
        assert logger.appenders == (a, b, c)

    def test_rejects_non_appender(self):
        with pytest.raises(TypeError):
            Logger(appenders=[object()])


class TestDispatch:

    @pytest.mark.parametrize("method,level", RANK_METHODS)
    def test_one_event_per_appender(self, method, level):
        first, second = MemoryAppender("first"), MemoryAppender("second")
        logger = Logger("app", appenders=[first, second])

        getattr(logger, method)("payload")

        for appender in (first, second):
            assert len(appender) == 1
            event = appender.events[0]
            assert event.level == level
            assert event.message == "payload"
            assert event.name == "app"
            assert event.logger is logger

    def test_same_event_object_for_every_appender(self):
        first, second = MemoryAppender("first"), MemoryAppender("second")
        logger = Logger(appenders=[first, second])
        logger.info({"user": "ann"})
        assert first.events[0] is second.events[0]

    def test_invocation_follows_registration_order(self):
        calls = []
        logger = Logger(appenders=[
            RecordingAppender("a", calls),
            RecordingAppender("b", calls),
            RecordingAppender("c", calls),
        ])

        logger.info("one")
        logger.error("two")

        assert [name for name, _ in calls] == ["a", "b", "c", "a", "b", "c"]

    def test_payload_and_error_are_optional(self):
        memory = MemoryAppender()
        logger = Logger(appenders=[memory])
        error = RuntimeError("boom")

        logger.debug()
        logger.error("failed", error)

        assert memory.events[0].message is None
        assert memory.events[1].error is error

    def test_no_appenders_is_silent(self, capsys):
        logger = Logger(appenders=[])
        for method, _ in RANK_METHODS:
            getattr(logger, method)("nothing")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""
        assert logger.get_metrics()["logged"] == 6

    def test_timestamps_non_decreasing(self):
        memory = MemoryAppender()
        logger = Logger(appenders=[memory])
        logger.info("first")
        logger.info("second")
        first, second = memory.events
        assert int(first.timestamp) <= int(second.timestamp)

    def test_generic_log(self):
        memory = MemoryAppender()
        logger = Logger(appenders=[memory])
        logger.log(Level.WARNING, "careful")
        logger.log(16, "raw rank")
        assert [e.level for e in memory.events] == [Level.WARNING, Level.ERROR]

    def test_generic_log_rejects_masks(self):
        logger = Logger(appenders=[])
        with pytest.raises(ValueError):
            logger.log(Level.ERROR | Level.FATAL, "ambiguous")


class TestLevelFiltering:
    """The logger enforces each appender's level mask before append()."""

    def test_mask_decides_who_receives(self):
        errors_only = Mock()
        errors_only.name = "A"
        errors_only.levels = Level.ERROR | Level.FATAL
        everything = Mock()
        everything.name = "B"
        everything.levels = Level.ALL
        logger = Logger(appenders=[errors_only, everything])

        logger.info("x")

        errors_only.append.assert_not_called()
        everything.append.assert_called_once()
        event = everything.append.call_args[0][0]
        assert event.level == Level.INFO
        assert event.message == "x"

        logger.fatal("y")

        errors_only.append.assert_called_once()
        fatal_event = errors_only.append.call_args[0][0]
        assert fatal_event is everything.append.call_args[0][0]
        assert fatal_event.level == Level.FATAL

    def test_filtered_events_are_counted(self):
        logger = Logger(appenders=[MemoryAppender(levels=Level.ERROR)])
        logger.info("skipped")
        logger.error("kept")
        metrics = logger.get_metrics()
        assert metrics["filtered"] == 1
        assert metrics["dispatched"] == 1

    def test_raw_integer_mask_on_custom_appender(self):
        calls = []
        logger = Logger(appenders=[RecordingAppender("raw", calls, levels=0b1000)])
        logger.info("no")
        logger.warning("yes")
        assert [event.message for _, event in calls] == ["yes"]


class TestErrorIsolation:

    def test_failing_appender_does_not_raise(self, capsys):
        memory = MemoryAppender()
        logger = Logger(appenders=[FailingAppender(), memory])

        logger.error("still delivered")

        assert memory.messages == ["still delivered"]
        assert "Appender 'broken' error: disk full" in capsys.readouterr().err
        assert logger.get_metrics()["failed"] == 1

    def test_unreadable_levels_do_not_raise(self, capsys):
        memory = MemoryAppender()
        logger = Logger(appenders=[BrokenLevelsAppender(), memory])

        logger.info("x")

        assert memory.messages == ["x"]
        assert "Appender 'no-levels' error" in capsys.readouterr().err
        assert logger.get_metrics()["failed"] == 1

    def test_failing_flush_and_close_reach_later_appenders(self, capsys):
        later = Mock()
        later.name = "later"
        later.levels = Level.ALL
        logger = Logger(appenders=[FailingFlushAppender(), later])

        logger.flush()
        logger.close()

        later.flush.assert_called_once()
        later.close.assert_called_once()
        err = capsys.readouterr().err
        assert "Appender 'stuck' flush error: flush failed" in err
        assert "Appender 'stuck' close error: close failed" in err


class TestLocationCapture:

    def test_location_is_the_call_site(self):
        memory = MemoryAppender()
        logger = Logger(appenders=[memory])

        line = inspect.currentframe().f_lineno + 1
        logger.info("here")

        location = memory.events[0].location_info
        assert location.file == __file__
        assert location.line == line
        assert location.function == "test_location_is_the_call_site"
        assert location.column >= 0

    def test_generic_log_location(self):
        memory = MemoryAppender()
        logger = Logger(appenders=[memory])

        line = inspect.currentframe().f_lineno + 1
        logger.log(Level.INFO, "here")

        assert memory.events[0].location_info.line == line

    def test_stacklevel_skips_wrappers(self):
        memory = MemoryAppender()
        logger = Logger(appenders=[memory])

        def audit(message):
            logger.warning(message, stacklevel=2)

        line = inspect.currentframe().f_lineno + 1
        audit("wrapped")

        location = memory.events[0].location_info
        assert location.line == line
        assert location.function == "test_stacklevel_skips_wrappers"

    def test_explicit_location(self):
        memory = MemoryAppender()
        logger = Logger(appenders=[memory])
        location = LocationInfo(file="remote.py", line=1, column=1, function="job")
        logger.info("supplied", location=location)
        assert memory.events[0].location_info is location


class TestAppenderManagement:

    def test_add_and_remove(self):
        logger = Logger(appenders=[])
        memory = MemoryAppender("mem")
        logger.add_appender(memory)
        logger.info("one")
        assert logger.remove_appender("mem") is True
        assert logger.remove_appender("mem") is False
        logger.info("two")
        assert memory.messages == ["one"]

    def test_concurrent_adds_are_not_lost(self):
        logger = Logger(appenders=[])

        def add_many(prefix):
            for i in range(50):
                logger.add_appender(MemoryAppender(f"{prefix}-{i}"))

        threads = [threading.Thread(target=add_many, args=(n,)) for n in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(logger.appenders) == 200

    def test_flush_and_close_forwarded(self):
        appender = Mock()
        appender.name = "mock"
        appender.levels = Level.ALL
        logger = Logger(appenders=[appender, MemoryAppender()])

        logger.flush()
        logger.close()

        appender.flush.assert_called_once()
        appender.close.assert_called_once()

    def test_repr(self):
        logger = Logger("svc", appenders=[MemoryAppender("mem")])
        assert repr(logger) == "Logger(name='svc', appenders=['mem'])"
