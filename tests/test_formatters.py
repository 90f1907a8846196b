"""Tests for event formatters"""

from flaglog import Event, Level, LocationInfo, Logger
from flaglog.formatters import BaseFormatter, CompactFormatter, TextFormatter


LOCATION = LocationInfo(file="svc.py", line=40, column=9, function="handle")


def make_event(level=Level.INFO, message="hello", error=None):
    return Event.create(level, Logger("svc", appenders=[]), LOCATION,
                        message=message, error=error)


class TestTextFormatter:

    def test_default_template(self):
        text = TextFormatter().format(make_event())
        assert "[INFO   ]" in text
        assert "[svc]" in text
        assert "[svc.py:handle:40:9]" in text
        assert text.endswith("hello")

    def test_error_placeholder(self):
        event = make_event(level=Level.ERROR, message="failed", error=ValueError("bad id"))
        text = TextFormatter().format(event)
        assert text.endswith("failed (ValueError: bad id)")

    def test_custom_template(self):
        formatter = TextFormatter("{name}/{function}:{line} {level} {message}")
        assert formatter(make_event()) == "svc/handle:40 INFO hello"

    def test_raw_timestamp(self):
        event = make_event()
        assert TextFormatter("{timestamp}").format(event) == event.timestamp

    def test_structured_payload(self):
        formatter = TextFormatter("{message}")
        assert formatter.format(make_event(message={"order": 7, "state": "paid"})) == "order=7 state=paid"

    def test_unknown_placeholder(self):
        text = TextFormatter("{nope} {message}").format(make_event())
        assert text == "[FORMAT ERROR: 'nope'] hello"


class TestCompactFormatter:

    def test_minimal(self):
        formatter = CompactFormatter(include_timestamp=False)
        assert formatter.format(make_event(level=Level.WARNING)) == "WRN: hello"

    def test_with_logger_and_error(self):
        formatter = CompactFormatter(include_timestamp=False, include_logger=True)
        event = make_event(level=Level.FATAL, message="down", error=OSError("eio"))
        assert formatter.format(event) == "[svc] FTL: down (OSError: eio)"

    def test_with_timestamp(self):
        event = make_event()
        text = CompactFormatter().format(event)
        assert text.startswith(event.time.strftime("%H:%M:%S"))


class TestBaseFormatter:

    def test_subclass_is_callable(self):
        class Upper(BaseFormatter):
            def format(self, event):
                return self.render_message(event).upper()

        assert Upper()(make_event()) == "HELLO"
