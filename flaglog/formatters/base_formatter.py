"""
Base formatter interface

Formatters turn events into single lines of text.
"""

from abc import ABC, abstractmethod
from flaglog.core.event import Event, render_message


class BaseFormatter(ABC):
    """
    Abstract base class for event formatters.

    Formatters convert Event objects into formatted strings.
    """

    @abstractmethod
    def format(self, event: Event) -> str:
        """
        Format an event into a string.

        Args:
            event: The event to format

        Returns:
            Formatted string representation of the event
        """
        pass

    @staticmethod
    def render_error(event: Event) -> str:
        """'ExcType: text' for the attached error, '' if there is none."""
        if event.error is None:
            return ""
        return f"{type(event.error).__name__}: {event.error}"

    @staticmethod
    def render_message(event: Event) -> str:
        """Event payload as text."""
        return render_message(event.message)

    def __call__(self, event: Event) -> str:
        """Allow formatters to be callable."""
        return self.format(event)
