"""
Text formatter with customizable template

Formats events using a template string with placeholders
"""

from typing import Optional

from flaglog.core.event import Event
from flaglog.formatters.base_formatter import BaseFormatter


class TextFormatter(BaseFormatter):
    """
    Format events using a customizable template.

    Supports placeholders for all Event fields.
    """

    DEFAULT_TEMPLATE = "[{time}] [{level:7}] [{name}] [{location}] {message}{error}"

    def __init__(
        self,
        template: Optional[str] = None,
        timestamp_format: str = "%Y-%m-%d %H:%M:%S",
    ):
        """
        Initialize text formatter.

        Args:
            template: Format template with placeholders.
                     Available placeholders:
                     - {timestamp}: Raw seconds since the epoch
                     - {time}: Timestamp rendered with timestamp_format
                     - {level}: Level name
                     - {level:7}: Level name with padding
                     - {name}: Logger name
                     - {location}: file:function:line:column
                     - {file}, {line}, {column}, {function}: Call site parts
                     - {message}: Rendered payload
                     - {error}: ' (ExcType: text)' or empty
            timestamp_format: strftime format for {time}

        Example:
            # Default format
            formatter = TextFormatter()

            # Custom format
            formatter = TextFormatter("{level} - {message}")

            # Detailed format
            formatter = TextFormatter(
                "{time} [{level}] {name}:{function} - {message}"
            )
        """
        self.template = template or self.DEFAULT_TEMPLATE
        self.timestamp_format = timestamp_format

    def format(self, event: Event) -> str:
        """
        Format event using the template.

        Args:
            event: Event to format

        Returns:
            Formatted string
        """
        error = self.render_error(event)
        location = event.location_info

        format_dict = {
            "timestamp": event.timestamp,
            "time": event.time.strftime(self.timestamp_format),
            "level": event.level.label,
            "name": event.name,
            "location": str(location),
            "file": location.file,
            "line": location.line,
            "column": location.column,
            "function": location.function,
            "message": self.render_message(event),
            "error": f" ({error})" if error else "",
        }

        try:
            return self.template.format(**format_dict)
        except KeyError as e:
            # Fallback if template has unknown placeholder
            return f"[FORMAT ERROR: {e}] {format_dict['message']}"

    def __repr__(self) -> str:
        """String representation."""
        return f"TextFormatter(template='{self.template}')"
