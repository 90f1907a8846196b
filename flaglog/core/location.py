"""Call-site location captured for each log event"""

import inspect
import sys
from dataclasses import dataclass
from types import FrameType


@dataclass(frozen=True)
class LocationInfo:
    """Source location of a logging call. Used for display only."""

    file: str
    line: int
    column: int
    function: str

    def __str__(self) -> str:
        return f"{self.file}:{self.function}:{self.line}:{self.column}"

    @classmethod
    def from_frame(cls, frame: FrameType) -> "LocationInfo":
        """
        Build location info from an interpreter frame.

        Column is 1-based where the interpreter records instruction
        positions (3.11+), otherwise 0.
        """
        info = inspect.getframeinfo(frame, context=0)
        positions = getattr(info, "positions", None)
        column = 0
        if positions is not None and positions.col_offset is not None:
            column = positions.col_offset + 1
        return cls(
            file=info.filename,
            line=info.lineno,
            column=column,
            function=info.function,
        )

    @classmethod
    def capture(cls, stacklevel: int = 1) -> "LocationInfo":
        """
        Capture the location of a caller up the stack.

        Args:
            stacklevel: How many frames above the caller of capture()
                        to look. 1 is the function that called the
                        function calling capture().

        Returns:
            LocationInfo of that frame (the outermost frame if the
            stack is shallower than requested)
        """
        frame = sys._getframe(1)
        for _ in range(stacklevel):
            if frame.f_back is None:
                break
            frame = frame.f_back
        return cls.from_frame(frame)
