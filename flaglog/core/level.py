"""
Severity level mask

Levels are a set of enabled ranks, not an ordered scale.
"""

import re
from enum import IntFlag
from typing import Dict, Tuple, Union


class Level(IntFlag):
    """
    Severity bitmask.

    Each rank occupies exactly one bit. ALL has every bit of a 32-bit
    mask set, so it matches any rank, including ones defined later.
    """

    TRACE = 1 << 0
    DEBUG = 1 << 1
    INFO = 1 << 2
    WARNING = 1 << 3
    ERROR = 1 << 4
    FATAL = 1 << 5
    ALL = 0xFFFFFFFF

    def matches(self, other: Union["Level", int]) -> bool:
        """
        Check whether two masks share at least one rank.

        Args:
            other: Mask or raw integer to test against

        Returns:
            True if the bitwise intersection is non-empty
        """
        return (int(self) & int(other)) != 0

    @property
    def is_rank(self) -> bool:
        """True if this mask is exactly one named rank."""
        return int(self) in _RANK_VALUES

    @property
    def label(self) -> str:
        """Human-readable name: 'INFO', 'ALL' or 'ERROR|FATAL'."""
        if int(self) == int(Level.ALL):
            return "ALL"
        names = [rank.name for rank in Level.ranks() if int(rank) & int(self)]
        return "|".join(names) if names else str(int(self))

    def __str__(self) -> str:
        return self.label

    @classmethod
    def ranks(cls) -> Tuple["Level", ...]:
        """The six named ranks, in definition order."""
        return (cls.TRACE, cls.DEBUG, cls.INFO, cls.WARNING, cls.ERROR, cls.FATAL)

    @classmethod
    def from_string(cls, text: str) -> "Level":
        """
        Parse a level mask from text.

        Args:
            text: Rank name, 'all', or a union such as 'error|fatal'
                  (case-insensitive, '|' or ',' separated)

        Returns:
            Level mask

        Raises:
            ValueError: If any name is unknown
        """
        names = [part.strip().upper() for part in re.split(r"[|,]", text)]
        if not any(names):
            raise ValueError(f"Invalid log level: {text!r}")

        mask = cls(0)
        for name in names:
            if not name:
                continue
            if name not in cls.__members__:
                raise ValueError(f"Invalid log level: {name}")
            mask |= cls.__members__[name]
        return mask

    @property
    def color_code(self) -> str:
        """
        Get ANSI color code for this rank.

        Returns:
            ANSI escape sequence (reset code for masks)
        """
        return _COLORS.get(int(self), "\033[0m")

    @property
    def reset_code(self) -> str:
        """ANSI reset code."""
        return "\033[0m"


_RANK_VALUES = frozenset(int(rank) for rank in Level.ranks())

_COLORS: Dict[int, str] = {
    int(Level.TRACE): "\033[37m",    # White
    int(Level.DEBUG): "\033[36m",    # Cyan
    int(Level.INFO): "\033[32m",     # Green
    int(Level.WARNING): "\033[33m",  # Yellow
    int(Level.ERROR): "\033[31m",    # Red
    int(Level.FATAL): "\033[35m",    # Magenta
}
