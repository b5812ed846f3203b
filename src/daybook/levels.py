"""Severity levels used by the daybook logging facade.

Each `Level` carries a numeric rank. Ordering between levels is defined purely
on that rank so levels can be compared with `<`, `<=`, `>` and `>=`.
"""

from __future__ import annotations

import enum
from typing import Any


class Level(enum.Enum):
    """Ordered log severity, from `VERBOSE` up to the `OFF` sentinel."""

    VERBOSE = 999
    TRACE = 1000
    DEBUG = 2000
    INFO = 3000
    WARNING = 4000
    ERROR = 5000
    FATAL = 6000
    OFF = 10000

    @property
    def rank(self) -> int:
        return self.value

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Level):
            return NotImplemented
        return self.value < other.value

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, Level):
            return NotImplemented
        return self.value <= other.value

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, Level):
            return NotImplemented
        return self.value > other.value

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, Level):
            return NotImplemented
        return self.value >= other.value

    @property
    def emoji(self) -> str:
        """Return the console decoration shown in front of a line of this level."""
        return _EMOJI[self]

    @classmethod
    def parse(cls, value: Level | str | int) -> Level:
        """Coerce a level name, numeric rank or `Level` into a `Level`.

        Args:
            value (Level | str | int): A member, a member name (any case) or a rank.

        Returns:
            Level: The matching level.

        Raises:
            ValueError: When `value` does not name or rank any level.

        """
        if isinstance(value, Level):
            return value
        if isinstance(value, bool):
            raise ValueError(f"Not a log level: {value!r}")
        if isinstance(value, int):
            return cls(value)
        if isinstance(value, str):
            text = value.strip()
            if text.lstrip("-").isdigit():
                return cls(int(text))
            try:
                return cls[text.upper()]
            except KeyError:
                pass
        raise ValueError(f"Not a log level: {value!r}")


_EMOJI = {
    Level.VERBOSE: "🗨️",
    Level.TRACE: "🧭",
    Level.DEBUG: "🐛",
    Level.INFO: "💡",
    Level.WARNING: "⚠️",
    Level.ERROR: "🧨",
    Level.FATAL: "💥",
    Level.OFF: "⛔️",
}
