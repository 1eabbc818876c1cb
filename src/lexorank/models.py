"""
Value types shared by the ranking strategies and the facade.
"""

from enum import Enum, IntEnum


class LexoRankKind(Enum):
    """Closed set of ranking algorithm families."""

    FIGMA = "figma"

    @classmethod
    def from_value(cls, value: str) -> "LexoRankKind":
        """Look up a kind by its value or member name, ignoring case."""
        normalized = value.strip().lower()
        for kind in cls:
            if kind.value == normalized or kind.name.lower() == normalized:
                return kind
        raise ValueError(f"Unknown ranking strategy: {value!r}")


class Ordering(IntEnum):
    """Result of comparing two positions; usable with functools.cmp_to_key."""

    LESS = -1
    EQUAL = 0
    GREATER = 1
