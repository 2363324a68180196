"""Result allocation strategy for filtering."""

from __future__ import annotations

from enum import Enum, auto


class Allocation(Enum):
    """How the result buffer of a filter is allocated.

    Both strategies yield the same values in the same order.
    They differ only in memory footprint and number of reallocations.
    """

    PREALLOCATE = auto()  # reserve len(input) slots up front, release the tail after the scan
    GROW = auto()  # start empty, append matches (amortized growth)

    @classmethod
    def coerce(cls, value: Allocation | bool) -> Allocation:
        """Normalize a strategy selector.

        Args:
            value: Allocation member, or bool flag (True = PREALLOCATE).

        Returns:
            Allocation member.

        Raises:
            TypeError: value is neither Allocation nor bool.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            return cls.PREALLOCATE if value else cls.GROW
        raise TypeError(f"allocation must be Allocation or bool, got {type(value).__name__}")

    @property
    def label(self) -> str:
        """Short human-readable name."""
        return "Prealloc" if self is Allocation.PREALLOCATE else "Grow"
