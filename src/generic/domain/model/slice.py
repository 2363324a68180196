"""Generic ordered container with predicate filtering."""

from __future__ import annotations

from typing import TYPE_CHECKING, Self

from generic.domain.model.allocation import Allocation
from generic.domain.where import where

if TYPE_CHECKING:
    from generic.domain.predicates.types import Predicate


class Slice[T](list[T]):
    """Ordered, zero-indexed sequence of a single element type.

    Behaves exactly like list. Adds where() returning a new Slice.
    """

    def where(
        self,
        predicate: Predicate[T],
        allocation: Allocation | bool = Allocation.GROW,
    ) -> Self:
        """Filter elements by predicate.

        Args:
            predicate: Selection criterion, called once per element in order.
            allocation: Result buffer strategy (see Allocation).

        Returns:
            New instance of the same class holding the matching elements.
            Created only after the scan completes. self is not modified.
        """
        return type(self)(where(self, predicate, allocation))
