"""Predicate filtering over ordered sequences.

Single pass, synchronous, no internal state.
The predicate is called exactly once per element, in index order.
Exceptions raised by the predicate propagate unchanged; the result
under construction is local to the call and is dropped with it.
"""

from __future__ import annotations

import logging
from itertools import repeat
from typing import TYPE_CHECKING

from generic.domain.model.allocation import Allocation

if TYPE_CHECKING:
    from collections.abc import Sequence

    from generic.domain.predicates.types import Predicate

logger = logging.getLogger(__name__)


def where[T](
    data: Sequence[T],
    predicate: Predicate[T],
    allocation: Allocation | bool = Allocation.GROW,
) -> list[T]:
    """Return the elements of data for which predicate returns True.

    Args:
        data: Ordered input. Read only, never mutated.
        predicate: Selection criterion, called once per element in order.
        allocation: Result buffer strategy. True/False are accepted as
            PREALLOCATE/GROW.

    Returns:
        New list with the matching elements in their original order.
        Empty (never None) when nothing matches or data is empty.

    Raises:
        TypeError: allocation is neither Allocation nor bool.

    Complexity: O(N) predicate calls, O(N) element copies.
    """
    strategy = Allocation.coerce(allocation)

    if strategy is Allocation.PREALLOCATE:
        matches = _where_preallocated(data, predicate)
    else:
        matches = _where_growing(data, predicate)

    logger.debug("where: kept %d of %d elements (%s)", len(matches), len(data), strategy.name)
    return matches


def _where_preallocated[T](data: Sequence[T], predicate: Predicate[T]) -> list[T]:
    """Reserve len(data) slots, write matches by index, release the unused tail."""
    matches: list[T] = list(repeat(None, len(data)))  # type: ignore[arg-type]

    count = 0
    for element in data:
        if predicate(element):
            matches[count] = element
            count += 1

    del matches[count:]
    return matches


def _where_growing[T](data: Sequence[T], predicate: Predicate[T]) -> list[T]:
    """Append matches one at a time, letting the list grow as needed."""
    matches: list[T] = []
    for element in data:
        if predicate(element):
            matches.append(element)
    return matches
