"""Predicate type alias.

Predicate function: takes one element, returns True to keep it.
"""

from collections.abc import Callable

type Predicate[T] = Callable[[T], bool]
