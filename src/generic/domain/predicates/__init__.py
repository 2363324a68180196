"""Domain layer: predicate type and constant predicates.

Predicates are plain functions: Predicate[T] = Callable[[T], bool]
True = keep element, False = drop element.
"""

from generic.domain.predicates.constants import always, never
from generic.domain.predicates.types import Predicate

__all__ = [
    "Predicate",
    "always",
    "never",
]
