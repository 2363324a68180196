"""generic - predicate filtering over ordered sequences with selectable allocation."""

__version__ = "0.1.0"

from generic.domain import Allocation, Predicate, Slice, always, never, where

__all__ = [
    "Allocation",
    "Predicate",
    "Slice",
    "__version__",
    "always",
    "never",
    "where",
]
