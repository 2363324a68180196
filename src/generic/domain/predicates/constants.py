"""Constant predicates."""


def always(element: object) -> bool:
    """Keep every element."""
    return True


def never(element: object) -> bool:
    """Drop every element."""
    return False
