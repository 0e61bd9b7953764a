"""Domain layer utilities."""

from collections.abc import Hashable, Iterable


def elements_are_unique(items: Iterable[Hashable]) -> bool:
    """Return True if no two elements of ``items`` are equal.

    Args:
        items: The elements to check. Consumed once, so generators are fine.

    Returns:
        True when every element is distinct (by equality), False otherwise.
    """
    seen: set[Hashable] = set()
    for item in items:
        if item in seen:
            return False
        seen.add(item)
    return True
