"""Unique affiliation list.

An ordered list of `Affiliation` values in which no two elements are equal.
Operations that could introduce a duplicate either fail before touching the
list (`add`, `add_all`, the strict constructors) or silently skip the
offending values (`merge_from`, `from_set`).
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Set
from typing import Self

from .affiliation import Affiliation
from .errors import DuplicateAffiliationError
from .utils import elements_are_unique

logger = logging.getLogger(__name__)


class UniqueAffiliationList:
    """A list of affiliations. Does not allow duplicates.

    Order is insertion order. Membership checks use a set kept alongside the
    list, so `contains` and the merge checks are O(1) per element.

    Accessors never hand out the internal list: `to_set` returns a fresh set
    and iteration yields a fresh iterator. Mutating the list while iterating
    over it is not allowed; the result of doing so is undefined.

    Not thread-safe. Callers sharing an instance across threads must hold one
    lock around each whole read-modify-write sequence.
    """

    __slots__ = ("_items", "_members")

    def __init__(self, *affiliations: Affiliation) -> None:
        """Construct a list holding `affiliations`, in the given order.

        Raises:
            DuplicateAffiliationError: If any two of `affiliations` are equal.
        """
        if not elements_are_unique(affiliations):
            raise DuplicateAffiliationError
        self._items: list[Affiliation] = list(affiliations)
        self._members: set[Affiliation] = set(affiliations)

    @classmethod
    def from_iterable(cls, affiliations: Iterable[Affiliation]) -> Self:
        """Construct a list from any ordered iterable of affiliations.

        Raises:
            DuplicateAffiliationError: If any two of `affiliations` are equal.
        """
        return cls(*affiliations)

    @classmethod
    def from_set(cls, affiliations: Set[Affiliation]) -> Self:
        """Construct a list from a set; duplicates cannot occur, so this never fails."""
        instance = cls()
        instance._items.extend(affiliations)
        instance._members.update(affiliations)
        return instance

    @classmethod
    def copy_of(cls, source: UniqueAffiliationList) -> Self:
        """Construct a shallow copy of `source`, without re-checking uniqueness."""
        instance = cls()
        instance._items.extend(source._items)
        instance._members.update(source._members)
        return instance

    def copy(self) -> UniqueAffiliationList:
        """Return a shallow copy of this list."""
        return self.copy_of(self)

    # --- Queries ---

    def contains(self, affiliation: Affiliation) -> bool:
        """Return True if an equal affiliation is in the list."""
        return affiliation in self._members

    def __contains__(self, affiliation: object) -> bool:
        return affiliation in self._members

    def to_set(self) -> set[Affiliation]:
        """Return a new mutable set of the affiliations in this list.

        The set is independent: changing it never changes this list.
        """
        return set(self._items)

    def __iter__(self) -> Iterator[Affiliation]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    # --- Mutations ---

    def add(self, affiliation: Affiliation) -> None:
        """Append `affiliation` to the list.

        Raises:
            DuplicateAffiliationError: If an equal affiliation is already present.
        """
        if affiliation in self._members:
            raise DuplicateAffiliationError
        self._items.append(affiliation)
        self._members.add(affiliation)

    def add_all(self, affiliations: UniqueAffiliationList) -> None:
        """Append all of `affiliations`, keeping their order.

        All or nothing: if any of them is already present, nothing is added.

        Raises:
            DuplicateAffiliationError: If the two lists share any affiliation.
        """
        if not self._members.isdisjoint(affiliations._members):
            raise DuplicateAffiliationError
        self._items.extend(affiliations._items)
        self._members.update(affiliations._members)

    def merge_from(self, affiliations: UniqueAffiliationList) -> None:
        """Append every affiliation of `affiliations` not already in this list.

        Affiliations already present are skipped; this never fails.
        """
        if affiliations is self:
            return
        for affiliation in affiliations._items:
            if affiliation in self._members:
                logger.debug("Skipping affiliation already present: %s", affiliation)
                continue
            self._items.append(affiliation)
            self._members.add(affiliation)

    def clear(self) -> None:
        """Remove all affiliations."""
        self._items.clear()
        self._members.clear()

    def set_affiliations(self, replacement: UniqueAffiliationList) -> None:
        """Replace the contents of this list with those of `replacement`."""
        items = list(replacement._items)
        self._items[:] = items
        self._members = set(items)

    # --- Dunder methods ---

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, UniqueAffiliationList):
            return NotImplemented
        return self._items == other._items

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        names = ", ".join(repr(affiliation.name) for affiliation in self._items)
        return f"{type(self).__name__}({names})"
