"""Conversions between affiliation lists and their persisted form.

Storage keeps one plain string per affiliation, in list order. Loading a
record rebuilds each `Affiliation` (so malformed names raise
`IllegalValueError`) and a strict `UniqueAffiliationList` (so a record
holding the same name twice raises `DuplicateAffiliationError`).
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from addressbook.domain.affiliation import Affiliation
from addressbook.domain.unique_affiliation_list import UniqueAffiliationList

logger = logging.getLogger(__name__)


class AffiliationMapper:
    """Maps between UniqueAffiliationLists and lists of affiliation names."""

    @staticmethod
    def to_record(affiliations: UniqueAffiliationList) -> list[str]:
        """Convert a UniqueAffiliationList to a list of names, in list order."""
        return [affiliation.name for affiliation in affiliations]

    @staticmethod
    def to_domain(names: Iterable[str]) -> UniqueAffiliationList:
        """Convert persisted names back to a UniqueAffiliationList.

        Raises:
            IllegalValueError: If any name is not a valid affiliation.
            DuplicateAffiliationError: If two names denote the same affiliation.
        """
        affiliations = [Affiliation(name) for name in names]
        logger.debug("Loaded %d affiliation(s) from record", len(affiliations))
        return UniqueAffiliationList.from_iterable(affiliations)
