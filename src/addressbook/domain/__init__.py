"""Domain layer for ADDRESSBOOK.

Contains the affiliation value object, the unique affiliation list and the
errors they raise. This package is deliberately technology-agnostic.

Dependency rule: do not import from `addressbook.adapters` or `addressbook.entrypoints`.
"""

from .affiliation import Affiliation
from .errors import DuplicateAffiliationError, IllegalValueError
from .unique_affiliation_list import UniqueAffiliationList

__all__ = [
    "Affiliation",
    "DuplicateAffiliationError",
    "IllegalValueError",
    "UniqueAffiliationList",
]
