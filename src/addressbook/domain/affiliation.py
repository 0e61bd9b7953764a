"""Affiliation value object.

An affiliation is a short label (an institution, company or club name)
attached to a contact. It is validated once, at construction, and never
changes afterwards.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import ClassVar

from .errors import IllegalValueError

logger = logging.getLogger(__name__)

# Stripped from both ends before validation: every code point up to U+0020
TRIM_CHARS = "".join(map(chr, range(0x21)))


@dataclass(frozen=True, slots=True)
class Affiliation:
    """Immutable, validated affiliation name.

    Conventions:
      - `name` is stored with leading and trailing code points <= U+0020 removed
        (spaces, tabs, newlines and other C0 controls). Other Unicode spaces
        such as U+00A0 are kept, and so make the name invalid.
      - `name` is one or more ASCII letters or digits.
      - Equality and hashing are by `name`, case-sensitive.

    Raises:
        IllegalValueError: If the trimmed name is not alphanumeric.
    """

    MESSAGE_CONSTRAINTS: ClassVar[str] = "Affiliation should be alphanumeric."
    VALIDATION_REGEX: ClassVar[str] = "[A-Za-z0-9]+"

    name: str

    def __post_init__(self) -> None:
        trimmed = self.name.strip(TRIM_CHARS)
        logger.debug("Validating affiliation %r", trimmed)
        if not self.is_valid(trimmed):
            raise IllegalValueError(self.MESSAGE_CONSTRAINTS, value=self.name)
        object.__setattr__(self, "name", trimmed)

    @classmethod
    def is_valid(cls, test: str) -> bool:
        """Return True if `test` is a valid affiliation name as given (no trimming)."""
        return re.fullmatch(cls.VALIDATION_REGEX, test) is not None

    def __str__(self) -> str:
        return f"[{self.name}]"
