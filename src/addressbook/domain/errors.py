"""Domain-layer error definitions."""

# ============================================================================
#                           General domain errors
# ============================================================================


class DomainError(Exception):
    """Base class for domain-layer errors."""


class IllegalValueError(DomainError):
    """Raised when a value does not satisfy its format constraints."""

    def __init__(self, message: str, value: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.value = value


class DuplicateDataError(DomainError):
    """Raised when an operation would break a 'no duplicates' property."""


# ============================================================================
#                       Affiliation related errors
# ============================================================================


class DuplicateAffiliationError(DuplicateDataError):
    """Raised when an operation would result in duplicate affiliations."""

    def __init__(self) -> None:
        super().__init__("Operation would result in duplicate affiliations.")
