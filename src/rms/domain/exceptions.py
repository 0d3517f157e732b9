"""Domain-level exceptions.

All rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class InvalidValueError(ValidationError):
    """A field update carried a value outside its allowed range."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class DuplicateKeyError(DomainException):
    """An entity with the same identifier is already stored."""


class RecordParseError(DomainException):
    """A line of delimited input could not be turned into a record."""

    def __init__(self, message: str, line_number: int) -> None:
        super().__init__(f"Line {line_number}: {message}")
        self.line_number = line_number


class MissingFieldError(RecordParseError):
    """A line did not have the expected number of fields."""


class FormatError(RecordParseError):
    """A field could not be converted to its expected type."""


class LoadError(DomainException):
    """A persisted file exists but could not be read back."""
