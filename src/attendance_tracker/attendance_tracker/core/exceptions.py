from __future__ import annotations

from typing import Mapping, Optional


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules.

    ``field_errors`` maps a form field name to the message shown next to it.
    """

    def __init__(self, message: str, field_errors: Optional[Mapping[str, str]] = None):
        super().__init__(message)
        self.field_errors = dict(field_errors or {})


class NotFoundError(DomainError):
    """Raised when a referenced employee or holiday does not exist."""


class PersistenceError(DomainError):
    """Raised by a sink when records could not be stored."""


class DataUnavailableError(DomainError):
    """Raised when upstream data is still loading or failed to load."""
