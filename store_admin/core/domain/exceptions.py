"""
Domain Exceptions for Domain-Driven Design

These exceptions represent business rule violations and domain-specific errors.
They should be caught and translated to appropriate HTTP responses in the API layer.
"""

from enum import Enum
from typing import Any


def _display(value: Any) -> str:
    """Readable form of a rejected value (enum members show their value)."""
    return str(value.value if isinstance(value, Enum) else value)


class ErrorKind(str, Enum):
    """Machine-readable failure kinds raised by the domain core."""

    NOT_FOUND = "not_found"
    DUPLICATE = "duplicate"
    MISSING_VALUE = "missing_value"
    INVALID_VALUE = "invalid_value"
    CONFLICT = "conflict"
    INTERNAL = "internal"


class DomainException(Exception):
    """
    Base exception for all domain-related errors.

    Provides a standardized way to communicate business rule violations.
    """

    kind: ErrorKind = ErrorKind.INTERNAL

    def __init__(self, message: str, code: str | None = None, details: dict[str, Any] | None = None):
        """
        Initialize domain exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code (e.g., "DOMAINS.DUPLICATE_DOMAIN")
            details: Additional context about the error
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__.upper()
        self.details = details or {}

    @property
    def field(self) -> str | None:
        """Offending field, when the error concerns a single field."""
        return self.details.get("field")

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for API responses."""
        return {
            "error": self.code,
            "kind": self.kind.value,
            "message": self.message,
            "details": self.details,
        }


class EntityNotFoundException(DomainException):
    """
    Raised when a referenced entity is not found.
    """

    kind = ErrorKind.NOT_FOUND

    def __init__(
        self,
        entity_type: str,
        entity_id: Any,
        message: str | None = None,
        code: str | None = None,
    ):
        self.entity_type = entity_type
        self.entity_id = entity_id
        msg = message or f"{entity_type} '{entity_id}' not found"
        super().__init__(
            msg,
            code or "ENTITY_NOT_FOUND",
            {"entity_type": entity_type, "entity_id": str(entity_id)},
        )


class DuplicateEntityException(DomainException):
    """Raised when attempting to create a duplicate entity."""

    kind = ErrorKind.DUPLICATE

    def __init__(self, entity_type: str, field: str, value: Any, code: str | None = None):
        self.entity_type = entity_type
        self.value = value
        super().__init__(
            f"{entity_type} with {field}='{_display(value)}' already exists",
            code or "DUPLICATE_ENTITY",
            {
                "entity_type": entity_type,
                "field": field,
                "value": _display(value),
            },
        )


class MissingValueException(DomainException):
    """
    Raised when a required field is absent or empty.
    """

    kind = ErrorKind.MISSING_VALUE

    def __init__(self, field: str, code: str | None = None, message: str | None = None):
        super().__init__(
            message or f"Field '{field}' is required",
            code or "MISSING_VALUE",
            {"field": field},
        )


class InvalidValueException(DomainException):
    """
    Raised when a field is present but fails a predicate,
    or when a cross-field precondition is not met.
    """

    kind = ErrorKind.INVALID_VALUE

    def __init__(
        self,
        field: str,
        value: Any = None,
        message: str | None = None,
        code: str | None = None,
    ):
        self.value = value
        details: dict[str, Any] = {"field": field}
        if value is not None:
            details["value"] = _display(value)
        super().__init__(
            message or f"Value '{_display(value)}' for field '{field}' is invalid",
            code or "INVALID_VALUE",
            details,
        )


class ConcurrencyException(DomainException):
    """Raised when there's a concurrency conflict (optimistic locking)."""

    kind = ErrorKind.CONFLICT

    def __init__(self, entity_type: str, entity_id: Any, expected_version: int, actual_version: int | None = None):
        self.entity_type = entity_type
        self.entity_id = entity_id
        self.expected_version = expected_version
        self.actual_version = actual_version
        found = "a different version" if actual_version is None else f"version {actual_version}"
        super().__init__(
            f"Concurrency conflict for {entity_type} {entity_id}. Expected version {expected_version}, but found {found}",
            "CONCURRENCY_CONFLICT",
            {
                "entity_type": entity_type,
                "entity_id": str(entity_id),
                "expected_version": expected_version,
                "actual_version": actual_version,
            },
        )


class InternalException(DomainException):
    """Raised when a collaborator (storage, id generation) fails unexpectedly."""

    kind = ErrorKind.INTERNAL

    def __init__(self, operation: str, message: str | None = None, original_error: Exception | None = None):
        self.operation = operation
        self.original_error = original_error
        details: dict[str, Any] = {"operation": operation}
        if original_error:
            details["original_error"] = str(original_error)
        super().__init__(message or f"Unexpected failure during '{operation}'", "INTERNAL_ERROR", details)
