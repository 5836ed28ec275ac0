"""Domain exceptions for the elemo persistence layer.

Defines domain-level exceptions independent of infrastructure concerns.
Storage, cache, and wiring failures live in elemo.infrastructure.exceptions;
the two hierarchies share only the ElemoException base.
"""

from typing import Any


class ElemoException(Exception):
    """Base exception for all elemo errors.

    Callers discriminate errors by class (``except ResourceNotFoundException``),
    never by message.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. resource_type, resource_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)


class ValidationException(ElemoException):
    """Raised when input validation fails (e.g. invalid format or range)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field or attribute that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class InvalidIDException(ValidationException):
    """Raised when an identifier string cannot be parsed for a resource type."""

    def __init__(self, value: str, reason: str) -> None:
        super().__init__(f"Invalid ID '{value}': {reason}", field="id")
        self.details["value"] = value


class ResourceNotFoundException(ElemoException):
    """Raised when a requested resource is not found in storage."""

    def __init__(self, resource_type: str, resource_id: str) -> None:
        """Initialize with resource type and id.

        Args:
            resource_type: Canonical resource tag (e.g. 'Document').
            resource_id: The ID (or key) that was not found.
        """
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )
