"""Domain error classes.

Protocol-agnostic errors that represent inventory business failures.
The HTTP entrypoint translates them into status codes and JSON bodies.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all domain errors.

    Carries a human-readable message plus arbitrary context that protocol
    adapters may expose (resource names, offending identifiers, ...).
    """

    # Default error code (stable identifier for clients)
    error_code: str = "DOMAIN_ERROR"

    def __init__(self, message: str, **context: Any) -> None:
        """Create a domain error.

        Args:
            message: Human-readable error message
            **context: Additional context for the error (e.g., field names, ids)
        """
        self.message = message
        self.context = context
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Convert to structured format for protocol translation."""
        return {
            "message": self.message,
            "code": self.error_code,
            **self.context,
        }


class ValidationError(DomainError):
    """A payload or filter broke one or more field rules.

    Examples:
        - make longer than 100 characters
        - plate not matching ABC1234 / ABC1D23
        - year_min greater than year_max

    Protocol mappings:
        - REST: 400 Bad Request
    """

    error_code: str = "VALIDATION_ERROR"

    def __init__(
        self,
        message: str | None = None,
        errors: list[dict[str, str]] | None = None,
        **context: Any,
    ) -> None:
        """Create a validation error.

        Args:
            message: Overall validation error message (optional if errors provided)
            errors: Field-specific errors, each with 'field', 'message' and 'code'
                   Example: [{"field": "plate", "message": "Plate is required", "code": "REQUIRED"}]
            **context: Additional context
        """
        self.errors: list[dict[str, str]] | None
        if errors:
            self.errors = errors
            msg = message or "Validation failed"
        else:
            self.errors = None
            msg = message or "Validation error"

        super().__init__(msg, **context)

    def to_dict(self) -> dict[str, Any]:
        """Convert to structured format."""
        if self.errors:
            return {
                "message": self.message,
                "code": self.error_code,
                "errors": self.errors,
                **self.context,
            }
        return super().to_dict()


class NotFoundError(DomainError):
    """Resource not found.

    Examples:
        - Vehicle with id 42 does not exist
        - Portal package already removed

    Protocol mappings:
        - REST: 404 Not Found
    """

    error_code: str = "NOT_FOUND"

    def __init__(self, resource: str, identifier: int | str | None = None, **context: Any) -> None:
        """Create a not found error.

        Args:
            resource: Type of resource (e.g., "Vehicle", "PortalPackage")
            identifier: Resource identifier
            **context: Additional context
        """
        if identifier is not None:
            message = f"{resource} with identifier '{identifier}' not found"
        else:
            message = f"{resource} not found"

        super().__init__(message, resource=resource, identifier=identifier, **context)


class ConflictError(DomainError):
    """Business constraint conflict.

    Examples:
        - Plate already registered for another vehicle
        - New photo reusing the display order of a kept photo

    Protocol mappings:
        - REST: 400 Bad Request
    """

    error_code: str = "CONFLICT"


class InternalError(DomainError):
    """Internal domain error (unexpected conditions).

    Should be logged for investigation.

    Protocol mappings:
        - REST: 500 Internal Server Error
    """

    error_code: str = "INTERNAL_ERROR"
