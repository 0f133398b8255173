"""Domain exceptions for clouddriver.

Every failure the catalog reports to its callers is one of the kinds below.
They are independent of the storage engine; the persistence layer translates
SQLAlchemy errors into them and the presentation layer maps them to HTTP
responses in exception handlers.
"""

from typing import Any


class ClouddriverException(Exception):
    """Base exception for all clouddriver errors.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, provider name).
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

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON body used by the HTTP exception handler."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class NotFoundException(ClouddriverException):
    """Raised when a single-row lookup has no match."""

    def __init__(self, resource_type: str, key: str) -> None:
        """Initialize with resource type and the key that was looked up.

        Args:
            resource_type: Type of record (e.g. 'provider').
            key: The key that was not found.
        """
        super().__init__(
            f"{resource_type} not found: {key}",
            "NOT_FOUND",
            {"resource_type": resource_type, "key": key},
        )


class ConstraintViolationException(ClouddriverException):
    """Raised when the backend rejects a write (uniqueness or other constraint)."""

    def __init__(self, operation: str, reason: str) -> None:
        super().__init__(
            f"Constraint violated during {operation}",
            "CONSTRAINT_VIOLATION",
            {"operation": operation, "reason": reason},
        )


class InvalidArgumentException(ClouddriverException):
    """Raised when a caller-supplied precondition is violated."""

    def __init__(self, message: str, argument: str | None = None) -> None:
        details = {"argument": argument} if argument else {}
        super().__init__(message, "INVALID_ARGUMENT", details)


class BackendUnavailableException(ClouddriverException):
    """Raised on connection, pool exhaustion, or transport failure."""

    def __init__(self, operation: str, reason: str) -> None:
        super().__init__(
            f"Storage backend unavailable during {operation}",
            "BACKEND_UNAVAILABLE",
            {"operation": operation, "reason": reason},
        )
