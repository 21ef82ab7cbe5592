"""Domain exceptions for the venuehub application.

Defines domain-level exceptions that represent business rule violations and
store failures. These exceptions are independent of infrastructure concerns.
Presentation layer maps them to HTTP responses in exception handlers.
"""

from typing import Any


class VenueHubException(Exception):
    """Base exception for all venuehub application errors.

    Attributes:
        message: Human-readable error description (safe to show callers).
        error_code: Machine-readable error code.
        details: Additional error context (e.g. kind, resource_id).
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
        """Return the failure envelope body for this exception."""
        return {
            "success": False,
            "data": None,
            "message": self.message,
            "error_code": self.error_code,
        }


class ValidationException(VenueHubException):
    """Raised when input validation fails (missing required field, bad value)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class ResourceNotFoundException(VenueHubException):
    """Raised when a requested document does not exist."""

    def __init__(self, kind: str, resource_id: str) -> None:
        """Initialize with the entity kind label and the missing id.

        Args:
            kind: Human label of the kind (e.g. 'hero slide').
            resource_id: The ID that was not found.
        """
        super().__init__(
            f"{kind[:1].upper()}{kind[1:]} not found",
            "RESOURCE_NOT_FOUND",
            {"kind": kind, "resource_id": resource_id},
        )


class AccessDeniedException(VenueHubException):
    """Raised when an entitlement-gated read is refused (e.g. non-premium hotel).

    Distinct from ResourceNotFoundException: the owner exists but may not read.
    """

    def __init__(self, message: str, resource_id: str | None = None) -> None:
        details = {"resource_id": resource_id} if resource_id else {}
        super().__init__(message, "ACCESS_DENIED", details)


class StoreFailureException(VenueHubException):
    """Raised when the document store fails during a read or write.

    The message is coarse and user-safe; the original error is logged by the
    repository and chained as __cause__, never exposed to the caller.
    """

    def __init__(self, action: str, kind: str) -> None:
        """Initialize with the attempted action and kind.

        Args:
            action: Verb of the failed operation ('fetch', 'add', 'update', 'delete').
            kind: Human label of the kind (e.g. 'testimonials').
        """
        super().__init__(
            f"Failed to {action} {kind}",
            "STORE_FAILURE",
            {"action": action, "kind": kind},
        )


class StoreNotConfiguredException(VenueHubException):
    """Raised when a route needs Firestore but no credentials were configured."""

    def __init__(self) -> None:
        super().__init__(
            message="The document store is not configured.",
            error_code="STORE_NOT_CONFIGURED",
        )
