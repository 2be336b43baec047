"""Domain error codes shared by the storefront apps.

Errors are grouped by category base class; the HTTP layer maps the category,
never the individual error, to a status code.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ErrorCode(Enum):
    """Domain error codes."""

    UNAUTHORIZED = "UNAUTHORIZED"
    INVALID_ID = "INVALID_ID"
    EMPTY_ORDER = "EMPTY_ORDER"
    INVALID_QUANTITY = "INVALID_QUANTITY"
    MAX_PER_ORDER_EXCEEDED = "MAX_PER_ORDER_EXCEEDED"
    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    TICKET_TYPE_NOT_FOUND = "TICKET_TYPE_NOT_FOUND"
    ORDER_NOT_FOUND = "ORDER_NOT_FOUND"
    INSUFFICIENT_INVENTORY = "INSUFFICIENT_INVENTORY"
    STORAGE_FAILURE = "STORAGE_FAILURE"


@dataclass(eq=False)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str
    details: dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class UnauthorizedError(DomainError):
    """Raised when a protected operation has no resolved principal."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.UNAUTHORIZED,
            message="Authentication required",
        )


class InvalidRequestError(DomainError):
    """Category for malformed input."""


class NotFoundError(DomainError):
    """Category for references to records that do not exist."""


class StorageFailureError(DomainError):
    """Raised when the backing store fails unexpectedly."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.STORAGE_FAILURE,
            message="Storage is temporarily unavailable",
        )


class InvalidIdentifierError(InvalidRequestError):
    """Raised when an identifier cannot be parsed."""

    def __init__(self, kind: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_ID,
            message=f"Invalid {kind} ID",
        )
        self.kind = kind


class EventNotFoundError(NotFoundError):
    """Raised when an event is not found."""

    def __init__(self, event_id: int) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_FOUND,
            message="Event not found",
        )
        self.event_id = event_id
