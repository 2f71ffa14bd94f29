"""Domain error codes for the admissions module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    TICKET_NOT_FOUND = "TICKET_NOT_FOUND"
    INVALID_EVENT_ID = "INVALID_EVENT_ID"
    INVALID_TICKET_ID = "INVALID_TICKET_ID"
    INVALID_BATCH_SIZE = "INVALID_BATCH_SIZE"
    STORE_UNAVAILABLE = "STORE_UNAVAILABLE"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class ValidationError(DomainError):
    """Malformed or missing input. Raised before the store is touched."""


class NotFoundError(DomainError):
    """A referenced record does not exist."""


class EventNotFoundError(NotFoundError):
    """Raised when an event is not found."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_FOUND,
            message="Event not found",
        )
        self.event_id = event_id


class TicketNotFoundError(NotFoundError):
    """Raised when a ticket is looked up for display and does not exist."""

    def __init__(self, ticket_id: str) -> None:
        super().__init__(
            code=ErrorCode.TICKET_NOT_FOUND,
            message="Ticket not found",
        )
        self.ticket_id = ticket_id


class InvalidEventIdError(ValidationError):
    """Raised when an event ID is invalid."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_EVENT_ID,
            message="Invalid event ID format",
        )


class InvalidTicketIdError(ValidationError):
    """Raised when a ticket ID is missing or malformed."""

    def __init__(self, message: str = "No Ticket ID provided") -> None:
        super().__init__(
            code=ErrorCode.INVALID_TICKET_ID,
            message=message,
        )


class InvalidBatchSizeError(ValidationError):
    """Raised when an issuance count is not a positive integer within the ceiling."""

    def __init__(self, ceiling: int) -> None:
        super().__init__(
            code=ErrorCode.INVALID_BATCH_SIZE,
            message=f"Count must be an integer between 1 and {ceiling}",
        )
        self.ceiling = ceiling


class TransientStoreError(DomainError):
    """The store could not be reached or timed out.

    Nothing was written; the caller may retry.
    """

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.STORE_UNAVAILABLE,
            message="Storage temporarily unavailable",
        )
