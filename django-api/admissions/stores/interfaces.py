"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from datetime import datetime

from admissions.domain import Event, EventId, Ticket, TicketId


class EventStore(ABC):
    """Interface for event persistence operations."""

    @abstractmethod
    def list_events(self) -> list[Event]:
        """Return all events ordered by starts_at ascending."""
        ...

    @abstractmethod
    def get_event(self, event_id: EventId) -> Event | None:
        """Return an event by ID, or None if not found."""
        ...

    @abstractmethod
    def event_exists(self, event_id: EventId) -> bool:
        """Check if an event exists."""
        ...


class TicketStore(ABC):
    """Interface for ticket persistence operations.

    Implementations must provide ``mark_used`` as a single atomic
    compare-and-set; it is the only thing standing between two scanners
    and a double admission.
    """

    @abstractmethod
    def get_ticket(self, ticket_id: TicketId) -> Ticket | None:
        """Return a ticket by ID, or None if not found."""
        ...

    @abstractmethod
    def mark_used(self, ticket_id: TicketId, redeemed_at: datetime) -> bool:
        """Set status USED and stamp redeemed_at, only if status is still VALID.

        Returns True if this call performed the transition.
        """
        ...

    @abstractmethod
    def create_batch(self, tickets: Sequence[Ticket]) -> None:
        """Insert all tickets or none of them."""
        ...

    @abstractmethod
    def count_for_event(self, event_id: EventId) -> int:
        """Return the number of tickets issued for an event."""
        ...

    @abstractmethod
    def counts_by_event(self) -> dict[EventId, int]:
        """Return ticket counts for every event that has tickets."""
        ...

    @abstractmethod
    def list_for_event(self, event_id: EventId, offset: int, limit: int) -> list[Ticket]:
        """Return a slice of an event's tickets, newest first."""
        ...
