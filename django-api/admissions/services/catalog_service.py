"""Catalog service - read-only views of events and tickets for display.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

from admissions.domain import Event, EventId, EventOverview, PageNumber, Ticket, TicketId, TicketPage
from admissions.domain.errors import (
    EventNotFoundError,
    InvalidEventIdError,
    InvalidTicketIdError,
    TicketNotFoundError,
)
from admissions.stores.interfaces import EventStore, TicketStore


class CatalogService:
    """Service for event and ticket listings."""

    def __init__(self, events: EventStore, tickets: TicketStore, page_size: int = 50) -> None:
        self._events = events
        self._tickets = tickets
        self._page_size = page_size

    def list_events(self) -> list[EventOverview]:
        """Return all events with their ticket counts, soonest first."""
        counts = self._tickets.counts_by_event()
        return [
            EventOverview(event=event, ticket_count=counts.get(event.id, 0))
            for event in self._events.list_events()
        ]

    def get_event(self, event_id: str) -> EventOverview:
        """Return an event by ID with its ticket count.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
        """
        event = self._require_event(event_id)
        return EventOverview(event=event, ticket_count=self._tickets.count_for_event(event.id))

    def list_tickets(self, event_id: str, page: object = None) -> TicketPage:
        """Return one page of an event's tickets, newest first.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
        """
        event = self._require_event(event_id)
        number = PageNumber.parse(page)
        tickets = self._tickets.list_for_event(
            event.id, offset=number.offset(self._page_size), limit=self._page_size
        )
        return TicketPage(
            event=event,
            tickets=tuple(tickets),
            page=number.value,
            page_size=self._page_size,
            total=self._tickets.count_for_event(event.id),
        )

    def get_ticket(self, ticket_id: str) -> tuple[Ticket, Event]:
        """Return a ticket and its event for display.

        Raises:
            InvalidTicketIdError: If the ticket_id is not a valid UUID.
            TicketNotFoundError: If the ticket does not exist.
        """
        try:
            parsed = TicketId.from_string(ticket_id)
        except (TypeError, ValueError, AttributeError) as exc:
            raise InvalidTicketIdError("Invalid ticket ID format") from exc

        ticket = self._tickets.get_ticket(parsed)
        if ticket is None:
            raise TicketNotFoundError(ticket_id)
        event = self._events.get_event(ticket.event_id)
        if event is None:
            raise TicketNotFoundError(ticket_id)
        return ticket, event

    def _require_event(self, event_id: str) -> Event:
        try:
            parsed = EventId.from_string(event_id)
        except (TypeError, ValueError, AttributeError) as exc:
            raise InvalidEventIdError() from exc

        event = self._events.get_event(parsed)
        if event is None:
            raise EventNotFoundError(event_id)
        return event
