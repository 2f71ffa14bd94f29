"""Issuance engine: creates a batch of tickets for one event."""

from collections.abc import Callable
from datetime import UTC, datetime

import structlog

from admissions.domain import BatchSize, EventId, Ticket, TicketId, TicketStatus
from admissions.domain.errors import EventNotFoundError, InvalidBatchSizeError, InvalidEventIdError
from admissions.stores.interfaces import EventStore, TicketStore

logger = structlog.get_logger(__name__)


def _utcnow() -> datetime:
    return datetime.now(UTC)


class IssuanceService:
    """Service for bulk ticket creation."""

    def __init__(
        self,
        tickets: TicketStore,
        events: EventStore,
        max_batch_size: int = 1000,
        default_name_prefix: str = "Guest",
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._tickets = tickets
        self._events = events
        self._max_batch_size = max_batch_size
        self._default_name_prefix = default_name_prefix
        self._clock = clock

    def issue(self, event_id: str, count: int, name_prefix: str | None = None) -> list[TicketId]:
        """Create ``count`` VALID tickets named "{prefix} #{i}" for an event.

        The batch is written in one atomic insert.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            InvalidBatchSizeError: If count is not an integer in 1..max_batch_size.
            EventNotFoundError: If the event does not exist.
        """
        try:
            parsed = EventId.from_string(event_id)
        except (TypeError, ValueError, AttributeError) as exc:
            raise InvalidEventIdError() from exc

        try:
            size = BatchSize(value=count, ceiling=self._max_batch_size)
        except ValueError as exc:
            raise InvalidBatchSizeError(self._max_batch_size) from exc

        prefix = (name_prefix or "").strip() or self._default_name_prefix

        if not self._events.event_exists(parsed):
            raise EventNotFoundError(event_id)

        created_at = self._clock()
        tickets = [
            Ticket(
                id=TicketId.generate(),
                event_id=parsed,
                attendee_name=f"{prefix} #{number}",
                status=TicketStatus.VALID,
                redeemed_at=None,
                created_at=created_at,
            )
            for number in range(1, size.value + 1)
        ]
        self._tickets.create_batch(tickets)

        logger.info("tickets_issued", event_id=str(parsed), count=len(tickets), prefix=prefix)
        return [ticket.id for ticket in tickets]
