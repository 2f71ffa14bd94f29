"""Redemption engine: turns one scan into exactly one admission decision.

The read that precedes the write is only used to pick a denial message.
Admission itself is decided by the store's conditional write, so any number
of scanners in any number of processes can race on the same ticket and
exactly one of them wins.
"""

from collections.abc import Callable
from datetime import UTC, datetime

import structlog

from admissions.domain import (
    EventId,
    RedemptionOutcome,
    RedemptionResult,
    Ticket,
    TicketId,
    TicketStatus,
)
from admissions.domain.errors import InvalidTicketIdError
from admissions.stores.interfaces import EventStore, TicketStore

logger = structlog.get_logger(__name__)


def _utcnow() -> datetime:
    return datetime.now(UTC)


class RedemptionService:
    """Service for redeeming scanned tickets."""

    def __init__(
        self,
        tickets: TicketStore,
        events: EventStore,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._tickets = tickets
        self._events = events
        self._clock = clock

    def redeem(self, ticket_id: str) -> RedemptionResult:
        """Admit the ticket if it is still VALID, otherwise explain why not.

        Raises:
            InvalidTicketIdError: If ticket_id is empty.
            TransientStoreError: If the store cannot be reached. Nothing was
                written and the scan may be retried.
        """
        if not isinstance(ticket_id, str) or not ticket_id.strip():
            raise InvalidTicketIdError()

        raw_id = ticket_id.strip()
        try:
            parsed = TicketId.from_string(raw_id)
        except ValueError:
            # Ids are opaque to scanners; garbage is just an unknown ticket.
            logger.info("ticket_redemption", ticket_id=raw_id, outcome=RedemptionOutcome.NOT_FOUND.value)
            return RedemptionResult.not_found(raw_id)

        ticket = self._tickets.get_ticket(parsed)
        if ticket is not None and ticket.status.is_redeemable:
            redeemed_at = self._clock()
            if self._tickets.mark_used(parsed, redeemed_at):
                result = self._describe(RedemptionOutcome.ADMITTED, ticket, redeemed_at)
                logger.info("ticket_redemption", ticket_id=str(parsed), outcome=result.outcome.value)
                return result
            # Lost the race: report whatever the winner left behind.
            logger.info("ticket_redemption_race_lost", ticket_id=str(parsed))
            ticket = self._tickets.get_ticket(parsed)

        result = self._deny(raw_id, ticket)
        logger.info(
            "ticket_redemption",
            ticket_id=str(parsed),
            outcome=result.outcome.value,
            status=result.status.value if result.status else None,
        )
        return result

    def _deny(self, raw_id: str, ticket: Ticket | None) -> RedemptionResult:
        if ticket is None:
            return RedemptionResult.not_found(raw_id)
        if ticket.status is TicketStatus.USED:
            return self._describe(RedemptionOutcome.ALREADY_USED, ticket)
        if not ticket.status.is_redeemable:
            return self._describe(RedemptionOutcome.NOT_REDEEMABLE, ticket)
        # The conditional write failed yet the ticket reads VALID again.
        raise RuntimeError(f"Ticket {ticket.id} rejected the USED transition while VALID")

    def _describe(
        self,
        outcome: RedemptionOutcome,
        ticket: Ticket,
        redeemed_at: datetime | None = None,
    ) -> RedemptionResult:
        return RedemptionResult(
            outcome=outcome,
            ticket_id=str(ticket.id),
            attendee_name=ticket.attendee_name,
            event_name=self._event_name(ticket.event_id),
            status=TicketStatus.USED if redeemed_at else ticket.status,
            redeemed_at=redeemed_at or ticket.redeemed_at,
        )

    def _event_name(self, event_id: EventId) -> str | None:
        event = self._events.get_event(event_id)
        return event.name if event else None
