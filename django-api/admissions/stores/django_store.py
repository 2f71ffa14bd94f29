"""Django ORM implementation of the event and ticket stores."""

import functools
from collections.abc import Callable, Sequence
from datetime import datetime
from typing import ParamSpec, TypeVar

import structlog
from django.db import InterfaceError, OperationalError, transaction
from django.db.models import Count

from admissions import models
from admissions.domain import Event, EventId, Ticket, TicketId, TicketStatus
from admissions.domain.errors import TransientStoreError
from admissions.signals import tickets_issued
from admissions.stores.interfaces import EventStore, TicketStore

logger = structlog.get_logger(__name__)

P = ParamSpec("P")
R = TypeVar("R")


def translate_db_errors(func: Callable[P, R]) -> Callable[P, R]:
    """Re-raise connection and timeout failures as TransientStoreError."""

    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        try:
            return func(*args, **kwargs)
        except (OperationalError, InterfaceError) as exc:
            logger.warning("store_unavailable", operation=func.__name__, error=str(exc))
            raise TransientStoreError() from exc

    return wrapper


def _to_event(row: models.Event) -> Event:
    return Event(
        id=EventId(row.id),
        name=row.name,
        starts_at=row.starts_at,
        location=row.location,
        created_at=row.created_at,
    )


def _to_ticket(row: models.Ticket) -> Ticket:
    return Ticket(
        id=TicketId(row.id),
        event_id=EventId(row.event_id),
        attendee_name=row.attendee_name,
        status=TicketStatus(row.status),
        redeemed_at=row.redeemed_at,
        created_at=row.created_at,
    )


class DjangoEventStore(EventStore):
    """Database-backed event store using Django ORM."""

    @translate_db_errors
    def list_events(self) -> list[Event]:
        return [_to_event(row) for row in models.Event.objects.order_by("starts_at", "id")]

    @translate_db_errors
    def get_event(self, event_id: EventId) -> Event | None:
        row = models.Event.objects.filter(pk=event_id.value).first()
        return _to_event(row) if row else None

    @translate_db_errors
    def event_exists(self, event_id: EventId) -> bool:
        return models.Event.objects.filter(pk=event_id.value).exists()


class DjangoTicketStore(TicketStore):
    """Database-backed ticket store using Django ORM."""

    @translate_db_errors
    def get_ticket(self, ticket_id: TicketId) -> Ticket | None:
        row = models.Ticket.objects.filter(pk=ticket_id.value).first()
        return _to_ticket(row) if row else None

    @translate_db_errors
    def mark_used(self, ticket_id: TicketId, redeemed_at: datetime) -> bool:
        # Single UPDATE ... WHERE status = 'VALID'; the row count picks the winner.
        updated = models.Ticket.objects.filter(
            pk=ticket_id.value,
            status=models.Ticket.Status.VALID,
        ).update(status=models.Ticket.Status.USED, redeemed_at=redeemed_at)
        return updated == 1

    @translate_db_errors
    def create_batch(self, tickets: Sequence[Ticket]) -> None:
        if not tickets:
            return
        rows = [
            models.Ticket(
                id=ticket.id.value,
                event_id=ticket.event_id.value,
                attendee_name=ticket.attendee_name,
                status=ticket.status.value,
                redeemed_at=ticket.redeemed_at,
                created_at=ticket.created_at,
            )
            for ticket in tickets
        ]
        event_ids = {ticket.event_id for ticket in tickets}
        with transaction.atomic():
            models.Ticket.objects.bulk_create(rows)
            for event_id in event_ids:
                transaction.on_commit(
                    functools.partial(tickets_issued.send, sender=DjangoTicketStore, event_id=event_id)
                )

    @translate_db_errors
    def count_for_event(self, event_id: EventId) -> int:
        return models.Ticket.objects.filter(event_id=event_id.value).count()

    @translate_db_errors
    def counts_by_event(self) -> dict[EventId, int]:
        rows = models.Ticket.objects.order_by().values("event_id").annotate(total=Count("id"))
        return {EventId(row["event_id"]): row["total"] for row in rows}

    @translate_db_errors
    def list_for_event(self, event_id: EventId, offset: int, limit: int) -> list[Ticket]:
        rows = models.Ticket.objects.filter(event_id=event_id.value).order_by("-created_at", "id")
        return [_to_ticket(row) for row in rows[offset : offset + limit]]
