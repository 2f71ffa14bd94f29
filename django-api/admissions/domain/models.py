"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in admissions/models.py (persistence layer).
"""

import math
from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from admissions.domain.value_objects import EventId, TicketId


class TicketStatus(Enum):
    """Closed set of ticket states.

    VOID and EXPIRED are only reachable through administrative changes and
    are never produced by redemption.
    """

    VALID = "VALID"
    USED = "USED"
    VOID = "VOID"
    EXPIRED = "EXPIRED"

    @property
    def is_redeemable(self) -> bool:
        return self is TicketStatus.VALID


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event."""

    id: EventId
    name: str
    starts_at: datetime
    location: str
    created_at: datetime


@dataclass(frozen=True)
class Ticket:
    """Domain representation of a Ticket."""

    id: TicketId
    event_id: EventId
    attendee_name: str
    status: TicketStatus
    redeemed_at: datetime | None
    created_at: datetime

    def __post_init__(self) -> None:
        if (self.status is TicketStatus.USED) != (self.redeemed_at is not None):
            raise ValueError("redeemed_at must be set if and only if status is USED")


@dataclass(frozen=True)
class EventOverview:
    """An event together with the number of tickets issued for it."""

    event: Event
    ticket_count: int


@dataclass(frozen=True)
class TicketPage:
    """One fixed-size page of an event's tickets, newest first."""

    event: Event
    tickets: tuple[Ticket, ...]
    page: int
    page_size: int
    total: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.page_size) if self.total else 0
