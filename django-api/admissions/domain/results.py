"""Structured redemption outcomes.

A denied scan is an ordinary result, not an error: callers branch on
``outcome`` and only infrastructure failures are raised.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from admissions.domain.models import TicketStatus


class RedemptionOutcome(Enum):
    """Disjoint results of a redemption attempt."""

    ADMITTED = "ADMITTED"
    NOT_FOUND = "NOT_FOUND"
    ALREADY_USED = "ALREADY_USED"
    NOT_REDEEMABLE = "NOT_REDEEMABLE"


@dataclass(frozen=True)
class RedemptionResult:
    """What a scanner is told about one ticket identifier."""

    outcome: RedemptionOutcome
    ticket_id: str
    attendee_name: str | None = None
    event_name: str | None = None
    status: TicketStatus | None = None
    redeemed_at: datetime | None = None

    @property
    def admitted(self) -> bool:
        return self.outcome is RedemptionOutcome.ADMITTED

    @classmethod
    def not_found(cls, ticket_id: str) -> "RedemptionResult":
        return cls(outcome=RedemptionOutcome.NOT_FOUND, ticket_id=ticket_id)
