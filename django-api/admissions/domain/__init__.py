from admissions.domain.models import Event, EventOverview, Ticket, TicketPage, TicketStatus
from admissions.domain.results import RedemptionOutcome, RedemptionResult
from admissions.domain.value_objects import BatchSize, EventId, PageNumber, TicketId

__all__ = [
    "Event",
    "EventOverview",
    "Ticket",
    "TicketPage",
    "TicketStatus",
    "RedemptionOutcome",
    "RedemptionResult",
    "EventId",
    "TicketId",
    "BatchSize",
    "PageNumber",
]
