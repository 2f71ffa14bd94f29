from admissions.handlers.views import (
    EventDetailView,
    EventListView,
    EventTicketsView,
    ScanView,
    TicketDetailView,
)

__all__ = [
    "EventDetailView",
    "EventListView",
    "EventTicketsView",
    "ScanView",
    "TicketDetailView",
]
