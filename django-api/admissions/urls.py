from django.urls import path

from admissions.handlers import (
    EventDetailView,
    EventListView,
    EventTicketsView,
    ScanView,
    TicketDetailView,
)

urlpatterns = [
    path("scan", ScanView.as_view(), name="scan"),
    path("events", EventListView.as_view(), name="event-list"),
    path("events/<str:event_id>", EventDetailView.as_view(), name="event-detail"),
    path("events/<str:event_id>/tickets", EventTicketsView.as_view(), name="event-tickets"),
    path("tickets/<str:ticket_id>", TicketDetailView.as_view(), name="ticket-detail"),
]
