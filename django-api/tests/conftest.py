"""Pytest configuration and shared fixtures."""

from datetime import UTC, datetime, timedelta

import pytest
from rest_framework.test import APIClient

from admissions import models
from admissions.domain import Event, EventId, Ticket, TicketId, TicketStatus

NOW = datetime(2026, 6, 1, 18, 30, tzinfo=UTC)


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture(autouse=True)
def clear_cache():
    from django.core.cache import cache
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def concert() -> Event:
    return Event(
        id=EventId.from_string("6f1d2c1e-8c3b-4a53-9a4e-0d7d6f0b1a01"),
        name="Summer Festival",
        starts_at=NOW + timedelta(days=30),
        location="Main Stadium",
        created_at=NOW,
    )


@pytest.fixture
def make_ticket():
    def _make(event: Event, status: TicketStatus = TicketStatus.VALID, name: str = "Guest #1") -> Ticket:
        return Ticket(
            id=TicketId.generate(),
            event_id=event.id,
            attendee_name=name,
            status=status,
            redeemed_at=NOW if status is TicketStatus.USED else None,
            created_at=NOW,
        )

    return _make


@pytest.fixture
def event_row(db) -> models.Event:
    return models.Event.objects.create(
        name="Summer Festival",
        starts_at=NOW + timedelta(days=30),
        location="Main Stadium",
    )


@pytest.fixture
def ticket_row(event_row):
    def _make(status: str = models.Ticket.Status.VALID, name: str = "Guest #1", event=None) -> models.Ticket:
        return models.Ticket.objects.create(
            event=event or event_row,
            attendee_name=name,
            status=status,
            redeemed_at=NOW if status == models.Ticket.Status.USED else None,
        )

    return _make
