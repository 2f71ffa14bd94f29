"""Tests for the Django ORM stores.

Run with: pytest tests/test_stores.py -v
"""

from datetime import UTC, datetime, timedelta

import threading

import pytest
from django.db import IntegrityError, OperationalError, connections

from admissions import models
from admissions.domain import EventId, RedemptionOutcome, Ticket, TicketId, TicketStatus
from admissions.domain.errors import TransientStoreError
from admissions.services import RedemptionService
from admissions.stores.django_store import DjangoEventStore, DjangoTicketStore

SCAN_TIME = datetime(2026, 7, 1, 19, 5, 42, tzinfo=UTC)


def _domain_ticket(event_row, name="Guest #1", ticket_id=None) -> Ticket:
    return Ticket(
        id=ticket_id or TicketId.generate(),
        event_id=EventId(event_row.pk),
        attendee_name=name,
        status=TicketStatus.VALID,
        redeemed_at=None,
        created_at=SCAN_TIME,
    )


@pytest.mark.django_db
class TestDjangoTicketStore:
    """Tests for DjangoTicketStore."""

    def test_get_ticket_returns_domain_model(self, ticket_row):
        """Rows are converted to domain tickets."""
        row = ticket_row()
        ticket = DjangoTicketStore().get_ticket(TicketId(row.pk))
        assert ticket.id == TicketId(row.pk)
        assert ticket.status is TicketStatus.VALID
        assert ticket.event_id == EventId(row.event_id)

    def test_get_ticket_missing(self):
        """Unknown ids return None."""
        assert DjangoTicketStore().get_ticket(TicketId.generate()) is None

    def test_mark_used_transitions_valid_ticket(self, ticket_row):
        """The first conditional write wins."""
        row = ticket_row()
        assert DjangoTicketStore().mark_used(TicketId(row.pk), SCAN_TIME) is True
        row.refresh_from_db()
        assert row.status == models.Ticket.Status.USED
        assert row.redeemed_at == SCAN_TIME

    def test_mark_used_twice_only_first_wins(self, ticket_row):
        """A second conditional write changes nothing, including the timestamp."""
        row = ticket_row()
        store = DjangoTicketStore()
        assert store.mark_used(TicketId(row.pk), SCAN_TIME) is True
        assert store.mark_used(TicketId(row.pk), SCAN_TIME + timedelta(minutes=1)) is False
        row.refresh_from_db()
        assert row.redeemed_at == SCAN_TIME

    @pytest.mark.parametrize("status", [models.Ticket.Status.VOID, models.Ticket.Status.EXPIRED])
    def test_mark_used_refuses_non_valid(self, ticket_row, status):
        """VOID and EXPIRED tickets are never moved to USED."""
        row = ticket_row(status=status)
        assert DjangoTicketStore().mark_used(TicketId(row.pk), SCAN_TIME) is False
        row.refresh_from_db()
        assert row.status == status
        assert row.redeemed_at is None

    def test_mark_used_unknown_ticket(self):
        """Nothing to update means no winner."""
        assert DjangoTicketStore().mark_used(TicketId.generate(), SCAN_TIME) is False

    def test_create_batch_inserts_all(self, event_row):
        """A batch is persisted with the ids and names it was given."""
        batch = [_domain_ticket(event_row, name=f"Guest #{i}") for i in range(1, 4)]
        DjangoTicketStore().create_batch(batch)
        stored = set(models.Ticket.objects.values_list("id", "attendee_name"))
        assert stored == {(ticket.id.value, ticket.attendee_name) for ticket in batch}

    def test_create_batch_is_all_or_nothing(self, event_row):
        """A collision anywhere in the batch leaves no rows behind."""
        duplicate = TicketId.generate()
        batch = [
            _domain_ticket(event_row, name="Guest #1"),
            _domain_ticket(event_row, name="Guest #2", ticket_id=duplicate),
            _domain_ticket(event_row, name="Guest #3", ticket_id=duplicate),
        ]
        with pytest.raises(IntegrityError):
            DjangoTicketStore().create_batch(batch)
        assert models.Ticket.objects.count() == 0

    def test_counts_and_listing(self, event_row, ticket_row):
        """Counts are per event and listings are newest first."""
        other = models.Event.objects.create(name="Jazz Night", starts_at=SCAN_TIME, location="Club")
        older = ticket_row(name="Guest #1")
        older.created_at = SCAN_TIME - timedelta(hours=1)
        older.save()
        newer = ticket_row(name="Guest #2")
        newer.created_at = SCAN_TIME
        newer.save()
        ticket_row(name="Other #1", event=other)
        store = DjangoTicketStore()

        assert store.count_for_event(EventId(event_row.pk)) == 2
        assert store.counts_by_event() == {EventId(event_row.pk): 2, EventId(other.pk): 1}
        listed = store.list_for_event(EventId(event_row.pk), offset=0, limit=10)
        assert [ticket.id.value for ticket in listed] == [newer.pk, older.pk]
        assert store.list_for_event(EventId(event_row.pk), offset=1, limit=10)[0].id.value == older.pk

    def test_database_errors_become_transient(self, monkeypatch):
        """Connection failures surface as TransientStoreError."""

        def unavailable(*args, **kwargs):
            raise OperationalError("could not connect to server")

        monkeypatch.setattr("django.db.models.query.QuerySet.update", unavailable)
        with pytest.raises(TransientStoreError):
            DjangoTicketStore().mark_used(TicketId.generate(), SCAN_TIME)


@pytest.mark.django_db
class TestDjangoEventStore:
    """Tests for DjangoEventStore."""

    def test_list_events_ordered_by_start(self, event_row):
        """Events are listed soonest first."""
        earlier = models.Event.objects.create(
            name="Jazz Night", starts_at=event_row.starts_at - timedelta(days=1), location=""
        )
        assert [event.name for event in DjangoEventStore().list_events()] == [earlier.name, event_row.name]

    def test_get_event_and_exists(self, event_row):
        """Events are found by id; unknown ids are None / False."""
        store = DjangoEventStore()
        assert store.get_event(EventId(event_row.pk)).name == "Summer Festival"
        assert store.event_exists(EventId(event_row.pk)) is True
        missing = EventId.from_string("9d0c6a5e-2b8e-4f61-a7f0-3c2b1e4d5f60")
        assert store.get_event(missing) is None
        assert store.event_exists(missing) is False


@pytest.mark.django_db
class TestTicketConstraint:
    """Tests for the database check on redeemed_at."""

    def test_used_without_timestamp_is_rejected(self, event_row):
        """The database refuses a USED ticket with no redemption time."""
        with pytest.raises(IntegrityError):
            models.Ticket.objects.create(
                event=event_row, attendee_name="Guest #1", status=models.Ticket.Status.USED
            )


@pytest.mark.django_db(transaction=True)
class TestConcurrentRedemption:
    """Tests for the conditional write under real concurrent database connections."""

    @pytest.mark.parametrize("contenders", [2, 8])
    def test_one_connection_wins(self, contenders):
        """K threads with their own connections: one ADMITTED, K-1 ALREADY_USED."""
        event = models.Event.objects.create(name="Summer Festival", starts_at=SCAN_TIME, location="")
        row = models.Ticket.objects.create(event=event, attendee_name="Guest #1")
        barrier = threading.Barrier(contenders)
        outcomes = []
        errors = []
        lock = threading.Lock()

        def scan():
            service = RedemptionService(tickets=DjangoTicketStore(), events=DjangoEventStore())
            try:
                barrier.wait(timeout=10)
                for _ in range(20):
                    try:
                        result = service.redeem(str(row.pk))
                        break
                    except TransientStoreError:
                        # SQLite may report the table as locked; a retry is always safe.
                        continue
                else:
                    raise AssertionError("store stayed unavailable")
                with lock:
                    outcomes.append(result.outcome)
            except Exception as exc:
                with lock:
                    errors.append(exc)
            finally:
                connections.close_all()

        threads = [threading.Thread(target=scan) for _ in range(contenders)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join(timeout=30)

        assert errors == []
        assert outcomes.count(RedemptionOutcome.ADMITTED) == 1
        assert outcomes.count(RedemptionOutcome.ALREADY_USED) == contenders - 1
        row.refresh_from_db()
        assert row.status == models.Ticket.Status.USED
        assert row.redeemed_at is not None
