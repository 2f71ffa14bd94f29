"""Tests for the admin site actions.

Run with: pytest tests/test_admin.py -v
"""

import pytest
from django.urls import reverse

from admissions import models


@pytest.mark.django_db
class TestVoidTicketsAction:
    """Tests for the "Void selected tickets" action."""

    def test_voids_valid_tickets_only(self, admin_client, ticket_row):
        """VALID tickets become VOID; used tickets keep their redemption."""
        valid = ticket_row()
        used = ticket_row(status=models.Ticket.Status.USED, name="Guest #2")

        response = admin_client.post(
            reverse("admin:admissions_ticket_changelist"),
            {"action": "void_tickets", "_selected_action": [str(valid.pk), str(used.pk)]},
        )

        assert response.status_code == 302
        valid.refresh_from_db()
        used.refresh_from_db()
        assert valid.status == models.Ticket.Status.VOID
        assert used.status == models.Ticket.Status.USED
        assert used.redeemed_at is not None

    def test_voided_ticket_is_refused_at_scan(self, admin_client, api_client, ticket_row):
        """A voided ticket is reported as not redeemable."""
        row = ticket_row()
        admin_client.post(
            reverse("admin:admissions_ticket_changelist"),
            {"action": "void_tickets", "_selected_action": [str(row.pk)]},
        )

        response = api_client.post("/api/scan", {"ticketId": str(row.pk)}, format="json")

        assert response.status_code == 403
        assert response.json()["message"] == "Ticket is VOID"

    def test_event_changelist_shows_counts(self, admin_client, event_row, ticket_row):
        """The event list renders with ticket counts."""
        ticket_row()
        response = admin_client.get(reverse("admin:admissions_event_changelist"))
        assert response.status_code == 200
        assert b"Summer Festival" in response.content
