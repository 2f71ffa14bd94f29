"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
"""

import uuid

from django.db import models
from django.utils import timezone


class Event(models.Model):
    """Persistence model for events."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    starts_at = models.DateTimeField()
    location = models.CharField(max_length=255, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["starts_at"]
        indexes = [
            models.Index(fields=["starts_at"], name="event_starts_at_idx"),
        ]

    def __str__(self) -> str:
        return self.name


class Ticket(models.Model):
    """Persistence model for tickets."""

    class Status(models.TextChoices):
        VALID = "VALID", "Valid"
        USED = "USED", "Used"
        VOID = "VOID", "Void"
        EXPIRED = "EXPIRED", "Expired"

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    event = models.ForeignKey(Event, on_delete=models.PROTECT, related_name="tickets")
    attendee_name = models.CharField(max_length=255)
    status = models.CharField(max_length=16, choices=Status.choices, default=Status.VALID)
    redeemed_at = models.DateTimeField(null=True, blank=True)
    # Not auto_now_add: issuance stamps the whole batch with one timestamp.
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        ordering = ["-created_at", "id"]
        indexes = [
            models.Index(fields=["event", "-created_at"], name="ticket_event_created_idx"),
        ]
        constraints = [
            models.CheckConstraint(
                condition=(
                    models.Q(status="USED", redeemed_at__isnull=False)
                    | (~models.Q(status="USED") & models.Q(redeemed_at__isnull=True))
                ),
                name="ticket_redeemed_at_iff_used",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.attendee_name} - {self.status}"
