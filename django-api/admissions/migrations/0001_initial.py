import uuid

import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Event",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("name", models.CharField(max_length=255)),
                ("starts_at", models.DateTimeField()),
                ("location", models.CharField(blank=True, max_length=255)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "ordering": ["starts_at"],
                "indexes": [models.Index(fields=["starts_at"], name="event_starts_at_idx")],
            },
        ),
        migrations.CreateModel(
            name="Ticket",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("attendee_name", models.CharField(max_length=255)),
                (
                    "status",
                    models.CharField(
                        choices=[("VALID", "Valid"), ("USED", "Used"), ("VOID", "Void"), ("EXPIRED", "Expired")],
                        default="VALID",
                        max_length=16,
                    ),
                ),
                ("redeemed_at", models.DateTimeField(blank=True, null=True)),
                ("created_at", models.DateTimeField(default=django.utils.timezone.now)),
                (
                    "event",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="tickets",
                        to="admissions.event",
                    ),
                ),
            ],
            options={
                "ordering": ["-created_at", "id"],
                "indexes": [models.Index(fields=["event", "-created_at"], name="ticket_event_created_idx")],
                "constraints": [
                    models.CheckConstraint(
                        condition=(
                            models.Q(status="USED", redeemed_at__isnull=False)
                            | (~models.Q(status="USED") & models.Q(redeemed_at__isnull=True))
                        ),
                        name="ticket_redeemed_at_iff_used",
                    )
                ],
            },
        ),
    ]
