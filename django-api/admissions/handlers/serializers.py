"""Serializers for request parsing and for rendering domain models."""

from rest_framework import serializers


class ScanRequestSerializer(serializers.Serializer):
    """Body of a scan: the ticket identifier read from the code."""

    ticketId = serializers.CharField(required=False, allow_blank=True)
    ticket_id = serializers.CharField(required=False, allow_blank=True)

    @property
    def scanned_id(self) -> str:
        data = self.validated_data
        return data.get("ticketId") or data.get("ticket_id") or ""


class IssueTicketsSerializer(serializers.Serializer):
    """Body of a batch issuance request. Bounds are checked by the service."""

    count = serializers.IntegerField()
    prefix = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=200)


class EventSerializer(serializers.Serializer):
    """Serializer for Event domain model."""

    id = serializers.UUIDField(source="id.value")
    name = serializers.CharField()
    starts_at = serializers.DateTimeField()
    location = serializers.CharField()
    created_at = serializers.DateTimeField()


class EventOverviewSerializer(serializers.Serializer):
    """Serializer for EventOverview: the event fields plus its ticket count."""

    id = serializers.UUIDField(source="event.id.value")
    name = serializers.CharField(source="event.name")
    starts_at = serializers.DateTimeField(source="event.starts_at")
    location = serializers.CharField(source="event.location")
    created_at = serializers.DateTimeField(source="event.created_at")
    ticket_count = serializers.IntegerField()


class TicketSerializer(serializers.Serializer):
    """Serializer for Ticket domain model."""

    id = serializers.UUIDField(source="id.value")
    event_id = serializers.UUIDField(source="event_id.value")
    attendee_name = serializers.CharField()
    status = serializers.CharField(source="status.value")
    redeemed_at = serializers.DateTimeField(allow_null=True)
    created_at = serializers.DateTimeField()


class TicketPageSerializer(serializers.Serializer):
    """Serializer for one page of an event's tickets."""

    event = EventSerializer()
    tickets = TicketSerializer(many=True)
    page = serializers.IntegerField()
    page_size = serializers.IntegerField()
    total = serializers.IntegerField()
    total_pages = serializers.IntegerField()
