"""Cache keys for event read endpoints."""

from django.core.cache import cache

EVENT_LIST_KEY = "events:list"


def event_detail_key(event_id: object) -> str:
    return f"events:{event_id}"


def invalidate_event(event_id: object) -> None:
    """Drop the list and detail entries that embed this event."""
    cache.delete_many([EVENT_LIST_KEY, event_detail_key(event_id)])
