"""Django signals for cache invalidation."""

import structlog
from django.db.models.signals import post_delete, post_save
from django.dispatch import Signal, receiver

from admissions.cache import invalidate_event
from admissions.models import Event, Ticket

logger = structlog.get_logger(__name__)

# Sent after an issuance batch commits. bulk_create does not fire post_save.
tickets_issued = Signal()


@receiver([post_save, post_delete], sender=Event)
def invalidate_event_cache(sender, instance, **kwargs):
    """Invalidate caches when an event is saved or deleted."""
    invalidate_event(instance.pk)


@receiver([post_save, post_delete], sender=Ticket)
def invalidate_ticket_cache(sender, instance, **kwargs):
    """Invalidate the owning event's caches when a single ticket changes."""
    invalidate_event(instance.event_id)


@receiver(tickets_issued)
def invalidate_issued_cache(sender, event_id, **kwargs):
    """Invalidate cached ticket counts once a batch is committed."""
    logger.debug("event_cache_invalidated", event_id=str(event_id))
    invalidate_event(event_id)
