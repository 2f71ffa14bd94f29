import structlog
from django.contrib import admin, messages
from django.db.models import Count

from admissions.models import Event, Ticket

logger = structlog.get_logger(__name__)


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    list_display = ["name", "starts_at", "location", "ticket_count"]
    search_fields = ["name", "location"]

    def get_queryset(self, request):
        return super().get_queryset(request).annotate(_ticket_count=Count("tickets"))

    @admin.display(description="Tickets", ordering="_ticket_count")
    def ticket_count(self, obj: Event) -> int:
        return obj._ticket_count


@admin.register(Ticket)
class TicketAdmin(admin.ModelAdmin):
    list_display = ["attendee_name", "event", "status", "redeemed_at", "created_at"]
    list_filter = ["status", "event"]
    search_fields = ["attendee_name", "=id"]
    readonly_fields = ["id", "event", "attendee_name", "status", "redeemed_at", "created_at"]
    actions = ["void_tickets"]

    def has_add_permission(self, request):
        return False

    def has_delete_permission(self, request, obj=None):
        return False

    @admin.action(description="Void selected tickets")
    def void_tickets(self, request, queryset):
        # Conditional like redemption: a ticket already used stays used.
        voided = queryset.filter(status=Ticket.Status.VALID).update(status=Ticket.Status.VOID)
        logger.info("tickets_voided", count=voided, user=str(request.user))
        self.message_user(request, f"{voided} ticket(s) voided.", messages.SUCCESS)
