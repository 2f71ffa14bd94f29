"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

from django.conf import settings
from django.core.cache import cache
from django.utils import timezone
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from admissions.cache import EVENT_LIST_KEY, event_detail_key
from admissions.domain import EventId, RedemptionOutcome, RedemptionResult
from admissions.domain.errors import InvalidEventIdError, InvalidTicketIdError
from admissions.handlers.serializers import (
    EventOverviewSerializer,
    EventSerializer,
    IssueTicketsSerializer,
    ScanRequestSerializer,
    TicketPageSerializer,
    TicketSerializer,
)
from admissions.services import CatalogService, IssuanceService, RedemptionService
from admissions.stores.django_store import DjangoEventStore, DjangoTicketStore

REDEMPTION_STATUS = {
    RedemptionOutcome.ADMITTED: status.HTTP_200_OK,
    RedemptionOutcome.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    RedemptionOutcome.ALREADY_USED: status.HTTP_409_CONFLICT,
    RedemptionOutcome.NOT_REDEEMABLE: status.HTTP_403_FORBIDDEN,
}


def redemption_service() -> RedemptionService:
    return RedemptionService(tickets=DjangoTicketStore(), events=DjangoEventStore())


def issuance_service() -> IssuanceService:
    return IssuanceService(
        tickets=DjangoTicketStore(),
        events=DjangoEventStore(),
        max_batch_size=settings.TICKETS_MAX_BATCH_SIZE,
        default_name_prefix=settings.TICKETS_DEFAULT_NAME_PREFIX,
    )


def catalog_service() -> CatalogService:
    return CatalogService(
        events=DjangoEventStore(),
        tickets=DjangoTicketStore(),
        page_size=settings.TICKETS_PAGE_SIZE,
    )


def _normalized_event_id(event_id: str) -> str:
    try:
        return str(EventId.from_string(event_id))
    except ValueError as exc:
        raise InvalidEventIdError() from exc


def render_redemption(result: RedemptionResult) -> dict:
    """Build the scanner payload for a redemption outcome."""
    if result.outcome is RedemptionOutcome.NOT_FOUND:
        return {"success": False, "message": "INVALID TICKET"}

    ticket = {
        "id": result.ticket_id,
        "attendee": result.attendee_name,
        "event": result.event_name,
    }
    if result.outcome is RedemptionOutcome.ADMITTED:
        return {"success": True, "message": "ACCESS GRANTED", "ticket": ticket}
    if result.outcome is RedemptionOutcome.ALREADY_USED:
        scanned = timezone.localtime(result.redeemed_at)
        ticket["redeemed_at"] = result.redeemed_at.isoformat()
        return {
            "success": False,
            "message": f"ALREADY USED at {scanned.strftime('%H:%M:%S')}",
            "ticket": ticket,
        }
    return {"success": False, "message": f"Ticket is {result.status.value}", "ticket": ticket}


class ScanView(APIView):
    """Handler for POST /api/scan"""

    def post(self, request: Request) -> Response:
        serializer = ScanRequestSerializer(data=request.data)
        if not serializer.is_valid():
            raise InvalidTicketIdError()
        result = redemption_service().redeem(serializer.scanned_id)
        return Response(render_redemption(result), status=REDEMPTION_STATUS[result.outcome])


class EventTicketsView(APIView):
    """Handler for POST /api/events/{event_id}/tickets"""

    def post(self, request: Request, event_id: str) -> Response:
        serializer = IssueTicketsSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        created = issuance_service().issue(
            event_id,
            serializer.validated_data["count"],
            serializer.validated_data.get("prefix"),
        )
        return Response({"success": True, "created": len(created)}, status=status.HTTP_201_CREATED)

    def get(self, request: Request, event_id: str) -> Response:
        page = catalog_service().list_tickets(event_id, request.query_params.get("page"))
        return Response(TicketPageSerializer(page).data)


class EventListView(APIView):
    """Handler for GET /api/events"""

    def get(self, request: Request) -> Response:
        data = cache.get(EVENT_LIST_KEY)
        if data is None:
            overviews = catalog_service().list_events()
            data = EventOverviewSerializer(overviews, many=True).data
            cache.set(EVENT_LIST_KEY, data, settings.CACHE_TTL)
        return Response(data)


class EventDetailView(APIView):
    """Handler for GET /api/events/{event_id}"""

    def get(self, request: Request, event_id: str) -> Response:
        normalized = _normalized_event_id(event_id)
        key = event_detail_key(normalized)
        data = cache.get(key)
        if data is None:
            overview = catalog_service().get_event(normalized)
            data = EventOverviewSerializer(overview).data
            cache.set(key, data, settings.CACHE_TTL)
        return Response(data)


class TicketDetailView(APIView):
    """Handler for GET /api/tickets/{ticket_id}"""

    def get(self, request: Request, ticket_id: str) -> Response:
        ticket, event = catalog_service().get_ticket(ticket_id)
        return Response(
            {
                "ticket": TicketSerializer(ticket).data,
                "event": EventSerializer(event).data,
            }
        )
