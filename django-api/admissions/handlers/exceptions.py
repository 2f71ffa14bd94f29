"""Maps domain errors to HTTP responses for every API view."""

import structlog
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

from admissions.domain.errors import DomainError, NotFoundError, TransientStoreError, ValidationError

logger = structlog.get_logger(__name__)


def _status_for(exc: DomainError) -> int:
    if isinstance(exc, ValidationError):
        return status.HTTP_400_BAD_REQUEST
    if isinstance(exc, NotFoundError):
        return status.HTTP_404_NOT_FOUND
    if isinstance(exc, TransientStoreError):
        return status.HTTP_503_SERVICE_UNAVAILABLE
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def exception_handler(exc: Exception, context: dict) -> Response:
    """DRF exception handler.

    Domain errors carry user-safe messages and are returned as-is. Anything
    DRF does not recognise is logged and answered with a generic 500.
    """
    if isinstance(exc, DomainError):
        code = _status_for(exc)
        if isinstance(exc, TransientStoreError):
            logger.warning("store_unavailable_response", view=_view_name(context))
            return Response(
                {"success": False, "code": exc.code.value, "message": exc.message},
                status=code,
                headers={"Retry-After": "1"},
            )
        return Response({"success": False, "code": exc.code.value, "message": exc.message}, status=code)

    response = drf_exception_handler(exc, context)
    if response is not None:
        return response

    logger.exception("internal_server_error", view=_view_name(context))
    return Response(
        {"success": False, "message": "Internal Server Error."},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def _view_name(context: dict) -> str | None:
    view = context.get("view")
    return type(view).__name__ if view is not None else None
