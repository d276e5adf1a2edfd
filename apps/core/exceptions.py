"""
Error taxonomy and the API exception handler.

Business-rule failures are raised as typed exceptions from the service layer.
``shop_exception_handler`` turns these, DRF errors and database integrity
errors into the JSON failure envelope.
"""

import logging

from django.core.exceptions import ObjectDoesNotExist
from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import IntegrityError
from django.db.models import ProtectedError, RestrictedError
from django.http import Http404
from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler, set_rollback

logger = logging.getLogger(__name__)


class ShopError(exceptions.APIException):
    """Base class for business-rule failures."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = "An unexpected error occurred"
    default_code = "internal_error"


class InvalidRequest(ShopError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Invalid request"
    default_code = "bad_request"


class ResourceNotFound(ShopError):
    """A referenced record does not exist."""

    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Resource not found"
    default_code = "not_found"

    def __init__(self, resource="Resource", identifier=None):
        self.resource = resource
        self.identifier = identifier
        if identifier is None:
            detail = f"{resource} not found"
        else:
            detail = f"{resource} {identifier} not found"
        super().__init__(detail)


class InsufficientStock(ShopError):
    """Requested quantity exceeds what is on hand."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Insufficient stock"
    default_code = "insufficient_stock"

    def __init__(self, product_code, available=None, requested=None):
        self.product_code = product_code
        self.available = available
        self.requested = requested
        super().__init__(f"Insufficient stock for product {product_code}")


class InvalidReason(ShopError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Invalid reason"
    default_code = "invalid_reason"

    def __init__(self, reason, allowed):
        self.reason = reason
        super().__init__(f"Invalid reason. Must be one of: {', '.join(allowed)}")


class InvalidReference(ShopError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Invalid reference to a related record"
    default_code = "invalid_reference"


class Conflict(ShopError):
    status_code = status.HTTP_409_CONFLICT
    default_detail = "Record conflicts with existing data"
    default_code = "conflict"


def _translate(exc):
    """Map Django/database exceptions onto the shop error types."""
    # ProtectedError and RestrictedError subclass IntegrityError.
    if isinstance(exc, (ProtectedError, RestrictedError)):
        return Conflict("Record is in use and cannot be deleted")
    if isinstance(exc, DjangoValidationError):
        return InvalidRequest(_error_message(exc.messages))
    if isinstance(exc, IntegrityError):
        message = str(exc)
        logger.warning("IntegrityError caught: %s", message)
        if "UNIQUE constraint failed" in message or "duplicate key value" in message:
            return Conflict("A record with this value already exists")
        if "FOREIGN KEY constraint failed" in message or "foreign key constraint" in message:
            return InvalidReference()
        return InvalidRequest("Data integrity violation")
    if isinstance(exc, (Http404, ObjectDoesNotExist)):
        return ResourceNotFound()
    return exc


def _error_message(detail):
    if isinstance(detail, list) and detail:
        return _error_message(detail[0])
    if isinstance(detail, dict):
        return detail.get("detail") or "Validation failed"
    return str(detail)


def shop_exception_handler(exc, context):
    """
    DRF exception handler producing ``{"success": false, "error", "message"}``.

    Validation failures add the field errors under ``data.errors``.
    Unhandled exceptions are logged and reported as a 500.
    """
    exc = _translate(exc)
    response = exception_handler(exc, context)

    if response is None:
        view = context.get("view")
        logger.error(
            "Unhandled error in %s: %s",
            view.__class__.__name__ if view else "unknown view",
            exc,
            exc_info=exc,
        )
        set_rollback()
        message = "An unexpected error occurred"
        return Response(
            {"success": False, "error": message, "message": message},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    if isinstance(exc, exceptions.ValidationError):
        message = "Validation failed"
        response.data = {
            "success": False,
            "error": message,
            "message": message,
            "data": {"errors": response.data},
        }
        return response

    unauthenticated = (exceptions.NotAuthenticated, exceptions.AuthenticationFailed)
    if isinstance(exc, unauthenticated) and response.status_code == 403:
        # Unauthenticated is always 401.
        response.status_code = status.HTTP_401_UNAUTHORIZED

    message = _error_message(exc.detail)
    body = {"success": False, "error": message, "message": message}
    code = getattr(exc, "default_code", None)
    if isinstance(exc, ShopError) and code:
        body["code"] = code
    response.data = body
    return response
