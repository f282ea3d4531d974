"""
API exception handlers.

This module provides custom exception handling for REST API responses.
Every error body has the shape {"error": {"code": ..., "message": ...}}.
"""

import logging
from typing import Any, Dict, Optional

from django.http import Http404
from rest_framework import status
from rest_framework.exceptions import APIException, ValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler

from core.domain.exceptions import (
    DomainException,
    InvalidLicenseKeyError,
    LicenseLifecycleError,
    NoValidLicensesError,
    NotFoundError,
    ProductNotFoundError,
    TenantIsolationError,
)
from core.metrics import domain_errors_total

logger = logging.getLogger(__name__)

# First match wins; anything else is a 400
DOMAIN_STATUS_CODES = (
    ((NotFoundError, InvalidLicenseKeyError), status.HTTP_404_NOT_FOUND),
    (TenantIsolationError, status.HTTP_403_FORBIDDEN),
    (
        (NoValidLicensesError, ProductNotFoundError, LicenseLifecycleError),
        status.HTTP_422_UNPROCESSABLE_ENTITY,
    ),
)


class APIError(APIException):
    """Base API exception with error code."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "An error occurred"
    default_code = "api_error"

    def __init__(self, detail=None, code=None, status_code=None):
        """
        Initialize API error.

        Args:
            detail: Error message
            code: Error code
            status_code: HTTP status code
        """
        if status_code:
            self.status_code = status_code
        if code:
            self.default_code = code
        super().__init__(detail)


class RequestValidationError(APIError):
    """Raised when a request body or query string is malformed."""

    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY
    default_detail = "The given data was invalid."
    default_code = "validation_error"

    def __init__(self, errors: Dict[str, Any]):
        super().__init__()
        self.errors = errors


def domain_status_code(exc: DomainException) -> int:
    """Map a domain exception to its HTTP status."""
    for exc_types, status_code in DOMAIN_STATUS_CODES:
        if isinstance(exc, exc_types):
            return status_code
    return status.HTTP_400_BAD_REQUEST


def custom_exception_handler(exc: Exception, context: Dict[str, Any]) -> Response:
    """Custom exception handler for REST API."""
    correlation_id = _get_correlation_id(context)

    if isinstance(exc, DomainException):
        return _handle_domain_exception(exc, correlation_id)

    if isinstance(exc, RequestValidationError):
        return _error_response(
            exc.default_code,
            str(exc.detail),
            exc.status_code,
            details=exc.errors,
        )

    if isinstance(exc, ValidationError):
        return _error_response(
            "validation_error",
            RequestValidationError.default_detail,
            status.HTTP_422_UNPROCESSABLE_ENTITY,
            details=exc.detail,
        )

    if isinstance(exc, Http404):
        return _error_response("not_found", "Resource not found", status.HTTP_404_NOT_FOUND)

    if isinstance(exc, APIException):
        response = exception_handler(exc, context)
        if response is not None:
            detail = response.data.get("detail", exc.default_detail) if isinstance(
                response.data, dict
            ) else exc.default_detail
            response.data = {"error": {"code": _code(exc.default_code), "message": str(detail)}}
            return response

    return _handle_unexpected_exception(exc, context, correlation_id)


def _code(code: str) -> str:
    return code.upper().replace("-", "_")


def _error_response(code: str, message: str, status_code: int, details=None) -> Response:
    body: Dict[str, Any] = {"code": _code(code), "message": message}
    if details is not None:
        body["details"] = details
    return Response({"error": body}, status=status_code)


def _get_correlation_id(context: Dict[str, Any]) -> Optional[str]:
    """Extract correlation ID from request context."""
    request = context.get("request")
    if not request:
        return None
    return getattr(request, "correlation_id", None)


def _handle_domain_exception(exc: DomainException, correlation_id: Optional[str]) -> Response:
    """Handle domain-specific exceptions."""
    status_code = domain_status_code(exc)
    domain_errors_total.labels(code=exc.code).inc()
    logger.warning(
        "Domain exception: %s - %s",
        exc.code,
        exc.message,
        extra={"correlation_id": correlation_id, "status_code": status_code},
    )
    return Response({"error": {"code": exc.code, "message": exc.message}}, status=status_code)


def _handle_unexpected_exception(
    exc: Exception, context: Dict[str, Any], correlation_id: Optional[str]
) -> Response:
    """Handle unexpected or untracked exceptions."""
    logger.error(
        "Unexpected error: %s", exc, extra={"correlation_id": correlation_id}, exc_info=True
    )
    return Response(
        {"error": {"code": "INTERNAL_ERROR", "message": "An internal error occurred"}},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
