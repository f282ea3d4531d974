"""
Observability middleware.

This middleware adds structured logging, Prometheus metrics,
and request correlation.
"""

import contextvars
import logging
import re
import time
import uuid
from typing import Callable, Optional

from django.http import HttpRequest, HttpResponse

from core.metrics import http_request_duration_seconds, http_requests_total

logger = logging.getLogger(__name__)

CORRELATION_HEADER = "HTTP_X_CORRELATION_ID"

_UUID_SEGMENT = re.compile(
    r"/[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}"
)
_NUMERIC_SEGMENT = re.compile(r"/\d+")

# Correlation id of the request being served
correlation_context: contextvars.ContextVar[Optional[str]] = contextvars.ContextVar(
    "correlation_id", default=None
)


def get_correlation_id() -> Optional[str]:
    """
    Get the correlation ID of the current request.

    Returns:
        Correlation ID or None outside a request
    """
    return correlation_context.get()


def normalize_endpoint(path: str) -> str:
    """Collapse ids in a path so metric labels stay bounded."""
    endpoint = _UUID_SEGMENT.sub("/{id}", path)
    return _NUMERIC_SEGMENT.sub("/{id}", endpoint)


class ObservabilityMiddleware:
    """
    Middleware for request observability.

    This middleware:
    1. Accepts or generates correlation IDs for request tracing
    2. Logs request/response information
    3. Records request count and duration metrics
    4. Adds correlation ID to response headers
    """

    def __init__(self, get_response: Callable):
        """Initialize middleware."""
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        """
        Process request and add observability.

        Args:
            request: HTTP request

        Returns:
            HTTP response with observability headers
        """
        correlation_id = request.META.get(CORRELATION_HEADER) or str(uuid.uuid4())
        request.correlation_id = correlation_id  # type: ignore
        token = correlation_context.set(correlation_id)

        endpoint = normalize_endpoint(request.path)
        start_time = time.perf_counter()
        logger.info(
            "Request started",
            extra={
                "correlation_id": correlation_id,
                "method": request.method,
                "path": request.path,
                "remote_addr": request.META.get("REMOTE_ADDR"),
                "user_agent": request.META.get("HTTP_USER_AGENT", ""),
            },
        )

        try:
            response = self.get_response(request)
        except Exception as e:
            self._handle_exception(request, e, start_time, correlation_id, endpoint)
            correlation_context.reset(token)
            raise

        duration = time.perf_counter() - start_time
        request_status = self._get_request_status(response)
        self._record_metrics(request, endpoint, response.status_code, duration)
        self._log_response(request, response, correlation_id, request_status, duration)
        self._add_observability_headers(response, correlation_id, request_status, duration)
        correlation_context.reset(token)
        return response

    def _get_request_status(self, response: HttpResponse) -> str:
        """Determine request status based on status code."""
        if response.status_code >= 500:
            return "server_error"
        if response.status_code >= 400:
            return "client_error"
        return "success"

    def _record_metrics(self, request, endpoint, status_code, duration):
        """Record HTTP metrics for Prometheus."""
        http_requests_total.labels(
            method=request.method,
            endpoint=endpoint,
            status_code=status_code,
        ).inc()
        http_request_duration_seconds.labels(
            method=request.method,
            endpoint=endpoint,
        ).observe(duration)

    def _log_response(self, request, response, correlation_id, status, duration):
        """Log structured response information."""
        log_extra = {
            "correlation_id": correlation_id,
            "request_status": status,
            "method": request.method,
            "path": request.path,
            "status_code": response.status_code,
            "duration_ms": round(duration * 1000, 2),
        }

        # Brand routes carry the tenant in the URL
        resolver_match = getattr(request, "resolver_match", None)
        if resolver_match and "brand_id" in resolver_match.kwargs:
            log_extra["brand_id"] = str(resolver_match.kwargs["brand_id"])

        if response.status_code >= 500:
            logger.error("Request completed with server error", extra=log_extra)
        elif response.status_code >= 400:
            logger.warning("Request completed with client error", extra=log_extra)
        else:
            logger.info("Request completed successfully", extra=log_extra)

    def _add_observability_headers(self, response, correlation_id, status, duration):
        """Add observability headers to response."""
        response["X-Correlation-ID"] = correlation_id
        response["X-Request-Status"] = status
        response["X-Request-Duration"] = f"{duration:.3f}"

    def _handle_exception(self, request, e, start_time, correlation_id, endpoint):
        """Record and log a request that raised."""
        duration = time.perf_counter() - start_time
        self._record_metrics(request, endpoint, 500, duration)
        logger.error(
            "Request failed",
            extra={
                "correlation_id": correlation_id,
                "request_status": "exception",
                "method": request.method,
                "path": request.path,
                "error": str(e),
                "error_type": type(e).__name__,
                "duration_ms": round(duration * 1000, 2),
            },
            exc_info=True,
        )
