"""
Unit tests for API exception handling.
"""

import pytest
from django.http import Http404
from rest_framework.exceptions import MethodNotAllowed, ValidationError

from api.exceptions import RequestValidationError, custom_exception_handler, domain_status_code
from core.domain.exceptions import (
    BrandNotFoundError,
    CrossTenantAccessError,
    CrossTenantKeyError,
    DomainException,
    InvalidLicenseKeyError,
    InvalidTransitionError,
    LicenseImmutableError,
    LicenseKeyNotFoundError,
    LicenseNotFoundError,
    MissingExpiryError,
    NoValidLicensesError,
    ProductNotFoundError,
    UnsupportedActionError,
)


class TestDomainStatusCode:
    """Tests for domain exception to HTTP status mapping."""

    @pytest.mark.parametrize(
        "exc, expected",
        [
            (InvalidLicenseKeyError(), 404),
            (BrandNotFoundError(), 404),
            (LicenseNotFoundError(), 404),
            (LicenseKeyNotFoundError(), 404),
            (CrossTenantKeyError(), 403),
            (CrossTenantAccessError(), 403),
            (NoValidLicensesError(), 422),
            (ProductNotFoundError("pro"), 422),
            (MissingExpiryError(), 422),
            (InvalidTransitionError("resume", "valid"), 422),
            (LicenseImmutableError(), 422),
            (UnsupportedActionError("delete"), 422),
            (DomainException("other"), 400),
        ],
    )
    def test_status(self, exc, expected):
        """Test each domain exception maps to its status."""
        assert domain_status_code(exc) == expected


class TestCustomExceptionHandler:
    """Tests for custom_exception_handler."""

    def test_domain_exception_body(self):
        """Test domain exceptions are rendered with their code and message."""
        response = custom_exception_handler(LicenseImmutableError(), {})

        assert response.status_code == 422
        assert response.data == {
            "error": {
                "code": "LICENSE_IMMUTABLE",
                "message": "Cancelled licenses cannot be modified.",
            }
        }

    def test_request_validation_error_has_details(self):
        """Test malformed requests carry field errors."""
        errors = {"customer_email": ["Enter a valid email address."]}

        response = custom_exception_handler(RequestValidationError(errors), {})

        assert response.status_code == 422
        assert response.data["error"]["code"] == "VALIDATION_ERROR"
        assert response.data["error"]["details"] == errors

    def test_drf_validation_error_is_422(self):
        """Test DRF validation errors use the same shape."""
        response = custom_exception_handler(ValidationError({"email": ["required"]}), {})

        assert response.status_code == 422
        assert response.data["error"]["code"] == "VALIDATION_ERROR"
        assert "email" in response.data["error"]["details"]

    def test_http_404(self):
        """Test Django 404s are rendered as errors."""
        response = custom_exception_handler(Http404(), {})

        assert response.status_code == 404
        assert response.data["error"]["code"] == "NOT_FOUND"

    def test_other_api_exception(self):
        """Test other DRF exceptions keep their status."""
        response = custom_exception_handler(MethodNotAllowed("PUT"), {})

        assert response.status_code == 405
        assert response.data["error"]["code"] == "METHOD_NOT_ALLOWED"

    def test_unexpected_exception(self):
        """Test unexpected errors are hidden behind a 500."""
        response = custom_exception_handler(RuntimeError("boom"), {})

        assert response.status_code == 500
        assert response.data == {
            "error": {"code": "INTERNAL_ERROR", "message": "An internal error occurred"}
        }
