"""
Integration tests for operational endpoints and the admin site.
"""

import pytest
from django.urls import reverse

from core.middleware.observability import normalize_endpoint


@pytest.mark.integration
class TestHealthEndpoints:
    """Tests for health and metrics endpoints."""

    def test_health(self, client):
        """Test service health check."""
        response = client.get(reverse("health"))

        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "service": "license-hub"}

    @pytest.mark.django_db
    def test_health_db(self, client):
        """Test database health check."""
        response = client.get(reverse("health-db"))

        assert response.status_code == 200
        assert response.json()["database"] == "connected"

    def test_metrics(self, client):
        """Test Prometheus metrics are exposed."""
        client.get(reverse("health"))

        response = client.get(reverse("metrics"))

        assert response.status_code == 200
        assert b"http_requests_total" in response.content


@pytest.mark.integration
class TestObservabilityMiddleware:
    """Tests for request correlation."""

    def test_correlation_id_is_generated(self, client):
        """Test responses carry a correlation id."""
        response = client.get(reverse("health"))

        assert response["X-Correlation-ID"]
        assert response["X-Request-Status"] == "success"

    def test_correlation_id_is_propagated(self, client):
        """Test an incoming correlation id is echoed back."""
        response = client.get(reverse("health"), HTTP_X_CORRELATION_ID="abc-123")

        assert response["X-Correlation-ID"] == "abc-123"

    def test_normalize_endpoint(self):
        """Test ids are collapsed in metric labels."""
        path = "/api/v1/brands/6f1c2a9e-1b7d-4f52-9c1e-2d4b8a7e3f10/licenses/42"
        assert normalize_endpoint(path) == "/api/v1/brands/{id}/licenses/{id}"


@pytest.mark.django_db
@pytest.mark.integration
class TestAdmin:
    """Tests for the back-office admin."""

    def test_license_key_changelist(self, admin_client, brand, product, provision):
        """Test license keys are listed in the admin."""
        license_key = provision(brand, "user@example.com", ("rankmath-pro", None))

        response = admin_client.get(reverse("admin:licenses_licensekey_changelist"))

        assert response.status_code == 200
        assert license_key.key.encode() in response.content

    @pytest.mark.parametrize(
        "url_name",
        [
            "admin:brands_brand_changelist",
            "admin:products_product_changelist",
            "admin:licenses_license_changelist",
            "admin:activations_activation_changelist",
        ],
    )
    def test_changelists_render(self, admin_client, brand, product, provision, url_name):
        """Test every admin changelist renders."""
        provision(brand, "user@example.com", ("rankmath-pro", None))

        response = admin_client.get(reverse(url_name))

        assert response.status_code == 200

    def test_license_keys_cannot_be_added(self, admin_client):
        """Test keys are only issued through provisioning."""
        response = admin_client.get(reverse("admin:licenses_licensekey_add"))

        assert response.status_code == 403
