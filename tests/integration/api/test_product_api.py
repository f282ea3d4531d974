"""
Integration tests for Product API endpoints.
"""

from datetime import timedelta

import pytest
from django.urls import reverse
from django.utils import timezone

from activations.infrastructure.models import Activation
from licenses.infrastructure.models import License

SITE = "https://site.example"


@pytest.fixture
def license_key(api_client, brand, product):
    """Fixture for the token of a key holding one valid license."""
    response = api_client.post(
        reverse("brand:provision-license", kwargs={"brand_id": brand.id}),
        {
            "customer_email": "user@example.com",
            "licenses": [
                {
                    "product_code": "rankmath-pro",
                    "expires_at": (timezone.now() + timedelta(days=365)).date().isoformat(),
                }
            ],
        },
        format="json",
    )
    assert response.status_code == 201
    return response.json()["license_key"]["key"]


def set_status(license_key, status):
    License.objects.filter(license_key__key=license_key).update(status=status)


@pytest.mark.django_db
@pytest.mark.integration
class TestActivateLicenseAPI:
    """Integration tests for license activation."""

    def activate(self, api_client, license_key, instance_id=SITE):
        return api_client.post(
            reverse("product:activate-license"),
            {"license_key": license_key, "instance_id": instance_id},
            format="json",
        )

    def test_activate_license_success(self, api_client, license_key):
        """Test successful license activation via API."""
        response = self.activate(api_client, license_key)

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "active"
        assert len(data["licenses"]) == 1
        assert data["licenses"][0]["product_code"] == "rankmath-pro"
        assert data["licenses"][0]["status"] == "valid"
        assert Activation.objects.get().instance_id == SITE

    def test_activation_is_idempotent(self, api_client, license_key):
        """Test activating the same instance twice keeps one row."""
        first = self.activate(api_client, license_key)
        second = self.activate(api_client, license_key)

        assert first.status_code == second.status_code == 200
        assert second.json() == first.json()
        assert Activation.objects.filter(instance_id=SITE).count() == 1

    def test_invalid_license_key(self, api_client, brand):
        """Test activating an unknown token."""
        response = self.activate(api_client, "NOPE-NOPE-NOPE")

        assert response.status_code == 404
        assert response.json()["error"] == {
            "code": "INVALID_LICENSE_KEY",
            "message": "Invalid license key.",
        }

    def test_no_valid_licenses(self, api_client, license_key):
        """Test activating a key whose licenses are suspended."""
        set_status(license_key, "suspended")

        response = self.activate(api_client, license_key)

        assert response.status_code == 422
        assert response.json()["error"]["code"] == "NO_VALID_LICENSES"
        assert Activation.objects.count() == 0

    def test_over_long_license_key_is_unknown(self, api_client, brand):
        """Test a key longer than any issued key is treated as unknown."""
        response = self.activate(api_client, "X" * 101)

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "INVALID_LICENSE_KEY"

    def test_instance_id_is_kept_verbatim(self, api_client, license_key):
        """Test instance ids differing only in surrounding spaces are distinct."""
        assert self.activate(api_client, license_key, "site").status_code == 200
        assert self.activate(api_client, license_key, " site ").status_code == 200

        assert sorted(Activation.objects.values_list("instance_id", flat=True)) == [
            " site ",
            "site",
        ]

    @pytest.mark.parametrize(
        "body, field",
        [
            ({"instance_id": SITE}, "license_key"),
            ({"license_key": "ABCD-EFGH-JKLM"}, "instance_id"),
            ({"license_key": "ABCD-EFGH-JKLM", "instance_id": "x" * 256}, "instance_id"),
            ({"license_key": "ABCD-EFGH-JKLM", "instance_id": "   "}, "instance_id"),
        ],
    )
    def test_invalid_request(self, api_client, body, field):
        """Test malformed activation requests."""
        response = api_client.post(reverse("product:activate-license"), body, format="json")

        assert response.status_code == 422
        assert field in response.json()["error"]["details"]


@pytest.mark.django_db
@pytest.mark.integration
class TestValidateLicenseAPI:
    """Integration tests for license validation."""

    def validate(self, api_client, license_key):
        return api_client.post(
            reverse("product:validate-license"), {"license_key": license_key}, format="json"
        )

    def test_validate_license_success(self, api_client, license_key):
        """Test validating a key with a valid license."""
        api_client.post(
            reverse("product:activate-license"),
            {"license_key": license_key, "instance_id": SITE},
            format="json",
        )

        response = self.validate(api_client, license_key)

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "valid"
        assert [item["product_code"] for item in data["licenses"]] == ["rankmath-pro"]
        assert data["seats"] == {"used": 1, "remaining": None}

    def test_suspended_license_is_invalid(self, api_client, brand, license_key):
        """Test validating after the only license was suspended."""
        license = License.objects.get(license_key__key=license_key)
        suspend = api_client.patch(
            reverse(
                "brand:license-detail", kwargs={"brand_id": brand.id, "license_id": license.id}
            ),
            {"action": "suspend"},
            format="json",
        )
        assert suspend.status_code == 200

        response = self.validate(api_client, license_key)

        assert response.status_code == 200
        assert response.json()["status"] == "invalid"
        assert response.json()["licenses"] == []

    def test_validation_does_not_activate(self, api_client, license_key):
        """Test validating records no activation."""
        self.validate(api_client, license_key)

        assert Activation.objects.count() == 0

    def test_invalid_license_key(self, api_client, brand):
        """Test validating an unknown token."""
        response = self.validate(api_client, "NOPE-NOPE-NOPE")

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "INVALID_LICENSE_KEY"

    def test_over_long_license_key_is_unknown(self, api_client, brand):
        """Test a key longer than any issued key is treated as unknown."""
        response = self.validate(api_client, "X" * 101)

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "INVALID_LICENSE_KEY"

    def test_seats_count_instances_verbatim(self, api_client, license_key):
        """Test instance ids differing only in surrounding spaces use two seats."""
        for instance_id in ("site", " site "):
            api_client.post(
                reverse("product:activate-license"),
                {"license_key": license_key, "instance_id": instance_id},
                format="json",
            )

        response = self.validate(api_client, license_key)

        assert response.json()["seats"] == {"used": 2, "remaining": None}
