"""
Unit tests for QueryService.
"""

from datetime import date, datetime, timedelta, timezone

import pytest

from core.domain.exceptions import BrandNotFoundError
from licenses.application.queries.list_licenses_by_email import ListLicensesByEmailQuery
from licenses.application.services.query_service import QueryService

NOW = datetime(2026, 1, 15, 12, 0, tzinfo=timezone.utc)
NEXT_YEAR = NOW + timedelta(days=365)


@pytest.mark.django_db
class TestQueryService:
    """Tests for QueryService."""

    def test_lists_across_brands(
        self, query_service, brand, product, other_brand, other_product, provision
    ):
        """Test licenses of every brand are listed for the email."""
        rankmath_key = provision(brand, "user@example.com", ("rankmath-pro", NEXT_YEAR))
        rocket_key = provision(other_brand, "user@example.com", ("wp-rocket", None))

        items = query_service.list_by_customer_email(
            ListLicensesByEmailQuery(customer_email="user@example.com")
        )

        assert len(items) == 2
        by_brand = {item.brand.code: item for item in items}
        assert by_brand["rankmath"].license_key == rankmath_key.key
        assert by_brand["rankmath"].product.code == "rankmath-pro"
        assert by_brand["rankmath"].product.name == "RankMath Pro"
        assert by_brand["rankmath"].expires_at == date(2027, 1, 15)
        assert by_brand["wprocket"].license_key == rocket_key.key
        assert by_brand["wprocket"].brand.id == other_brand.id
        assert by_brand["wprocket"].expires_at is None

    def test_one_item_per_license(
        self, query_service, brand, product, addon_product, provision
    ):
        """Test a key with two licenses yields two items."""
        provision(
            brand,
            "user@example.com",
            ("rankmath-pro", NEXT_YEAR),
            ("content-ai", NEXT_YEAR),
        )

        items = query_service.list_by_customer_email(
            ListLicensesByEmailQuery(customer_email="user@example.com")
        )

        assert [item.product.code for item in items] == ["content-ai", "rankmath-pro"]
        assert {item.status for item in items} == {"valid"}

    def test_email_match_is_exact(self, query_service, brand, product, provision):
        """Test the email is matched verbatim."""
        provision(brand, "User@Example.com", ("rankmath-pro", NEXT_YEAR))

        assert query_service.list_by_customer_email(
            ListLicensesByEmailQuery(customer_email="User@Example.com")
        )
        assert (
            query_service.list_by_customer_email(
                ListLicensesByEmailQuery(customer_email="someone@example.com")
            )
            == []
        )

    def test_unknown_email(self, query_service, brand):
        """Test an email with no keys yields an empty list."""
        items = query_service.list_by_customer_email(
            ListLicensesByEmailQuery(customer_email="nobody@example.com")
        )

        assert items == []

    def test_missing_brand(
        self, license_key_repository, brand_repository, brand, product, provision
    ):
        """Test a key whose brand cannot be loaded."""

        class EmptyBrandRepository(type(brand_repository)):
            def find_by_id(self, brand_id):
                return None

        provision(brand, "user@example.com", ("rankmath-pro", NEXT_YEAR))
        service = QueryService(
            license_key_repository=license_key_repository,
            brand_repository=EmptyBrandRepository(),
        )

        with pytest.raises(BrandNotFoundError):
            service.list_by_customer_email(
                ListLicensesByEmailQuery(customer_email="user@example.com")
            )
