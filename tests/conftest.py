"""
Pytest configuration and shared fixtures.
"""

from datetime import datetime, timedelta, timezone

import pytest

from activations.application.services.activation_service import ActivationService
from activations.infrastructure.repositories.django_activation_repository import (
    DjangoActivationRepository,
)
from brands.domain.brand import Brand
from brands.domain.product import Product
from brands.infrastructure.repositories.django_brand_repository import DjangoBrandRepository
from brands.infrastructure.repositories.django_product_repository import DjangoProductRepository
from core.domain.clock import Clock
from licenses.application.commands.provision_license import (
    LicenseRequest,
    ProvisionLicenseCommand,
)
from licenses.application.services.lifecycle_service import LifecycleService
from licenses.application.services.provisioning_service import ProvisioningService
from licenses.application.services.query_service import QueryService
from licenses.application.services.validation_service import ValidationService
from licenses.infrastructure.repositories.django_license_key_repository import (
    DjangoLicenseKeyRepository,
)
from licenses.infrastructure.repositories.django_license_repository import DjangoLicenseRepository

NOW = datetime(2026, 1, 15, 12, 0, tzinfo=timezone.utc)
NEXT_YEAR = NOW + timedelta(days=365)


class FixedClock(Clock):
    """Clock pinned to a settable instant."""

    def __init__(self, now: datetime = NOW):
        self.current = now

    def now(self) -> datetime:
        return self.current

    def advance(self, delta: timedelta) -> None:
        self.current += delta


@pytest.fixture
def clock():
    """Fixture for a clock pinned to NOW."""
    return FixedClock()


@pytest.fixture
def brand_repository():
    """Fixture for BrandRepository."""
    return DjangoBrandRepository()


@pytest.fixture
def product_repository():
    """Fixture for ProductRepository."""
    return DjangoProductRepository()


@pytest.fixture
def license_key_repository():
    """Fixture for LicenseKeyRepository."""
    return DjangoLicenseKeyRepository()


@pytest.fixture
def license_repository():
    """Fixture for LicenseRepository."""
    return DjangoLicenseRepository()


@pytest.fixture
def activation_repository():
    """Fixture for ActivationRepository."""
    return DjangoActivationRepository()


@pytest.fixture
def brand(db, brand_repository):
    """Fixture for a Brand saved in database."""
    return brand_repository.save(Brand.create(code="rankmath", name="RankMath"))


@pytest.fixture
def other_brand(db, brand_repository):
    """Fixture for a second Brand saved in database."""
    return brand_repository.save(Brand.create(code="wprocket", name="WP Rocket"))


@pytest.fixture
def product(db, brand, product_repository):
    """Fixture for a Product of ``brand``."""
    return product_repository.save(
        Product.create(brand_id=brand.id, code="rankmath-pro", name="RankMath Pro")
    )


@pytest.fixture
def addon_product(db, brand, product_repository):
    """Fixture for a second Product of ``brand``."""
    return product_repository.save(
        Product.create(brand_id=brand.id, code="content-ai", name="Content AI")
    )


@pytest.fixture
def other_product(db, other_brand, product_repository):
    """Fixture for a Product of ``other_brand``."""
    return product_repository.save(
        Product.create(brand_id=other_brand.id, code="wp-rocket", name="WP Rocket")
    )


@pytest.fixture
def provisioning_service(product_repository, license_key_repository, license_repository, clock):
    """Fixture for ProvisioningService on a fixed clock."""
    return ProvisioningService(
        product_repository=product_repository,
        license_key_repository=license_key_repository,
        license_repository=license_repository,
        clock=clock,
    )


@pytest.fixture
def lifecycle_service(license_repository, clock):
    """Fixture for LifecycleService on a fixed clock."""
    return LifecycleService(license_repository=license_repository, clock=clock)


@pytest.fixture
def activation_service(license_key_repository, activation_repository, clock):
    """Fixture for ActivationService on a fixed clock."""
    return ActivationService(
        license_key_repository=license_key_repository,
        activation_repository=activation_repository,
        clock=clock,
    )


@pytest.fixture
def validation_service(license_key_repository, activation_repository, clock):
    """Fixture for ValidationService on a fixed clock."""
    return ValidationService(
        license_key_repository=license_key_repository,
        activation_repository=activation_repository,
        clock=clock,
    )


@pytest.fixture
def query_service(license_key_repository, brand_repository):
    """Fixture for QueryService."""
    return QueryService(
        license_key_repository=license_key_repository,
        brand_repository=brand_repository,
    )


@pytest.fixture
def provision(provisioning_service):
    """
    Fixture returning a shortcut for provisioning.

    Usage:
        provision(brand, "user@example.com", ("rankmath-pro", NEXT_YEAR))
    """

    def _provision(brand, customer_email, *licenses, existing_license_key_id=None):
        return provisioning_service.provision(
            ProvisionLicenseCommand(
                brand=brand,
                customer_email=customer_email,
                licenses=[LicenseRequest(code, expires_at) for code, expires_at in licenses],
                existing_license_key_id=existing_license_key_id,
            )
        )

    return _provision


@pytest.fixture
def api_client():
    """Fixture for DRF API client."""
    from rest_framework.test import APIClient

    return APIClient()
