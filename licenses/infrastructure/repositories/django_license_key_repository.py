"""
Django implementation of LicenseKeyRepository port.

This adapter converts between domain entities and Django ORM models.
"""
import uuid
from typing import List, Optional

from django.db.models import Prefetch, QuerySet

from core.infrastructure.database import unique_insert
from licenses.domain.license_key import LicenseKey
from licenses.infrastructure.models import License as LicenseModel
from licenses.infrastructure.models import LicenseKey as LicenseKeyModel
from licenses.infrastructure.repositories.django_license_repository import (
    LICENSE_ORDERING,
    DjangoLicenseRepository,
)
from licenses.ports.license_key_repository import LicenseKeyRepository


class DjangoLicenseKeyRepository(LicenseKeyRepository):
    """
    Django ORM implementation of LicenseKeyRepository.

    Keys are always loaded with their licenses and products in
    two queries, so callers never trigger lazy loads.
    """

    @staticmethod
    def _queryset() -> QuerySet:
        # pylint: disable=no-member
        licenses = LicenseModel.objects.select_related("product").order_by(*LICENSE_ORDERING)
        return LicenseKeyModel.objects.prefetch_related(
            Prefetch("licenses", queryset=licenses)
        )

    @staticmethod
    def to_domain(model: LicenseKeyModel) -> LicenseKey:
        """
        Convert Django model to domain aggregate.

        Args:
            model: Django LicenseKey model with licenses prefetched

        Returns:
            LicenseKey domain entity with its licenses
        """
        return LicenseKey(
            id=model.id,
            brand_id=model.brand_id,
            customer_email=model.customer_email,
            key=model.key,
            created_at=model.created_at,
            licenses=tuple(
                DjangoLicenseRepository.to_domain(license) for license in model.licenses.all()
            ),
        )

    def create(self, license_key: LicenseKey) -> LicenseKey:
        """
        Insert a new license key.

        Args:
            license_key: LicenseKey entity to insert

        Returns:
            Stored license key

        Raises:
            DuplicateRecordError: If the token is already taken
        """
        with unique_insert("license key"):
            # pylint: disable=no-member
            LicenseKeyModel.objects.create(
                id=license_key.id,
                brand_id=license_key.brand_id,
                key=license_key.key,
                customer_email=license_key.customer_email,
                created_at=license_key.created_at,
            )
        return license_key

    def find_by_id(self, license_key_id: uuid.UUID) -> Optional[LicenseKey]:
        """
        Find a license key by ID.

        Args:
            license_key_id: License key UUID

        Returns:
            LicenseKey with licenses or None if not found
        """
        model = self._queryset().filter(id=license_key_id).first()
        return self.to_domain(model) if model else None

    def find_by_key(self, key: str) -> Optional[LicenseKey]:
        """
        Find a license key by its exact token.

        Args:
            key: License key token, matched case-sensitively

        Returns:
            LicenseKey with licenses or None if not found
        """
        model = self._queryset().filter(key=key).first()
        if model is None or model.key != key:
            # Some backends compare case-insensitively
            return None
        return self.to_domain(model)

    def find_by_customer_email(self, email: str) -> List[LicenseKey]:
        """
        Find license keys issued to an email across all brands.

        Args:
            email: Customer email, matched exactly

        Returns:
            List of LicenseKey aggregates, oldest first
        """
        models = self._queryset().filter(customer_email=email).order_by("created_at", "id")
        return [self.to_domain(model) for model in models]
