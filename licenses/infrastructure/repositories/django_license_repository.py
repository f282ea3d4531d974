"""
Django implementation of LicenseRepository port.

This adapter converts between domain entities and Django ORM models.
"""
import uuid
from typing import Optional

from brands.infrastructure.repositories.django_product_repository import (
    DjangoProductRepository,
)
from core.domain.value_objects import LicenseStatus
from core.infrastructure.database import unique_insert
from licenses.domain.license import License
from licenses.domain.license_key import LicenseKey
from licenses.infrastructure.models import License as LicenseModel
from licenses.ports.license_repository import LicenseRepository

# Licenses of a key are listed oldest first; product code breaks ties
# between licenses created in the same call.
LICENSE_ORDERING = ("created_at", "product__code")


class DjangoLicenseRepository(LicenseRepository):
    """
    Django ORM implementation of LicenseRepository.

    Only status, expiry and update time change after insert;
    the key and product of a license are fixed.
    """

    @staticmethod
    def to_domain(model: LicenseModel, license_key: Optional[LicenseKey] = None) -> License:
        """
        Convert Django model to domain entity.

        Args:
            model: Django License model with its product loaded
            license_key: Owning key to attach, if loaded

        Returns:
            License domain entity
        """
        return License(
            id=model.id,
            license_key_id=model.license_key_id,
            product=DjangoProductRepository.to_domain(model.product),
            status=LicenseStatus(model.status),
            expires_at=model.expires_at,
            created_at=model.created_at,
            updated_at=model.updated_at,
            license_key=license_key,
        )

    def find_by_id(self, license_id: uuid.UUID) -> Optional[License]:
        """
        Find a license by ID.

        Args:
            license_id: License UUID

        Returns:
            License with its product and license key, or None if not found
        """
        # pylint: disable=no-member
        model = (
            LicenseModel.objects.select_related("product", "license_key")
            .filter(id=license_id)
            .first()
        )
        if model is None:
            return None
        key_model = model.license_key
        license_key = LicenseKey(
            id=key_model.id,
            brand_id=key_model.brand_id,
            customer_email=key_model.customer_email,
            key=key_model.key,
            created_at=key_model.created_at,
        )
        return self.to_domain(model, license_key=license_key)

    def find_by_license_key_and_product(
        self, license_key_id: uuid.UUID, product_id: uuid.UUID
    ) -> Optional[License]:
        """
        Find the license a key holds for a product.

        Args:
            license_key_id: License key UUID
            product_id: Product UUID

        Returns:
            License entity or None if not found
        """
        # pylint: disable=no-member
        model = (
            LicenseModel.objects.select_related("product")
            .filter(license_key_id=license_key_id, product_id=product_id)
            .first()
        )
        return self.to_domain(model) if model else None

    def create(self, license: License) -> License:
        """
        Insert a new license.

        Args:
            license: License entity to insert

        Returns:
            Stored license

        Raises:
            DuplicateRecordError: If the key already holds a license for the product
        """
        with unique_insert("license for product"):
            # pylint: disable=no-member
            LicenseModel.objects.create(
                id=license.id,
                license_key_id=license.license_key_id,
                product_id=license.product_id,
                status=license.status.value,
                expires_at=license.expires_at,
                created_at=license.created_at,
                updated_at=license.updated_at,
            )
        return license

    def update(self, license: License) -> License:
        """
        Persist the status, expiry and update time of a license.

        Args:
            license: License entity with changes

        Returns:
            Stored license
        """
        # pylint: disable=no-member
        LicenseModel.objects.filter(id=license.id).update(
            status=license.status.value,
            expires_at=license.expires_at,
            updated_at=license.updated_at,
        )
        return license
