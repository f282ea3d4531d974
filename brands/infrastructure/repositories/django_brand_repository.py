"""
Django implementation of BrandRepository port.

This adapter converts between domain entities and Django ORM models.
"""

import uuid
from typing import Optional

from brands.domain.brand import Brand
from brands.infrastructure.models import Brand as BrandModel
from brands.ports.brand_repository import BrandRepository


class DjangoBrandRepository(BrandRepository):
    """
    Django ORM implementation of BrandRepository.

    Brands are created through the admin; the API only reads them.
    """

    @staticmethod
    def to_domain(model: BrandModel) -> Brand:
        """
        Convert Django model to domain entity.

        Args:
            model: Django Brand model

        Returns:
            Brand domain entity
        """
        return Brand(
            id=model.id,
            code=model.code,
            name=model.name,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def save(self, brand: Brand) -> Brand:
        """
        Save a brand entity.

        Args:
            brand: Brand entity to save

        Returns:
            Saved brand entity
        """
        # pylint: disable=no-member
        model, _ = BrandModel.objects.update_or_create(
            id=brand.id,
            defaults={"code": brand.code, "name": brand.name},
        )
        return self.to_domain(model)

    def find_by_id(self, brand_id: uuid.UUID) -> Optional[Brand]:
        """
        Find a brand by ID.

        Args:
            brand_id: Brand UUID

        Returns:
            Brand entity or None if not found
        """
        # pylint: disable=no-member
        model = BrandModel.objects.filter(id=brand_id).first()
        return self.to_domain(model) if model else None

    def find_by_code(self, code: str) -> Optional[Brand]:
        """
        Find a brand by code.

        Args:
            code: Brand code

        Returns:
            Brand entity or None if not found
        """
        # pylint: disable=no-member
        model = BrandModel.objects.filter(code=code).first()
        return self.to_domain(model) if model else None
