"""
Django implementation of ProductRepository port.

This adapter converts between domain entities and Django ORM models.
"""

import uuid
from typing import Optional

from brands.domain.product import Product
from brands.ports.product_repository import ProductRepository
from products.infrastructure.models import Product as ProductModel


class DjangoProductRepository(ProductRepository):
    """Django ORM implementation of ProductRepository."""

    @staticmethod
    def to_domain(model: ProductModel) -> Product:
        """
        Convert Django model to domain entity.

        Args:
            model: Django Product model

        Returns:
            Product domain entity
        """
        return Product(
            id=model.id,
            brand_id=model.brand_id,
            code=model.code,
            name=model.name,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def save(self, product: Product) -> Product:
        """
        Save a product entity.

        Args:
            product: Product entity to save

        Returns:
            Saved product entity
        """
        # pylint: disable=no-member
        model, _ = ProductModel.objects.update_or_create(
            id=product.id,
            defaults={
                "brand_id": product.brand_id,
                "code": product.code,
                "name": product.name,
            },
        )
        return self.to_domain(model)

    def find_by_code(self, brand_id: uuid.UUID, code: str) -> Optional[Product]:
        """
        Find a product by code within a brand.

        Args:
            brand_id: Brand UUID
            code: Product code

        Returns:
            Product entity or None if the brand has no such product
        """
        # pylint: disable=no-member
        model = ProductModel.objects.filter(brand_id=brand_id, code=code).first()
        return self.to_domain(model) if model else None
