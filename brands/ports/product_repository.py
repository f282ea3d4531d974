"""
Product lookups scoped to a brand.
"""
import uuid
from abc import ABC, abstractmethod
from typing import Optional

from brands.domain.product import Product


class ProductRepository(ABC):
    """
    Abstract repository for Product entities.

    Products are always looked up within a brand; codes are
    only unique per brand.
    """

    @abstractmethod
    def save(self, product: Product) -> Product:
        """
        Save a product entity.

        Args:
            product: Product entity to save

        Returns:
            Saved product entity
        """
        pass

    @abstractmethod
    def find_by_code(self, brand_id: uuid.UUID, code: str) -> Optional[Product]:
        """
        Find a product by code within a brand.

        Args:
            brand_id: Brand UUID
            code: Product code

        Returns:
            Product entity or None if the brand has no such product
        """
        pass

