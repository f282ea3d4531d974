"""
Brand repository port (interface).

This defines the contract for brand persistence operations.
Implementations are in the infrastructure layer.
"""

import uuid
from abc import ABC, abstractmethod
from typing import Optional

from brands.domain.brand import Brand


class BrandRepository(ABC):
    """
    Abstract repository for Brand entities.

    Brands are addressed by id from brand routes; codes are
    the human-facing identifier.
    """

    @abstractmethod
    def save(self, brand: Brand) -> Brand:
        """
        Save a brand entity.

        Args:
            brand: Brand entity to save

        Returns:
            Saved brand entity
        """
        pass

    @abstractmethod
    def find_by_id(self, brand_id: uuid.UUID) -> Optional[Brand]:
        """
        Find a brand by ID.

        Args:
            brand_id: Brand UUID

        Returns:
            Brand entity or None if not found
        """
        pass

    @abstractmethod
    def find_by_code(self, code: str) -> Optional[Brand]:
        """
        Find a brand by code.

        Args:
            code: Brand code

        Returns:
            Brand entity or None if not found
        """
        pass
