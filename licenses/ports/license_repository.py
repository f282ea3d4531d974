"""
License repository port.
"""
from abc import ABC, abstractmethod
from typing import Optional
import uuid

from licenses.domain.license import License


class LicenseRepository(ABC):
    """
    Abstract repository for License entities.

    Licenses returned by find_by_id carry their license key so
    callers can check which brand owns them.
    """

    @abstractmethod
    def find_by_id(self, license_id: uuid.UUID) -> Optional[License]:
        """
        Find a license by ID.

        Args:
            license_id: License UUID

        Returns:
            License with its product and license key, or None if not found
        """
        pass

    @abstractmethod
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
        pass

    @abstractmethod
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
        pass

    @abstractmethod
    def update(self, license: License) -> License:
        """
        Persist the status, expiry and update time of a license.

        Args:
            license: License entity with changes

        Returns:
            Stored license
        """
        pass
