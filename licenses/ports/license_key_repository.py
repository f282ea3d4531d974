"""
Persistence port for license keys and the licenses they hold.
"""
import uuid
from abc import ABC, abstractmethod
from typing import List, Optional

from licenses.domain.license_key import LicenseKey


class LicenseKeyRepository(ABC):
    """
    Abstract repository for LicenseKey aggregates.

    Every finder returns the key with all of its licenses,
    each carrying its product, ordered by creation.
    """

    @abstractmethod
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
        pass

    @abstractmethod
    def find_by_id(self, license_key_id: uuid.UUID) -> Optional[LicenseKey]:
        """
        Find a license key by ID.

        Args:
            license_key_id: License key UUID

        Returns:
            LicenseKey with licenses or None if not found
        """
        pass

    @abstractmethod
    def find_by_key(self, key: str) -> Optional[LicenseKey]:
        """
        Find a license key by its exact token.

        Args:
            key: License key token, matched case-sensitively

        Returns:
            LicenseKey with licenses or None if not found
        """
        pass

    @abstractmethod
    def find_by_customer_email(self, email: str) -> List[LicenseKey]:
        """
        Find license keys issued to an email across all brands.

        Args:
            email: Customer email, matched exactly

        Returns:
            List of LicenseKey aggregates
        """
        pass
