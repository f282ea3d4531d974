"""
Activation repository port (interface).

The Django adapter lives in activations/infrastructure/repositories.
"""

import uuid
from abc import ABC, abstractmethod
from typing import Optional

from activations.domain.activation import Activation


class ActivationRepository(ABC):
    """
    Abstract repository for Activation entities.

    Activation rows are only ever inserted; back-office tooling
    owns deactivation.
    """

    @abstractmethod
    def find_active(self, license_key_id: uuid.UUID, instance_id: str) -> Optional[Activation]:
        """
        Find the active activation of a key on an instance.

        Args:
            license_key_id: License key UUID
            instance_id: Instance identifier

        Returns:
            Activation with no deactivation time, or None
        """
        pass

    @abstractmethod
    def create(self, activation: Activation) -> Activation:
        """
        Insert a new activation.

        Args:
            activation: Activation entity to insert

        Returns:
            Stored activation

        Raises:
            DuplicateRecordError: If the key already has a row for the instance
        """
        pass

    @abstractmethod
    def count_by_license_key(self, license_key_id: uuid.UUID) -> int:
        """
        Count every activation row of a key, active or not.

        Args:
            license_key_id: License key UUID

        Returns:
            Number of activations
        """
        pass
