"""
Django implementation of ActivationRepository port.

This adapter converts between domain entities and Django ORM models.
"""

import uuid
from typing import Optional

from activations.domain.activation import Activation
from activations.infrastructure.models import Activation as ActivationModel
from activations.ports.activation_repository import ActivationRepository
from core.infrastructure.database import unique_insert


class DjangoActivationRepository(ActivationRepository):
    """Django ORM implementation of ActivationRepository."""

    @staticmethod
    def to_domain(model: ActivationModel) -> Activation:
        """
        Convert Django model to domain entity.

        Args:
            model: Django Activation model

        Returns:
            Activation domain entity
        """
        return Activation(
            id=model.id,
            license_key_id=model.license_key_id,
            instance_id=model.instance_id,
            activated_at=model.activated_at,
            deactivated_at=model.deactivated_at,
        )

    def find_active(self, license_key_id: uuid.UUID, instance_id: str) -> Optional[Activation]:
        """
        Find the active activation of a key on an instance.

        Args:
            license_key_id: License key UUID
            instance_id: Instance identifier

        Returns:
            Activation with no deactivation time, or None
        """
        # pylint: disable=no-member
        model = ActivationModel.objects.filter(
            license_key_id=license_key_id,
            instance_id=instance_id,
            deactivated_at__isnull=True,
        ).first()
        return self.to_domain(model) if model else None

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
        with unique_insert("activation"):
            # pylint: disable=no-member
            ActivationModel.objects.create(
                id=activation.id,
                license_key_id=activation.license_key_id,
                instance_id=activation.instance_id,
                activated_at=activation.activated_at,
                deactivated_at=activation.deactivated_at,
            )
        return activation

    def count_by_license_key(self, license_key_id: uuid.UUID) -> int:
        """
        Count every activation row of a key, active or not.

        Args:
            license_key_id: License key UUID

        Returns:
            Number of activations
        """
        # pylint: disable=no-member
        return ActivationModel.objects.filter(license_key_id=license_key_id).count()
