"""
ActivationService.

Activates a license key on an end-user instance.
"""

import logging
from typing import List, Optional

from activations.application.commands.activate_license import ActivateLicenseCommand
from activations.domain.activation import Activation
from activations.ports.activation_repository import ActivationRepository
from core.domain.clock import Clock, SystemClock
from core.domain.exceptions import (
    DuplicateRecordError,
    InvalidLicenseKeyError,
    NoValidLicensesError,
)
from core.infrastructure.database import atomic
from core.metrics import license_activations_total
from licenses.application.dto.license_dto import EntitlementDTO
from licenses.domain.services import usable_licenses
from licenses.ports.license_key_repository import LicenseKeyRepository

logger = logging.getLogger(__name__)


class ActivationService:
    """
    Idempotent activation of a key on an instance.

    Repeating an activation for the same instance returns the same
    entitlements and never adds a second row.
    """

    def __init__(
        self,
        license_key_repository: LicenseKeyRepository,
        activation_repository: ActivationRepository,
        clock: Optional[Clock] = None,
    ):
        """Initialize service with repositories and clock."""
        self.license_key_repository = license_key_repository
        self.activation_repository = activation_repository
        self.clock = clock or SystemClock()

    def activate(self, command: ActivateLicenseCommand) -> List[EntitlementDTO]:
        """
        Activate a license key for an instance.

        Args:
            command: ActivateLicenseCommand

        Returns:
            Entitlement summaries of the key's usable licenses

        Raises:
            InvalidLicenseKeyError: If the token does not exist
            NoValidLicensesError: If no license of the key is usable
        """
        now = self.clock.now()

        with atomic():
            license_key = self.license_key_repository.find_by_key(command.license_key)
            if license_key is None:
                license_activations_total.labels(outcome="invalid_key").inc()
                logger.warning("Activation with unknown license key rejected")
                raise InvalidLicenseKeyError()

            usable = usable_licenses(license_key.licenses, now)
            if not usable:
                license_activations_total.labels(outcome="no_valid_licenses").inc()
                logger.warning(
                    "Activation without usable licenses rejected",
                    extra={"license_key_id": str(license_key.id)},
                )
                raise NoValidLicensesError()

            outcome = self._record_activation(license_key.id, command.instance_id, now)

        license_activations_total.labels(outcome=outcome).inc()
        logger.info(
            "License key activated",
            extra={
                "license_key_id": str(license_key.id),
                "instance_id": command.instance_id,
                "outcome": outcome,
            },
        )
        return [EntitlementDTO.from_license(license) for license in usable]

    def _record_activation(self, license_key_id, instance_id: str, now) -> str:
        """
        Insert the activation row unless one already exists.

        Returns:
            "created" for a new row, "existing" otherwise
        """
        if self.activation_repository.find_active(license_key_id, instance_id) is not None:
            return "existing"

        activation = Activation.create(
            license_key_id=license_key_id,
            instance_id=instance_id,
            activated_at=now,
        )
        try:
            self.activation_repository.create(activation)
        except DuplicateRecordError:
            # Concurrent activation, or a deactivated row for this instance
            return "existing"
        return "created"
