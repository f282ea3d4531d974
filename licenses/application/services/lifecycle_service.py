"""
LifecycleService.

Applies renew, suspend, resume and cancel to a brand's licenses.
"""
import logging
from typing import Optional

from core.domain.clock import Clock, SystemClock
from core.domain.exceptions import DomainException, LicenseImmutableError, LicenseNotFoundError
from core.domain.value_objects import LifecycleAction
from core.infrastructure.database import atomic
from core.metrics import license_transitions_total
from licenses.application.commands.change_license_status import ChangeLicenseStatusCommand
from licenses.domain.license import License
from licenses.domain.services import LicenseStateMachine, ensure_license_owned_by
from licenses.ports.license_repository import LicenseRepository

logger = logging.getLogger(__name__)


class LifecycleService:
    """Change the status of a license owned by the calling brand."""

    def __init__(self, license_repository: LicenseRepository, clock: Optional[Clock] = None):
        """Initialize service with repository and clock."""
        self.license_repository = license_repository
        self.clock = clock or SystemClock()

    def change(self, command: ChangeLicenseStatusCommand) -> License:
        """
        Apply a lifecycle action.

        Checks run in order: ownership, cancelled guard, action name,
        then the transition itself. A failed check leaves the license
        untouched.

        Args:
            command: ChangeLicenseStatusCommand

        Returns:
            The license as stored after the change

        Raises:
            LicenseNotFoundError: If the license does not exist
            CrossTenantAccessError: If the license belongs to another brand
            LicenseImmutableError: If the license is cancelled
            UnsupportedActionError: If the action is unknown
            MissingExpiryError: If renewing without an expiry
            InvalidTransitionError: If the action is not allowed from the status
        """
        brand = command.brand

        try:
            with atomic():
                license = self.license_repository.find_by_id(command.license_id)
                if license is None:
                    raise LicenseNotFoundError(f"License {command.license_id} not found")

                ensure_license_owned_by(license, brand.id)
                if license.status.is_terminal:
                    raise LicenseImmutableError()

                action = LifecycleAction.parse(command.action)
                changed = LicenseStateMachine.apply(
                    license, action, now=self.clock.now(), expires_at=command.expires_at
                )
                self.license_repository.update(changed)
                stored = self.license_repository.find_by_id(changed.id)
        except DomainException as exc:
            logger.warning(
                "License lifecycle change rejected",
                extra={
                    "brand_id": str(brand.id),
                    "license_id": str(command.license_id),
                    "action": str(command.action),
                    "error_code": exc.code,
                },
            )
            raise

        license_transitions_total.labels(brand_code=brand.code, action=action.value).inc()
        logger.info(
            "License status changed",
            extra={
                "brand_id": str(brand.id),
                "license_id": str(stored.id),
                "action": action.value,
                "from_status": license.status.value,
                "to_status": stored.status.value,
            },
        )
        return stored
