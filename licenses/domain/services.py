"""
License domain services.

Domain services contain business logic that doesn't naturally
fit within a single entity: token generation, the lifecycle
state machine and the usable-license filter.
"""
import secrets
import string
import uuid
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Dict, Iterable, List, Optional, Tuple

from core.domain.exceptions import (
    CrossTenantAccessError,
    InvalidTransitionError,
    LicenseImmutableError,
    MissingExpiryError,
)
from core.domain.value_objects import LicenseStatus, LifecycleAction
from licenses.domain.license import License

KEY_ALPHABET = string.ascii_uppercase + string.digits
KEY_GROUPS = 3
KEY_GROUP_LENGTH = 4


class LicenseKeyGenerator(ABC):
    """Produces license key tokens."""

    @abstractmethod
    def generate(self) -> str:
        """
        Generate a license key token.

        Returns:
            Token string; uniqueness is enforced by storage
        """
        pass


class RandomLicenseKeyGenerator(LicenseKeyGenerator):
    """Generates keys in the format XXXX-XXXX-XXXX."""

    def generate(self) -> str:
        groups = [
            "".join(secrets.choice(KEY_ALPHABET) for _ in range(KEY_GROUP_LENGTH))
            for _ in range(KEY_GROUPS)
        ]
        return "-".join(groups)


# (current status, action) -> new status; None marks a rejected transition.
# Cancelled is terminal and handled before the table is consulted.
TRANSITIONS: Dict[Tuple[LicenseStatus, LifecycleAction], Optional[LicenseStatus]] = {
    (LicenseStatus.VALID, LifecycleAction.RENEW): LicenseStatus.VALID,
    (LicenseStatus.SUSPENDED, LifecycleAction.RENEW): LicenseStatus.VALID,
    (LicenseStatus.VALID, LifecycleAction.SUSPEND): LicenseStatus.SUSPENDED,
    (LicenseStatus.SUSPENDED, LifecycleAction.SUSPEND): None,
    (LicenseStatus.VALID, LifecycleAction.RESUME): None,
    (LicenseStatus.SUSPENDED, LifecycleAction.RESUME): LicenseStatus.VALID,
    (LicenseStatus.VALID, LifecycleAction.CANCEL): LicenseStatus.CANCELLED,
    (LicenseStatus.SUSPENDED, LifecycleAction.CANCEL): LicenseStatus.CANCELLED,
}


class LicenseStateMachine:
    """Applies lifecycle actions to licenses."""

    @staticmethod
    def apply(
        license: License,
        action: LifecycleAction,
        now: datetime,
        expires_at: Optional[datetime] = None,
    ) -> License:
        """
        Apply a lifecycle action to a license.

        Checks run in a fixed order: terminal status, then the
        renewal expiry, then the transition table.

        Args:
            license: License to change
            action: Lifecycle action
            now: Time of the change
            expires_at: New expiry, required for renew

        Returns:
            New License instance

        Raises:
            LicenseImmutableError: If the license is cancelled
            MissingExpiryError: If renewing without an expiry
            InvalidTransitionError: If the action is not allowed from the status
        """
        if license.status.is_terminal:
            raise LicenseImmutableError()

        if action is LifecycleAction.RENEW and expires_at is None:
            raise MissingExpiryError()

        new_status = TRANSITIONS.get((license.status, action))
        if new_status is None:
            raise InvalidTransitionError(action.value, license.status.value)

        if action is LifecycleAction.RENEW:
            return license.with_status(new_status, updated_at=now, expires_at=expires_at)
        return license.with_status(new_status, updated_at=now)


def ensure_license_owned_by(license: License, brand_id: uuid.UUID) -> None:
    """
    Check that a license belongs to a brand.

    Raises:
        CrossTenantAccessError: If the license's key is owned by another brand
    """
    if license.license_key is None or not license.license_key.belongs_to(brand_id):
        raise CrossTenantAccessError()


def usable_licenses(licenses: Iterable[License], now: datetime) -> List[License]:
    """
    Filter licenses down to those that currently grant access.

    Args:
        licenses: Licenses of a key
        now: Current time

    Returns:
        Usable licenses in their original order
    """
    return [license for license in licenses if license.is_usable(now)]
