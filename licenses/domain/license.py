"""
License domain entity.

A license is one product entitlement on a license key. Status changes
produce new instances; the entity itself is never mutated.
"""
import uuid
from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Optional

from brands.domain.product import Product
from core.domain.value_objects import LicenseStatus
from licenses.domain.license_key import LicenseKey


@dataclass(frozen=True)
class License:
    """
    License domain entity.

    ``expires_at`` of None means the license never expires.
    ``license_key`` is populated when the license is loaded on its own,
    so callers can check which brand owns it.
    """

    id: uuid.UUID
    license_key_id: uuid.UUID
    product: Product
    status: LicenseStatus
    expires_at: Optional[datetime]
    created_at: datetime
    updated_at: datetime
    license_key: Optional[LicenseKey] = field(default=None, compare=False, repr=False)

    def __post_init__(self):
        """Validate license entity."""
        if not self.license_key_id:
            raise ValueError("License key ID is required")
        if self.product is None:
            raise ValueError("Product is required")

    @classmethod
    def create(
        cls,
        license_key_id: uuid.UUID,
        product: Product,
        expires_at: Optional[datetime],
        created_at: datetime,
        license_id: Optional[uuid.UUID] = None,
    ) -> "License":
        """
        Create a new License entity in the valid state.

        Args:
            license_key_id: License key UUID
            product: Licensed product
            expires_at: Expiration datetime, or None for perpetual
            created_at: Creation time
            license_id: Optional UUID (generated if not provided)

        Returns:
            License entity instance
        """
        return cls(
            id=license_id or uuid.uuid4(),
            license_key_id=license_key_id,
            product=product,
            status=LicenseStatus.VALID,
            expires_at=expires_at,
            created_at=created_at,
            updated_at=created_at,
        )

    @property
    def product_id(self) -> uuid.UUID:
        return self.product.id

    def is_expired(self, now: datetime) -> bool:
        """Check if the expiry has passed. Perpetual licenses never expire."""
        return self.expires_at is not None and self.expires_at <= now

    def is_usable(self, now: datetime) -> bool:
        """
        Check if the license currently grants access.

        Args:
            now: Current time

        Returns:
            True if status is valid and the license has not expired
        """
        return self.status == LicenseStatus.VALID and not self.is_expired(now)

    def with_status(
        self,
        status: LicenseStatus,
        updated_at: datetime,
        expires_at: Optional[datetime] = None,
    ) -> "License":
        """
        Return a copy with a new status.

        Args:
            status: New status
            updated_at: Time of the change
            expires_at: New expiry; keeps the current one when None

        Returns:
            New License instance
        """
        return replace(
            self,
            status=status,
            expires_at=expires_at if expires_at is not None else self.expires_at,
            updated_at=updated_at,
        )
