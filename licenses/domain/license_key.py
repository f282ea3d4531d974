"""
LicenseKey domain entity.

A license key is the token handed to a customer. It groups the
per-product licenses a brand has granted to that customer.
"""

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING, Optional, Tuple

if TYPE_CHECKING:
    from licenses.domain.license import License


@dataclass(frozen=True)
class LicenseKey:
    """
    LicenseKey domain entity.

    Immutable after creation. When loaded through a repository,
    ``licenses`` holds every license attached to the key, each
    with its product.
    """

    id: uuid.UUID
    brand_id: uuid.UUID
    customer_email: str
    key: str
    created_at: datetime
    licenses: Tuple["License", ...] = field(default=(), compare=False)

    def __post_init__(self):
        """Validate license key entity."""
        if not self.key or len(self.key.strip()) == 0:
            raise ValueError("License key cannot be empty")
        if len(self.key) > 100:
            raise ValueError("License key too long")
        if not self.brand_id:
            raise ValueError("Brand ID is required")
        if not self.customer_email:
            raise ValueError("Customer email is required")

    @classmethod
    def create(
        cls,
        brand_id: uuid.UUID,
        customer_email: str,
        key: str,
        created_at: datetime,
        license_key_id: Optional[uuid.UUID] = None,
    ) -> "LicenseKey":
        """
        Create a new LicenseKey entity.

        Args:
            brand_id: Brand UUID
            customer_email: Customer email address, stored verbatim
            key: Generated token
            created_at: Creation time
            license_key_id: Optional UUID (generated if not provided)

        Returns:
            LicenseKey entity instance
        """
        return cls(
            id=license_key_id or uuid.uuid4(),
            brand_id=brand_id,
            customer_email=customer_email,
            key=key,
            created_at=created_at,
        )

    def belongs_to(self, brand_id: uuid.UUID) -> bool:
        """Check whether the key is owned by the given brand."""
        return self.brand_id == brand_id
