"""
Activation domain entity.

Records that a license key was activated on a specific instance
(a site URL, hostname or machine id).
"""

import uuid
from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Activation:
    """
    Activation domain entity.

    Never mutated by the service; ``deactivated_at`` is only ever
    set by back-office tooling.
    """

    id: uuid.UUID
    license_key_id: uuid.UUID
    instance_id: str
    activated_at: datetime
    deactivated_at: Optional[datetime] = None

    def __post_init__(self):
        """Validate activation entity."""
        if not self.license_key_id:
            raise ValueError("License key ID is required")
        if not self.instance_id or len(self.instance_id.strip()) == 0:
            raise ValueError("Instance identifier cannot be empty")
        if len(self.instance_id) > 255:
            raise ValueError("Instance identifier too long")

    @classmethod
    def create(
        cls,
        license_key_id: uuid.UUID,
        instance_id: str,
        activated_at: datetime,
        activation_id: Optional[uuid.UUID] = None,
    ) -> "Activation":
        """
        Create a new Activation entity.

        Args:
            license_key_id: License key UUID
            instance_id: Instance identifier (URL, hostname, etc.)
            activated_at: Activation time
            activation_id: Optional UUID (generated if not provided)

        Returns:
            Activation entity instance
        """
        return cls(
            id=activation_id or uuid.uuid4(),
            license_key_id=license_key_id,
            instance_id=instance_id,
            activated_at=activated_at,
        )

    @property
    def is_active(self) -> bool:
        return self.deactivated_at is None
