"""
Brand domain entity.

A brand is a tenant: it owns products and the license keys
provisioned for its customers.
"""

import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional


@dataclass(frozen=True)
class Brand:
    """
    Brand domain entity.

    Identified externally by its unique code (e.g. "rankmath").
    """

    id: uuid.UUID
    code: str
    name: str
    created_at: datetime
    updated_at: datetime

    def __post_init__(self):
        """Validate brand entity."""
        if not self.code or len(self.code.strip()) == 0:
            raise ValueError("Brand code cannot be empty")
        if not self.code.replace("-", "").replace("_", "").isalnum():
            raise ValueError(f"Invalid brand code format: {self.code}")
        if not self.name or len(self.name.strip()) == 0:
            raise ValueError("Brand name cannot be empty")
        if len(self.name) > 255:
            raise ValueError("Brand name too long")

    @classmethod
    def create(
        cls,
        code: str,
        name: str,
        brand_id: Optional[uuid.UUID] = None,
    ) -> "Brand":
        """
        Create a new Brand entity.

        Args:
            code: Unique brand code (URL-safe identifier)
            name: Brand display name
            brand_id: Optional UUID (generated if not provided)

        Returns:
            Brand entity instance
        """
        now = datetime.now(timezone.utc)
        return cls(
            id=brand_id or uuid.uuid4(),
            code=code.strip().lower(),
            name=name.strip(),
            created_at=now,
            updated_at=now,
        )
