"""
Product domain entity.

This is the core domain entity representing a licensable product.
Product codes are unique within a brand, not globally.
"""
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional


@dataclass(frozen=True)
class Product:
    """
    Product domain entity.

    Represents a product a brand sells licenses for.
    """

    id: uuid.UUID
    brand_id: uuid.UUID
    code: str
    name: str
    created_at: datetime
    updated_at: datetime

    def __post_init__(self):
        """Validate product entity."""
        if not self.brand_id:
            raise ValueError("Brand ID is required")
        if not self.code or len(self.code.strip()) == 0:
            raise ValueError("Product code cannot be empty")
        if not self.code.replace("-", "").replace("_", "").isalnum():
            raise ValueError(f"Invalid product code format: {self.code}")
        if not self.name or len(self.name.strip()) == 0:
            raise ValueError("Product name cannot be empty")
        if len(self.name) > 255:
            raise ValueError("Product name too long")

    @classmethod
    def create(
        cls,
        brand_id: uuid.UUID,
        code: str,
        name: str,
        product_id: Optional[uuid.UUID] = None,
    ) -> "Product":
        """
        Create a new Product entity.

        Args:
            brand_id: Brand UUID this product belongs to
            code: Product code, unique within the brand
            name: Product display name
            product_id: Optional UUID (generated if not provided)

        Returns:
            Product entity instance
        """
        now = datetime.now(timezone.utc)
        return cls(
            id=product_id or uuid.uuid4(),
            brand_id=brand_id,
            code=code.strip(),
            name=name.strip(),
            created_at=now,
            updated_at=now,
        )
