"""
License DTOs for API responses.

Expiry dates are exposed as calendar dates (UTC); None means perpetual.
"""
import uuid
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import List, Optional

from brands.domain.brand import Brand
from licenses.domain.license import License
from licenses.domain.license_key import LicenseKey


def to_date(value: Optional[datetime]) -> Optional[date]:
    """Render an expiry as a date."""
    return value.date() if value is not None else None


@dataclass
class EntitlementDTO:
    """Entitlement summary returned to end-user products."""

    product_code: str
    status: str
    expires_at: Optional[date]

    @classmethod
    def from_license(cls, license: License) -> "EntitlementDTO":
        return cls(
            product_code=license.product.code,
            status=license.status.value,
            expires_at=to_date(license.expires_at),
        )


@dataclass
class LicenseKeyDTO:
    """DTO for license key information."""

    id: uuid.UUID
    key: str
    customer_email: str


@dataclass
class ProvisionedLicenseDTO:
    """DTO for a license attached during provisioning."""

    product: str
    status: str
    expires_at: Optional[date]


@dataclass
class ProvisionLicenseResponseDTO:
    """DTO for provision license response."""

    license_key: LicenseKeyDTO
    licenses: List[ProvisionedLicenseDTO]

    @classmethod
    def from_license_key(cls, license_key: LicenseKey) -> "ProvisionLicenseResponseDTO":
        """
        Build the response from a provisioned key.

        Args:
            license_key: LicenseKey aggregate with all of its licenses

        Returns:
            ProvisionLicenseResponseDTO
        """
        return cls(
            license_key=LicenseKeyDTO(
                id=license_key.id,
                key=license_key.key,
                customer_email=license_key.customer_email,
            ),
            licenses=[
                ProvisionedLicenseDTO(
                    product=license.product.code,
                    status=license.status.value,
                    expires_at=to_date(license.expires_at),
                )
                for license in license_key.licenses
            ],
        )


@dataclass
class LicenseStatusDTO:
    """DTO for a license after a lifecycle change."""

    id: uuid.UUID
    status: str
    expires_at: Optional[date]

    @classmethod
    def from_license(cls, license: License) -> "LicenseStatusDTO":
        return cls(
            id=license.id,
            status=license.status.value,
            expires_at=to_date(license.expires_at),
        )


@dataclass
class SeatUsageDTO:
    """Seat usage of a key; ``remaining`` is None while no quota is enforced."""

    used: int
    remaining: Optional[int] = None


@dataclass
class ValidationResultDTO:
    """DTO for license key validation."""

    status: str
    licenses: List[EntitlementDTO] = field(default_factory=list)
    seats: SeatUsageDTO = field(default_factory=lambda: SeatUsageDTO(used=0))


@dataclass
class BrandSummaryDTO:
    """Brand reference in list responses."""

    id: uuid.UUID
    code: str
    name: str

    @classmethod
    def from_brand(cls, brand: Brand) -> "BrandSummaryDTO":
        return cls(id=brand.id, code=brand.code, name=brand.name)


@dataclass
class ProductSummaryDTO:
    """Product reference in list responses."""

    code: str
    name: str


@dataclass
class LicenseListItemDTO:
    """DTO for license list item."""

    brand: BrandSummaryDTO
    product: ProductSummaryDTO
    license_key: str
    status: str
    expires_at: Optional[date]
