"""
ProvisionLicenseCommand.

Command to provision a license key and licenses for a customer.
"""

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from brands.domain.brand import Brand


@dataclass(frozen=True)
class LicenseRequest:
    """One requested product entitlement."""

    product_code: str
    expires_at: Optional[datetime]


@dataclass
class ProvisionLicenseCommand:
    """
    Command to provision a license key and licenses.

    Creates a new key for the customer, or attaches the requested
    licenses to ``existing_license_key_id`` when given.
    """

    brand: Brand
    customer_email: str
    licenses: List[LicenseRequest] = field(default_factory=list)
    existing_license_key_id: Optional[uuid.UUID] = None
