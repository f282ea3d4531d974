"""
ValidateLicenseKeyQuery.

Query for the current entitlements of a license key.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class ValidateLicenseKeyQuery:
    """
    Query to validate a license key.

    ``instance_id`` is accepted for API symmetry; validation is
    not scoped to an instance.
    """

    license_key: str
    instance_id: Optional[str] = None
