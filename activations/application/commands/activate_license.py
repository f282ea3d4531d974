"""
ActivateLicenseCommand.

Command to activate a license key on an instance.
"""

from dataclasses import dataclass


@dataclass
class ActivateLicenseCommand:
    """Command to activate a license key for a specific instance."""

    license_key: str
    instance_id: str
