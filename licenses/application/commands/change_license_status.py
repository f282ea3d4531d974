"""
ChangeLicenseStatusCommand.

Command to apply a lifecycle action (renew, suspend, resume, cancel).
"""

import uuid
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from brands.domain.brand import Brand


@dataclass
class ChangeLicenseStatusCommand:
    """Command to change the status of one license."""

    brand: Brand
    license_id: uuid.UUID
    action: str
    expires_at: Optional[datetime] = None
