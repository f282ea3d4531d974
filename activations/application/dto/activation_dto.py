"""
Activation DTOs for API responses.
"""

from dataclasses import dataclass
from typing import List

from licenses.application.dto.license_dto import EntitlementDTO


@dataclass
class ActivationResultDTO:
    """DTO for a successful activation."""

    licenses: List[EntitlementDTO]
    status: str = "active"
