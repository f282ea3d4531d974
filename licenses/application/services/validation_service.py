"""
ValidationService.

Reports which licenses of a key currently grant access.
"""
import logging
from typing import Optional

from activations.ports.activation_repository import ActivationRepository
from core.domain.clock import Clock, SystemClock
from core.domain.exceptions import InvalidLicenseKeyError
from core.infrastructure.database import atomic
from core.metrics import license_validations_total
from licenses.application.dto.license_dto import (
    EntitlementDTO,
    SeatUsageDTO,
    ValidationResultDTO,
)
from licenses.application.queries.validate_license_key import ValidateLicenseKeyQuery
from licenses.domain.services import usable_licenses
from licenses.ports.license_key_repository import LicenseKeyRepository

logger = logging.getLogger(__name__)


class ValidationService:
    """Read-only check of a license key's entitlements."""

    def __init__(
        self,
        license_key_repository: LicenseKeyRepository,
        activation_repository: ActivationRepository,
        clock: Optional[Clock] = None,
    ):
        """Initialize service with repositories and clock."""
        self.license_key_repository = license_key_repository
        self.activation_repository = activation_repository
        self.clock = clock or SystemClock()

    def validate(self, query: ValidateLicenseKeyQuery) -> ValidationResultDTO:
        """
        Validate a license key.

        A key with no usable license is reported as "invalid" rather
        than raising; only an unknown token is an error.

        Args:
            query: ValidateLicenseKeyQuery

        Returns:
            ValidationResultDTO with usable licenses and seat usage

        Raises:
            InvalidLicenseKeyError: If the token does not exist
        """
        with atomic():
            license_key = self.license_key_repository.find_by_key(query.license_key)
            if license_key is None:
                license_validations_total.labels(result="unknown_key").inc()
                raise InvalidLicenseKeyError()

            usable = usable_licenses(license_key.licenses, self.clock.now())
            seats_used = self.activation_repository.count_by_license_key(license_key.id)

        status = "valid" if usable else "invalid"
        license_validations_total.labels(result=status).inc()
        logger.info(
            "License key validated",
            extra={
                "license_key_id": str(license_key.id),
                "result": status,
                "usable_licenses": len(usable),
                "seats_used": seats_used,
            },
        )
        return ValidationResultDTO(
            status=status,
            licenses=[EntitlementDTO.from_license(license) for license in usable],
            seats=SeatUsageDTO(used=seats_used),
        )
