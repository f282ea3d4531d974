"""
ProvisioningService.

Creates license keys and attaches per-product licenses to them.
"""
import logging
from datetime import datetime
from typing import List, Optional

from brands.domain.product import Product
from brands.ports.product_repository import ProductRepository
from core.domain.clock import Clock, SystemClock
from core.domain.exceptions import (
    CrossTenantKeyError,
    DuplicateRecordError,
    LicenseKeyNotFoundError,
    ProductNotFoundError,
)
from core.infrastructure.database import atomic
from core.metrics import license_keys_created_total, licenses_provisioned_total
from licenses.application.commands.provision_license import ProvisionLicenseCommand
from licenses.domain.license import License
from licenses.domain.license_key import LicenseKey
from licenses.domain.services import LicenseKeyGenerator, RandomLicenseKeyGenerator
from licenses.ports.license_key_repository import LicenseKeyRepository
from licenses.ports.license_repository import LicenseRepository

logger = logging.getLogger(__name__)

DEFAULT_KEY_GENERATION_ATTEMPTS = 5


class ProvisioningService:
    """
    Provision license keys for a brand's customer.

    Attaching a product that the key already holds is a no-op, so
    replaying the same request never creates duplicates and never
    changes an existing license.
    """

    def __init__(
        self,
        product_repository: ProductRepository,
        license_key_repository: LicenseKeyRepository,
        license_repository: LicenseRepository,
        key_generator: Optional[LicenseKeyGenerator] = None,
        clock: Optional[Clock] = None,
        max_key_attempts: int = DEFAULT_KEY_GENERATION_ATTEMPTS,
    ):
        """Initialize service with repositories and collaborators."""
        self.product_repository = product_repository
        self.license_key_repository = license_key_repository
        self.license_repository = license_repository
        self.key_generator = key_generator or RandomLicenseKeyGenerator()
        self.clock = clock or SystemClock()
        self.max_key_attempts = max(1, max_key_attempts)

    def provision(self, command: ProvisionLicenseCommand) -> LicenseKey:
        """
        Provision licenses onto a new or existing license key.

        Args:
            command: ProvisionLicenseCommand

        Returns:
            LicenseKey with all of its licenses, existing and new

        Raises:
            LicenseKeyNotFoundError: If the existing key does not exist
            CrossTenantKeyError: If the existing key belongs to another brand
            ProductNotFoundError: If a product code is unknown to the brand
        """
        brand = command.brand
        now = self.clock.now()

        with atomic():
            if command.existing_license_key_id:
                license_key = self._existing_license_key(command)
                key_created = False
            else:
                license_key = self._create_license_key(command, now)
                key_created = True

            attached: List[Product] = []
            for request in command.licenses:
                product = self.product_repository.find_by_code(brand.id, request.product_code)
                if product is None:
                    raise ProductNotFoundError(request.product_code)
                if self._attach(license_key, product, request.expires_at, now):
                    attached.append(product)

            provisioned = self.license_key_repository.find_by_id(license_key.id)

        if key_created:
            license_keys_created_total.labels(brand_code=brand.code).inc()
        for product in attached:
            licenses_provisioned_total.labels(brand_code=brand.code, product_code=product.code).inc()

        logger.info(
            "Licenses provisioned",
            extra={
                "brand_id": str(brand.id),
                "license_key_id": str(provisioned.id),
                "key_created": key_created,
                "licenses_attached": [product.code for product in attached],
                "licenses_total": len(provisioned.licenses),
            },
        )
        return provisioned

    def _existing_license_key(self, command: ProvisionLicenseCommand) -> LicenseKey:
        license_key = self.license_key_repository.find_by_id(command.existing_license_key_id)
        if license_key is None:
            raise LicenseKeyNotFoundError(
                f"License key {command.existing_license_key_id} not found"
            )
        if not license_key.belongs_to(command.brand.id):
            logger.warning(
                "Provisioning onto a license key of another brand rejected",
                extra={
                    "brand_id": str(command.brand.id),
                    "license_key_id": str(license_key.id),
                },
            )
            raise CrossTenantKeyError()
        return license_key

    def _create_license_key(self, command: ProvisionLicenseCommand, now: datetime) -> LicenseKey:
        """Create a key, regenerating the token when it collides."""
        collision = None
        for attempt in range(1, self.max_key_attempts + 1):
            candidate = LicenseKey.create(
                brand_id=command.brand.id,
                customer_email=command.customer_email,
                key=self.key_generator.generate(),
                created_at=now,
            )
            try:
                return self.license_key_repository.create(candidate)
            except DuplicateRecordError as exc:
                collision = exc
                logger.warning(
                    "License key token collision, regenerating",
                    extra={"attempt": attempt, "max_attempts": self.max_key_attempts},
                )
        raise collision

    def _attach(
        self,
        license_key: LicenseKey,
        product: Product,
        expires_at: Optional[datetime],
        now: datetime,
    ) -> bool:
        """
        Attach a license for a product unless the key already holds one.

        Returns:
            True if a license was created
        """
        existing = self.license_repository.find_by_license_key_and_product(
            license_key.id, product.id
        )
        if existing is not None:
            return False

        license = License.create(
            license_key_id=license_key.id,
            product=product,
            expires_at=expires_at,
            created_at=now,
        )
        try:
            self.license_repository.create(license)
        except DuplicateRecordError:
            # Attached concurrently; first write wins
            logger.info(
                "License already attached",
                extra={"license_key_id": str(license_key.id), "product_code": product.code},
            )
            return False
        return True
