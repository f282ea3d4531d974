"""
QueryService.

Lists a customer's licenses across every brand.
"""
import logging
import uuid
from typing import Dict, List

from brands.domain.brand import Brand
from brands.ports.brand_repository import BrandRepository
from core.domain.exceptions import BrandNotFoundError
from core.infrastructure.database import atomic
from licenses.application.dto.license_dto import (
    BrandSummaryDTO,
    LicenseListItemDTO,
    ProductSummaryDTO,
    to_date,
)
from licenses.application.queries.list_licenses_by_email import ListLicensesByEmailQuery
from licenses.ports.license_key_repository import LicenseKeyRepository

logger = logging.getLogger(__name__)


class QueryService:
    """
    Cross-brand license lookup by customer email.

    Only reachable from trusted brand endpoints: results include
    licenses of other brands.
    """

    def __init__(
        self,
        license_key_repository: LicenseKeyRepository,
        brand_repository: BrandRepository,
    ):
        """Initialize service with repositories."""
        self.license_key_repository = license_key_repository
        self.brand_repository = brand_repository

    def list_by_customer_email(self, query: ListLicensesByEmailQuery) -> List[LicenseListItemDTO]:
        """
        List every license on keys issued to an email.

        Args:
            query: ListLicensesByEmailQuery

        Returns:
            One item per license; empty when the email is unknown
        """
        brands: Dict[uuid.UUID, Brand] = {}
        items: List[LicenseListItemDTO] = []

        with atomic():
            for license_key in self.license_key_repository.find_by_customer_email(
                query.customer_email
            ):
                brand = brands.get(license_key.brand_id)
                if brand is None:
                    brand = self.brand_repository.find_by_id(license_key.brand_id)
                    if brand is None:
                        raise BrandNotFoundError(f"Brand {license_key.brand_id} not found")
                    brands[brand.id] = brand

                for license in license_key.licenses:
                    items.append(
                        LicenseListItemDTO(
                            brand=BrandSummaryDTO.from_brand(brand),
                            product=ProductSummaryDTO(
                                code=license.product.code,
                                name=license.product.name,
                            ),
                            license_key=license_key.key,
                            status=license.status.value,
                            expires_at=to_date(license.expires_at),
                        )
                    )

        logger.info(
            "Licenses listed by customer email",
            extra={"brands": len(brands), "licenses": len(items)},
        )
        return items
