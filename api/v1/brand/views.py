"""
Brand API views.

These endpoints are used by trusted brand systems to:
- Provision license keys and licenses
- Manage license lifecycle
- Query licenses by customer email

The brand is taken from the URL; callers are authenticated upstream.
"""

import uuid

from django.conf import settings
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from api.exceptions import RequestValidationError
from api.v1.brand.serializers import (
    ChangeLicenseStatusRequestSerializer,
    LicenseListResponseSerializer,
    LicenseStatusSerializer,
    ListLicensesQuerySerializer,
    ProvisionLicenseRequestSerializer,
    ProvisionLicenseResponseSerializer,
)
from brands.domain.brand import Brand
from brands.infrastructure.repositories.django_brand_repository import DjangoBrandRepository
from brands.infrastructure.repositories.django_product_repository import DjangoProductRepository
from core.domain.exceptions import BrandNotFoundError
from licenses.application.commands.change_license_status import ChangeLicenseStatusCommand
from licenses.application.commands.provision_license import (
    LicenseRequest,
    ProvisionLicenseCommand,
)
from licenses.application.dto.license_dto import LicenseStatusDTO, ProvisionLicenseResponseDTO
from licenses.application.queries.list_licenses_by_email import ListLicensesByEmailQuery
from licenses.application.services.lifecycle_service import LifecycleService
from licenses.application.services.provisioning_service import ProvisioningService
from licenses.application.services.query_service import QueryService
from licenses.infrastructure.key_generators import load_license_key_generator
from licenses.infrastructure.repositories.django_license_key_repository import (
    DjangoLicenseKeyRepository,
)
from licenses.infrastructure.repositories.django_license_repository import DjangoLicenseRepository

# Initialize repositories (in production, use DI container)
_brand_repo = DjangoBrandRepository()
_product_repo = DjangoProductRepository()
_license_key_repo = DjangoLicenseKeyRepository()
_license_repo = DjangoLicenseRepository()

ERROR_RESPONSES = {
    403: {"description": "License or license key belongs to another brand"},
    404: {"description": "Brand, license or license key not found"},
    422: {"description": "Validation failed or action not allowed"},
}


def get_brand(brand_id: uuid.UUID) -> Brand:
    """Resolve the brand addressed by the URL."""
    brand = _brand_repo.find_by_id(brand_id)
    if brand is None:
        raise BrandNotFoundError(f"Brand {brand_id} not found")
    return brand


def validated(serializer_class, data) -> dict:
    """Validate request data or raise a 422."""
    serializer = serializer_class(data=data)
    if not serializer.is_valid():
        raise RequestValidationError(serializer.errors)
    return serializer.validated_data


class ProvisionLicenseView(APIView):
    """View for provisioning license keys."""

    @extend_schema(
        operation_id="provision_license",
        summary="Provision License Key",
        description=(
            "Create a license key for a customer, or attach licenses to an existing "
            "key of this brand. Products the key already holds are left unchanged."
        ),
        tags=["Brand API"],
        request=ProvisionLicenseRequestSerializer,
        responses={201: ProvisionLicenseResponseSerializer, **ERROR_RESPONSES},
    )
    def post(self, request: Request, brand_id: uuid.UUID) -> Response:
        """Provision a license key and licenses."""
        brand = get_brand(brand_id)
        data = validated(ProvisionLicenseRequestSerializer, request.data)

        service = ProvisioningService(
            product_repository=_product_repo,
            license_key_repository=_license_key_repo,
            license_repository=_license_repo,
            key_generator=load_license_key_generator(),
            max_key_attempts=settings.LICENSE_KEY_GENERATION_ATTEMPTS,
        )
        license_key = service.provision(
            ProvisionLicenseCommand(
                brand=brand,
                customer_email=data["customer_email"],
                licenses=[
                    LicenseRequest(
                        product_code=item["product_code"],
                        expires_at=item["expires_at"],
                    )
                    for item in data["licenses"]
                ],
                existing_license_key_id=data.get("existing_license_key_id"),
            )
        )

        result = ProvisionLicenseResponseDTO.from_license_key(license_key)
        return Response(
            ProvisionLicenseResponseSerializer(result).data,
            status=status.HTTP_201_CREATED,
        )


class LicenseDetailView(APIView):
    """View for license lifecycle changes."""

    @extend_schema(
        operation_id="change_license_status",
        summary="Change License Status",
        description=(
            "Apply a lifecycle action: renew (requires expires_at), suspend, "
            "resume or cancel. Cancelled licenses cannot be modified."
        ),
        tags=["Brand API"],
        request=ChangeLicenseStatusRequestSerializer,
        responses={200: LicenseStatusSerializer, **ERROR_RESPONSES},
    )
    def patch(self, request: Request, brand_id: uuid.UUID, license_id: uuid.UUID) -> Response:
        """Change the status of a license."""
        brand = get_brand(brand_id)
        data = validated(ChangeLicenseStatusRequestSerializer, request.data)

        service = LifecycleService(license_repository=_license_repo)
        license = service.change(
            ChangeLicenseStatusCommand(
                brand=brand,
                license_id=license_id,
                action=data["action"],
                expires_at=data.get("expires_at"),
            )
        )

        return Response(LicenseStatusSerializer(LicenseStatusDTO.from_license(license)).data)


class ListLicensesByEmailView(APIView):
    """View for listing a customer's licenses across brands."""

    @extend_schema(
        operation_id="list_licenses_by_email",
        summary="List Licenses by Customer Email",
        description="List every license issued to a customer email, across all brands.",
        tags=["Brand API"],
        parameters=[
            OpenApiParameter(
                name="email",
                type=str,
                location=OpenApiParameter.QUERY,
                required=True,
                description="Customer email address",
            ),
        ],
        responses={200: LicenseListResponseSerializer, **ERROR_RESPONSES},
    )
    def get(self, request: Request, brand_id: uuid.UUID) -> Response:
        """List licenses by customer email."""
        get_brand(brand_id)
        data = validated(ListLicensesQuerySerializer, request.query_params)

        service = QueryService(
            license_key_repository=_license_key_repo,
            brand_repository=_brand_repo,
        )
        items = service.list_by_customer_email(
            ListLicensesByEmailQuery(customer_email=data["email"])
        )

        payload = {"customer_email": data["email"], "licenses": items}
        return Response(LicenseListResponseSerializer(payload).data)
