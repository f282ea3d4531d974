"""
Product API views.

These endpoints are used by end-user products (untrusted clients) to:
- Activate a license key on an instance
- Validate a license key
"""

from drf_spectacular.utils import extend_schema
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from activations.application.commands.activate_license import ActivateLicenseCommand
from activations.application.dto.activation_dto import ActivationResultDTO
from activations.application.services.activation_service import ActivationService
from activations.infrastructure.repositories.django_activation_repository import (
    DjangoActivationRepository,
)
from api.exceptions import RequestValidationError
from api.v1.product.serializers import (
    ActivateLicenseRequestSerializer,
    ActivateLicenseResponseSerializer,
    ValidateLicenseRequestSerializer,
    ValidateLicenseResponseSerializer,
)
from licenses.application.queries.validate_license_key import ValidateLicenseKeyQuery
from licenses.application.services.validation_service import ValidationService
from licenses.infrastructure.repositories.django_license_key_repository import (
    DjangoLicenseKeyRepository,
)

# Initialize repositories (in production, use DI container)
_license_key_repo = DjangoLicenseKeyRepository()
_activation_repo = DjangoActivationRepository()


class ActivateLicenseView(APIView):
    """View for activating a license key."""

    @extend_schema(
        operation_id="activate_license",
        summary="Activate License Key",
        description=(
            "Activate a license key for a specific instance (site URL, hostname or "
            "machine id). Repeating the call for the same instance is a no-op."
        ),
        tags=["Product API"],
        request=ActivateLicenseRequestSerializer,
        responses={
            200: ActivateLicenseResponseSerializer,
            404: {"description": "Invalid license key"},
            422: {"description": "No valid licenses available, or invalid request"},
        },
    )
    def post(self, request: Request) -> Response:
        """Activate a license key."""
        serializer = ActivateLicenseRequestSerializer(data=request.data)
        if not serializer.is_valid():
            raise RequestValidationError(serializer.errors)

        service = ActivationService(
            license_key_repository=_license_key_repo,
            activation_repository=_activation_repo,
        )
        licenses = service.activate(
            ActivateLicenseCommand(
                license_key=serializer.validated_data["license_key"],
                instance_id=serializer.validated_data["instance_id"],
            )
        )

        result = ActivationResultDTO(licenses=licenses)
        return Response(ActivateLicenseResponseSerializer(result).data)


class ValidateLicenseView(APIView):
    """View for validating a license key."""

    @extend_schema(
        operation_id="validate_license",
        summary="Validate License Key",
        description=(
            "Report the licenses of a key that currently grant access, and how many "
            "instances the key has been activated on."
        ),
        tags=["Product API"],
        request=ValidateLicenseRequestSerializer,
        responses={
            200: ValidateLicenseResponseSerializer,
            404: {"description": "Invalid license key"},
            422: {"description": "Invalid request"},
        },
    )
    def post(self, request: Request) -> Response:
        """Validate a license key."""
        serializer = ValidateLicenseRequestSerializer(data=request.data)
        if not serializer.is_valid():
            raise RequestValidationError(serializer.errors)

        service = ValidationService(
            license_key_repository=_license_key_repo,
            activation_repository=_activation_repo,
        )
        result = service.validate(
            ValidateLicenseKeyQuery(
                license_key=serializer.validated_data["license_key"],
                instance_id=serializer.validated_data.get("instance_id"),
            )
        )
        return Response(ValidateLicenseResponseSerializer(result).data)
