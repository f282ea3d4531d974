"""
Serializers for Brand API endpoints.
"""

from rest_framework import serializers

# Plain dates are read as midnight UTC
DATE_INPUT_FORMATS = ["iso-8601", "%Y-%m-%d"]


class LicenseRequestSerializer(serializers.Serializer):
    """One product entitlement in a provision request."""

    product_code = serializers.CharField(max_length=100)
    expires_at = serializers.DateTimeField(allow_null=True, input_formats=DATE_INPUT_FORMATS)


class ProvisionLicenseRequestSerializer(serializers.Serializer):
    """Serializer for provision license request."""

    customer_email = serializers.EmailField()
    licenses = LicenseRequestSerializer(many=True, allow_empty=False)
    existing_license_key_id = serializers.UUIDField(required=False, allow_null=True)


class ChangeLicenseStatusRequestSerializer(serializers.Serializer):
    """
    Serializer for a lifecycle change request.

    ``action`` is free text: unknown actions are rejected by the
    license state machine, not here.
    """

    action = serializers.CharField(max_length=50)
    expires_at = serializers.DateTimeField(
        required=False, allow_null=True, input_formats=DATE_INPUT_FORMATS
    )


class ListLicensesQuerySerializer(serializers.Serializer):
    """Serializer for the license list query string."""

    email = serializers.EmailField()


class LicenseKeySerializer(serializers.Serializer):
    """Serializer for LicenseKeyDTO."""

    id = serializers.UUIDField()
    key = serializers.CharField()
    customer_email = serializers.EmailField()


class ProvisionedLicenseSerializer(serializers.Serializer):
    """Serializer for ProvisionedLicenseDTO."""

    product = serializers.CharField()
    status = serializers.CharField()
    expires_at = serializers.DateField(allow_null=True)


class ProvisionLicenseResponseSerializer(serializers.Serializer):
    """Serializer for provision license response."""

    license_key = LicenseKeySerializer()
    licenses = ProvisionedLicenseSerializer(many=True)


class LicenseStatusSerializer(serializers.Serializer):
    """Serializer for LicenseStatusDTO."""

    id = serializers.UUIDField()
    status = serializers.CharField()
    expires_at = serializers.DateField(allow_null=True)


class BrandSummarySerializer(serializers.Serializer):
    id = serializers.UUIDField()
    code = serializers.CharField()
    name = serializers.CharField()


class ProductSummarySerializer(serializers.Serializer):
    code = serializers.CharField()
    name = serializers.CharField()


class LicenseListItemSerializer(serializers.Serializer):
    """Serializer for license list item."""

    brand = BrandSummarySerializer()
    product = ProductSummarySerializer()
    license_key = serializers.CharField()
    status = serializers.CharField()
    expires_at = serializers.DateField(allow_null=True)


class LicenseListResponseSerializer(serializers.Serializer):
    """Serializer for the license list response."""

    customer_email = serializers.EmailField()
    licenses = LicenseListItemSerializer(many=True)
