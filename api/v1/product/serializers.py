"""
Serializers for Product API endpoints.
"""

from rest_framework import serializers


class ActivateLicenseRequestSerializer(serializers.Serializer):
    """Serializer for activate license request."""

    # Keys and instance ids are opaque; an unknown key is answered by the lookup
    license_key = serializers.CharField(trim_whitespace=False)
    instance_id = serializers.CharField(max_length=255, trim_whitespace=False)

    def validate_instance_id(self, value):
        if not value.strip():
            raise serializers.ValidationError("This field may not be blank.")
        return value


class ValidateLicenseRequestSerializer(serializers.Serializer):
    """Serializer for validate license request."""

    license_key = serializers.CharField(trim_whitespace=False)
    instance_id = serializers.CharField(
        required=False,
        allow_null=True,
        allow_blank=True,
        max_length=255,
        trim_whitespace=False,
    )


class EntitlementSerializer(serializers.Serializer):
    """Serializer for EntitlementDTO."""

    product_code = serializers.CharField()
    status = serializers.CharField()
    expires_at = serializers.DateField(allow_null=True)


class ActivateLicenseResponseSerializer(serializers.Serializer):
    """Serializer for activate license response."""

    status = serializers.CharField()
    licenses = EntitlementSerializer(many=True)


class SeatUsageSerializer(serializers.Serializer):
    """Serializer for SeatUsageDTO."""

    used = serializers.IntegerField()
    remaining = serializers.IntegerField(allow_null=True)


class ValidateLicenseResponseSerializer(serializers.Serializer):
    """Serializer for validate license response."""

    status = serializers.CharField()
    licenses = EntitlementSerializer(many=True)
    seats = SeatUsageSerializer()
