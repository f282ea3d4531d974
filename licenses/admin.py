"""
Django admin configuration for licenses app.

License keys and license status are read-only here: keys are issued
by provisioning and status only changes through the lifecycle API.
"""
from django.contrib import admin
from django.utils.html import format_html

from licenses.infrastructure.models import License, LicenseKey

STATUS_COLORS = {
    "valid": "green",
    "suspended": "orange",
    "cancelled": "red",
}


class LicenseInline(admin.TabularInline):
    """Licenses attached to a key."""

    model = License
    extra = 0
    can_delete = False
    fields = ["product", "status", "expires_at", "created_at"]
    readonly_fields = fields

    def has_add_permission(self, request, obj=None):
        return False


@admin.register(LicenseKey)
class LicenseKeyAdmin(admin.ModelAdmin):
    """Admin interface for LicenseKey model."""

    list_display = [
        "key",
        "brand",
        "customer_email",
        "license_count",
        "created_at",
    ]
    list_filter = ["brand", "created_at"]
    search_fields = ["key", "customer_email", "brand__name"]
    readonly_fields = ["id", "brand", "key", "customer_email", "created_at"]
    inlines = [LicenseInline]

    @admin.display(description="Licenses")
    def license_count(self, obj):
        """Display number of licenses for this key."""
        return len(obj.licenses.all())

    def has_add_permission(self, request):
        """Keys are issued through provisioning."""
        return False

    def get_queryset(self, request):
        """Optimize queryset."""
        return (
            super()
            .get_queryset(request)
            .select_related("brand")
            .prefetch_related("licenses")
        )


@admin.register(License)
class LicenseAdmin(admin.ModelAdmin):
    """Admin interface for License model."""

    list_display = [
        "license_key",
        "product",
        "status_display",
        "expires_at",
        "created_at",
    ]
    list_filter = ["status", "expires_at", "created_at", "product__brand"]
    search_fields = [
        "license_key__key",
        "license_key__customer_email",
        "product__code",
        "product__name",
    ]
    readonly_fields = [
        "id",
        "license_key",
        "product",
        "status",
        "expires_at",
        "created_at",
        "updated_at",
    ]

    @admin.display(description="Status", ordering="status")
    def status_display(self, obj):
        """Display status with color coding."""
        return format_html(
            '<span style="color: {}; font-weight: bold;">{}</span>',
            STATUS_COLORS.get(obj.status, "black"),
            obj.status.upper(),
        )

    def has_add_permission(self, request):
        """Licenses are created through provisioning."""
        return False

    def get_queryset(self, request):
        """Optimize queryset."""
        return super().get_queryset(request).select_related("license_key", "product__brand")
