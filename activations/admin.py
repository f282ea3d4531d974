"""
Django admin configuration for activations app.

Back-office staff can set ``deactivated_at``; everything else is read-only.
"""

from django.contrib import admin
from django.utils.html import format_html
from django.utils.safestring import mark_safe

from activations.infrastructure.models import Activation


@admin.register(Activation)
class ActivationAdmin(admin.ModelAdmin):
    """Admin interface for Activation model."""

    list_display = [
        "license_key",
        "instance_id_display",
        "is_active_display",
        "activated_at",
        "deactivated_at",
    ]
    list_filter = [
        "activated_at",
        "deactivated_at",
        "license_key__brand",
    ]
    search_fields = [
        "instance_id",
        "license_key__key",
        "license_key__customer_email",
    ]
    readonly_fields = ["id", "license_key", "instance_id", "activated_at"]
    fields = ["id", "license_key", "instance_id", "activated_at", "deactivated_at"]

    @admin.display(description="Instance")
    def instance_id_display(self, obj):
        """Display instance identifier with truncation."""
        if len(obj.instance_id) > 50:
            return format_html(
                '<span title="{}">{}</span>',
                obj.instance_id,
                obj.instance_id[:47] + "...",
            )
        return obj.instance_id

    @admin.display(description="Status")
    def is_active_display(self, obj):
        """Display active status with color."""
        if obj.is_active:
            return mark_safe('<span style="color: green; font-weight: bold;">Active</span>')
        return mark_safe('<span style="color: red; font-weight: bold;">Inactive</span>')

    def has_add_permission(self, request):
        """Activations are created by end-user products."""
        return False

    def get_queryset(self, request):
        """Optimize queryset."""
        return super().get_queryset(request).select_related("license_key__brand")
