"""
Django admin configuration for products app.
"""

from django.contrib import admin
from django.db.models import Count

from products.infrastructure.models import Product


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    """Admin interface for Product model."""

    list_display = ["name", "code", "brand", "license_count", "created_at"]
    list_filter = ["brand", "created_at", "updated_at"]
    search_fields = ["name", "code", "brand__name", "brand__code"]
    readonly_fields = ["id", "created_at", "updated_at"]
    fieldsets = (
        (
            "Basic Information",
            {
                "fields": ("id", "brand", "code", "name"),
            },
        ),
        (
            "Timestamps",
            {
                "fields": ("created_at", "updated_at"),
                "classes": ("collapse",),
            },
        ),
    )

    @admin.display(description="Licenses", ordering="license_total")
    def license_count(self, obj):
        """Display number of licenses for this product."""
        return obj.license_total

    def get_queryset(self, request):
        """Optimize queryset."""
        return (
            super()
            .get_queryset(request)
            .select_related("brand")
            .annotate(license_total=Count("licenses"))
        )
