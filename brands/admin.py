"""
Django admin configuration for brands app.
"""

from django.contrib import admin
from django.db.models import Count

from brands.infrastructure.models import Brand


@admin.register(Brand)
class BrandAdmin(admin.ModelAdmin):
    """Admin interface for Brand model."""

    list_display = ["name", "code", "product_count", "created_at"]
    list_filter = ["created_at", "updated_at"]
    search_fields = ["name", "code"]
    readonly_fields = ["id", "created_at", "updated_at"]
    fieldsets = (
        (
            "Basic Information",
            {
                "fields": ("id", "code", "name"),
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

    @admin.display(description="Products", ordering="product_total")
    def product_count(self, obj):
        """Display number of products for this brand."""
        return obj.product_total

    def get_queryset(self, request):
        """Optimize queryset."""
        return super().get_queryset(request).annotate(product_total=Count("products"))
