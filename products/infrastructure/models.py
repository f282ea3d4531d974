"""
Product model.
"""
import uuid

from django.db import models


class Product(models.Model):
    """
    Represents a product that can be licensed (e.g., RankMath Pro, Content AI).
    Products belong to a brand and are addressed by a per-brand code.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    brand = models.ForeignKey("brands.Brand", on_delete=models.CASCADE, related_name="products")
    code = models.SlugField(max_length=100, help_text="Product code, unique within the brand")
    name = models.CharField(max_length=255, help_text="Product display name")
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "products"
        unique_together = [["brand", "code"]]
        ordering = ["brand", "code"]

    def clean(self):
        """Validate product fields."""
        from django.core.exceptions import ValidationError

        if not self.brand_id:
            raise ValidationError("Brand is required")
        if not self.name or not self.name.strip():
            raise ValidationError("Name is required")

    def save(self, *args, **kwargs):
        """Save product with validation."""
        self.full_clean(validate_unique=False, validate_constraints=False)
        super().save(*args, **kwargs)

    def __str__(self):
        return f"{self.brand.name} - {self.name}"
