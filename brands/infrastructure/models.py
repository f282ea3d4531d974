"""
Brand model.
"""

import uuid

from django.db import models


class Brand(models.Model):
    """
    Represents a brand/tenant in the system (e.g., RankMath, WP Rocket).
    Each brand has isolated data access.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    code = models.SlugField(
        max_length=100,
        unique=True,
        help_text="Unique brand code (e.g., 'rankmath')",
    )
    name = models.CharField(max_length=255, help_text="Brand display name")
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "brands"
        ordering = ["name"]

    def clean(self):
        """Validate brand fields."""
        from django.core.exceptions import ValidationError

        if not self.name or not self.name.strip():
            raise ValidationError("Name is required")

    def save(self, *args, **kwargs):
        """Save brand with validation."""
        self.full_clean(validate_unique=False, validate_constraints=False)
        super().save(*args, **kwargs)

    def __str__(self):
        return self.name
