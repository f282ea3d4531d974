"""
Activation Django ORM model.

This is the infrastructure layer model for activations.
Domain entities are in activations.domain.activation.
"""
import uuid

from django.db import models


class Activation(models.Model):
    """
    Represents a specific instance where a license key is activated.

    One row per (license key, instance) for the lifetime of the row,
    whether or not it has been deactivated.
    """

    id = models.UUIDField(
        primary_key=True, default=uuid.uuid4, editable=False
    )
    license_key = models.ForeignKey(
        "licenses.LicenseKey",
        on_delete=models.CASCADE,
        related_name="activations",
    )
    instance_id = models.CharField(
        max_length=255, help_text="URL, hostname, or machine ID"
    )
    activated_at = models.DateTimeField()
    deactivated_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = "activations"
        unique_together = [["license_key", "instance_id"]]
        ordering = ["-activated_at"]

    def clean(self):
        """Validate activation fields."""
        from django.core.exceptions import ValidationError

        if not self.instance_id or not self.instance_id.strip():
            raise ValidationError("Instance identifier cannot be empty")

    def save(self, *args, **kwargs):
        """Save activation with validation."""
        self.full_clean(validate_unique=False, validate_constraints=False)
        super().save(*args, **kwargs)

    @property
    def is_active(self) -> bool:
        return self.deactivated_at is None

    def __str__(self):
        return f"{self.license_key.key} @ {self.instance_id}"
