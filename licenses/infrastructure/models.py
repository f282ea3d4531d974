"""
LicenseKey and License models.
"""
import uuid

from django.db import models
from django.utils import timezone


class LicenseKey(models.Model):
    """
    A license key that can contain multiple licenses.
    Given to customers to activate products.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    brand = models.ForeignKey("brands.Brand", on_delete=models.CASCADE, related_name="license_keys")
    key = models.CharField(max_length=100, unique=True)
    customer_email = models.EmailField(db_index=True)
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = "license_keys"
        ordering = ["-created_at"]
        indexes = [
            models.Index(
                fields=["customer_email", "brand"], name="license_keys_email_brand_idx"
            ),
        ]

    def __str__(self):
        return self.key

    def save(self, *args, **kwargs):
        """Save license key with validation."""
        self.full_clean(validate_unique=False, validate_constraints=False)
        super().save(*args, **kwargs)


class License(models.Model):
    """
    A license grants access to a specific product.
    Multiple licenses can be associated with one license key,
    at most one per product.
    """

    STATUS_CHOICES = [
        ("valid", "Valid"),
        ("suspended", "Suspended"),
        ("cancelled", "Cancelled"),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    license_key = models.ForeignKey(
        LicenseKey, on_delete=models.CASCADE, related_name="licenses"
    )
    product = models.ForeignKey(
        "products.Product", on_delete=models.PROTECT, related_name="licenses"
    )
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default="valid")
    expires_at = models.DateTimeField(null=True, blank=True, help_text="Empty means perpetual")
    created_at = models.DateTimeField(default=timezone.now)
    updated_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = "licenses"
        ordering = ["created_at"]
        constraints = [
            models.UniqueConstraint(
                fields=["license_key", "product"],
                name="uniq_license_key_product",
            ),
        ]
        indexes = [
            models.Index(fields=["license_key", "status"], name="licenses_key_status_idx"),
        ]

    def __str__(self):
        return f"{self.license_key.key} - {self.product.name}"

    def save(self, *args, **kwargs):
        """Save license with validation."""
        self.full_clean(validate_unique=False, validate_constraints=False)
        super().save(*args, **kwargs)
