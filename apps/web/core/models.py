"""
Core models - Multi-tenancy foundation.

A Vendor is the tenant. All vendor-owned models inherit from VendorScopedModel.
"""

from django.db import models

from .managers import VendorScopedManager


class DiscountType(models.TextChoices):
    """How a vendor's discount value is applied to menu prices."""

    PERCENTAGE = "percentage", "Percentage"
    FIXED = "fixed", "Fixed amount"


class Vendor(models.Model):
    """
    Tenant - a restaurant account, keyed by email.

    Holds the outstanding login passcode (if any), the public display
    fields and the discount configuration applied to every menu price.
    """

    email = models.CharField(
        max_length=254,
        unique=True,
        help_text="Login identity and tenant key",
    )

    # One-time passcode (cleared once consumed)
    otp = models.CharField(max_length=6, null=True, blank=True)
    otp_expiry = models.DateTimeField(null=True, blank=True)

    # Display fields
    restaurant_name = models.CharField(
        max_length=200,
        blank=True,
        help_text="Public name used in the menu URL and QR code",
    )
    phone = models.CharField(max_length=20, blank=True)
    address = models.TextField(blank=True)
    description = models.TextField(blank=True)
    logo = models.TextField(blank=True, help_text="Logo URL")

    # Discount configuration
    discount_type = models.CharField(
        max_length=20,
        choices=DiscountType.choices,
        default=DiscountType.PERCENTAGE,
    )
    discount_value = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        default=0,
        help_text="0 = no discount",
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["email"]
        indexes = [
            models.Index(
                fields=["restaurant_name"], name="core_vendor_restaur_5b0f1e_idx"
            ),
        ]
        constraints = [
            models.UniqueConstraint(
                fields=["restaurant_name"],
                condition=~models.Q(restaurant_name=""),
                name="unique_vendor_restaurant_name",
            ),
        ]

    def __str__(self) -> str:
        if self.restaurant_name:
            return f"{self.restaurant_name} ({self.email})"
        return self.email

    @property
    def has_pending_passcode(self) -> bool:
        """Check if a login passcode is outstanding (may still be expired)."""
        return bool(self.otp and self.otp_expiry)

    @property
    def has_active_discount(self) -> bool:
        """Check if the discount configuration changes any price."""
        return self.discount_value > 0


class VendorScopedModel(models.Model):
    """
    Abstract base for all tenant-scoped models.

    Provides:
    - Automatic vendor FK
    - VendorScopedManager for filtered queries
    - Created/updated timestamps
    """

    vendor = models.ForeignKey(
        Vendor,
        on_delete=models.CASCADE,
        related_name="%(class)ss",  # e.g., vendor.menuitems
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = VendorScopedManager()

    class Meta:
        abstract = True
