"""
Restaurant models - the vendor's menu catalog.

Discount settings live on the Vendor; prices here are always base prices.
"""

from django.db import models

from apps.web.core.models import VendorScopedModel


class MenuItem(VendorScopedModel):
    """
    Individual menu item.

    The price stored is the base price. The effective (discounted) price is
    computed at read time by restaurant.pricing.
    """

    name = models.CharField(max_length=200)
    price = models.DecimalField(max_digits=10, decimal_places=2)
    category = models.CharField(max_length=100)
    image = models.TextField(blank=True, help_text="Image URL")

    class Meta:
        ordering = ["pk"]
        indexes = [
            models.Index(
                fields=["vendor", "category"], name="restaurant__vendor__8c2d4a_idx"
            ),
        ]

    def __str__(self) -> str:
        return self.name
