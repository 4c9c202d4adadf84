"""Factory classes for vendor and menu models."""

from decimal import Decimal

import factory

from apps.web.core.models import DiscountType, Vendor
from apps.web.restaurant.models import MenuItem


class VendorFactory(factory.django.DjangoModelFactory):
    """Factory for Vendor model."""

    class Meta:
        model = Vendor
        django_get_or_create = ("email",)

    email = factory.Sequence(lambda n: f"vendor-{n}@example.com")
    restaurant_name = factory.Sequence(lambda n: f"Restaurant {n}")
    phone = "+15551234567"
    address = "123 Main St"
    description = "Neighbourhood kitchen"
    discount_type = DiscountType.PERCENTAGE
    discount_value = Decimal("0")


class MenuItemFactory(factory.django.DjangoModelFactory):
    """Factory for MenuItem model."""

    class Meta:
        model = MenuItem

    vendor = factory.SubFactory(VendorFactory)
    name = factory.Sequence(lambda n: f"Item {n}")
    price = Decimal("100.00")
    category = "Mains"
    image = ""
