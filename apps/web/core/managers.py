"""
Custom managers for multi-tenancy.

VendorScopedManager filters queries by the authenticated vendor.
"""

from typing import TYPE_CHECKING, Any, TypeVar

from django.db import models

if TYPE_CHECKING:
    from django.http import HttpRequest

    from .models import VendorScopedModel

_T = TypeVar("_T", bound="VendorScopedModel")


class VendorScopedManager(models.Manager[_T]):
    """
    Manager that filters by vendor.

    Usage in views:
        # Automatically scoped to request.vendor
        items = MenuItem.objects.for_vendor(request).all()

    SECURITY: Always use for_vendor() in vendor views, never raw querysets.
    """

    def for_vendor(self, request: "HttpRequest") -> models.QuerySet[_T]:
        """
        Filter queryset by the vendor attached to the request.

        Args:
            request: HttpRequest with .vendor attribute (set by vendor_token_required)

        Returns:
            QuerySet filtered to the request's vendor

        Raises:
            ValueError: If request has no vendor attached
        """
        vendor: Any = getattr(request, "vendor", None)
        if vendor is None:
            msg = "Request has no vendor attached. Is vendor_token_required applied?"
            raise ValueError(msg)
        return self.filter(vendor=vendor)
