"""Admin registrations for core models."""

from django.contrib import admin

from .models import Vendor


@admin.register(Vendor)
class VendorAdmin(admin.ModelAdmin):  # type: ignore[type-arg]
    list_display = [
        "email",
        "restaurant_name",
        "discount_type",
        "discount_value",
        "created_at",
    ]
    list_filter = ["discount_type"]
    search_fields = ["email", "restaurant_name"]
    exclude = ["otp", "otp_expiry"]
    readonly_fields = ["created_at", "updated_at"]
