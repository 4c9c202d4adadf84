"""Admin registration for restaurant models."""

from django.contrib import admin

from apps.web.restaurant.models import MenuItem


@admin.register(MenuItem)
class MenuItemAdmin(admin.ModelAdmin):
    """Admin for menu items."""

    list_display = ["name", "category", "price", "vendor"]
    list_filter = ["category", "vendor"]
    search_fields = ["name", "category", "vendor__restaurant_name"]
    readonly_fields = ["created_at", "updated_at"]

    fieldsets = [
        (None, {"fields": ["vendor", "name", "category", "price"]}),
        ("Media", {"fields": ["image"]}),
        ("Timestamps", {"fields": ["created_at", "updated_at"]}),
    ]
