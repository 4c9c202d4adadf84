"""Django app configuration for the menu catalog."""

from django.apps import AppConfig


class RestaurantConfig(AppConfig):
    """Menu catalog, vendor profile and discount pricing."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.web.restaurant"
    verbose_name = "Restaurant menus"
