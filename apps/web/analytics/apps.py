"""Django app configuration for analytics module."""

from django.apps import AppConfig


class AnalyticsConfig(AppConfig):
    """Scan and visit tracking for public menus."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.web.analytics"
    verbose_name = "Analytics"
