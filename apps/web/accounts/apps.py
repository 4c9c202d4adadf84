"""Django app configuration for accounts module."""

from django.apps import AppConfig


class AccountsConfig(AppConfig):
    """Accounts app configuration."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.web.accounts"
    verbose_name = "Accounts"

    def ready(self) -> None:
        from apps.web.accounts import checks  # noqa: F401, PLC0415
