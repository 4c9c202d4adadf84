"""
System checks for the credential issuer.

Registered from AccountsConfig.ready() so `manage.py check`, `runserver`
and `migrate` refuse to start silently without a signing secret.
"""

from typing import Any

from django.conf import settings
from django.core.checks import Error, register


@register()
def check_token_signing_secret(app_configs: Any, **kwargs: Any) -> list[Error]:
    """Report a missing TOKEN_SIGNING_SECRET."""
    if getattr(settings, "TOKEN_SIGNING_SECRET", ""):
        return []
    return [
        Error(
            "TOKEN_SIGNING_SECRET is not set.",
            hint="Set TOKEN_SIGNING_SECRET in the environment; vendor logins "
            "and authenticated API calls are rejected until it is configured.",
            id="accounts.E001",
        )
    ]
