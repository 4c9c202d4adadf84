"""
Session token guard for vendor-scoped views.
"""

import logging
from collections.abc import Callable
from functools import wraps
from typing import Any

from django.http import HttpRequest, JsonResponse

from apps.web.accounts.exceptions import ConfigurationError, InvalidTokenError
from apps.web.accounts.services import authenticate_token
from apps.web.core.middleware import TOKEN_COOKIE_NAME
from apps.web.core.models import Vendor

logger = logging.getLogger(__name__)

INVALID_TOKEN_MESSAGE = "Invalid or expired token"


def get_request_token(request: HttpRequest) -> str:
    """Return the bearer token from the Authorization header, else the cookie."""
    auth_header = request.headers.get("Authorization", "")
    if auth_header.startswith("Bearer "):
        return auth_header[len("Bearer ") :].strip()
    return request.COOKIES.get(TOKEN_COOKIE_NAME, "")


def vendor_token_required(view_func: Callable[..., Any]) -> Callable[..., Any]:
    """
    Decorator that authenticates the vendor from a session token.

    Sets request.vendor on success. Expired, tampered and malformed tokens
    all get the same 401 response.

    Usage:
        @vendor_token_required
        def menu_list(request):
            items = MenuItem.objects.for_vendor(request)
    """

    @wraps(view_func)
    def wrapper(request: HttpRequest, *args: Any, **kwargs: Any) -> Any:
        token = get_request_token(request)
        if not token:
            return JsonResponse({"error": "Unauthorized"}, status=401)

        try:
            claims = authenticate_token(token)
        except ConfigurationError:
            logger.error("Rejected request: token signing secret not configured")
            return JsonResponse({"error": "Server configuration error"}, status=500)
        except InvalidTokenError:
            return JsonResponse({"error": INVALID_TOKEN_MESSAGE}, status=401)

        vendor = Vendor.objects.filter(pk=claims.vendor_id, email=claims.email).first()
        if vendor is None:
            return JsonResponse({"error": INVALID_TOKEN_MESSAGE}, status=401)

        request.vendor = vendor  # type: ignore[attr-defined]
        return view_func(request, *args, **kwargs)

    return wrapper
