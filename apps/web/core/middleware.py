"""
Dashboard route guard - sends anonymous browsers to the login page.
"""

from collections.abc import Callable
from urllib.parse import urlencode

from django.conf import settings
from django.http import HttpRequest, HttpResponse, HttpResponseRedirect

TOKEN_COOKIE_NAME = "token"


class DashboardGuardMiddleware:
    """
    Middleware that redirects dashboard navigation without credentials.

    A request passes if it carries the session cookie or an
    `Authorization: Bearer` header. Only presence is checked here; the
    token itself is verified by vendor_token_required on each dashboard view.
    """

    protected_prefix = "/dashboard/"

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        if request.path.startswith(self.protected_prefix) and not self._has_token(
            request
        ):
            query = urlencode({"next": request.get_full_path()})
            return HttpResponseRedirect(f"{settings.VENDOR_LOGIN_URL}?{query}")

        return self.get_response(request)

    @staticmethod
    def _has_token(request: HttpRequest) -> bool:
        if request.COOKIES.get(TOKEN_COOKIE_NAME):
            return True
        return request.headers.get("Authorization", "").startswith("Bearer ")
