"""
Vendor login API - OTP request and verification.
"""

import logging

from django.conf import settings
from django.http import HttpRequest, JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_POST

from apps.web.accounts.exceptions import (
    AuthValidationError,
    ConfigurationError,
    DeliveryError,
    PasscodeRejectedError,
    PersistenceError,
    VendorNotFoundError,
)
from apps.web.accounts.serializers import (
    SendOTPRequest,
    VerifyOTPRequest,
    VerifyOTPResponse,
)
from apps.web.accounts.services import TOKEN_TTL, request_passcode, verify_passcode
from apps.web.core.decorators import json_body
from apps.web.core.middleware import TOKEN_COOKIE_NAME

logger = logging.getLogger(__name__)

REJECTED_PASSCODE_MESSAGE = "Invalid or expired OTP"


@csrf_exempt
@require_POST
@json_body(SendOTPRequest)
def send_otp(_request: HttpRequest, payload: SendOTPRequest) -> JsonResponse:
    """
    POST /api/auth/send-otp

    Emails a fresh 6-digit passcode to the vendor, creating the vendor on
    first login.
    """
    try:
        request_passcode(payload.email)
    except AuthValidationError as e:
        return JsonResponse({"error": e.message}, status=400)
    except (PersistenceError, DeliveryError) as e:
        logger.error("Send OTP failed: %s", e.message)
        return JsonResponse({"error": "Internal Server Error"}, status=500)

    return JsonResponse({"message": "OTP sent successfully"})


@csrf_exempt
@require_POST
@json_body(VerifyOTPRequest)
def verify_otp(_request: HttpRequest, payload: VerifyOTPRequest) -> JsonResponse:
    """
    POST /api/auth/verify-otp

    Consumes the passcode and returns a 7-day session token, also set as
    the `token` cookie.

    Unknown vendors, wrong codes and expired codes share one response so
    callers cannot tell which check failed.
    """
    try:
        _vendor, token = verify_passcode(payload.email, payload.otp)
    except AuthValidationError as e:
        return JsonResponse({"error": e.message}, status=400)
    except (VendorNotFoundError, PasscodeRejectedError):
        return JsonResponse({"error": REJECTED_PASSCODE_MESSAGE}, status=401)
    except ConfigurationError:
        logger.error("Verify OTP rejected: token signing secret not configured")
        return JsonResponse({"error": "Server configuration error"}, status=500)
    except PersistenceError as e:
        logger.error("Verify OTP failed: %s", e.message)
        return JsonResponse({"error": "Server error"}, status=500)

    body = VerifyOTPResponse(message="OTP verified", token=token)
    response = JsonResponse(body.model_dump())
    # httponly is off so the dashboard frontend can read the token
    response.set_cookie(
        TOKEN_COOKIE_NAME,
        token,
        max_age=int(TOKEN_TTL.total_seconds()),
        path="/",
        secure=not settings.DEBUG,
        httponly=False,
        samesite="Strict",
    )
    return response
