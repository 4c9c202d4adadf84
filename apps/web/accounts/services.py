"""
Credential issuer - one-time passcodes and stateless session tokens.

Login flow:
1. request_passcode() stores a 6-digit code for 10 minutes and emails it
2. verify_passcode() consumes the code and signs a 7-day session token
3. authenticate_token() checks that token on every vendor-scoped request

Tokens are not stored server-side, so they cannot be revoked before
they expire.
"""

import hmac
import logging
import secrets
from datetime import datetime, timedelta

from django.conf import settings
from django.db import DatabaseError
from django.utils import timezone

from jose import JWTError, jwt
from pydantic import ValidationError as PydanticValidationError

from apps.web.accounts.emails import EmailError, send_passcode_email
from apps.web.accounts.exceptions import (
    AuthValidationError,
    ConfigurationError,
    DeliveryError,
    ExpiredPasscodeError,
    InvalidPasscodeError,
    InvalidTokenError,
    PersistenceError,
    VendorNotFoundError,
)
from apps.web.accounts.serializers import TokenClaims
from apps.web.core.models import Vendor

logger = logging.getLogger(__name__)

PASSCODE_TTL = timedelta(minutes=10)
PASSCODE_MIN = 100000
PASSCODE_MAX = 999999

TOKEN_TTL = timedelta(days=7)
TOKEN_ALGORITHM = "HS256"


def generate_passcode() -> str:
    """Return a uniformly random 6-digit code (never a leading zero)."""
    return str(PASSCODE_MIN + secrets.randbelow(PASSCODE_MAX - PASSCODE_MIN + 1))


def get_signing_secret() -> str:
    """
    Return the token signing secret.

    Raises:
        ConfigurationError: If TOKEN_SIGNING_SECRET is not configured
    """
    secret = getattr(settings, "TOKEN_SIGNING_SECRET", "")
    if not secret:
        raise ConfigurationError("TOKEN_SIGNING_SECRET is not configured")
    return str(secret)


def request_passcode(email: str) -> Vendor:
    """
    Issue a new login passcode for a vendor and email it.

    Creates the vendor if this is the first login for the email. Any
    passcode still outstanding for the vendor is overwritten.

    Args:
        email: Vendor identity (any non-empty string)

    Returns:
        The vendor holding the new passcode

    Raises:
        AuthValidationError: If email is blank
        PersistenceError: If the vendor record cannot be written
        DeliveryError: If the passcode email cannot be sent
    """
    email = (email or "").strip()
    if not email:
        raise AuthValidationError("Email is required")

    passcode = generate_passcode()
    expiry = timezone.now() + PASSCODE_TTL

    try:
        vendor, created = Vendor.objects.update_or_create(
            email=email,
            defaults={"otp": passcode, "otp_expiry": expiry},
        )
    except DatabaseError as e:
        logger.exception("Failed to store passcode for %s: %s", email, e)
        raise PersistenceError("Failed to store passcode") from e

    if created:
        logger.info("Created vendor %s on first login request", vendor.pk)

    try:
        send_passcode_email(email, passcode, int(PASSCODE_TTL.total_seconds() // 60))
    except EmailError as e:
        raise DeliveryError(f"Failed to deliver passcode: {e.args[0]}") from e

    logger.info("Passcode issued for vendor %s", vendor.pk)
    return vendor


def verify_passcode(email: str, code: str) -> tuple[Vendor, str]:
    """
    Consume a login passcode and issue a session token.

    Checks run in order: the vendor exists, the code matches, the code has
    not expired. Consumption is a single conditional UPDATE so a code can
    only ever be redeemed once, even by concurrent requests.

    Args:
        email: Vendor identity
        code: Passcode submitted by the vendor

    Returns:
        Tuple of (vendor, signed session token)

    Raises:
        AuthValidationError: If email or code is blank
        VendorNotFoundError: If no vendor exists for the email
        InvalidPasscodeError: If the code does not match (or was just consumed)
        ExpiredPasscodeError: If the code has expired
        ConfigurationError: If the signing secret is missing
        PersistenceError: If the vendor record cannot be read or written
    """
    email = (email or "").strip()
    code = (code or "").strip()
    if not email or not code:
        raise AuthValidationError("Email and OTP are required")

    # Fail closed before touching the passcode
    secret = get_signing_secret()

    try:
        vendor = Vendor.objects.filter(email=email).first()
    except DatabaseError as e:
        raise PersistenceError("Failed to load vendor") from e

    if vendor is None:
        raise VendorNotFoundError("Vendor not found")

    if not vendor.otp or not hmac.compare_digest(
        vendor.otp.encode(), code.encode()
    ):
        logger.warning("Rejected passcode for vendor %s: mismatch", vendor.pk)
        raise InvalidPasscodeError("Passcode does not match")

    now = timezone.now()
    if vendor.otp_expiry is None or vendor.otp_expiry <= now:
        logger.warning("Rejected passcode for vendor %s: expired", vendor.pk)
        raise ExpiredPasscodeError("Passcode has expired")

    try:
        consumed = Vendor.objects.filter(
            pk=vendor.pk,
            otp=vendor.otp,
            otp_expiry__gt=now,
        ).update(otp=None, otp_expiry=None)
    except DatabaseError as e:
        raise PersistenceError("Failed to clear passcode") from e

    if consumed == 0:
        logger.warning("Passcode for vendor %s was already consumed", vendor.pk)
        raise InvalidPasscodeError("Passcode already used")

    vendor.otp = None
    vendor.otp_expiry = None

    token = _sign_token(vendor, secret, now)
    logger.info("Vendor %s logged in", vendor.pk)
    return vendor, token


def issue_token(vendor: Vendor) -> str:
    """
    Sign a session token for a vendor.

    Raises:
        ConfigurationError: If the signing secret is missing
    """
    return _sign_token(vendor, get_signing_secret(), timezone.now())


def _sign_token(vendor: Vendor, secret: str, issued_at: datetime) -> str:
    claims = {
        "email": vendor.email,
        "vendor_id": vendor.pk,
        "iat": issued_at,
        "exp": issued_at + TOKEN_TTL,
    }
    return str(jwt.encode(claims, secret, algorithm=TOKEN_ALGORITHM))


def authenticate_token(token: str) -> TokenClaims:
    """
    Verify a session token's signature and expiry.

    Args:
        token: Signed token from the Authorization header or cookie

    Returns:
        TokenClaims with the vendor's email and id

    Raises:
        ConfigurationError: If the signing secret is missing
        InvalidTokenError: If the token is malformed, tampered with or expired
    """
    secret = get_signing_secret()

    if not token:
        raise InvalidTokenError("Token is required")

    try:
        payload = jwt.decode(
            token,
            secret,
            algorithms=[TOKEN_ALGORITHM],
            options={"require_exp": True},
        )
        return TokenClaims.model_validate(payload)
    except (JWTError, PydanticValidationError) as e:
        raise InvalidTokenError("Invalid or expired token") from e
