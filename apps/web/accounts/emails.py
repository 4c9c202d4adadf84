"""
Transactional email sending via Resend.
"""

import logging

from django.conf import settings

import resend

logger = logging.getLogger(__name__)

PASSCODE_SUBJECT = "Your OTP for QRScan Login"


class EmailError(Exception):
    """Raised when email sending fails."""

    pass


def send_email(to_email: str, subject: str, html: str) -> str:
    """
    Send an HTML email via Resend.

    Args:
        to_email: Recipient email address
        subject: Email subject
        html: Email body (HTML)

    Returns:
        Resend email ID

    Raises:
        EmailError: If sending fails or Resend is not configured
    """
    if not to_email:
        raise EmailError("Recipient email address is required")

    if not subject:
        raise EmailError("Email subject is required")

    if not html:
        raise EmailError("Email body is required")

    api_key = getattr(settings, "RESEND_API_KEY", None)
    if not api_key:
        raise EmailError("Resend API key not configured")

    resend.api_key = api_key

    try:
        response = resend.Emails.send(
            {  # type: ignore[arg-type]
                "from": settings.EMAIL_FROM,
                "to": to_email,
                "subject": subject,
                "html": html,
            }
        )

        email_id = response.get("id", "") if isinstance(response, dict) else ""

        logger.info("Sent email to %s (ID: %s)", to_email, email_id)

        return str(email_id)

    except Exception as e:
        logger.exception("Failed to send email to %s: %s", to_email, e)
        raise EmailError(f"Failed to send email: {e}") from e


def send_passcode_email(to_email: str, passcode: str, ttl_minutes: int) -> str:
    """Send a login passcode to a vendor."""
    html = (
        f"<p>Your OTP is: <strong>{passcode}</strong></p>"
        f"<p>It will expire in {ttl_minutes} minutes.</p>"
    )
    return send_email(to_email, PASSCODE_SUBJECT, html)
