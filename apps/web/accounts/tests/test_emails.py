"""
Tests for passcode email delivery.
"""

from unittest.mock import patch

import pytest

from apps.web.accounts.emails import (
    PASSCODE_SUBJECT,
    EmailError,
    send_email,
    send_passcode_email,
)


class TestSendEmail:
    """Tests for Resend email sending."""

    def test_send_email_success(self) -> None:
        """Successful send should return the Resend email ID."""
        with patch("apps.web.accounts.emails.resend") as mock_resend:
            mock_resend.Emails.send.return_value = {"id": "email_123"}

            with patch("apps.web.accounts.emails.settings") as mock_settings:
                mock_settings.RESEND_API_KEY = "re_test"
                mock_settings.EMAIL_FROM = "QRScan <login@qrscan.app>"

                email_id = send_email("owner@example.com", "Hi", "<p>Hello</p>")

        assert email_id == "email_123"
        mock_resend.Emails.send.assert_called_once_with(
            {
                "from": "QRScan <login@qrscan.app>",
                "to": "owner@example.com",
                "subject": "Hi",
                "html": "<p>Hello</p>",
            }
        )

    @pytest.mark.parametrize(
        ("to_email", "subject", "html", "error"),
        [
            ("", "Hi", "<p>x</p>", "Recipient email address is required"),
            ("owner@example.com", "", "<p>x</p>", "Email subject is required"),
            ("owner@example.com", "Hi", "", "Email body is required"),
        ],
    )
    def test_send_email_missing_fields(
        self, to_email: str, subject: str, html: str, error: str
    ) -> None:
        """Missing inputs should raise before calling Resend."""
        with pytest.raises(EmailError, match=error):
            send_email(to_email, subject, html)

    def test_send_email_no_api_key(self) -> None:
        """Should raise if Resend is not configured."""
        with patch("apps.web.accounts.emails.settings") as mock_settings:
            mock_settings.RESEND_API_KEY = ""

            with pytest.raises(EmailError, match="Resend API key not configured"):
                send_email("owner@example.com", "Hi", "<p>Hello</p>")

    def test_send_email_api_error(self) -> None:
        """Resend failures should be wrapped in EmailError."""
        with patch("apps.web.accounts.emails.resend") as mock_resend:
            mock_resend.Emails.send.side_effect = Exception("Rate limited")

            with patch("apps.web.accounts.emails.settings") as mock_settings:
                mock_settings.RESEND_API_KEY = "re_test"
                mock_settings.EMAIL_FROM = "login@qrscan.app"

                with pytest.raises(EmailError, match="Failed to send email"):
                    send_email("owner@example.com", "Hi", "<p>Hello</p>")


class TestSendPasscodeEmail:
    """Tests for the login passcode email."""

    def test_includes_code_and_lifetime(self) -> None:
        """The body should carry the code and its lifetime in minutes."""
        with patch("apps.web.accounts.emails.send_email") as mock_send:
            mock_send.return_value = "email_123"

            send_passcode_email("owner@example.com", "482913", 10)

        to_email, subject, html = mock_send.call_args.args
        assert to_email == "owner@example.com"
        assert subject == PASSCODE_SUBJECT
        assert "482913" in html
        assert "10 minutes" in html
