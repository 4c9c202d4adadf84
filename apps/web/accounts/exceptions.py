"""Credential issuer exceptions."""


class CredentialError(Exception):
    """Base exception for login and session token errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class AuthValidationError(CredentialError):
    """A required input was missing or blank."""


class VendorNotFoundError(CredentialError):
    """No vendor exists for the given identity."""


class PasscodeRejectedError(CredentialError):
    """Submitted passcode cannot be accepted.

    Subclasses record why, but callers must surface every rejection with
    the same generic message.
    """


class InvalidPasscodeError(PasscodeRejectedError):
    """Submitted passcode does not match the outstanding one."""


class ExpiredPasscodeError(PasscodeRejectedError):
    """Outstanding passcode is past its expiry (or has none)."""


class InvalidTokenError(CredentialError):
    """Session token is malformed, tampered with or expired."""


class PersistenceError(CredentialError):
    """Reading or writing the credential record failed."""


class DeliveryError(CredentialError):
    """Passcode could not be dispatched to the vendor."""


class ConfigurationError(CredentialError):
    """Server is missing the token signing secret."""
