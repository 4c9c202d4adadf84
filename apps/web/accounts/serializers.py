"""
Pydantic schemas for vendor login requests and session token claims.
"""

from pydantic import BaseModel, ConfigDict, Field


class SendOTPRequest(BaseModel):
    """Request body for POST /api/auth/send-otp."""

    model_config = ConfigDict(str_strip_whitespace=True)

    email: str = Field(..., min_length=1, max_length=254)


class VerifyOTPRequest(BaseModel):
    """Request body for POST /api/auth/verify-otp."""

    model_config = ConfigDict(str_strip_whitespace=True)

    email: str = Field(..., min_length=1, max_length=254)
    otp: str = Field(..., min_length=1, max_length=20)


class VerifyOTPResponse(BaseModel):
    """Response for POST /api/auth/verify-otp."""

    message: str
    token: str


class TokenClaims(BaseModel):
    """Identity asserted by a verified session token."""

    model_config = ConfigDict(frozen=True)

    email: str = Field(..., min_length=1)
    vendor_id: int
