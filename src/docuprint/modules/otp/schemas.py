"""
OTP Schemas
"""

from datetime import datetime
from uuid import UUID

from pydantic import Field, field_validator

from docuprint.modules.shared.schemas import CamelModel, normalize_mobile


class OtpRequest(CamelModel):
    """Request body for POST /auth/request-otp."""

    mobile: str

    @field_validator("mobile")
    @classmethod
    def mobile_is_ten_digits(cls, v: str) -> str:
        return normalize_mobile(v)


class OtpVerifyRequest(CamelModel):
    """Request body for POST /auth/verify-otp."""

    mobile: str = Field(..., min_length=1)
    code: str = Field(..., min_length=1)


class OtpIssuedResponse(CamelModel):
    mobile: str
    expires_at: datetime
    # Only present in demo mode
    code: str | None = None


class ResidentLoginResponse(CamelModel):
    resident_id: UUID
    mobile: str
