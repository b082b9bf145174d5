"""
Signup Schemas

Pydantic schemas for request validation and response serialization.
"""

from datetime import datetime
from uuid import UUID

from pydantic import Field, field_validator

from docuprint.modules.residents.schemas import ResidentProfileResponse
from docuprint.modules.shared.schemas import CamelModel, normalize_mobile
from docuprint.modules.signups.models import SignupStatus


class ResidentSignupCreate(CamelModel):
    """Request body for POST /resident-signup."""

    full_name: str = Field(..., max_length=200)
    mobile: str
    state_id: str = Field(..., min_length=1)
    city_id: str = Field(..., min_length=1)
    community_id: str = Field(..., min_length=1)
    block_id: str = Field(..., min_length=1)
    flat_number: str = Field(..., min_length=1)

    @field_validator("full_name")
    @classmethod
    def full_name_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Full name is required")
        return v

    @field_validator("mobile")
    @classmethod
    def mobile_is_ten_digits(cls, v: str) -> str:
        return normalize_mobile(v)


class SignupDecisionRequest(CamelModel):
    """Optional body for approve/reject."""

    notes: str | None = Field(None, max_length=1000)


class SignupResponse(CamelModel):
    id: UUID
    full_name: str
    mobile: str
    state_id: str
    city_id: str
    community_id: str
    block_id: str
    flat_number: str
    status: SignupStatus
    admin_notes: str | None = None
    decided_by: UUID | None = None
    decided_at: datetime | None = None
    created_at: datetime


class SignupApprovalResponse(CamelModel):
    signup: SignupResponse
    profile: ResidentProfileResponse
