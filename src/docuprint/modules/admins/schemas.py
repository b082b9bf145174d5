"""
Admin Schemas
"""

from uuid import UUID

from pydantic import EmailStr, Field

from docuprint.modules.shared.schemas import CamelModel


class AdminLoginRequest(CamelModel):
    """Request body for POST /admin/login."""

    email: EmailStr
    password: str = Field(..., min_length=1, max_length=200)


class AdminLoginResponse(CamelModel):
    admin_id: UUID
    name: str


class AdminResponse(CamelModel):
    id: UUID
    email: str
    name: str
    community_ids: list[str]
