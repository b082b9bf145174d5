"""
Resident Schemas
"""

from datetime import datetime
from typing import Literal
from uuid import UUID

from docuprint.modules.directory.schemas import LocationNames
from docuprint.modules.print_jobs.schemas import PrintJobResponse
from docuprint.modules.shared.schemas import CamelModel


class ResidentProfileResponse(CamelModel):
    id: UUID
    signup_id: UUID
    full_name: str
    mobile: str
    state_id: str
    city_id: str
    community_id: str
    block_id: str
    flat_number: str
    created_at: datetime


class ResidentProfileDetail(ResidentProfileResponse):
    """Profile plus display names for its location."""

    location: LocationNames


class ResidentIdentity(CamelModel):
    resident_id: UUID
    mobile: str


class AdminIdentity(CamelModel):
    admin_id: UUID


class MeResponse(CamelModel):
    """Response for GET /me."""

    data: ResidentIdentity | AdminIdentity | None
    type: Literal["resident", "admin", "anonymous"]
    jobs: list[PrintJobResponse] | None = None
