"""
Resident Router

Endpoints:
- GET /resident/profile - The logged-in resident's profile
- GET /me - Who the current session belongs to (resident, admin or nobody)
"""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from docuprint.core.auth import (
    AdminSession,
    ResidentSession,
    get_admin_session,
    get_resident_session,
    require_resident_session,
)
from docuprint.core.database import get_db
from docuprint.core.exceptions import ServiceError, to_http_exception
from docuprint.modules.print_jobs import service as print_job_service
from docuprint.modules.print_jobs.schemas import PrintJobResponse
from docuprint.modules.residents import service
from docuprint.modules.residents.schemas import (
    AdminIdentity,
    MeResponse,
    ResidentIdentity,
    ResidentProfileDetail,
)
from docuprint.modules.shared.schemas import DataResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "/resident/profile",
    response_model=DataResponse[ResidentProfileDetail],
    summary="Resident Profile",
)
async def get_profile(
    session: ResidentSession = Depends(require_resident_session),
    db: AsyncSession = Depends(get_db),
) -> DataResponse[ResidentProfileDetail]:
    try:
        profile = await service.get_resident_profile(db, session.resident_id)
    except ServiceError as e:
        raise to_http_exception(e) from e
    return DataResponse(data=profile)


@router.get("/me", response_model=MeResponse, summary="Current Session")
async def who_am_i(
    resident: ResidentSession | None = Depends(get_resident_session),
    admin: AdminSession | None = Depends(get_admin_session),
    db: AsyncSession = Depends(get_db),
) -> MeResponse:
    """
    Describe the caller. A resident session wins over an admin session and
    includes the resident's print jobs.
    """
    if resident is not None:
        jobs = await print_job_service.list_print_jobs_for_resident(db, resident.resident_id)
        return MeResponse(
            data=ResidentIdentity(resident_id=resident.resident_id, mobile=resident.mobile),
            type="resident",
            jobs=[PrintJobResponse.model_validate(job) for job in jobs],
        )

    if admin is not None:
        return MeResponse(data=AdminIdentity(admin_id=admin.admin_id), type="admin")

    return MeResponse(data=None, type="anonymous")
