"""
Resident Print Job Router

Endpoints (resident session required):
- POST /print-jobs - Submit a print job
- GET /print-jobs - The resident's print jobs, newest first
"""

import logging

from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from docuprint.core.auth import ResidentSession, require_resident_session
from docuprint.core.database import get_db
from docuprint.core.exceptions import ServiceError, to_http_exception
from docuprint.modules.print_jobs import service
from docuprint.modules.print_jobs.schemas import PrintJobResponse
from docuprint.modules.shared.schemas import DataResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "",
    response_model=DataResponse[PrintJobResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Submit Print Job",
    responses={400: {"description": "Validation error"}, 401: {"description": "Not logged in"}},
)
async def create_print_job(
    data: dict = Body(...),
    session: ResidentSession = Depends(require_resident_session),
    db: AsyncSession = Depends(get_db),
) -> DataResponse[PrintJobResponse]:
    """Only file metadata is accepted; any residentId in the body is ignored."""
    try:
        job = await service.create_print_job(db, session.resident_id, data)
    except ServiceError as e:
        raise to_http_exception(e) from e

    return DataResponse(data=PrintJobResponse.model_validate(job))


@router.get("", response_model=DataResponse[list[PrintJobResponse]], summary="My Print Jobs")
async def list_print_jobs(
    session: ResidentSession = Depends(require_resident_session),
    db: AsyncSession = Depends(get_db),
) -> DataResponse[list[PrintJobResponse]]:
    jobs = await service.list_print_jobs_for_resident(db, session.resident_id)
    return DataResponse(data=[PrintJobResponse.model_validate(job) for job in jobs])
