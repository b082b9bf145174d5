"""
Admin Print Job Router

Endpoints (admin session required):
- GET /admin/print-jobs - Jobs from residents of the admin's communities
- POST /admin/print-jobs/{job_id}/status - Change a job's status
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Body, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from docuprint.core.auth import AdminSession, require_admin_session
from docuprint.core.database import get_db
from docuprint.core.exceptions import ServiceError, parse_payload, to_http_exception
from docuprint.modules.print_jobs import service
from docuprint.modules.print_jobs.schemas import (
    AdminPrintJobResponse,
    PrintJobResponse,
    PrintJobStatusUpdate,
)
from docuprint.modules.shared.schemas import DataResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "",
    response_model=DataResponse[list[AdminPrintJobResponse]],
    summary="Community Print Jobs",
)
async def list_print_jobs(
    session: AdminSession = Depends(require_admin_session),
    db: AsyncSession = Depends(get_db),
) -> DataResponse[list[AdminPrintJobResponse]]:
    try:
        rows = await service.list_print_jobs_for_admin(db, session.admin_id)
    except ServiceError as e:
        raise to_http_exception(e) from e
    return DataResponse(data=[service.to_admin_response(job, resident) for job, resident in rows])


@router.post(
    "/{job_id}/status",
    response_model=DataResponse[PrintJobResponse],
    summary="Update Print Job Status",
    responses={
        400: {"description": "Missing or unknown status"},
        403: {"description": "Job is outside the admin's communities"},
        404: {"description": "Print job not found"},
        409: {"description": "Transition not allowed (when transitions are enforced)"},
    },
)
async def update_status(
    job_id: UUID,
    data: dict = Body(...),
    session: AdminSession = Depends(require_admin_session),
    db: AsyncSession = Depends(get_db),
) -> DataResponse[PrintJobResponse]:
    try:
        payload = parse_payload(PrintJobStatusUpdate, data)
        job = await service.update_print_job_status(db, job_id, payload.status, session.admin_id)
    except ServiceError as e:
        raise to_http_exception(e) from e

    return DataResponse(data=PrintJobResponse.model_validate(job))
