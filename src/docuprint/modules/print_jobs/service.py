"""
Print Job Service

Residents submit print jobs; admins of the resident's community move them
through queued -> printing -> ready -> collected (or cancelled).

Status updates overwrite the status unconditionally unless
ENFORCE_PRINT_JOB_TRANSITIONS is set, in which case moves outside
VALID_PRINT_JOB_TRANSITIONS are refused.
"""

import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from docuprint.core.config import settings
from docuprint.core.exceptions import (
    AuthorizationError,
    ConflictError,
    NotFoundError,
    ValidationError,
    parse_payload,
)
from docuprint.modules.admins.repository import AdminRepository
from docuprint.modules.admins.service import get_admin
from docuprint.modules.notifications.service import notify_admins
from docuprint.modules.print_jobs import repository
from docuprint.modules.print_jobs.models import PrintJob, PrintJobStatus
from docuprint.modules.print_jobs.schemas import (
    AdminPrintJobResponse,
    PrintJobCreate,
    PrintJobResponse,
)
from docuprint.modules.residents.models import ResidentProfile
from docuprint.modules.residents.repository import ResidentRepository

logger = logging.getLogger(__name__)


VALID_PRINT_JOB_TRANSITIONS: dict[PrintJobStatus, set[PrintJobStatus]] = {
    PrintJobStatus.QUEUED: {PrintJobStatus.PRINTING, PrintJobStatus.CANCELLED},
    PrintJobStatus.PRINTING: {PrintJobStatus.READY, PrintJobStatus.CANCELLED},
    PrintJobStatus.READY: {PrintJobStatus.COLLECTED, PrintJobStatus.CANCELLED},
    # Terminal states - no transitions allowed
    PrintJobStatus.COLLECTED: set(),
    PrintJobStatus.CANCELLED: set(),
}


class PrintJobNotFoundError(NotFoundError):
    def __init__(self, job_id: UUID | None = None):
        message = f"Print job {job_id} not found" if job_id else "Print job not found"
        super().__init__(message=message, error_code="PRINT_JOB_NOT_FOUND")


class InvalidPrintJobStatusError(ValidationError):
    def __init__(self, value: str):
        allowed = ", ".join(s.value for s in PrintJobStatus)
        super().__init__(
            message=f"Invalid status '{value}'. Expected one of: {allowed}",
            error_code="INVALID_STATUS",
        )


class PrintJobAccessDeniedError(AuthorizationError):
    def __init__(self):
        super().__init__(
            message="This print job belongs to a community you do not manage",
            error_code="COMMUNITY_ACCESS_DENIED",
        )


class InvalidStatusTransitionError(ConflictError):
    def __init__(self, current: PrintJobStatus, new: PrintJobStatus):
        valid = sorted(s.value for s in VALID_PRINT_JOB_TRANSITIONS.get(current, set()))
        super().__init__(
            message=f"Invalid status transition: {current.value} -> {new.value}. "
            f"Valid transitions: {valid}",
            error_code="INVALID_STATUS_TRANSITION",
        )


class UnknownResidentError(NotFoundError):
    def __init__(self):
        super().__init__(message="Resident not found", error_code="RESIDENT_NOT_FOUND")


def validate_print_job(data: dict | PrintJobCreate) -> PrintJobCreate:
    """
    Validate a print job submission.

    Raises:
        ValidationError: Non-positive pages or copies, unknown colorMode or
            paperSize, file over the upload limit, or empty title/fileName
    """
    return parse_payload(PrintJobCreate, data)


def to_admin_response(job: PrintJob, resident: ResidentProfile) -> AdminPrintJobResponse:
    return AdminPrintJobResponse(
        **PrintJobResponse.model_validate(job).model_dump(),
        resident_name=resident.full_name,
        resident_mobile=resident.mobile,
        community_id=resident.community_id,
        block_id=resident.block_id,
        flat_number=resident.flat_number,
    )


async def create_print_job(
    db: AsyncSession,
    resident_id: UUID,
    data: dict | PrintJobCreate,
) -> PrintJob:
    """
    Queue a print job for a resident and notify the community's admins.

    The resident id always comes from the session, never the payload.
    """
    payload = validate_print_job(data)

    resident = await ResidentRepository.get_by_id(db, resident_id)
    if resident is None:
        logger.warning(f"Print job submitted for unknown resident {resident_id}")
        raise UnknownResidentError()

    job = await repository.create(db, resident.id, payload)

    admins = await AdminRepository.list_for_community(db, resident.community_id)
    await notify_admins(
        db,
        admins,
        f"New print job: {job.title} ({job.pages} pages x {job.copies}) "
        f"from {resident.full_name}, {resident.flat_number}",
        print_job_id=job.id,
    )

    await db.commit()
    await db.refresh(job)

    logger.info(f"Print job created: id={job.id}, resident={resident.id}")
    return job


async def list_print_jobs_for_resident(db: AsyncSession, resident_id: UUID) -> list[PrintJob]:
    return await repository.list_for_resident(db, resident_id)


async def list_print_jobs_by_community(
    db: AsyncSession,
    community_id: str,
) -> list[tuple[PrintJob, ResidentProfile]]:
    """Jobs submitted by residents of a community, newest first."""
    return await repository.list_by_communities(db, [community_id])


async def list_print_jobs_for_admin(
    db: AsyncSession,
    admin_id: UUID,
) -> list[tuple[PrintJob, ResidentProfile]]:
    """Jobs across every community the admin manages, newest first."""
    admin = await get_admin(db, admin_id)
    if not admin.community_ids:
        return []
    return await repository.list_by_communities(db, admin.community_ids)


def _parse_status(value: str | PrintJobStatus) -> PrintJobStatus:
    try:
        return PrintJobStatus(value)
    except ValueError as e:
        raise InvalidPrintJobStatusError(str(value)) from e


async def update_print_job_status(
    db: AsyncSession,
    job_id: UUID,
    status: str | PrintJobStatus,
    admin_id: UUID,
) -> PrintJob:
    """
    Set a print job's status.

    Raises:
        InvalidPrintJobStatusError: Status is not one of the five values
        PrintJobNotFoundError: Unknown job
        PrintJobAccessDeniedError: Job's resident is outside the admin's communities
        InvalidStatusTransitionError: Transition refused (only when enforced)
    """
    new_status = _parse_status(status)

    found = await repository.get_with_resident(db, job_id)
    if found is None:
        logger.warning(f"Print job not found: {job_id}")
        raise PrintJobNotFoundError(job_id)
    job, resident = found

    admin = await get_admin(db, admin_id)
    if not admin.manages(resident.community_id):
        logger.warning(f"Admin {admin_id} may not update print job {job_id}")
        raise PrintJobAccessDeniedError()

    current_status = job.status
    if (
        settings.enforce_print_job_transitions
        and new_status != current_status
        and new_status not in VALID_PRINT_JOB_TRANSITIONS.get(current_status, set())
    ):
        raise InvalidStatusTransitionError(current_status, new_status)

    job.status = new_status
    await db.commit()
    await db.refresh(job)

    logger.info(
        f"Print job {job_id} status {current_status.value} -> {new_status.value} by admin {admin_id}"
    )
    return job
