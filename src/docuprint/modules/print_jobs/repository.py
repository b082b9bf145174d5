"""
Print Job Repository
"""

import uuid
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from docuprint.modules.print_jobs.models import PrintJob, PrintJobStatus
from docuprint.modules.print_jobs.schemas import PrintJobCreate
from docuprint.modules.residents.models import ResidentProfile


async def create(db: AsyncSession, resident_id: uuid.UUID, data: PrintJobCreate) -> PrintJob:
    """Add a queued print job. Flushes, does not commit."""
    job = PrintJob(
        resident_id=resident_id,
        title=data.title,
        pages=data.pages,
        copies=data.copies,
        color_mode=data.color_mode,
        paper_size=data.paper_size,
        notes=data.notes,
        file_name=data.file_name,
        file_size=data.file_size,
        status=PrintJobStatus.QUEUED,
    )
    db.add(job)
    await db.flush()
    return job


async def get_by_id(db: AsyncSession, id: UUID) -> PrintJob | None:
    result = await db.execute(select(PrintJob).where(PrintJob.id == id))
    return result.scalar_one_or_none()


async def get_with_resident(db: AsyncSession, id: UUID) -> tuple[PrintJob, ResidentProfile] | None:
    result = await db.execute(
        select(PrintJob, ResidentProfile)
        .join(ResidentProfile, PrintJob.resident_id == ResidentProfile.id)
        .where(PrintJob.id == id)
    )
    row = result.one_or_none()
    return (row[0], row[1]) if row else None


async def list_for_resident(db: AsyncSession, resident_id: UUID) -> list[PrintJob]:
    """A resident's jobs, newest first."""
    result = await db.execute(
        select(PrintJob)
        .where(PrintJob.resident_id == resident_id)
        .order_by(PrintJob.created_at.desc(), PrintJob.id.desc())
    )
    return list(result.scalars().all())


async def list_by_communities(
    db: AsyncSession,
    community_ids: list[str],
) -> list[tuple[PrintJob, ResidentProfile]]:
    """Jobs whose resident lives in one of the communities, newest first."""
    result = await db.execute(
        select(PrintJob, ResidentProfile)
        .join(ResidentProfile, PrintJob.resident_id == ResidentProfile.id)
        .where(ResidentProfile.community_id.in_(community_ids))
        .order_by(PrintJob.created_at.desc(), PrintJob.id.desc())
    )
    return [(job, resident) for job, resident in result.all()]
