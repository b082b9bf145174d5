"""
OTP Background Jobs

Expiry is enforced when a code is verified; this job only removes entries
that were never verified.
"""

import logging
from datetime import UTC, datetime
from typing import Any

from apscheduler.triggers.interval import IntervalTrigger

from docuprint.core.config import settings
from docuprint.core.database import session_scope
from docuprint.core.scheduler import register_job
from docuprint.modules.otp import repository

logger = logging.getLogger(__name__)

JOB_ID_PURGE_EXPIRED = "otp_purge_expired"


async def purge_expired_otps() -> dict[str, Any]:
    """
    Delete expired OTP entries. Idempotent.

    Returns:
        Dict with executed_at and purged count
    """
    executed_at = datetime.now(UTC)

    async with session_scope() as db:
        purged = await repository.purge_expired(db, executed_at)
        await db.commit()

    logger.info(f"OTP purge complete: {purged} expired entr{'y' if purged == 1 else 'ies'} removed")
    return {"executed_at": executed_at.isoformat(), "purged": purged}


def register_otp_jobs() -> None:
    """Register OTP housekeeping with the scheduler. Call before it starts."""
    register_job(
        job_id=JOB_ID_PURGE_EXPIRED,
        func=purge_expired_otps,
        trigger=IntervalTrigger(minutes=settings.otp_purge_interval_minutes),
    )
    logger.info(
        f"Registered job: {JOB_ID_PURGE_EXPIRED} "
        f"(interval: {settings.otp_purge_interval_minutes} minutes)"
    )
