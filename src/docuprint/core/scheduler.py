"""
Background Job Scheduler

Scheduled task execution using APScheduler with AsyncIO support.

Jobs are registered (usually before start) with `register_job`; the
scheduler adds every registered job when it starts. Registered jobs can
also be run on demand with `trigger_job_manually`.
"""

import logging
from collections.abc import Callable, Coroutine
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any

from apscheduler.events import EVENT_JOB_ERROR, EVENT_JOB_EXECUTED, JobExecutionEvent
from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.base import BaseTrigger

logger = logging.getLogger(__name__)

JobFunc = Callable[[], Coroutine[Any, Any, Any]]


@dataclass
class RegisteredJob:
    func: JobFunc
    trigger: BaseTrigger


# Global scheduler instance
_scheduler: AsyncIOScheduler | None = None

# Job registry for scheduling and manual triggering
_job_registry: dict[str, RegisteredJob] = {}


class SchedulerConfig:
    """Configuration for the background scheduler."""

    TIMEZONE = "UTC"

    JOB_DEFAULTS = {
        "coalesce": True,  # Combine missed executions into one
        "max_instances": 1,
        "misfire_grace_time": 60 * 5,
    }


def _job_listener(event: JobExecutionEvent) -> None:
    """Log job execution results."""
    if event.exception:
        logger.error(
            f"Job {event.job_id} failed with exception: {event.exception}",
            exc_info=event.exception,
        )
    else:
        logger.info(f"Job {event.job_id} executed successfully at {datetime.now(UTC).isoformat()}")


def get_scheduler() -> AsyncIOScheduler | None:
    """Get the global scheduler instance, or None if not started."""
    return _scheduler


async def start_scheduler() -> AsyncIOScheduler:
    """
    Initialize and start the background scheduler.

    Every job in the registry is added before the scheduler starts.
    """
    global _scheduler

    if _scheduler is not None and _scheduler.running:
        logger.warning("Scheduler already running, returning existing instance")
        return _scheduler

    logger.info("Initializing background job scheduler...")

    _scheduler = AsyncIOScheduler(
        timezone=SchedulerConfig.TIMEZONE,
        job_defaults=SchedulerConfig.JOB_DEFAULTS,
    )
    _scheduler.add_listener(_job_listener, EVENT_JOB_EXECUTED | EVENT_JOB_ERROR)

    for job_id, job in _job_registry.items():
        _scheduler.add_job(job.func, trigger=job.trigger, id=job_id, replace_existing=True)
        logger.info(f"Scheduled job: {job_id}")

    _scheduler.start()

    logger.info("Background job scheduler started successfully")
    return _scheduler


async def stop_scheduler() -> None:
    """Stop the background scheduler, waiting for running jobs."""
    global _scheduler

    if _scheduler is None or not _scheduler.running:
        logger.debug("Scheduler not running, nothing to stop")
        return

    logger.info("Stopping background job scheduler...")
    _scheduler.shutdown(wait=True)
    _scheduler = None
    logger.info("Background job scheduler stopped")


def register_job(job_id: str, func: JobFunc, trigger: BaseTrigger) -> None:
    """
    Register a job.

    If the scheduler is already running the job is scheduled immediately,
    otherwise it is scheduled on `start_scheduler`.

    Example:
        register_job(
            job_id="otp_purge_expired",
            func=purge_expired_otps,
            trigger=IntervalTrigger(hours=1),
        )
    """
    _job_registry[job_id] = RegisteredJob(func=func, trigger=trigger)

    if _scheduler is not None and _scheduler.running:
        _scheduler.add_job(func, trigger=trigger, id=job_id, replace_existing=True)
        logger.info(f"Scheduled job: {job_id}")
    else:
        logger.debug(f"Registered job {job_id}; it will be scheduled on start")


async def trigger_job_manually(job_id: str) -> dict[str, Any]:
    """
    Run a registered job now, bypassing the schedule.

    Returns:
        Dict with job_id, status ("success" or "error"), executed_at,
        the job's return value as result, and error on failure

    Raises:
        ValueError: If job_id is not registered
    """
    if job_id not in _job_registry:
        raise ValueError(
            f"Job {job_id} not found in registry. Available jobs: {list(_job_registry.keys())}"
        )

    executed_at = datetime.now(UTC)
    logger.info(f"Manually triggering job: {job_id}")

    try:
        result = await _job_registry[job_id].func()
        logger.info(f"Manual execution of job {job_id} completed successfully")
        return {
            "job_id": job_id,
            "status": "success",
            "executed_at": executed_at.isoformat(),
            "result": result,
        }
    except Exception as e:
        logger.error(f"Manual execution of job {job_id} failed: {e}", exc_info=True)
        return {
            "job_id": job_id,
            "status": "error",
            "executed_at": executed_at.isoformat(),
            "error": str(e),
        }


def list_registered_jobs() -> list[dict[str, Any]]:
    """List registered jobs with their next run time when scheduled."""
    jobs = []

    for job_id in _job_registry:
        job_info: dict[str, Any] = {"job_id": job_id, "next_run_time": None}

        if _scheduler is not None:
            scheduled_job = _scheduler.get_job(job_id)
            if scheduled_job and scheduled_job.next_run_time:
                job_info["next_run_time"] = scheduled_job.next_run_time.isoformat()

        jobs.append(job_info)

    return jobs
