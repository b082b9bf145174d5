"""
Notification Repository
"""

import uuid
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from docuprint.modules.notifications.models import AdminNotification


async def create_many(
    db: AsyncSession,
    admin_ids: list[UUID],
    message: str,
    *,
    signup_id: uuid.UUID | None = None,
    print_job_id: uuid.UUID | None = None,
) -> list[AdminNotification]:
    """Add one notification per admin. Flushes, does not commit."""
    notifications = [
        AdminNotification(
            admin_id=admin_id,
            message=message,
            signup_id=signup_id,
            print_job_id=print_job_id,
        )
        for admin_id in admin_ids
    ]
    db.add_all(notifications)
    await db.flush()
    return notifications


async def get_by_id(db: AsyncSession, notification_id: UUID) -> AdminNotification | None:
    result = await db.execute(
        select(AdminNotification).where(AdminNotification.id == notification_id)
    )
    return result.scalar_one_or_none()


async def list_for_admin(db: AsyncSession, admin_id: UUID) -> list[AdminNotification]:
    """Notifications addressed to an admin, newest first."""
    result = await db.execute(
        select(AdminNotification)
        .where(AdminNotification.admin_id == admin_id)
        .order_by(AdminNotification.created_at.desc(), AdminNotification.id.desc())
    )
    return list(result.scalars().all())


async def count_unread(db: AsyncSession, admin_id: UUID) -> int:
    result = await db.execute(
        select(func.count())
        .select_from(AdminNotification)
        .where(AdminNotification.admin_id == admin_id, AdminNotification.is_read.is_(False))
    )
    return result.scalar_one()
