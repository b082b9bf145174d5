"""
Notification Service

Admin-facing message log. Other modules call `notify_admins` inside their
own transaction; the caller commits.
"""

import logging
import uuid
from collections.abc import Iterable
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from docuprint.core.exceptions import NotFoundError
from docuprint.modules.admins.models import AdminAccount
from docuprint.modules.notifications import repository
from docuprint.modules.notifications.models import AdminNotification

logger = logging.getLogger(__name__)


class NotificationNotFoundError(NotFoundError):
    def __init__(self):
        super().__init__(message="Notification not found", error_code="NOTIFICATION_NOT_FOUND")


async def notify_admins(
    db: AsyncSession,
    admins: Iterable[AdminAccount],
    message: str,
    *,
    signup_id: uuid.UUID | None = None,
    print_job_id: uuid.UUID | None = None,
) -> list[AdminNotification]:
    """Create exactly one notification per admin (duplicates in `admins` are collapsed)."""
    admin_ids = list(dict.fromkeys(admin.id for admin in admins))
    if not admin_ids:
        logger.warning(f"No admins to notify: {message}")
        return []

    notifications = await repository.create_many(
        db,
        admin_ids,
        message,
        signup_id=signup_id,
        print_job_id=print_job_id,
    )
    logger.info(f"Queued {len(notifications)} admin notification(s)")
    return notifications


async def list_notifications(db: AsyncSession, admin_id: UUID) -> list[AdminNotification]:
    return await repository.list_for_admin(db, admin_id)


async def count_unread(db: AsyncSession, admin_id: UUID) -> int:
    return await repository.count_unread(db, admin_id)


async def mark_notification_read(
    db: AsyncSession,
    notification_id: UUID,
    admin_id: UUID,
) -> AdminNotification:
    """
    Mark a notification as read. Re-marking is a no-op.

    Raises:
        NotificationNotFoundError: Unknown id, or addressed to another admin
    """
    notification = await repository.get_by_id(db, notification_id)
    if notification is None or notification.admin_id != admin_id:
        logger.warning(f"Admin {admin_id} cannot read notification {notification_id}")
        raise NotificationNotFoundError()

    if not notification.is_read:
        notification.is_read = True
        await db.commit()
        await db.refresh(notification)

    return notification
