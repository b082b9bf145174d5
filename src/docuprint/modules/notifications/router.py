"""
Admin Notifications Router

Endpoints:
- GET /admin/notifications - Notification log with unread count
- POST /admin/notifications/{notification_id}/read - Mark one as read
- POST /admin/notifications - Mark one as read ({"notificationId": ...} body)
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from docuprint.core.auth import AdminSession, require_admin_session
from docuprint.core.database import get_db
from docuprint.core.exceptions import ServiceError, to_http_exception
from docuprint.modules.notifications import service
from docuprint.modules.notifications.schemas import (
    MarkReadRequest,
    NotificationListResponse,
    NotificationResponse,
)
from docuprint.modules.shared.schemas import DataResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=NotificationListResponse, summary="List Notifications")
async def list_notifications(
    session: AdminSession = Depends(require_admin_session),
    db: AsyncSession = Depends(get_db),
) -> NotificationListResponse:
    """Notifications for the logged-in admin, newest first."""
    notifications = await service.list_notifications(db, session.admin_id)
    unread = await service.count_unread(db, session.admin_id)
    return NotificationListResponse(
        data=[NotificationResponse.model_validate(n) for n in notifications],
        unread_count=unread,
    )


async def _mark_read(
    db: AsyncSession,
    notification_id: UUID,
    admin_id: UUID,
) -> DataResponse[NotificationResponse]:
    try:
        notification = await service.mark_notification_read(db, notification_id, admin_id)
    except ServiceError as e:
        raise to_http_exception(e) from e
    return DataResponse(data=NotificationResponse.model_validate(notification))


@router.post(
    "/{notification_id}/read",
    response_model=DataResponse[NotificationResponse],
    summary="Mark Notification Read",
)
async def mark_read(
    notification_id: UUID,
    session: AdminSession = Depends(require_admin_session),
    db: AsyncSession = Depends(get_db),
) -> DataResponse[NotificationResponse]:
    return await _mark_read(db, notification_id, session.admin_id)


@router.post(
    "",
    response_model=DataResponse[NotificationResponse],
    summary="Mark Notification Read (body)",
)
async def mark_read_from_body(
    data: MarkReadRequest,
    session: AdminSession = Depends(require_admin_session),
    db: AsyncSession = Depends(get_db),
) -> DataResponse[NotificationResponse]:
    return await _mark_read(db, data.notification_id, session.admin_id)
