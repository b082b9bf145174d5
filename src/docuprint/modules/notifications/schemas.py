"""
Notification Schemas
"""

from datetime import datetime
from uuid import UUID

from docuprint.modules.shared.schemas import CamelModel


class NotificationResponse(CamelModel):
    id: UUID
    admin_id: UUID
    message: str
    is_read: bool
    signup_id: UUID | None = None
    print_job_id: UUID | None = None
    created_at: datetime


class NotificationListResponse(CamelModel):
    """Response for GET /admin/notifications."""

    data: list[NotificationResponse]
    unread_count: int


class MarkReadRequest(CamelModel):
    notification_id: UUID
