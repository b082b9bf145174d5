"""
Notifications Module

Admin notification log. Entries are created when a signup or print job
arrives in an admin's community and can only be marked read.

API Endpoints:
- GET /admin/notifications - List with unread count
- POST /admin/notifications/{id}/read - Mark read
"""

from .router import router
from .service import NotificationNotFoundError, mark_notification_read, notify_admins

__all__ = ["NotificationNotFoundError", "mark_notification_read", "notify_admins", "router"]
