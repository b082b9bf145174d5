"""
Notification Models
"""

import uuid

from sqlalchemy import Boolean, ForeignKey, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from docuprint.modules.shared import BaseModel


class AdminNotification(BaseModel):
    """
    A message in an admin's notification log.

    Created when a signup or print job arrives in one of the admin's
    communities. is_read only ever goes from False to True.
    """

    __tablename__ = "admin_notifications"

    admin_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("admin_accounts.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    message: Mapped[str] = mapped_column(Text, nullable=False)
    is_read: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    # What the notification is about (at most one is set)
    signup_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid,
        ForeignKey("resident_signups.id", ondelete="SET NULL"),
        nullable=True,
    )
    print_job_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid,
        ForeignKey("print_jobs.id", ondelete="SET NULL"),
        nullable=True,
    )

    def __repr__(self) -> str:
        return f"<AdminNotification {self.id} admin={self.admin_id} read={self.is_read}>"
