"""
Signup Models

A resident's request for DocuPrint access. Requests are decided exactly
once by an admin of the target community and are never deleted.
"""

import enum
import uuid
from datetime import datetime

from sqlalchemy import Enum, ForeignKey, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from docuprint.core.database import UTCDateTime
from docuprint.modules.shared import BaseModel


class SignupStatus(str, enum.Enum):
    """Status of a resident signup request."""

    PENDING_APPROVAL = "pending_approval"
    APPROVED = "approved"
    REJECTED = "rejected"


class ResidentSignupRequest(BaseModel):
    """Access request submitted from the public signup form."""

    __tablename__ = "resident_signups"

    full_name: Mapped[str] = mapped_column(String(200), nullable=False)
    mobile: Mapped[str] = mapped_column(String(10), nullable=False, index=True)

    # Directory path
    state_id: Mapped[str] = mapped_column(String(64), nullable=False)
    city_id: Mapped[str] = mapped_column(String(64), nullable=False)
    community_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    block_id: Mapped[str] = mapped_column(String(64), nullable=False)
    flat_number: Mapped[str] = mapped_column(String(32), nullable=False)

    status: Mapped[SignupStatus] = mapped_column(
        Enum(SignupStatus, name="signup_status"),
        nullable=False,
        default=SignupStatus.PENDING_APPROVAL,
    )

    # Decision
    admin_notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    decided_by: Mapped[uuid.UUID | None] = mapped_column(
        Uuid,
        ForeignKey("admin_accounts.id", ondelete="SET NULL"),
        nullable=True,
    )
    decided_at: Mapped[datetime | None] = mapped_column(UTCDateTime, nullable=True)

    def __repr__(self) -> str:
        return f"<ResidentSignupRequest {self.id} {self.mobile} {self.status.value}>"
