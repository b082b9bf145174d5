"""
Resident Models

A ResidentProfile exists only for an approved signup. The mobile number
is the login identity, so it is unique.
"""

import uuid

from sqlalchemy import ForeignKey, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from docuprint.modules.shared import BaseModel


class ResidentProfile(BaseModel):
    """An approved resident."""

    __tablename__ = "residents"

    signup_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("resident_signups.id", ondelete="RESTRICT"),
        unique=True,
        nullable=False,
    )

    full_name: Mapped[str] = mapped_column(String(200), nullable=False)
    mobile: Mapped[str] = mapped_column(
        String(10),
        unique=True,
        index=True,
        nullable=False,
    )

    state_id: Mapped[str] = mapped_column(String(64), nullable=False)
    city_id: Mapped[str] = mapped_column(String(64), nullable=False)
    community_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    block_id: Mapped[str] = mapped_column(String(64), nullable=False)
    flat_number: Mapped[str] = mapped_column(String(32), nullable=False)

    def __repr__(self) -> str:
        return f"<ResidentProfile {self.id} {self.mobile}>"
