"""
Admin Models

Community admins review signups and manage print jobs for the communities
listed in `community_ids`.
"""

from sqlalchemy import JSON, String
from sqlalchemy.orm import Mapped, mapped_column

from docuprint.modules.shared import BaseModel


class AdminAccount(BaseModel):
    """A community admin account."""

    __tablename__ = "admin_accounts"

    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        index=True,
        nullable=False,
    )
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)

    # Directory community ids this admin is responsible for
    community_ids: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)

    def manages(self, community_id: str) -> bool:
        return community_id in self.community_ids

    def __repr__(self) -> str:
        return f"<AdminAccount {self.email}>"
