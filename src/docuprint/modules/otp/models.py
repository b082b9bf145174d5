"""
OTP Models

One live passcode per mobile number. Codes are stored as SHA-256 hashes,
never in plain text.
"""

from datetime import datetime

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from docuprint.core.database import Base, UTCDateTime
from docuprint.modules.shared.models import utcnow


class OtpEntry(Base):
    """The current one-time passcode for a mobile number."""

    __tablename__ = "otp_entries"

    mobile: Mapped[str] = mapped_column(String(10), primary_key=True)
    code_hash: Mapped[str] = mapped_column(String(64), nullable=False)
    expires_at: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False, index=True)
    created_at: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False, default=utcnow)

    def is_expired(self, now: datetime) -> bool:
        return now >= self.expires_at

    def __repr__(self) -> str:
        return f"<OtpEntry {self.mobile} expires={self.expires_at.isoformat()}>"
