"""
Print Job Models

Print jobs are submitted by residents and moved through their lifecycle by
admins of the resident's community. Jobs are never deleted. Only file
metadata is stored.
"""

import enum
import uuid

from sqlalchemy import BigInteger, Enum, ForeignKey, Integer, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from docuprint.modules.shared import BaseModel


class ColorMode(str, enum.Enum):
    MONO = "mono"
    COLOR = "color"


class PaperSize(str, enum.Enum):
    A4 = "A4"
    A3 = "A3"
    LETTER = "Letter"


class PrintJobStatus(str, enum.Enum):
    """Lifecycle of a print job."""

    QUEUED = "queued"
    PRINTING = "printing"
    READY = "ready"
    COLLECTED = "collected"
    CANCELLED = "cancelled"


class PrintJob(BaseModel):
    """A resident's request to print a document."""

    __tablename__ = "print_jobs"

    resident_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("residents.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    title: Mapped[str] = mapped_column(String(200), nullable=False)
    pages: Mapped[int] = mapped_column(Integer, nullable=False)
    copies: Mapped[int] = mapped_column(Integer, nullable=False)
    color_mode: Mapped[ColorMode] = mapped_column(
        Enum(ColorMode, name="color_mode", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
    )
    paper_size: Mapped[PaperSize] = mapped_column(
        Enum(PaperSize, name="paper_size", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
    )
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Uploaded file metadata
    file_name: Mapped[str] = mapped_column(String(255), nullable=False)
    file_size: Mapped[int] = mapped_column(BigInteger, nullable=False)

    status: Mapped[PrintJobStatus] = mapped_column(
        Enum(PrintJobStatus, name="print_job_status"),
        nullable=False,
        default=PrintJobStatus.QUEUED,
    )

    def __repr__(self) -> str:
        return f"<PrintJob {self.id} {self.status.value}>"
