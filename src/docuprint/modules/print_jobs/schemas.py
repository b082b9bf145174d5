"""
Print Job Schemas
"""

from datetime import datetime
from uuid import UUID

from pydantic import Field, field_validator

from docuprint.core.config import settings
from docuprint.modules.print_jobs.models import ColorMode, PaperSize, PrintJobStatus
from docuprint.modules.shared.schemas import CamelModel


class PrintJobCreate(CamelModel):
    """Request body for POST /print-jobs. The resident comes from the session."""

    title: str = Field(..., max_length=200)
    pages: int = Field(..., gt=0)
    copies: int = Field(..., gt=0)
    color_mode: ColorMode
    paper_size: PaperSize
    notes: str | None = Field(None, max_length=2000)
    file_name: str = Field(..., max_length=255)
    file_size: int = Field(..., ge=0)

    @field_validator("title", "file_name")
    @classmethod
    def not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must not be empty")
        return v

    @field_validator("file_size")
    @classmethod
    def within_upload_limit(cls, v: int) -> int:
        if v > settings.max_upload_size_bytes:
            raise ValueError(f"File exceeds the {settings.max_upload_size_mb} MB limit")
        return v


class PrintJobStatusUpdate(CamelModel):
    """Request body for POST /admin/print-jobs/{id}/status."""

    status: str = Field(..., min_length=1)


class PrintJobResponse(CamelModel):
    id: UUID
    resident_id: UUID
    title: str
    pages: int
    copies: int
    color_mode: ColorMode
    paper_size: PaperSize
    notes: str | None = None
    file_name: str
    file_size: int
    status: PrintJobStatus
    created_at: datetime
    updated_at: datetime


class AdminPrintJobResponse(PrintJobResponse):
    """Print job with the resident it belongs to."""

    resident_name: str
    resident_mobile: str
    community_id: str
    block_id: str
    flat_number: str
