"""
OTP Repository

Database operations for one-time passcodes. The mobile number is the
primary key, so there is at most one entry per mobile.
"""

from datetime import datetime

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from docuprint.modules.otp.models import OtpEntry


async def upsert(
    db: AsyncSession,
    mobile: str,
    code_hash: str,
    expires_at: datetime,
    created_at: datetime,
) -> OtpEntry:
    """Replace any existing entry for the mobile. Flushes, does not commit."""
    await db.execute(delete(OtpEntry).where(OtpEntry.mobile == mobile))
    entry = OtpEntry(
        mobile=mobile,
        code_hash=code_hash,
        expires_at=expires_at,
        created_at=created_at,
    )
    db.add(entry)
    await db.flush()
    return entry


async def get(db: AsyncSession, mobile: str) -> OtpEntry | None:
    result = await db.execute(select(OtpEntry).where(OtpEntry.mobile == mobile))
    return result.scalar_one_or_none()


async def delete_for_mobile(db: AsyncSession, mobile: str) -> None:
    await db.execute(delete(OtpEntry).where(OtpEntry.mobile == mobile))


async def consume(db: AsyncSession, mobile: str, code_hash: str) -> bool:
    """
    Delete the entry only if it still holds `code_hash`.

    Returns:
        True if this call removed the entry
    """
    result = await db.execute(
        delete(OtpEntry)
        .where(OtpEntry.mobile == mobile, OtpEntry.code_hash == code_hash)
    )
    return result.rowcount == 1


async def purge_expired(db: AsyncSession, now: datetime) -> int:
    """Delete every expired entry. Returns the number removed."""
    result = await db.execute(
        delete(OtpEntry)
        .where(OtpEntry.expires_at <= now)
        .execution_options(synchronize_session=False)
    )
    return result.rowcount
