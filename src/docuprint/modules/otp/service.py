"""
OTP Service

One-time passcode login for approved residents.

- Codes are 6 random digits from `secrets`
- Only the SHA-256 hash of mobile + code is stored
- A new request replaces the previous code for that mobile
- Expiry is checked when a code is verified; a purge job cleans up leftovers
- A matching code is deleted as it is verified, so it works once
"""

import hashlib
import logging
import secrets
from dataclasses import dataclass
from datetime import datetime, timedelta

from sqlalchemy.ext.asyncio import AsyncSession

from docuprint.core.config import settings
from docuprint.core.exceptions import AuthenticationError, NotFoundError, parse_payload
from docuprint.modules.otp import repository
from docuprint.modules.otp.schemas import OtpRequest
from docuprint.modules.residents.models import ResidentProfile
from docuprint.modules.residents.repository import ResidentRepository
from docuprint.modules.shared.models import utcnow

logger = logging.getLogger(__name__)

OTP_LENGTH = 6


class ResidentNotFoundError(NotFoundError):
    def __init__(self, message: str = "Resident not found or pending approval"):
        super().__init__(message=message, error_code="RESIDENT_NOT_FOUND")


class InvalidOtpError(AuthenticationError):
    def __init__(self):
        super().__init__(message="Invalid or expired OTP", error_code="INVALID_OTP")


@dataclass
class IssuedOtp:
    mobile: str
    code: str
    expires_at: datetime


def _hash_code(mobile: str, code: str) -> str:
    """Hash a code for storage. Salting with the mobile keeps equal codes distinct."""
    return hashlib.sha256(f"{mobile}:{code}".encode()).hexdigest()


def _generate_code() -> str:
    return f"{secrets.randbelow(10**OTP_LENGTH):0{OTP_LENGTH}d}"


async def create_otp(
    db: AsyncSession,
    mobile: str,
    *,
    now: datetime | None = None,
) -> IssuedOtp:
    """
    Issue a new code for `mobile`, replacing any previous one, and commit.

    Returns:
        The plain code and its expiry. The code is not stored.
    """
    now = now or utcnow()
    code = _generate_code()
    expires_at = now + timedelta(minutes=settings.otp_ttl_minutes)

    await repository.upsert(db, mobile, _hash_code(mobile, code), expires_at, now)
    await db.commit()

    logger.info(f"OTP issued for mobile ending {mobile[-4:]}, expires {expires_at.isoformat()}")
    return IssuedOtp(mobile=mobile, code=code, expires_at=expires_at)


async def verify_otp(
    db: AsyncSession,
    mobile: str,
    code: str,
    *,
    now: datetime | None = None,
) -> bool:
    """
    Check a code. A match consumes it.

    Returns False when there is no entry, the entry has expired (it is
    deleted) or the code does not match.
    """
    now = now or utcnow()

    entry = await repository.get(db, mobile)
    if entry is None:
        return False

    if entry.is_expired(now):
        await repository.delete_for_mobile(db, mobile)
        await db.commit()
        logger.info(f"Expired OTP discarded for mobile ending {mobile[-4:]}")
        return False

    code_hash = _hash_code(mobile, code)
    if not secrets.compare_digest(entry.code_hash, code_hash):
        return False

    # Compare-and-delete: a concurrent verification of the same code loses
    consumed = await repository.consume(db, mobile, code_hash)
    await db.commit()
    return consumed


async def request_otp(db: AsyncSession, data: dict | OtpRequest) -> IssuedOtp:
    """
    Issue a code for an approved resident.

    Raises:
        ValidationError: Mobile is not 10 digits
        ResidentNotFoundError: No resident profile for the mobile
    """
    payload = parse_payload(OtpRequest, data)

    if await ResidentRepository.get_by_mobile(db, payload.mobile) is None:
        logger.warning("OTP requested for unknown or unapproved mobile")
        raise ResidentNotFoundError()

    return await create_otp(db, payload.mobile)


async def login_with_otp(db: AsyncSession, mobile: str, code: str) -> ResidentProfile:
    """
    Verify a code and return the resident it logs in.

    Raises:
        ResidentNotFoundError: No resident profile for the mobile
        InvalidOtpError: Code missing, wrong, expired or already used
    """
    resident = await ResidentRepository.get_by_mobile(db, mobile)
    if resident is None:
        raise ResidentNotFoundError("Resident not found")

    if not await verify_otp(db, mobile, code):
        logger.warning(f"OTP verification failed for resident {resident.id}")
        raise InvalidOtpError()

    logger.info(f"Resident {resident.id} logged in with OTP")
    return resident
