"""
Signup Repository

Database operations for resident signup requests.
"""

import logging
import uuid
from datetime import datetime
from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from docuprint.modules.signups.models import ResidentSignupRequest, SignupStatus
from docuprint.modules.signups.schemas import ResidentSignupCreate

logger = logging.getLogger(__name__)


async def create(db: AsyncSession, data: ResidentSignupCreate) -> ResidentSignupRequest:
    """Add a pending signup. Flushes, does not commit."""
    signup = ResidentSignupRequest(
        full_name=data.full_name,
        mobile=data.mobile,
        state_id=data.state_id,
        city_id=data.city_id,
        community_id=data.community_id,
        block_id=data.block_id,
        flat_number=data.flat_number,
        status=SignupStatus.PENDING_APPROVAL,
    )

    db.add(signup)
    await db.flush()
    return signup


async def get_by_id(db: AsyncSession, id: UUID) -> ResidentSignupRequest | None:
    result = await db.execute(select(ResidentSignupRequest).where(ResidentSignupRequest.id == id))
    return result.scalar_one_or_none()


async def get_pending_by_mobile(db: AsyncSession, mobile: str) -> ResidentSignupRequest | None:
    """The pending signup for a mobile number, if any."""
    result = await db.execute(
        select(ResidentSignupRequest)
        .where(
            ResidentSignupRequest.mobile == mobile,
            ResidentSignupRequest.status == SignupStatus.PENDING_APPROVAL,
        )
        .limit(1)
    )
    return result.scalar_one_or_none()


async def list_by_communities(
    db: AsyncSession,
    community_ids: list[str],
    status: SignupStatus | None = None,
) -> list[ResidentSignupRequest]:
    """Signups for the given communities, newest first."""
    query = select(ResidentSignupRequest).where(
        ResidentSignupRequest.community_id.in_(community_ids)
    )
    if status is not None:
        query = query.where(ResidentSignupRequest.status == status)

    result = await db.execute(
        query.order_by(ResidentSignupRequest.created_at.desc(), ResidentSignupRequest.id.desc())
    )
    return list(result.scalars().all())


# Signups are decided exactly once
VALID_SIGNUP_TRANSITIONS: dict[SignupStatus, set[SignupStatus]] = {
    SignupStatus.PENDING_APPROVAL: {
        SignupStatus.APPROVED,
        SignupStatus.REJECTED,
    },
    # Terminal states - no transitions allowed
    SignupStatus.APPROVED: set(),
    SignupStatus.REJECTED: set(),
}


def can_transition(current: SignupStatus, new: SignupStatus) -> bool:
    return new in VALID_SIGNUP_TRANSITIONS.get(current, set())


async def mark_decided(
    db: AsyncSession,
    id: UUID,
    status: SignupStatus,
    *,
    decided_by: uuid.UUID,
    decided_at: datetime,
    admin_notes: str | None = None,
) -> bool:
    """
    Record a decision if the signup is still pending.

    The UPDATE is conditional on status == pending_approval, so of two
    concurrent decisions only one can match.

    Returns:
        True if this call decided the signup
    """
    if not can_transition(SignupStatus.PENDING_APPROVAL, status):
        raise ValueError(f"Cannot decide a signup as {status.value}")

    result = await db.execute(
        update(ResidentSignupRequest)
        .where(
            ResidentSignupRequest.id == id,
            ResidentSignupRequest.status == SignupStatus.PENDING_APPROVAL,
        )
        .values(
            status=status,
            decided_by=decided_by,
            decided_at=decided_at,
            admin_notes=admin_notes,
            updated_at=decided_at,
        )
        .execution_options(synchronize_session="fetch")
    )
    return result.rowcount == 1
