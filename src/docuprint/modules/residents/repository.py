"""
Resident Repository

Database operations for resident profiles.
"""

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from docuprint.modules.residents.models import ResidentProfile

if TYPE_CHECKING:
    from docuprint.modules.signups.models import ResidentSignupRequest

logger = logging.getLogger(__name__)


class ResidentRepository:
    """Repository for resident profile database operations."""

    @staticmethod
    async def create_from_signup(
        db: AsyncSession,
        signup: "ResidentSignupRequest",
    ) -> ResidentProfile:
        """
        Create the profile for an approved signup.

        Flushes so that the unique mobile index is checked inside the
        caller's transaction.
        """
        profile = ResidentProfile(
            signup_id=signup.id,
            full_name=signup.full_name,
            mobile=signup.mobile,
            state_id=signup.state_id,
            city_id=signup.city_id,
            community_id=signup.community_id,
            block_id=signup.block_id,
            flat_number=signup.flat_number,
        )

        db.add(profile)
        await db.flush()

        logger.info(f"Created resident profile {profile.id} from signup {signup.id}")
        return profile

    @staticmethod
    async def get_by_id(db: AsyncSession, resident_id: UUID) -> ResidentProfile | None:
        result = await db.execute(select(ResidentProfile).where(ResidentProfile.id == resident_id))
        return result.scalar_one_or_none()

    @staticmethod
    async def get_by_mobile(db: AsyncSession, mobile: str) -> ResidentProfile | None:
        result = await db.execute(select(ResidentProfile).where(ResidentProfile.mobile == mobile))
        return result.scalar_one_or_none()

