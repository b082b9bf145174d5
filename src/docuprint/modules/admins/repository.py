"""
Admin Repository

Database operations for admin accounts.
"""

import logging
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from docuprint.modules.admins.models import AdminAccount

logger = logging.getLogger(__name__)


class AdminRepository:
    """Repository for admin account database operations."""

    @staticmethod
    async def create(
        db: AsyncSession,
        *,
        email: str,
        name: str,
        password_hash: str,
        community_ids: list[str],
    ) -> AdminAccount:
        """
        Create a new admin account.

        Args:
            db: Database session
            email: Login email (stored lowercase, unique)
            name: Display name
            password_hash: Bcrypt hash of the password
            community_ids: Directory community ids the admin manages

        Returns:
            Created AdminAccount instance
        """
        admin = AdminAccount(
            email=email.lower(),
            name=name,
            password_hash=password_hash,
            community_ids=list(community_ids),
        )

        db.add(admin)
        await db.flush()
        await db.refresh(admin)

        logger.info(f"Created admin: {admin.id} - {admin.email}")
        return admin

    @staticmethod
    async def get_by_id(db: AsyncSession, admin_id: UUID) -> AdminAccount | None:
        result = await db.execute(select(AdminAccount).where(AdminAccount.id == admin_id))
        return result.scalar_one_or_none()

    @staticmethod
    async def get_by_email(db: AsyncSession, email: str) -> AdminAccount | None:
        """Get an admin by email (case-insensitive)."""
        result = await db.execute(
            select(AdminAccount).where(func.lower(AdminAccount.email) == email.lower())
        )
        return result.scalar_one_or_none()

    @staticmethod
    async def list_all(db: AsyncSession) -> list[AdminAccount]:
        result = await db.execute(select(AdminAccount).order_by(AdminAccount.email))
        return list(result.scalars().all())

    @staticmethod
    async def list_for_community(db: AsyncSession, community_id: str) -> list[AdminAccount]:
        """
        Admins assigned to a community.

        community_ids is a JSON list, so membership is checked in Python.
        """
        admins = await AdminRepository.list_all(db)
        return [admin for admin in admins if admin.manages(community_id)]
