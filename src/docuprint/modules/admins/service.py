"""
Admin Service

Admin authentication and community lookups.
"""

import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from docuprint.core.exceptions import AuthenticationError
from docuprint.core.security import verify_password
from docuprint.modules.admins.models import AdminAccount
from docuprint.modules.admins.repository import AdminRepository
from docuprint.modules.directory import InvalidLocationError, get_directory
from docuprint.modules.directory.schemas import CommunitySummary

logger = logging.getLogger(__name__)


class InvalidCredentialsError(AuthenticationError):
    def __init__(self):
        super().__init__(message="Invalid credentials", error_code="INVALID_CREDENTIALS")


class UnknownAdminError(AuthenticationError):
    """The session names an admin that no longer exists."""

    def __init__(self):
        super().__init__()


async def authenticate_admin(db: AsyncSession, email: str, password: str) -> AdminAccount:
    """
    Check an admin's email and password.

    Raises:
        InvalidCredentialsError: Unknown email or wrong password
    """
    admin = await AdminRepository.get_by_email(db, email)
    if admin is None or not verify_password(password, admin.password_hash):
        logger.warning("Admin login failed")
        raise InvalidCredentialsError()

    logger.info(f"Admin logged in: {admin.id}")
    return admin


async def get_admin(db: AsyncSession, admin_id: UUID) -> AdminAccount:
    """
    Load the admin behind a session.

    Raises:
        UnknownAdminError: If the admin does not exist
    """
    admin = await AdminRepository.get_by_id(db, admin_id)
    if admin is None:
        logger.warning(f"Session references unknown admin {admin_id}")
        raise UnknownAdminError()
    return admin


async def get_admin_communities(db: AsyncSession, admin_id: UUID) -> list[CommunitySummary]:
    """Summaries of the communities an admin manages, in assignment order."""
    admin = await get_admin(db, admin_id)
    directory = get_directory()

    summaries = []
    for community_id in admin.community_ids:
        try:
            summaries.append(directory.describe_community(community_id))
        except InvalidLocationError:
            logger.warning(f"Admin {admin.id} is assigned unknown community {community_id}")
    return summaries
