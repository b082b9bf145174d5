"""
Resident Service
"""

import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from docuprint.core.exceptions import NotFoundError
from docuprint.modules.directory import get_directory
from docuprint.modules.residents.models import ResidentProfile
from docuprint.modules.residents.repository import ResidentRepository
from docuprint.modules.residents.schemas import ResidentProfileDetail, ResidentProfileResponse

logger = logging.getLogger(__name__)


class ResidentNotFoundError(NotFoundError):
    def __init__(self, message: str = "Resident not found"):
        super().__init__(message=message, error_code="RESIDENT_NOT_FOUND")


async def get_resident(db: AsyncSession, resident_id: UUID) -> ResidentProfile:
    """
    Raises:
        ResidentNotFoundError: If no profile has this id
    """
    profile = await ResidentRepository.get_by_id(db, resident_id)
    if profile is None:
        raise ResidentNotFoundError()
    return profile


async def get_resident_profile(db: AsyncSession, resident_id: UUID) -> ResidentProfileDetail:
    """The resident's profile with location display names."""
    profile = await get_resident(db, resident_id)
    location = get_directory().location_names(
        profile.state_id,
        profile.city_id,
        profile.community_id,
        profile.block_id,
        profile.flat_number,
    )
    return ResidentProfileDetail(
        **ResidentProfileResponse.model_validate(profile).model_dump(),
        location=location,
    )
