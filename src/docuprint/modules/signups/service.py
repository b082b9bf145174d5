"""
Signup Service

Business logic for the resident signup workflow:
1. Public submission with directory and duplicate checks
2. Fan-out of one admin notification per community admin
3. Approval (creates the ResidentProfile) or rejection by a community admin

A signup is decided exactly once. The decision is written with a
conditional UPDATE so two admins racing on the same signup cannot both win.
"""

import logging
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from docuprint.core.exceptions import (
    AuthorizationError,
    ConflictError,
    NotFoundError,
    ValidationError,
    parse_payload,
)
from docuprint.modules.admins.models import AdminAccount
from docuprint.modules.admins.repository import AdminRepository
from docuprint.modules.admins.service import get_admin
from docuprint.modules.directory import ResolvedLocation, get_directory
from docuprint.modules.notifications.service import notify_admins
from docuprint.modules.residents.models import ResidentProfile
from docuprint.modules.residents.repository import ResidentRepository
from docuprint.modules.shared.models import utcnow
from docuprint.modules.signups import repository
from docuprint.modules.signups.models import ResidentSignupRequest, SignupStatus
from docuprint.modules.signups.schemas import ResidentSignupCreate

logger = logging.getLogger(__name__)


# ============================================================================
# Errors
# ============================================================================


class DuplicateSignupError(ValidationError):
    """Mobile already has a resident profile or a pending signup."""

    def __init__(self, message: str):
        super().__init__(message=message, error_code="DUPLICATE_SIGNUP")


class SignupNotFoundError(NotFoundError):
    def __init__(self, signup_id: UUID | None = None):
        message = f"Signup {signup_id} not found" if signup_id else "Signup not found"
        super().__init__(message=message, error_code="SIGNUP_NOT_FOUND")


class CommunityAccessDeniedError(AuthorizationError):
    """Admin does not manage the signup's community."""

    def __init__(self):
        super().__init__(
            message="You are not an admin of this community",
            error_code="COMMUNITY_ACCESS_DENIED",
        )


class SignupAlreadyDecidedError(ConflictError):
    def __init__(self, current_status: str):
        super().__init__(
            message=f"Signup has already been decided (status: {current_status})",
            error_code="SIGNUP_ALREADY_DECIDED",
        )


# ============================================================================
# Submission
# ============================================================================


async def validate_signup(
    db: AsyncSession,
    data: dict | ResidentSignupCreate,
) -> tuple[ResidentSignupCreate, ResolvedLocation]:
    """
    Validate a signup submission.

    Checks field formats, that the location ids form a path in the
    directory, and that the mobile is not already a resident or pending.
    Rejected signups do not block resubmission.

    Raises:
        ValidationError: Bad fields or location
        DuplicateSignupError: Mobile already registered or pending
    """
    payload = parse_payload(ResidentSignupCreate, data)

    location = get_directory().resolve_location(
        payload.state_id,
        payload.city_id,
        payload.community_id,
        payload.block_id,
        payload.flat_number,
    )

    if await ResidentRepository.get_by_mobile(db, payload.mobile) is not None:
        logger.warning("Signup rejected: mobile already has a resident profile")
        raise DuplicateSignupError("This mobile number is already registered")

    if await repository.get_pending_by_mobile(db, payload.mobile) is not None:
        logger.warning("Signup rejected: mobile already has a pending signup")
        raise DuplicateSignupError("A signup for this mobile number is already pending approval")

    return payload, location


def _signup_message(signup: ResidentSignupRequest, location: ResolvedLocation) -> str:
    return f"New signup: {signup.full_name} ({signup.mobile}) for {location.label()}"


async def create_signup(
    db: AsyncSession,
    payload: ResidentSignupCreate,
    location: ResolvedLocation | None = None,
) -> ResidentSignupRequest:
    """
    Store a pending signup and notify every admin of its community.

    The signup and its notifications are committed together. Email alerts
    are sent after the commit and never fail the request.
    """
    if location is None:
        location = get_directory().resolve_location(
            payload.state_id,
            payload.city_id,
            payload.community_id,
            payload.block_id,
            payload.flat_number,
        )

    signup = await repository.create(db, payload)
    admins = await AdminRepository.list_for_community(db, signup.community_id)
    await notify_admins(db, admins, _signup_message(signup, location), signup_id=signup.id)

    await db.commit()
    await db.refresh(signup)

    logger.info(
        f"Signup created: id={signup.id}, community={signup.community_id}, "
        f"admins_notified={len(admins)}"
    )

    await _send_signup_alerts(admins, signup, location)
    return signup


async def _send_signup_alerts(
    admins: list[AdminAccount],
    signup: ResidentSignupRequest,
    location: ResolvedLocation,
) -> None:
    from docuprint.core.email import send_admin_signup_alert

    for admin in admins:
        try:
            await send_admin_signup_alert(
                to_email=admin.email,
                admin_name=admin.name,
                resident_name=signup.full_name,
                mobile=signup.mobile,
                location=location.label(),
            )
        except Exception as e:
            # Email is best-effort; the signup is already committed
            logger.error(f"Failed to send signup alert to admin {admin.id}: {e}", exc_info=True)


async def submit_signup(
    db: AsyncSession,
    data: dict | ResidentSignupCreate,
) -> ResidentSignupRequest:
    """Validate and create a signup."""
    payload, location = await validate_signup(db, data)
    return await create_signup(db, payload, location)


# ============================================================================
# Admin decisions
# ============================================================================


async def _load_decidable_signup(
    db: AsyncSession,
    signup_id: UUID,
    admin_id: UUID,
    action: str,
) -> ResidentSignupRequest:
    signup = await repository.get_by_id(db, signup_id)
    if signup is None:
        logger.warning(f"Signup not found: {signup_id}")
        raise SignupNotFoundError(signup_id)

    admin = await get_admin(db, admin_id)
    if not admin.manages(signup.community_id):
        logger.warning(f"Admin {admin_id} may not {action} signup {signup_id}")
        raise CommunityAccessDeniedError()

    if signup.status != SignupStatus.PENDING_APPROVAL:
        logger.warning(f"Cannot {action} signup {signup_id}: status={signup.status.value}")
        raise SignupAlreadyDecidedError(signup.status.value)

    return signup


async def _decide(
    db: AsyncSession,
    signup: ResidentSignupRequest,
    status: SignupStatus,
    admin_id: UUID,
    notes: str | None,
) -> None:
    decided = await repository.mark_decided(
        db,
        signup.id,
        status,
        decided_by=admin_id,
        decided_at=utcnow(),
        admin_notes=notes,
    )
    if not decided:
        # Another admin decided it between our read and write
        await db.rollback()
        current = await repository.get_by_id(db, signup.id)
        current_status = current.status.value if current else "unknown"
        logger.warning(f"Lost decision race on signup {signup.id}: status={current_status}")
        raise SignupAlreadyDecidedError(current_status)

    await db.refresh(signup)


async def approve_signup(
    db: AsyncSession,
    signup_id: UUID,
    admin_id: UUID,
    notes: str | None = None,
) -> tuple[ResidentSignupRequest, ResidentProfile]:
    """
    Approve a pending signup and create the resident's profile.

    The status change and the profile are committed in one transaction.

    Raises:
        SignupNotFoundError: Unknown signup
        CommunityAccessDeniedError: Admin does not manage the community
        SignupAlreadyDecidedError: Signup is not pending
    """
    logger.info(f"Admin {admin_id} approving signup {signup_id}")

    signup = await _load_decidable_signup(db, signup_id, admin_id, "approve")
    await _decide(db, signup, SignupStatus.APPROVED, admin_id, notes)

    try:
        profile = await ResidentRepository.create_from_signup(db, signup)
        await db.commit()
    except IntegrityError as e:
        await db.rollback()
        logger.warning(f"Profile for signup {signup_id} conflicts with an existing resident")
        raise ConflictError(
            "A resident with this mobile number already exists",
            error_code="RESIDENT_EXISTS",
        ) from e

    await db.refresh(signup)
    await db.refresh(profile)

    logger.info(f"Signup {signup_id} approved; resident profile {profile.id} created")
    return signup, profile


async def reject_signup(
    db: AsyncSession,
    signup_id: UUID,
    admin_id: UUID,
    notes: str | None = None,
) -> ResidentSignupRequest:
    """
    Reject a pending signup. No profile is created.

    Raises:
        SignupNotFoundError: Unknown signup
        CommunityAccessDeniedError: Admin does not manage the community
        SignupAlreadyDecidedError: Signup is not pending
    """
    logger.info(f"Admin {admin_id} rejecting signup {signup_id}")

    signup = await _load_decidable_signup(db, signup_id, admin_id, "reject")
    await _decide(db, signup, SignupStatus.REJECTED, admin_id, notes)
    await db.commit()
    await db.refresh(signup)

    logger.info(f"Signup {signup_id} rejected")
    return signup


async def list_signups_for_admin(
    db: AsyncSession,
    admin_id: UUID,
    status: SignupStatus | None = None,
) -> list[ResidentSignupRequest]:
    """Signups in the admin's communities, newest first."""
    admin = await get_admin(db, admin_id)
    if not admin.community_ids:
        return []
    return await repository.list_by_communities(db, admin.community_ids, status)
