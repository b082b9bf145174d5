"""
Admin Signup Router

Review of resident signups by community admins. Every endpoint requires an
admin session; admins only see and decide signups in their communities.

Endpoints:
- GET /admin/signups - List signups (optional ?status= filter)
- POST /admin/signups/{signup_id}/approve - Approve, creating the resident profile
- POST /admin/signups/{signup_id}/reject - Reject
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Body, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from docuprint.core.auth import AdminSession, require_admin_session
from docuprint.core.database import get_db
from docuprint.core.exceptions import ServiceError, to_http_exception
from docuprint.core.rate_limit import enforce_rate_limit
from docuprint.modules.residents.schemas import ResidentProfileResponse
from docuprint.modules.shared.schemas import DataResponse
from docuprint.modules.signups import service
from docuprint.modules.signups.models import SignupStatus
from docuprint.modules.signups.schemas import (
    SignupApprovalResponse,
    SignupDecisionRequest,
    SignupResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()

DECISION_RATE_LIMIT = 60
DECISION_RATE_WINDOW_SECONDS = 60


@router.get("", response_model=DataResponse[list[SignupResponse]], summary="List Signups")
async def list_signups(
    status: SignupStatus | None = Query(None, description="Filter by status"),
    session: AdminSession = Depends(require_admin_session),
    db: AsyncSession = Depends(get_db),
) -> DataResponse[list[SignupResponse]]:
    """Signups in the admin's communities, newest first."""
    try:
        signups = await service.list_signups_for_admin(db, session.admin_id, status)
    except ServiceError as e:
        raise to_http_exception(e) from e
    return DataResponse(data=[SignupResponse.model_validate(s) for s in signups])


@router.post(
    "/{signup_id}/approve",
    response_model=DataResponse[SignupApprovalResponse],
    summary="Approve Signup",
    responses={
        403: {"description": "Signup is outside the admin's communities"},
        404: {"description": "Signup not found"},
        409: {"description": "Signup already decided"},
    },
)
async def approve_signup(
    signup_id: UUID,
    data: SignupDecisionRequest | None = Body(None),
    session: AdminSession = Depends(require_admin_session),
    db: AsyncSession = Depends(get_db),
) -> DataResponse[SignupApprovalResponse]:
    await enforce_rate_limit(
        f"admin:decision:{session.admin_id}",
        DECISION_RATE_LIMIT,
        DECISION_RATE_WINDOW_SECONDS,
    )

    try:
        signup, profile = await service.approve_signup(
            db,
            signup_id,
            session.admin_id,
            notes=data.notes if data else None,
        )
    except ServiceError as e:
        raise to_http_exception(e) from e

    return DataResponse(
        data=SignupApprovalResponse(
            signup=SignupResponse.model_validate(signup),
            profile=ResidentProfileResponse.model_validate(profile),
        )
    )


@router.post(
    "/{signup_id}/reject",
    response_model=DataResponse[SignupResponse],
    summary="Reject Signup",
    responses={
        403: {"description": "Signup is outside the admin's communities"},
        404: {"description": "Signup not found"},
        409: {"description": "Signup already decided"},
    },
)
async def reject_signup(
    signup_id: UUID,
    data: SignupDecisionRequest | None = Body(None),
    session: AdminSession = Depends(require_admin_session),
    db: AsyncSession = Depends(get_db),
) -> DataResponse[SignupResponse]:
    await enforce_rate_limit(
        f"admin:decision:{session.admin_id}",
        DECISION_RATE_LIMIT,
        DECISION_RATE_WINDOW_SECONDS,
    )

    try:
        signup = await service.reject_signup(
            db,
            signup_id,
            session.admin_id,
            notes=data.notes if data else None,
        )
    except ServiceError as e:
        raise to_http_exception(e) from e

    return DataResponse(data=SignupResponse.model_validate(signup))
