"""
Admin Session Router

Endpoints:
- POST /admin/login - Email + password login, sets the admin session cookie
- POST /admin/logout - Clears the admin session cookie
- GET /admin/communities - Communities managed by the logged-in admin

Login attempts are rate limited per email address.
"""

import logging

from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from docuprint.core.auth import (
    AdminSession,
    create_admin_session_cookie,
    destroy_admin_session_cookie,
    require_admin_session,
)
from docuprint.core.database import get_db
from docuprint.core.exceptions import ServiceError, to_http_exception
from docuprint.core.rate_limit import enforce_rate_limit
from docuprint.modules.admins import service
from docuprint.modules.admins.schemas import AdminLoginRequest, AdminLoginResponse
from docuprint.modules.directory.schemas import CommunitySummary
from docuprint.modules.shared.schemas import DataResponse

logger = logging.getLogger(__name__)

router = APIRouter()

LOGIN_RATE_LIMIT = 10
LOGIN_RATE_WINDOW_SECONDS = 15 * 60


@router.post(
    "/login",
    response_model=DataResponse[AdminLoginResponse],
    summary="Admin Login",
    responses={401: {"description": "Invalid credentials"}, 429: {"description": "Too many attempts"}},
)
async def login(
    data: AdminLoginRequest,
    response: Response,
    db: AsyncSession = Depends(get_db),
) -> DataResponse[AdminLoginResponse]:
    """Authenticate an admin and set the admin session cookie."""
    await enforce_rate_limit(
        f"admin:login:{data.email.lower()}",
        LOGIN_RATE_LIMIT,
        LOGIN_RATE_WINDOW_SECONDS,
    )

    try:
        admin = await service.authenticate_admin(db, data.email, data.password)
    except ServiceError as e:
        raise to_http_exception(e) from e

    response.set_cookie(**create_admin_session_cookie(admin.id))
    return DataResponse(data=AdminLoginResponse(admin_id=admin.id, name=admin.name))


@router.post("/logout", summary="Admin Logout")
async def logout(response: Response) -> dict:
    """Expire the admin session cookie."""
    response.set_cookie(**destroy_admin_session_cookie())
    return {"data": {"success": True}}


@router.get(
    "/communities",
    response_model=DataResponse[list[CommunitySummary]],
    summary="Managed Communities",
)
async def list_my_communities(
    session: AdminSession = Depends(require_admin_session),
    db: AsyncSession = Depends(get_db),
) -> DataResponse[list[CommunitySummary]]:
    try:
        communities = await service.get_admin_communities(db, session.admin_id)
    except ServiceError as e:
        raise to_http_exception(e) from e
    return DataResponse(data=communities)
