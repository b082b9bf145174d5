"""
Resident Auth Router

OTP login for approved residents. Public endpoints.

Endpoints:
- POST /auth/request-otp - Issue a code (returned in demo mode)
- POST /auth/verify-otp - Verify a code, sets the resident session cookie
- POST /auth/logout - Clears the resident session cookie

Both OTP endpoints are rate limited per mobile number.
"""

import logging

from fastapi import APIRouter, Body, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from docuprint.core.auth import create_resident_session_cookie, destroy_resident_session_cookie
from docuprint.core.config import settings
from docuprint.core.database import get_db
from docuprint.core.exceptions import ServiceError, parse_payload, to_http_exception
from docuprint.core.rate_limit import enforce_rate_limit
from docuprint.modules.otp import service
from docuprint.modules.otp.schemas import (
    OtpIssuedResponse,
    OtpRequest,
    OtpVerifyRequest,
    ResidentLoginResponse,
)
from docuprint.modules.shared.schemas import DataResponse

logger = logging.getLogger(__name__)

router = APIRouter()

OTP_REQUEST_LIMIT = 5
OTP_VERIFY_LIMIT = 10
OTP_RATE_WINDOW_SECONDS = 15 * 60

DEMO_MESSAGE = (
    "OTP generated. In production this would be sent via SMS. "
    "For demo purposes it is returned here."
)


@router.post(
    "/request-otp",
    response_model=DataResponse[OtpIssuedResponse],
    summary="Request Login Code",
    responses={
        400: {"description": "Mobile is not 10 digits"},
        404: {"description": "Resident not found or pending approval"},
        429: {"description": "Too many requests for this mobile"},
    },
)
async def request_otp(
    data: dict = Body(...),
    db: AsyncSession = Depends(get_db),
) -> DataResponse[OtpIssuedResponse]:
    try:
        payload = parse_payload(OtpRequest, data)
    except ServiceError as e:
        raise to_http_exception(e) from e

    await enforce_rate_limit(
        f"otp:request:{payload.mobile}",
        OTP_REQUEST_LIMIT,
        OTP_RATE_WINDOW_SECONDS,
    )

    try:
        issued = await service.request_otp(db, payload)
    except ServiceError as e:
        raise to_http_exception(e) from e

    if settings.otp_demo_mode:
        return DataResponse(
            data=OtpIssuedResponse(
                mobile=issued.mobile,
                code=issued.code,
                expires_at=issued.expires_at,
            ),
            message=DEMO_MESSAGE,
        )

    return DataResponse(
        data=OtpIssuedResponse(mobile=issued.mobile, expires_at=issued.expires_at),
        message="OTP sent",
    )


@router.post(
    "/verify-otp",
    response_model=DataResponse[ResidentLoginResponse],
    summary="Verify Login Code",
    responses={
        400: {"description": "Mobile and OTP are required"},
        401: {"description": "Invalid or expired OTP"},
        404: {"description": "Resident not found"},
        429: {"description": "Too many attempts for this mobile"},
    },
)
async def verify_otp(
    response: Response,
    data: dict = Body(...),
    db: AsyncSession = Depends(get_db),
) -> DataResponse[ResidentLoginResponse]:
    try:
        payload = parse_payload(OtpVerifyRequest, data)
    except ServiceError as e:
        raise to_http_exception(e) from e

    await enforce_rate_limit(
        f"otp:verify:{payload.mobile}",
        OTP_VERIFY_LIMIT,
        OTP_RATE_WINDOW_SECONDS,
    )

    try:
        resident = await service.login_with_otp(db, payload.mobile, payload.code)
    except ServiceError as e:
        raise to_http_exception(e) from e

    response.set_cookie(**create_resident_session_cookie(resident.id, resident.mobile))
    return DataResponse(data=ResidentLoginResponse(resident_id=resident.id, mobile=resident.mobile))


@router.post("/logout", summary="Resident Logout")
async def logout(response: Response) -> dict:
    """Expire the resident session cookie."""
    response.set_cookie(**destroy_resident_session_cookie())
    return {"data": {"success": True}}
