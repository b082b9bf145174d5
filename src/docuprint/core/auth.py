"""
Session Authentication

Residents and admins are identified by signed session tokens carried in
HTTP-only cookies. Each role has its own cookie and a role claim, so a
resident token never satisfies an admin check and vice versa.

`get_*_session` return None for absent, invalid or expired tokens;
`require_*_session` turn that into a uniform 401 that does not reveal
whether the requested resource exists.
"""

import logging
from dataclasses import dataclass
from typing import Any
from uuid import UUID

from fastapi import Depends, HTTPException, Request, status

from docuprint.core.config import settings
from docuprint.core.security import SESSION_TOKEN_TYPE, create_session_token, decode_token

logger = logging.getLogger(__name__)

RESIDENT_ROLE = "resident"
ADMIN_ROLE = "admin"


@dataclass
class ResidentSession:
    """
    An authenticated resident.

    Attributes:
        resident_id: ResidentProfile id
        mobile: 10-digit mobile number the resident logged in with
    """

    resident_id: UUID
    mobile: str


@dataclass
class AdminSession:
    """An authenticated community admin."""

    admin_id: UUID


def _session_cookie(name: str, token: str, max_age: int) -> dict[str, Any]:
    return {
        "key": name,
        "value": token,
        "max_age": max_age,
        "httponly": True,
        "samesite": "lax",
        "secure": settings.is_production,
        "path": "/",
    }


def _cookie_max_age() -> int:
    return settings.session_ttl_days * 24 * 60 * 60


def create_resident_session_cookie(resident_id: UUID, mobile: str) -> dict[str, Any]:
    """Cookie parameters for a new resident session (pass to response.set_cookie)."""
    token = create_session_token(
        subject=str(resident_id),
        role=RESIDENT_ROLE,
        additional_claims={"mobile": mobile},
    )
    return _session_cookie(settings.resident_cookie_name, token, _cookie_max_age())


def create_admin_session_cookie(admin_id: UUID) -> dict[str, Any]:
    """Cookie parameters for a new admin session."""
    token = create_session_token(subject=str(admin_id), role=ADMIN_ROLE)
    return _session_cookie(settings.admin_cookie_name, token, _cookie_max_age())


def destroy_resident_session_cookie() -> dict[str, Any]:
    """Cookie parameters that immediately expire the resident session."""
    return _session_cookie(settings.resident_cookie_name, "", 0)


def destroy_admin_session_cookie() -> dict[str, Any]:
    """Cookie parameters that immediately expire the admin session."""
    return _session_cookie(settings.admin_cookie_name, "", 0)


def _decode_session(token: str | None, role: str) -> dict[str, Any] | None:
    if not token:
        return None

    payload = decode_token(token)
    if payload is None:
        return None

    if payload.get("type") != SESSION_TOKEN_TYPE or payload.get("role") != role:
        logger.warning(f"Session token presented for wrong role: expected {role}")
        return None

    return payload


def read_resident_session(token: str | None) -> ResidentSession | None:
    """Decode a resident session token."""
    payload = _decode_session(token, RESIDENT_ROLE)
    if payload is None:
        return None

    try:
        return ResidentSession(resident_id=UUID(payload["sub"]), mobile=payload["mobile"])
    except (KeyError, ValueError) as e:
        logger.warning(f"Invalid resident session claims: {e}")
        return None


def read_admin_session(token: str | None) -> AdminSession | None:
    """Decode an admin session token."""
    payload = _decode_session(token, ADMIN_ROLE)
    if payload is None:
        return None

    try:
        return AdminSession(admin_id=UUID(payload["sub"]))
    except (KeyError, ValueError) as e:
        logger.warning(f"Invalid admin session claims: {e}")
        return None


async def get_resident_session(request: Request) -> ResidentSession | None:
    """FastAPI dependency: the resident session, or None."""
    return read_resident_session(request.cookies.get(settings.resident_cookie_name))


async def get_admin_session(request: Request) -> AdminSession | None:
    """FastAPI dependency: the admin session, or None."""
    return read_admin_session(request.cookies.get(settings.admin_cookie_name))


def _unauthorized() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail={
            "error": "UNAUTHORIZED",
            "message": "Unauthorized",
        },
    )


async def require_resident_session(
    session: ResidentSession | None = Depends(get_resident_session),
) -> ResidentSession:
    """
    FastAPI dependency that requires a resident session.

    Raises:
        HTTPException 401: If no valid resident session is present
    """
    if session is None:
        raise _unauthorized()
    return session


async def require_admin_session(
    session: AdminSession | None = Depends(get_admin_session),
) -> AdminSession:
    """
    FastAPI dependency that requires an admin session.

    Raises:
        HTTPException 401: If no valid admin session is present
    """
    if session is None:
        raise _unauthorized()
    return session


__all__ = [
    "AdminSession",
    "ResidentSession",
    "create_admin_session_cookie",
    "create_resident_session_cookie",
    "destroy_admin_session_cookie",
    "destroy_resident_session_cookie",
    "get_admin_session",
    "get_resident_session",
    "read_admin_session",
    "read_resident_session",
    "require_admin_session",
    "require_resident_session",
]
