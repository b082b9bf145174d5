"""
Tests for session cookies and role isolation.
"""

from unittest.mock import MagicMock
from uuid import uuid4

import pytest
from fastapi import HTTPException

from docuprint.core.auth import (
    AdminSession,
    ResidentSession,
    create_admin_session_cookie,
    create_resident_session_cookie,
    destroy_admin_session_cookie,
    destroy_resident_session_cookie,
    get_admin_session,
    get_resident_session,
    read_admin_session,
    read_resident_session,
    require_admin_session,
    require_resident_session,
)
from docuprint.core.config import settings
from docuprint.core.security import create_session_token


def _request_with_cookies(cookies: dict) -> MagicMock:
    request = MagicMock()
    request.cookies = cookies
    return request


class TestSessionCookies:
    """Tests for cookie parameters."""

    def test_resident_cookie_is_http_only(self):
        cookie = create_resident_session_cookie(uuid4(), "9876543210")
        assert cookie["key"] == settings.resident_cookie_name
        assert cookie["httponly"] is True
        assert cookie["samesite"] == "lax"
        assert cookie["path"] == "/"
        assert cookie["max_age"] == settings.session_ttl_days * 24 * 60 * 60

    def test_admin_cookie_uses_its_own_name(self):
        cookie = create_admin_session_cookie(uuid4())
        assert cookie["key"] == settings.admin_cookie_name
        assert cookie["key"] != settings.resident_cookie_name

    def test_destroy_cookies_expire_immediately(self):
        for cookie in (destroy_resident_session_cookie(), destroy_admin_session_cookie()):
            assert cookie["value"] == ""
            assert cookie["max_age"] == 0


class TestReadSessions:
    """Tests for decoding session tokens."""

    def test_resident_round_trip(self):
        resident_id = uuid4()
        cookie = create_resident_session_cookie(resident_id, "9876543210")

        session = read_resident_session(cookie["value"])

        assert session == ResidentSession(resident_id=resident_id, mobile="9876543210")

    def test_admin_round_trip(self):
        admin_id = uuid4()
        cookie = create_admin_session_cookie(admin_id)
        assert read_admin_session(cookie["value"]) == AdminSession(admin_id=admin_id)

    def test_resident_token_does_not_satisfy_admin_check(self):
        cookie = create_resident_session_cookie(uuid4(), "9876543210")
        assert read_admin_session(cookie["value"]) is None

    def test_admin_token_does_not_satisfy_resident_check(self):
        cookie = create_admin_session_cookie(uuid4())
        assert read_resident_session(cookie["value"]) is None

    def test_missing_token_is_anonymous(self):
        assert read_resident_session(None) is None
        assert read_admin_session("") is None

    def test_resident_token_without_mobile_is_rejected(self):
        token = create_session_token(str(uuid4()), "resident")
        assert read_resident_session(token) is None

    def test_non_uuid_subject_is_rejected(self):
        token = create_session_token("not-a-uuid", "admin")
        assert read_admin_session(token) is None


class TestSessionDependencies:
    """Tests for the FastAPI session dependencies."""

    @pytest.mark.asyncio
    async def test_get_resident_session_reads_resident_cookie(self):
        resident_id = uuid4()
        cookie = create_resident_session_cookie(resident_id, "9876543210")
        request = _request_with_cookies({cookie["key"]: cookie["value"]})

        session = await get_resident_session(request)

        assert session.resident_id == resident_id

    @pytest.mark.asyncio
    async def test_admin_token_in_resident_cookie_is_ignored(self):
        """Even under the resident cookie name, an admin token is not a resident session."""
        admin_cookie = create_admin_session_cookie(uuid4())
        request = _request_with_cookies({settings.resident_cookie_name: admin_cookie["value"]})

        assert await get_resident_session(request) is None
        assert await get_admin_session(request) is None

    @pytest.mark.asyncio
    async def test_require_resident_session_raises_uniform_401(self):
        with pytest.raises(HTTPException) as exc_info:
            await require_resident_session(None)

        assert exc_info.value.status_code == 401
        assert exc_info.value.detail == {"error": "UNAUTHORIZED", "message": "Unauthorized"}

    @pytest.mark.asyncio
    async def test_require_admin_session_raises_uniform_401(self):
        with pytest.raises(HTTPException) as exc_info:
            await require_admin_session(None)
        assert exc_info.value.status_code == 401

    @pytest.mark.asyncio
    async def test_require_admin_session_passes_session_through(self):
        session = AdminSession(admin_id=uuid4())
        assert await require_admin_session(session) is session
