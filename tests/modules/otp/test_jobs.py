"""Tests for the expired-OTP purge job."""

from datetime import timedelta
from unittest.mock import patch

import pytest

from docuprint.core.scheduler import _job_registry
from docuprint.modules.otp import repository
from docuprint.modules.otp.jobs import JOB_ID_PURGE_EXPIRED, purge_expired_otps, register_otp_jobs
from docuprint.modules.otp.service import create_otp
from docuprint.modules.shared.models import utcnow


class TestPurgeExpiredOtps:
    @pytest.mark.asyncio
    async def test_removes_only_expired(self, db, session_maker):
        await create_otp(db, "9000000001", now=utcnow() - timedelta(hours=1))
        await create_otp(db, "9000000002")

        with patch("docuprint.core.database.async_session_maker", session_maker):
            result = await purge_expired_otps()

        assert result["purged"] == 1
        assert "executed_at" in result
        assert await repository.get(db, "9000000001") is None
        assert await repository.get(db, "9000000002") is not None

    @pytest.mark.asyncio
    async def test_idempotent(self, db, session_maker):
        await create_otp(db, "9000000001", now=utcnow() - timedelta(hours=1))

        with patch("docuprint.core.database.async_session_maker", session_maker):
            await purge_expired_otps()
            result = await purge_expired_otps()

        assert result["purged"] == 0


def test_register_otp_jobs():
    _job_registry.pop(JOB_ID_PURGE_EXPIRED, None)

    register_otp_jobs()

    assert JOB_ID_PURGE_EXPIRED in _job_registry
    _job_registry.pop(JOB_ID_PURGE_EXPIRED, None)
