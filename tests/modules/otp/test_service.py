"""
Tests for OTP issuance and verification.
"""

import hashlib
from datetime import timedelta

import pytest

from docuprint.core.config import settings
from docuprint.core.exceptions import ValidationError
from docuprint.modules.otp import repository
from docuprint.modules.otp.service import (
    InvalidOtpError,
    ResidentNotFoundError,
    create_otp,
    login_with_otp,
    request_otp,
    verify_otp,
)
from docuprint.modules.shared.models import utcnow

MOBILE = "9876543210"


class TestCreateOtp:
    @pytest.mark.asyncio
    async def test_code_is_six_digits(self, db):
        issued = await create_otp(db, MOBILE)

        assert len(issued.code) == 6
        assert issued.code.isdigit()

    @pytest.mark.asyncio
    async def test_expiry_uses_ttl(self, db):
        now = utcnow()

        issued = await create_otp(db, MOBILE, now=now)

        assert issued.expires_at == now + timedelta(minutes=settings.otp_ttl_minutes)

    @pytest.mark.asyncio
    async def test_only_hash_is_stored(self, db):
        issued = await create_otp(db, MOBILE)

        entry = await repository.get(db, MOBILE)
        assert entry.code_hash != issued.code
        assert entry.code_hash == hashlib.sha256(f"{MOBILE}:{issued.code}".encode()).hexdigest()

    @pytest.mark.asyncio
    async def test_new_code_replaces_previous(self, db):
        first = await create_otp(db, MOBILE)
        second = await create_otp(db, MOBILE)

        if first.code != second.code:
            assert await verify_otp(db, MOBILE, first.code) is False
        assert await verify_otp(db, MOBILE, second.code) is True


class TestVerifyOtp:
    @pytest.mark.asyncio
    async def test_correct_code_verifies_once(self, db):
        issued = await create_otp(db, MOBILE)

        assert await verify_otp(db, MOBILE, issued.code) is True
        assert await verify_otp(db, MOBILE, issued.code) is False

    @pytest.mark.asyncio
    async def test_wrong_code_keeps_entry(self, db):
        issued = await create_otp(db, MOBILE)
        wrong = "000000" if issued.code != "000000" else "111111"

        assert await verify_otp(db, MOBILE, wrong) is False
        assert await verify_otp(db, MOBILE, issued.code) is True

    @pytest.mark.asyncio
    async def test_no_entry(self, db):
        assert await verify_otp(db, MOBILE, "123456") is False

    @pytest.mark.asyncio
    async def test_valid_just_before_expiry(self, db):
        now = utcnow()
        issued = await create_otp(db, MOBILE, now=now)

        just_before = issued.expires_at - timedelta(seconds=1)
        assert await verify_otp(db, MOBILE, issued.code, now=just_before) is True

    @pytest.mark.asyncio
    async def test_expired_code_fails_and_is_deleted(self, db):
        now = utcnow()
        issued = await create_otp(db, MOBILE, now=now)

        later = now + timedelta(minutes=settings.otp_ttl_minutes, seconds=1)
        assert await verify_otp(db, MOBILE, issued.code, now=later) is False
        assert await repository.get(db, MOBILE) is None

    @pytest.mark.asyncio
    async def test_codes_are_per_mobile(self, db):
        issued = await create_otp(db, MOBILE)

        assert await verify_otp(db, "9123456780", issued.code) is False


class TestRequestOtp:
    @pytest.mark.asyncio
    async def test_approved_resident(self, db, resident):
        issued = await request_otp(db, {"mobile": resident.mobile})

        assert issued.mobile == resident.mobile

    @pytest.mark.asyncio
    async def test_pending_signup_is_not_a_resident(self, db, admins, signup_data):
        from docuprint.modules.signups.service import submit_signup

        await submit_signup(db, signup_data)

        with pytest.raises(ResidentNotFoundError) as exc_info:
            await request_otp(db, {"mobile": signup_data["mobile"]})

        assert exc_info.value.status_code == 404

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "mobile",
        ["12345", "abcdefghij", "", "９８７６５４３２１０", "²" * 10, "٩" * 10],
    )
    async def test_bad_mobile(self, db, mobile):
        with pytest.raises(ValidationError):
            await request_otp(db, {"mobile": mobile})


class TestLoginWithOtp:
    @pytest.mark.asyncio
    async def test_login(self, db, resident):
        issued = await request_otp(db, {"mobile": resident.mobile})

        logged_in = await login_with_otp(db, resident.mobile, issued.code)

        assert logged_in.id == resident.id

    @pytest.mark.asyncio
    async def test_wrong_code(self, db, resident):
        issued = await request_otp(db, {"mobile": resident.mobile})
        wrong = "000000" if issued.code != "000000" else "111111"

        with pytest.raises(InvalidOtpError) as exc_info:
            await login_with_otp(db, resident.mobile, wrong)

        assert exc_info.value.status_code == 401

    @pytest.mark.asyncio
    async def test_unknown_mobile(self, db):
        with pytest.raises(ResidentNotFoundError):
            await login_with_otp(db, MOBILE, "123456")
