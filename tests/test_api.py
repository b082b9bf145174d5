"""
End-to-end API tests.

Drive the HTTP surface under /api with httpx, using cookies the way a
browser would.
"""

import pytest

from docuprint.core.config import settings
from docuprint.core.rate_limit import _memory_store
from tests.conftest import ADMIN_PASSWORD

API = settings.api_prefix


async def _admin_login(client, email: str = "prestige@example.com") -> dict:
    response = await client.post(
        f"{API}/admin/login",
        json={"email": email, "password": ADMIN_PASSWORD},
    )
    assert response.status_code == 200, response.text
    return response.json()["data"]


async def _resident_login(client, mobile: str) -> dict:
    response = await client.post(f"{API}/auth/request-otp", json={"mobile": mobile})
    assert response.status_code == 200, response.text
    code = response.json()["data"]["code"]

    response = await client.post(f"{API}/auth/verify-otp", json={"mobile": mobile, "code": code})
    assert response.status_code == 200, response.text
    return response.json()["data"]


class TestSignupToPrintJob:
    """Signup, approval, OTP login, print job, status change."""

    @pytest.mark.asyncio
    async def test_full_flow(self, api_client, admins, signup_data, print_job_data):
        response = await api_client.post(f"{API}/resident-signup", json=signup_data)
        assert response.status_code == 201
        signup = response.json()["data"]
        assert signup["status"] == "pending_approval"
        assert response.json()["message"] == "Signup submitted for approval"

        # Not approved yet, so no OTP
        response = await api_client.post(
            f"{API}/auth/request-otp", json={"mobile": signup_data["mobile"]}
        )
        assert response.status_code == 404

        await _admin_login(api_client)
        response = await api_client.get(f"{API}/admin/notifications")
        assert response.status_code == 200
        assert response.json()["unreadCount"] == 1
        assert "A Kumar" in response.json()["data"][0]["message"]

        response = await api_client.post(
            f"{API}/admin/signups/{signup['id']}/approve", json={"notes": "ID verified"}
        )
        assert response.status_code == 200
        approval = response.json()["data"]
        assert approval["signup"]["status"] == "approved"
        assert approval["profile"]["mobile"] == signup_data["mobile"]

        api_client.cookies.clear()
        login = await _resident_login(api_client, signup_data["mobile"])
        assert login["residentId"] == approval["profile"]["id"]

        response = await api_client.get(f"{API}/resident/profile")
        assert response.status_code == 200
        assert response.json()["data"]["location"]["communityName"] == "Prestige Lakeside Habitat"

        response = await api_client.post(
            f"{API}/print-jobs",
            json={**print_job_data, "residentId": "00000000-0000-0000-0000-000000000000"},
        )
        assert response.status_code == 201
        job = response.json()["data"]
        assert job["status"] == "queued"
        assert job["residentId"] == login["residentId"]

        response = await api_client.get(f"{API}/print-jobs")
        assert [j["id"] for j in response.json()["data"]] == [job["id"]]

        api_client.cookies.clear()
        await _admin_login(api_client, "frontdesk@example.com")
        response = await api_client.get(f"{API}/admin/print-jobs")
        assert response.status_code == 200
        [listed] = response.json()["data"]
        assert listed["residentName"] == "A Kumar"
        assert listed["flatNumber"] == "A-101"

        response = await api_client.post(
            f"{API}/admin/print-jobs/{job['id']}/status", json={"status": "ready"}
        )
        assert response.status_code == 200
        assert response.json()["data"]["status"] == "ready"

    @pytest.mark.asyncio
    async def test_rejected_signup_cannot_log_in(self, api_client, admins, signup_data):
        response = await api_client.post(f"{API}/resident-signup", json=signup_data)
        signup_id = response.json()["data"]["id"]

        await _admin_login(api_client)
        response = await api_client.post(f"{API}/admin/signups/{signup_id}/reject")
        assert response.status_code == 200
        assert response.json()["data"]["status"] == "rejected"

        response = await api_client.post(f"{API}/admin/signups/{signup_id}/approve")
        assert response.status_code == 409
        assert response.json()["code"] == "SIGNUP_ALREADY_DECIDED"

        response = await api_client.post(
            f"{API}/auth/request-otp", json={"mobile": signup_data["mobile"]}
        )
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_otp_replay_is_rejected(self, api_client, resident):
        response = await api_client.post(f"{API}/auth/request-otp", json={"mobile": resident.mobile})
        code = response.json()["data"]["code"]
        body = {"mobile": resident.mobile, "code": code}

        first = await api_client.post(f"{API}/auth/verify-otp", json=body)
        replay = await api_client.post(f"{API}/auth/verify-otp", json=body)

        assert first.status_code == 200
        assert replay.status_code == 401
        assert replay.json()["code"] == "INVALID_OTP"


class TestOtpRateLimit:
    @pytest.mark.asyncio
    async def test_invalid_mobile_is_not_tracked(self, api_client):
        for i in range(3):
            response = await api_client.post(f"{API}/auth/request-otp", json={"mobile": f"junk-{i}"})
            assert response.status_code == 400

        assert not any(key.startswith("otp:request:") for key in _memory_store)

    @pytest.mark.asyncio
    async def test_limit_is_per_mobile(self, api_client, resident):
        for _ in range(5):
            response = await api_client.post(
                f"{API}/auth/request-otp", json={"mobile": resident.mobile}
            )
            assert response.status_code == 200

        response = await api_client.post(f"{API}/auth/request-otp", json={"mobile": resident.mobile})

        assert response.status_code == 429
        assert response.json()["code"] == "RATE_LIMIT_EXCEEDED"
        assert list(_memory_store) == [f"otp:request:{resident.mobile}"]


class TestErrorEnvelope:
    @pytest.mark.asyncio
    async def test_validation_error_shape(self, api_client, signup_data):
        signup_data["mobile"] = "12345"

        response = await api_client.post(f"{API}/resident-signup", json=signup_data)

        assert response.status_code == 400
        body = response.json()
        assert body["code"] == "VALIDATION_ERROR"
        assert "10 digits" in body["error"]

    @pytest.mark.asyncio
    async def test_duplicate_signup(self, api_client, admins, signup_data):
        await api_client.post(f"{API}/resident-signup", json=signup_data)

        response = await api_client.post(f"{API}/resident-signup", json=signup_data)

        assert response.status_code == 400
        assert response.json()["code"] == "DUPLICATE_SIGNUP"

    @pytest.mark.asyncio
    async def test_malformed_json(self, api_client):
        response = await api_client.post(
            f"{API}/resident-signup",
            content=b"{not json",
            headers={"content-type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"


class TestAuthRequired:
    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("method", "path"),
        [
            ("get", "/print-jobs"),
            ("post", "/print-jobs"),
            ("get", "/resident/profile"),
            ("get", "/admin/signups"),
            ("get", "/admin/print-jobs"),
            ("get", "/admin/notifications"),
            ("get", "/admin/communities"),
        ],
    )
    async def test_requires_session(self, api_client, method, path):
        if method == "post":
            response = await api_client.post(f"{API}{path}", json={})
        else:
            response = await api_client.get(f"{API}{path}")

        assert response.status_code == 401
        assert response.json() == {"error": "Unauthorized", "code": "UNAUTHORIZED"}

    @pytest.mark.asyncio
    async def test_resident_cookie_is_not_an_admin_session(self, api_client, resident):
        await _resident_login(api_client, resident.mobile)

        response = await api_client.get(f"{API}/admin/signups")

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_wrong_admin_password(self, api_client, admins):
        response = await api_client.post(
            f"{API}/admin/login",
            json={"email": "prestige@example.com", "password": "nope"},
        )

        assert response.status_code == 401
        assert response.json()["code"] == "INVALID_CREDENTIALS"


class TestMe:
    @pytest.mark.asyncio
    async def test_anonymous(self, api_client):
        response = await api_client.get(f"{API}/me")

        assert response.status_code == 200
        assert response.json()["type"] == "anonymous"
        assert response.json()["data"] is None

    @pytest.mark.asyncio
    async def test_admin(self, api_client, admins):
        login = await _admin_login(api_client)

        response = await api_client.get(f"{API}/me")

        assert response.json()["type"] == "admin"
        assert response.json()["data"]["adminId"] == login["adminId"]

    @pytest.mark.asyncio
    async def test_resident_includes_jobs(self, api_client, resident, print_job_data):
        await _resident_login(api_client, resident.mobile)
        await api_client.post(f"{API}/print-jobs", json=print_job_data)

        response = await api_client.get(f"{API}/me")

        body = response.json()
        assert body["type"] == "resident"
        assert body["data"]["mobile"] == resident.mobile
        assert len(body["jobs"]) == 1

    @pytest.mark.asyncio
    async def test_logout_clears_session(self, api_client, resident):
        await _resident_login(api_client, resident.mobile)

        response = await api_client.post(f"{API}/auth/logout")
        assert response.json() == {"data": {"success": True}}

        response = await api_client.get(f"{API}/me")
        assert response.json()["type"] == "anonymous"


class TestAdminScoping:
    @pytest.mark.asyncio
    async def test_other_community_admin_cannot_approve(self, api_client, admins, signup_data):
        response = await api_client.post(f"{API}/resident-signup", json=signup_data)
        signup_id = response.json()["data"]["id"]

        await _admin_login(api_client, "avatar@example.com")
        response = await api_client.get(f"{API}/admin/signups")
        assert response.json()["data"] == []

        response = await api_client.post(f"{API}/admin/signups/{signup_id}/approve")
        assert response.status_code == 403
        assert response.json()["code"] == "COMMUNITY_ACCESS_DENIED"

    @pytest.mark.asyncio
    async def test_unknown_status_value(self, api_client, admins, resident, print_job_data):
        await _resident_login(api_client, resident.mobile)
        response = await api_client.post(f"{API}/print-jobs", json=print_job_data)
        job_id = response.json()["data"]["id"]

        api_client.cookies.clear()
        await _admin_login(api_client)
        response = await api_client.post(
            f"{API}/admin/print-jobs/{job_id}/status", json={"status": "shredded"}
        )

        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_STATUS"

    @pytest.mark.asyncio
    async def test_mark_notification_read(self, api_client, admins, signup_data):
        await api_client.post(f"{API}/resident-signup", json=signup_data)
        await _admin_login(api_client)
        notification = (await api_client.get(f"{API}/admin/notifications")).json()["data"][0]

        response = await api_client.post(
            f"{API}/admin/notifications", json={"notificationId": notification["id"]}
        )
        assert response.status_code == 200
        assert response.json()["data"]["isRead"] is True

        response = await api_client.get(f"{API}/admin/notifications")
        assert response.json()["unreadCount"] == 0

    @pytest.mark.asyncio
    async def test_managed_communities(self, api_client, admins):
        await _admin_login(api_client, "frontdesk@example.com")

        response = await api_client.get(f"{API}/admin/communities")

        assert [c["id"] for c in response.json()["data"]] == ["prestige-lakeside-habitat"]


@pytest.mark.asyncio
async def test_directory_is_public(api_client):
    response = await api_client.get(f"{API}/communities")

    assert response.status_code == 200
    states = [s["id"] for s in response.json()["data"]]
    assert "karnataka" in states


@pytest.mark.asyncio
async def test_health(api_client):
    response = await api_client.get("/health")

    assert response.json() == {"status": "healthy"}
