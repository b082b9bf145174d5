"""
OTP Module

One-time passcode login for approved residents.

API Endpoints:
- POST /auth/request-otp - Issue a 6-digit code
- POST /auth/verify-otp - Verify it and start a resident session
- POST /auth/logout - End the resident session

Security Features:
- SHA-256 code hashing (codes never stored in plain text)
- Single use: a verified code is deleted with a conditional DELETE
- Per-mobile rate limiting on request and verify

Background Jobs (via APScheduler):
- purge_expired_otps: Removes codes that expired unverified
"""

from .jobs import register_otp_jobs
from .router import router

__all__ = ["register_otp_jobs", "router"]
