"""
Residents Module

Profiles of approved residents. A profile is created only by approving a
signup (see the signups module).

API Endpoints (router in `router.py`):
- GET /resident/profile - Logged-in resident's profile
- GET /me - Current session
"""

from .models import ResidentProfile
from .repository import ResidentRepository

__all__ = ["ResidentProfile", "ResidentRepository"]
