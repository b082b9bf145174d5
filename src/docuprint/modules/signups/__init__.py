"""
Signups Module

Handles the resident access request workflow:
1. Public submission with directory validation and duplicate detection
2. One notification (and best-effort email) per admin of the community
3. Approval by a community admin creates the ResidentProfile
4. Rejection closes the request; the resident may apply again

API Endpoints:
- POST /resident-signup - Submit a signup
- GET /admin/signups - Admin's signups
- POST /admin/signups/{id}/approve - Approve
- POST /admin/signups/{id}/reject - Reject

Signups are decided exactly once (conditional UPDATE on pending status).
"""

from .admin_router import router as admin_router
from .router import router

__all__ = ["admin_router", "router"]
