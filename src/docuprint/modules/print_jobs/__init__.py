"""
Print Jobs Module

Residents submit print jobs (metadata only, no file storage); admins of the
resident's community track them through queued, printing, ready and
collected, or cancel them.

API Endpoints:
- POST /print-jobs - Submit (resident)
- GET /print-jobs - Own jobs (resident)
- GET /admin/print-jobs - Community jobs (admin)
- POST /admin/print-jobs/{id}/status - Update status (admin)
"""

from .admin_router import router as admin_router
from .router import router

__all__ = ["admin_router", "router"]
