"""
Admins Module

Community admin accounts, password login and community assignments.

API Endpoints:
- POST /admin/login - Log in, sets the admin session cookie
- POST /admin/logout - Log out
- GET /admin/communities - Communities the admin manages

Admin accounts are seed data (see `seed.py`); passwords are stored as
bcrypt hashes.
"""

from .models import AdminAccount
from .repository import AdminRepository
from .router import router
from .seed import seed_admin_accounts

__all__ = ["AdminAccount", "AdminRepository", "router", "seed_admin_accounts"]
