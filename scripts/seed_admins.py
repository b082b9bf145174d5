"""
Seed Admin Accounts

Creates the demo community admins in the database named by DATABASE_URL.
Existing accounts are left untouched, so the script can be re-run.

Usage:
    pip install -e .
    DATABASE_URL=sqlite+aiosqlite:///./docuprint.db python scripts/seed_admins.py
"""

import asyncio

from docuprint.core.config import settings
from docuprint.core.database import close_db, init_db, session_scope
from docuprint.modules.admins.seed import DEMO_ADMINS, seed_admin_accounts


async def seed_admins() -> None:
    """Create tables if needed, then any missing demo admins."""
    if ":memory:" in settings.database_url:
        print("DATABASE_URL points at an in-memory database; nothing would persist.")
        print("Set DATABASE_URL to a file or server database and re-run.")
        return

    await init_db()

    async with session_scope() as db:
        created = await seed_admin_accounts(db)

    created_emails = {admin.email for admin in created}
    for account in DEMO_ADMINS:
        state = "created" if account["email"] in created_emails else "already exists"
        print(f"  {account['email']}: {state} ({', '.join(account['community_ids'])})")

    print(f"Seeding complete: {len(created)} admin(s) created")

    await close_db()


if __name__ == "__main__":
    asyncio.run(seed_admins())
