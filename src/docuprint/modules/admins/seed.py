"""
Admin Seed Data

Demo admin accounts created at startup unless SEED_DEMO_DATA is false.
Seeding is idempotent: existing emails are left alone.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from docuprint.core.security import hash_password
from docuprint.modules.admins.models import AdminAccount
from docuprint.modules.admins.repository import AdminRepository

logger = logging.getLogger(__name__)

DEMO_ADMINS: list[dict] = [
    {
        "email": "admin@prestige.example",
        "name": "Ravi Shankar",
        "password": "prestige123",
        "community_ids": ["prestige-lakeside-habitat", "brigade-meadows"],
    },
    {
        "email": "frontdesk@prestige.example",
        "name": "Meera Iyer",
        "password": "lakeside123",
        "community_ids": ["prestige-lakeside-habitat"],
    },
    {
        "email": "admin@myhome.example",
        "name": "Sandeep Reddy",
        "password": "avatar123",
        "community_ids": ["my-home-avatar", "amanora-park-town"],
    },
]


async def seed_admin_accounts(
    db: AsyncSession,
    accounts: list[dict] | None = None,
) -> list[AdminAccount]:
    """
    Create any missing seed admins and commit.

    Returns:
        The admins created by this call
    """
    created = []
    for account in accounts if accounts is not None else DEMO_ADMINS:
        if await AdminRepository.get_by_email(db, account["email"]) is not None:
            logger.debug(f"Admin {account['email']} already exists, skipping")
            continue

        created.append(
            await AdminRepository.create(
                db,
                email=account["email"],
                name=account["name"],
                password_hash=hash_password(account["password"]),
                community_ids=account["community_ids"],
            )
        )

    await db.commit()
    logger.info(f"Seeded {len(created)} admin account(s)")
    return created
