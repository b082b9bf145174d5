"""
Shared test fixtures.

Service tests run against a fresh in-memory SQLite database per test.
API tests drive the FastAPI app through httpx with `get_db` overridden to
use the same database.
"""

import os

# Must be set before docuprint.core.config is imported
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("SCHEDULER_ENABLED", "false")
os.environ.setdefault("SEED_DEMO_DATA", "false")
os.environ.setdefault("OTP_DEMO_MODE", "true")
os.environ["RESEND_API_KEY"] = ""

from unittest.mock import AsyncMock, MagicMock  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker  # noqa: E402

import docuprint.models  # noqa: E402, F401
from docuprint.core.database import Base, create_engine, get_db  # noqa: E402
from docuprint.core.rate_limit import reset_memory_store  # noqa: E402
from docuprint.core.security import hash_password  # noqa: E402
from docuprint.modules.admins.repository import AdminRepository  # noqa: E402

ADMIN_PASSWORD = "correct-horse"

VALID_SIGNUP = {
    "fullName": "A Kumar",
    "mobile": "9876543210",
    "stateId": "karnataka",
    "cityId": "bengaluru",
    "communityId": "prestige-lakeside-habitat",
    "blockId": "plh-a",
    "flatNumber": "A-101",
}

VALID_PRINT_JOB = {
    "title": "Lease agreement",
    "pages": 10,
    "copies": 2,
    "colorMode": "mono",
    "paperSize": "A4",
    "fileName": "lease.pdf",
    "fileSize": 1_000_000,
}


@pytest.fixture(autouse=True)
def clear_rate_limits():
    """Rate limit state is process-global; start every test clean."""
    reset_memory_store()
    yield
    reset_memory_store()


@pytest.fixture
def mock_db():
    """Create a mock database session."""
    db = AsyncMock()
    db.commit = AsyncMock()
    db.rollback = AsyncMock()
    db.refresh = AsyncMock()
    db.flush = AsyncMock()
    db.execute = AsyncMock()
    db.add = MagicMock()
    return db


@pytest_asyncio.fixture
async def engine():
    """A private in-memory database with all tables created."""
    engine = create_engine("sqlite+aiosqlite:///:memory:")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_maker(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db(session_maker):
    async with session_maker() as session:
        yield session


@pytest_asyncio.fixture
async def admins(db):
    """
    Three admins:
    - prestige: Prestige Lakeside Habitat and Brigade Meadows
    - frontdesk: Prestige Lakeside Habitat only
    - avatar: My Home Avatar and Amanora Park Town
    """
    password_hash = hash_password(ADMIN_PASSWORD)
    prestige = await AdminRepository.create(
        db,
        email="prestige@example.com",
        name="Prestige Admin",
        password_hash=password_hash,
        community_ids=["prestige-lakeside-habitat", "brigade-meadows"],
    )
    frontdesk = await AdminRepository.create(
        db,
        email="frontdesk@example.com",
        name="Front Desk",
        password_hash=password_hash,
        community_ids=["prestige-lakeside-habitat"],
    )
    avatar = await AdminRepository.create(
        db,
        email="avatar@example.com",
        name="Avatar Admin",
        password_hash=password_hash,
        community_ids=["my-home-avatar", "amanora-park-town"],
    )
    await db.commit()
    return {"prestige": prestige, "frontdesk": frontdesk, "avatar": avatar}


@pytest_asyncio.fixture
async def api_client(session_maker):
    """httpx client against the app, sharing the test database."""
    from docuprint.main import app

    async def override_get_db():
        async with session_maker() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def signup_data():
    """A valid signup body for Prestige Lakeside Habitat, Block A."""
    return dict(VALID_SIGNUP)


@pytest.fixture
def print_job_data():
    return dict(VALID_PRINT_JOB)


@pytest_asyncio.fixture
async def resident(db, admins, signup_data):
    """An approved resident of Prestige Lakeside Habitat."""
    from docuprint.modules.signups.service import approve_signup, submit_signup

    signup = await submit_signup(db, signup_data)
    _, profile = await approve_signup(db, signup.id, admins["prestige"].id, notes="ID verified")
    return profile
