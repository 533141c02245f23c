"""Pytest configuration and fixtures."""

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from appointme.api.deps import get_store
from appointme.main import app
from appointme.models import Business, Service, User, UserRole
from appointme.stores import InMemoryBookingStore
from appointme.utils.jwt import create_access_token
from appointme.utils.passwords import hash_password

REP_PASSWORD = "Abcdefg1!"
USER_PASSWORD = "Qwerty12#"


def pytest_addoption(parser):
    """Add custom CLI options."""
    parser.addoption(
        "--run-db",
        action="store_true",
        default=False,
        help="Run tests that need a PostgreSQL test database",
    )


def pytest_collection_modifyitems(config, items):
    """Skip database tests unless --run-db is passed."""
    if config.getoption("--run-db"):
        return
    skip_db = pytest.mark.skip(reason="need --run-db option to run")
    for item in items:
        if "db" in item.keywords:
            item.add_marker(skip_db)


def auth_headers(user: User) -> dict[str, str]:
    """Authorization header carrying a fresh access token for ``user``."""
    token = create_access_token(user.id, user.role, user.business_id)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def store() -> InMemoryBookingStore:
    """Fresh in-memory store per test."""
    return InMemoryBookingStore()


@pytest_asyncio.fixture
async def client(store: InMemoryBookingStore) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client talking to the app, with the store swapped for the in-memory one."""
    app.dependency_overrides[get_store] = lambda: store
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def business(store: InMemoryBookingStore) -> Business:
    """Create test business."""
    return await store.create_business(
        {
            "name": "Bright Minds Tutoring",
            "email": "hello@brightminds.com",
            "phone": "+15550100000",
        }
    )


@pytest_asyncio.fixture
async def other_business(store: InMemoryBookingStore) -> Business:
    """Create a second, unrelated business."""
    return await store.create_business({"name": "Rival Tutors"})


@pytest_asyncio.fixture
async def rep(store: InMemoryBookingStore, business: Business) -> User:
    """Create the representative of ``business``."""
    return await store.create_user(
        {
            "fname": "Rita",
            "lname": "Rep",
            "email": "rita@brightminds.com",
            "password_hash": hash_password(REP_PASSWORD),
            "role": UserRole.BUSINESS_REP.value,
            "business_id": business.id,
        }
    )


@pytest_asyncio.fixture
async def other_rep(store: InMemoryBookingStore, other_business: Business) -> User:
    """Create the representative of ``other_business``."""
    return await store.create_user(
        {
            "fname": "Otto",
            "lname": "Other",
            "email": "otto@rivaltutors.com",
            "password_hash": hash_password(REP_PASSWORD),
            "role": UserRole.BUSINESS_REP.value,
            "business_id": other_business.id,
        }
    )


@pytest_asyncio.fixture
async def user(store: InMemoryBookingStore) -> User:
    """Create a regular (client) user."""
    return await store.create_user(
        {
            "fname": "Uma",
            "lname": "User",
            "email": "uma@mailbox.com",
            "password_hash": hash_password(USER_PASSWORD),
            "role": UserRole.USER.value,
        }
    )


@pytest_asyncio.fixture
async def service(store: InMemoryBookingStore, business: Business) -> Service:
    """Create test service."""
    return await store.create_service(
        business.id,
        {
            "name": "1:1 Maths",
            "description": "Individual maths tutoring",
            "duration": 50,
            "break_minutes": 10,
            "fee": 60.0,
        },
    )


@pytest_asyncio.fixture
async def service2(store: InMemoryBookingStore, business: Business) -> Service:
    """Create second test service."""
    return await store.create_service(
        business.id,
        {
            "name": "Group English",
            "duration": 80,
            "break_minutes": 10,
            "fee": 35.0,
        },
    )
