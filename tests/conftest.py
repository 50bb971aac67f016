"""Shared test configuration and fixtures.

Each test runs against a fresh in-memory SQLite database (aiosqlite):
- The schema is created from ``Base.metadata`` when the engine fixture starts.
- Every test works inside one outer transaction that rolls back afterwards.
"""

from collections.abc import AsyncGenerator
from datetime import date, timedelta

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.pool import StaticPool

from nakanostay.auth.jwt import create_admin_token
from nakanostay.config import settings
from nakanostay.database import Base, get_db
from nakanostay.main import app

# Cédulas with valid province codes and check digits
VALID_DNI = "1710034065"
OTHER_VALID_DNI = "0926687856"
THIRD_VALID_DNI = "1713175071"


def future_dates(offset_start: int = 30, nights: int = 5) -> tuple[str, str]:
    """Return a (check_in, check_out) pair safely in the future as ISO strings."""
    check_in = date.today() + timedelta(days=offset_start)
    check_out = check_in + timedelta(days=nights)
    return check_in.isoformat(), check_out.isoformat()


def booking_payload(room_id: str, offset_start: int = 30, nights: int = 5, **overrides) -> dict:
    """Build a valid booking request for one room, overriding any field."""
    check_in, check_out = future_dates(offset_start, nights)
    payload = {
        "guest_name": "Ana Torres",
        "guest_dni": VALID_DNI,
        "guest_email": "ana.torres@example.com",
        "guest_phone": "0991234567",
        "check_in": check_in,
        "check_out": check_out,
        "details": [{"room_id": room_id, "guests": 2}],
    }
    payload.update(overrides)
    return payload


# ---------------------------------------------------------------------------
# Per-test: engine, schema and transactional rollback
# ---------------------------------------------------------------------------


@pytest_asyncio.fixture
async def test_engine():
    """Create an in-memory engine whose single connection is shared by all sessions."""
    engine = create_async_engine(
        settings.test_database_url,
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(test_engine) -> AsyncGenerator[AsyncSession, None]:
    """Yield an async session wrapped in a transaction that always rolls back."""
    async with test_engine.connect() as connection:
        transaction = await connection.begin()
        session = AsyncSession(bind=connection, expire_on_commit=False)

        try:
            yield session
        finally:
            await session.close()
            await transaction.rollback()


@pytest_asyncio.fixture
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Provide an httpx AsyncClient wired to use the test DB session."""

    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as ac:
        yield ac

    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# Convenience fixtures: admin credentials, hotel and room
# ---------------------------------------------------------------------------


@pytest_asyncio.fixture
async def admin_headers() -> dict[str, str]:
    """Return Authorization headers carrying a valid admin token."""
    token = create_admin_token("admin")
    return {"Authorization": f"Bearer {token}"}


@pytest_asyncio.fixture
async def test_hotel(client: AsyncClient, admin_headers: dict) -> dict:
    """Create and return a test hotel via the API."""
    response = await client.post(
        "/api/v1/hotels",
        json={
            "name": "Hotel Nakano Quito",
            "address": "Av. Amazonas N24-03",
            "city": "Quito",
            "stars": 4,
            "email": "reservas@nakanoquito.com",
        },
        headers=admin_headers,
    )
    assert response.status_code == 201, f"Failed to create test hotel: {response.text}"
    return response.json()


@pytest_asyncio.fixture
async def test_room(client: AsyncClient, admin_headers: dict, test_hotel: dict) -> dict:
    """Create and return a 150.00-per-night room in the test hotel."""
    response = await client.post(
        "/api/v1/rooms",
        json={
            "hotel_id": test_hotel["id"],
            "room_number": "101",
            "room_type": "Doble",
            "price_per_night": "150.00",
        },
        headers=admin_headers,
    )
    assert response.status_code == 201, f"Failed to create test room: {response.text}"
    return response.json()


@pytest_asyncio.fixture
async def second_room(client: AsyncClient, admin_headers: dict, test_hotel: dict) -> dict:
    """Create and return a 90.50-per-night room in the test hotel."""
    response = await client.post(
        "/api/v1/rooms",
        json={
            "hotel_id": test_hotel["id"],
            "room_number": "102",
            "room_type": "Simple",
            "price_per_night": "90.50",
        },
        headers=admin_headers,
    )
    assert response.status_code == 201, f"Failed to create second room: {response.text}"
    return response.json()
