"""
Fixtures for integration tests.

Provides:
- A file-backed SQLite database behind the real session manager
- Test client for the FastAPI app
- Caller headers and request bodies for the common scenario
"""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from risk_ledger.core.config import settings
from risk_ledger.infrastructure.database import db_manager
from risk_ledger.main import app


# =============================================================================
# Database Fixtures
# =============================================================================

@pytest_asyncio.fixture
async def database(tmp_path) -> AsyncGenerator[None, None]:
    """
    Point the global session manager at a fresh SQLite file.

    Requests go through the same serialized write path as in production.
    """
    db_manager.init(f"sqlite+aiosqlite:///{tmp_path / 'ledger.db'}")
    await db_manager.create_tables()

    yield

    await db_manager.close()


# =============================================================================
# App Client Fixtures
# =============================================================================

@pytest_asyncio.fixture
async def client(database) -> AsyncGenerator[AsyncClient, None]:
    """Create a test client bound to the test database."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


# =============================================================================
# Helper Fixtures
# =============================================================================

def caller_headers(identity: str) -> dict:
    return {"X-Caller-Id": identity}


@pytest.fixture
def alice_headers() -> dict:
    return caller_headers("alice")


@pytest.fixture
def bob_headers() -> dict:
    return caller_headers("bob")


@pytest.fixture
def owner_headers() -> dict:
    return caller_headers(settings.owner_identity)


@pytest.fixture
def good_profile() -> dict:
    """Profile body for a low-risk borrower."""
    return {
        "credit_score": 720,
        "annual_income": 100000,
        "total_debt": 20000,
        "employment_years": 5,
        "previous_defaults": 0,
        "on_time_payments": 18,
        "total_loans": 20,
    }


@pytest.fixture
def car_loan_request() -> dict:
    return {"amount": 50000, "purpose": "Car", "term_months": 60}


@pytest_asyncio.fixture
async def registered_alice(client: AsyncClient, alice_headers: dict, good_profile: dict) -> dict:
    """Register alice's profile and return the response body."""
    response = await client.post("/v1/profiles", json=good_profile, headers=alice_headers)
    assert response.status_code == 200
    return response.json()


@pytest_asyncio.fixture
async def disbursed_loan(
    client: AsyncClient,
    registered_alice: dict,
    alice_headers: dict,
    owner_headers: dict,
    car_loan_request: dict,
) -> int:
    """Take alice's application through approval and disbursement."""
    response = await client.post("/v1/applications", json=car_loan_request, headers=alice_headers)
    assert response.status_code == 201
    application_id = response.json()["application_id"]

    response = await client.post(f"/v1/applications/{application_id}/approve", headers=owner_headers)
    assert response.status_code == 200

    response = await client.post(f"/v1/applications/{application_id}/disburse", headers=owner_headers)
    assert response.status_code == 201

    return application_id
