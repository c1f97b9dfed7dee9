"""Root conftest - shared fixtures: in-memory database, app wiring, HTTP clients.

Invariants:
    - Every test gets a fresh in-memory SQLite database with the schema created
    - get_db dependency overridden and db_manager patched to the test database
    - Rate counter reset before each test so request counts never leak between tests

Design Decisions:
    - StaticPool: one shared connection keeps the in-memory database alive across sessions
    - Lifespan not run by ASGITransport: the fixtures do the startup work themselves
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_FORMAT", "text")

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

import employee_registry.infrastructure.database as db_module  # noqa: E402
from employee_registry.client.api_client import EmployeeApiClient  # noqa: E402
from employee_registry.infrastructure.database import (  # noqa: E402
    DatabaseSessionManager, get_db,
)
from employee_registry.main import app  # noqa: E402


@pytest.fixture
async def test_manager():
    manager = DatabaseSessionManager(
        "sqlite+aiosqlite:///:memory:", poolclass=StaticPool,
    )
    await manager.create_schema()
    yield manager
    await manager.close()


@pytest.fixture
async def wired_app(test_manager):
    """The FastAPI app bound to the test database."""
    async def override_get_db():
        async with test_manager.session() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    original_manager = db_module.db_manager
    db_module.db_manager = test_manager
    app.state.rate_counter.reset()

    yield app

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
async def client(wired_app):
    """FastAPI test client with DB dependency overridden."""
    async with AsyncClient(
        transport=ASGITransport(app=wired_app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
async def employee_api(wired_app):
    """EmployeeApiClient talking to the app in-process."""
    http = AsyncClient(
        transport=ASGITransport(app=wired_app), base_url="http://test/api",
    )
    async with EmployeeApiClient(http) as api:
        yield api
