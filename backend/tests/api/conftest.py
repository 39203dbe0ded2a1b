"""API test fixtures: FastAPI test client over the in-memory database.

Invariants:
    - get_db dependency overridden to use the test session factory
    - get_view_cache overridden with a fresh ViewCache per test
    - db_manager patched so the readiness probe sees the test engine
"""

import pytest
from httpx import ASGITransport, AsyncClient

from dashboard.infrastructure.database import get_db, DatabaseSessionManager
from dashboard.infrastructure.view_cache import ViewCache, get_view_cache
import dashboard.infrastructure.database as db_module
from dashboard.main import app


@pytest.fixture
def views():
    return ViewCache()


@pytest.fixture
async def client(test_engine, test_session_factory, views):
    """FastAPI test client with DB and view cache dependencies overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_view_cache] = lambda: views

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager
