"""API test fixtures — in-process FastAPI client.

Invariants:
    - Every request carries an Origin header (CORS applies to cross-origin requests)
    - get_settings overrides are cleared after each test

Design Decisions:
    - fast_settings shrinks the guard/delay pair so timeout tests finish in
      milliseconds while keeping guard < delay
"""

import asyncio

import pytest
from httpx import ASGITransport, AsyncClient

from sample_api.config import Settings, get_settings
from sample_api.core.deadline import pending_orphans
from sample_api.main import app

TEST_ORIGIN = "http://client.test"


@pytest.fixture
async def client():
    """FastAPI test client against the in-process app."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
        headers={"Origin": TEST_ORIGIN},
    ) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
async def fast_settings():
    """Settings with a 50ms guard and a 300ms slow handler.

    Teardown waits out any handler the guard left running so it finishes
    on this test's event loop.
    """
    settings = Settings(
        timeout_guard_seconds=0.05, slow_response_delay_seconds=0.3,
    )
    app.dependency_overrides[get_settings] = lambda: settings
    yield settings
    app.dependency_overrides.pop(get_settings, None)
    for _ in range(20):
        if not pending_orphans():
            break
        await asyncio.sleep(settings.slow_response_delay_seconds / 10)


@pytest.fixture
async def bare_client():
    """Client that sends no Origin header (curl, server-to-server)."""
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
