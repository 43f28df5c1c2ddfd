"""Root conftest — shared fixtures: isolated fake store + ASGI test client.

Invariants:
    - Every test gets its own FakeServer (no data shared between tests)
    - get_redis dependency overridden; the lifespan (real Redis ping) never runs
"""

import os

import pytest
from fakeredis import FakeAsyncRedis, FakeServer
from httpx import ASGITransport, AsyncClient

# Ensure tests never point at a real store
os.environ.setdefault("REDIS_URL", "redis://localhost:6379")

from records_api.infrastructure.redis_store import get_redis  # noqa: E402
from records_api.main import app  # noqa: E402


@pytest.fixture
async def fake_redis():
    r = FakeAsyncRedis(server=FakeServer(), decode_responses=True)
    yield r
    await r.aclose()


@pytest.fixture
async def client(fake_redis):
    """FastAPI test client with the store dependency overridden."""
    app.dependency_overrides[get_redis] = lambda: fake_redis

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
