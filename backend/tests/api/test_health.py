"""Health probes — liveness always 200, readiness follows the store."""

from records_api.infrastructure.redis_store import get_redis
from records_api.main import app
from tests.stub_redis import FlakyRedis


async def test_liveness(client):
    res = await client.get("/health")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"


async def test_ready_when_store_answers(client):
    res = await client.get("/health/ready")
    assert res.status_code == 200
    assert res.json()["checks"] == {"store": "healthy"}


async def test_not_ready_when_store_down(client, fake_redis):
    app.dependency_overrides[get_redis] = lambda: FlakyRedis(fake_redis, {"ping"})
    res = await client.get("/health/ready")
    assert res.status_code == 503
    assert res.json()["reason"] == "store_unavailable"
