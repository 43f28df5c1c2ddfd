"""Redis Store Client — process-wide client factory, startup ping, and DI accessor.

Invariants:
    - One client per process, created in the lifespan and kept on app.state
    - decode_responses=True: every value the gateway sees is str, never bytes
    - ping_store is the only place a timeout is applied

Design Decisions:
    - Client on app.state over a module global: tests swap it via dependency_overrides
    - No retry loop on startup: an unreachable store aborts the process
"""

import asyncio
import logging

from fastapi import Request
from redis.asyncio import Redis
from redis.exceptions import RedisError

from records_api.config import Settings
from records_api.core.errors import StoreUnavailableError

logger = logging.getLogger(__name__)


def create_redis_client(settings: Settings) -> Redis:
    """Build the long-lived async client from settings."""
    return Redis.from_url(
        settings.redis_url,
        password=settings.redis_password,
        db=settings.redis_db,
        decode_responses=True,
    )


async def ping_store(
    client: Redis, timeout_seconds: float, address: str = "",
) -> None:
    """Fail with StoreUnavailableError unless PING answers within the timeout."""
    try:
        await asyncio.wait_for(client.ping(), timeout=timeout_seconds)
    except (RedisError, OSError, asyncio.TimeoutError) as e:
        logger.error(f"Store ping failed for {address or 'store'}: {e!r}")
        raise StoreUnavailableError(address or "store", cause=e) from e


async def check_store(client: Redis) -> bool:
    """Check store connectivity (for readiness probes)."""
    try:
        return bool(await client.ping())
    except (RedisError, OSError) as e:
        logger.error(f"Store health check failed: {e}")
        return False


def get_redis(request: Request) -> Redis:
    """FastAPI dependency for the store client."""
    client = getattr(request.app.state, "redis", None)
    if client is None:
        raise RuntimeError("Store client not initialized")
    return client
