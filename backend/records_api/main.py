"""Records API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map RecordsError → {"message": ...} responses
    - Store connectivity verified once on startup; failure aborts the process

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Startup ping bounded by store_startup_timeout_seconds, never retried
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from records_api.api.error_handlers import register_error_handlers
from records_api.api.routes import health, records
from records_api.config import get_settings
from records_api.infrastructure.observability import setup_logging
from records_api.infrastructure.redis_store import create_redis_client, ping_store

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    client = create_redis_client(settings)
    try:
        await ping_store(
            client,
            settings.store_startup_timeout_seconds,
            address=settings.redis_url,
        )
    except Exception:
        await client.aclose()
        raise
    app.state.redis = client
    logger.info("Records API started")
    yield
    logger.info("Records API shutting down")
    await client.aclose()


app = FastAPI(
    title="Records API", version=health.SERVICE_VERSION, lifespan=lifespan,
)

app.include_router(health.router)
app.include_router(records.router)

register_error_handlers(app)


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port)
