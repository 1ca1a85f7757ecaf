"""FastAPI application factory and lifespan management."""

import asyncio
import logging
from contextlib import asynccontextmanager

import redis.asyncio as aioredis
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from redis.exceptions import RedisError

from orgdir import __version__
from orgdir.config import settings
from orgdir.db.engine import create_db_engine, create_session_factory, create_tables
from orgdir.logging_config import configure_logging

# Configure logging at import time
configure_logging(log_level=settings.log_level, json_output=not settings.local_mode)

logger = logging.getLogger(__name__)


async def _connect_redis():
    """Return a connected Redis client, or None in local mode or when unreachable."""
    if settings.local_mode:
        return None
    client = aioredis.from_url(settings.redis_url, decode_responses=True)
    try:
        await client.ping()
    except (RedisError, OSError):
        logger.warning("Redis not available, queue consumer disabled")
        await client.aclose()
        return None
    return client


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application startup and shutdown resources."""
    engine = create_db_engine()
    await create_tables(engine)

    app.state.db_engine = engine
    app.state.db_session_factory = create_session_factory(engine)
    app.state.redis = await _connect_redis()

    consumer_task = None
    if app.state.redis is not None and settings.consumer_enabled:
        from orgdir.workers.poller import run_consumer
        consumer_task = asyncio.create_task(run_consumer(app))

    logger.info("orgdir API started (db=%s)", "sqlite" if settings.local_mode else "postgresql")
    yield

    # Shutdown
    if consumer_task is not None:
        consumer_task.cancel()
        try:
            await consumer_task
        except asyncio.CancelledError:
            pass
    if app.state.redis is not None:
        await app.state.redis.aclose()
    await engine.dispose()
    logger.info("orgdir API shutdown complete")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="orgdir API",
        version=__version__,
        description="Multi-tenant directory of organizations and their users.",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from orgdir.api.middleware.trace_id import TraceIdMiddleware
    app.add_middleware(TraceIdMiddleware)

    from orgdir.api.router import api_router
    app.include_router(api_router)

    return app


app = create_app()
