"""Application lifecycle management.

This module handles application startup and shutdown events, ensuring proper
initialization and cleanup of application resources.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from redis.asyncio import Redis

from src.core.config.settings import Settings
from src.core.logging import logger
from src.core.rate_limiting import create_rate_limiters
from src.domain.entities.user import User  # noqa: F401  registers the table on the metadata
from src.infrastructure.database.pool import ConnectionPool


def create_lifespan_manager(settings: Settings):
    """Create the application lifespan manager.

    Returns:
        AsyncContextManager: The lifespan manager for the FastAPI application
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Build the pool and the limiters on startup, release them on shutdown.

        An unreachable database is logged and the application still starts;
        requests touching storage fail with `500` until it comes back.
        """
        # Startup
        pool: ConnectionPool = app.state.connection_pool
        if await pool.check_connectivity() and settings.DB_CREATE_TABLES:
            await pool.create_tables()

        redis = None
        if settings.RATE_LIMIT_ENABLED and settings.RATE_LIMIT_STORAGE == "redis":
            redis = Redis.from_url(settings.REDIS_URL, decode_responses=True)
            app.state.rate_limiters = create_rate_limiters(settings, redis)

        logger.info("application_startup", env=settings.APP_ENV, version=settings.VERSION)

        yield

        # Shutdown
        if redis is not None:
            await redis.aclose()
        await pool.dispose()
        logger.info("application_shutdown", env=settings.APP_ENV)

    return lifespan
