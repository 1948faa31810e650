"""Application factory for creating and configuring the FastAPI application.

This module provides a factory function to create a properly configured FastAPI application
with all necessary middleware, exception handlers, and routers registered.
"""

from typing import Optional

from fastapi import FastAPI
from fastapi.responses import JSONResponse
from passlib.context import CryptContext

from src.adapters.api.v1 import api_router
from src.core.config.settings import Settings
from src.core.handlers import register_exception_handlers
from src.core.lifecycle import create_lifespan_manager
from src.core.middleware import configure_middleware
from src.core.rate_limiting import create_rate_limiters
from src.infrastructure.database.pool import ConnectionPool
from src.infrastructure.services import LoggingPasswordResetNotifier


def create_application(app_settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Long-lived collaborators are attached to ``app.state`` here so that each
    application instance owns its pool and its rate-limit windows.

    Args:
        app_settings: Settings to run with; the module singleton by default.

    Returns:
        FastAPI: The configured FastAPI application instance
    """
    if app_settings is None:
        from src.core.config.settings import settings as app_settings

    app = FastAPI(
        title=app_settings.PROJECT_NAME,
        version=app_settings.VERSION,
        description="Identity and access service for the hostel booking platform.",
        debug=app_settings.DEBUG,
        lifespan=create_lifespan_manager(app_settings),
        default_response_class=JSONResponse,
    )

    app.state.settings = app_settings
    app.state.connection_pool = ConnectionPool.from_settings(app_settings)
    app.state.pwd_context = CryptContext(
        schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=app_settings.BCRYPT_ROUNDS
    )
    app.state.password_reset_notifier = LoggingPasswordResetNotifier(
        app_settings.PASSWORD_RESET_URL
    )
    # In-memory windows until the lifespan swaps in Redis-backed ones
    app.state.rate_limiters = create_rate_limiters(app_settings)

    # Configure middleware
    configure_middleware(app, app_settings)

    # Register exception handlers
    register_exception_handlers(app)

    # Include routers
    app.include_router(api_router, prefix="/api/v1")

    return app
