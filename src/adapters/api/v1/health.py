"""Health check endpoint reporting database reachability."""

from datetime import datetime, timezone
from typing import Annotated, Any, Dict

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from src.core.config.settings import Settings
from src.infrastructure.database.pool import ConnectionPool
from src.infrastructure.dependency_injection.auth_dependencies import (
    get_connection_pool,
    get_settings,
)

router = APIRouter()


class HealthResponse(BaseModel):
    status: str
    env: str
    services: Dict[str, Any]
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


@router.get("", response_model=HealthResponse)
async def health_check(
    pool: Annotated[ConnectionPool, Depends(get_connection_pool)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> HealthResponse:
    """Report whether the database answers; never fails the request itself."""
    db_ok = await pool.check_connectivity()
    return HealthResponse(
        status="ok" if db_ok else "degraded",
        env=settings.APP_ENV,
        services={
            "database": {
                "status": "healthy" if db_ok else "unhealthy",
                "pool_size": pool.size,
                "checked_out": pool.checked_out,
            }
        },
    )
