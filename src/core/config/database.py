"""
Database connection settings.
"""
from pydantic import Field
from pydantic_settings import BaseSettings


class DatabaseSettings(BaseSettings):
    """
    Defines settings for the pooled connection to the relational store.

    Security Note:
        - DATABASE_URL carries credentials; it must come from the environment
          and is never logged.
    Performance Note:
        - DB_POOL_SIZE is a hard ceiling on live connections (no overflow).
          Callers beyond it wait up to DB_POOL_TIMEOUT seconds for a release.
    """
    DATABASE_URL: str = "sqlite+aiosqlite:///./hostel.db"
    DB_POOL_SIZE: int = Field(ge=1, default=10)
    DB_POOL_TIMEOUT: float = Field(gt=0, default=30.0)
    DB_ECHO: bool = False
    DB_CREATE_TABLES: bool = True
