"""
Database configuration and session management.

The session manager is created explicitly at application startup, kept on
``app.state`` and disposed on shutdown. Nothing connects at import time.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncSession, async_sessionmaker, create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """Declarative base for all ORM models."""
    pass


class DatabaseSessionManager:
    """Owns the async engine and hands out sessions."""

    def __init__(self, database_url: str, echo: bool = False, **engine_kwargs):
        self.database_url = database_url
        self.engine = create_async_engine(database_url, echo=echo, **engine_kwargs)
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide a session that rolls back when the block raises."""
        session = self._session_factory()
        try:
            yield session
        except SQLAlchemyError as e:
            await session.rollback()
            logger.error(f"Database error, transaction rolled back: {e}")
            raise
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()

    async def create_tables(self) -> None:
        """Create all tables that do not exist yet."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def drop_tables(self) -> None:
        """Drop all tables. Removes every stored row."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)

    async def health_check(self) -> bool:
        """Check database connectivity (for readiness probes)."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error(f"Database health check failed: {e}")
            return False

    async def close(self) -> None:
        """Dispose the engine and its connection pool."""
        await self.engine.dispose()


def get_session_manager(request: Request) -> DatabaseSessionManager:
    """Dependency returning the manager created in the application lifespan."""
    manager = getattr(request.app.state, "db_manager", None)
    if manager is None:
        raise RuntimeError("Database not initialized")
    return manager


async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency function to get database session.
    """
    manager = get_session_manager(request)
    async with manager.session() as session:
        yield session
