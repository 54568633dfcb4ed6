"""
Database Dependency

FastAPI dependencies for database sessions.

get_db yields a request-scoped session that is committed on success and
rolled back on error. get_session_factory hands out the factory itself,
for work that outlives the request (background cache refresh).

Usage:
======
    from acrossmedia.api.dependencies.database import DbSession

    @router.get("/users")
    async def list_users(db: DbSession):
        repo = AccountRepository(db)
        return await repo.search()
"""

from typing import Annotated, AsyncGenerator, Callable

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from acrossmedia.shared.db import AsyncSessionLocal
from acrossmedia.shared.db import get_db as _get_db


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency for database sessions.

    Yields:
        AsyncSession: Database session for the current request
    """
    async for session in _get_db():
        yield session


def get_session_factory() -> Callable[[], AsyncSession]:
    """Session factory for background tasks."""
    return AsyncSessionLocal


# Type aliases for cleaner route signatures
DbSession = Annotated[AsyncSession, Depends(get_db)]
SessionFactory = Annotated[Callable[[], AsyncSession], Depends(get_session_factory)]
