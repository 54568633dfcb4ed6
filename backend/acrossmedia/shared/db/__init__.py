"""
Database Module

Database connectivity and session management.

Architecture Overview:
======================
    FastAPI Route
        │  Dependency Injection: get_db()
        ▼
    AsyncSession (one per request, commit/rollback/close handled)
        │  Passed to Repository
        ▼
    Repository (AccountRepository, ProjectRepository, VideoRepository, ...)
        │  SQL
        ▼
    PostgreSQL

Usage:
======
    from acrossmedia.shared.db import get_db, AsyncSessionLocal

    async with AsyncSessionLocal() as session:
        repo = VideoRepository(session)
"""

from acrossmedia.shared.db.session import (
    get_db,
    init_db,
    close_db,
    build_engine,
    build_session_factory,
    AsyncSessionLocal,
    engine,
)

__all__ = [
    "get_db",
    "init_db",
    "close_db",
    "build_engine",
    "build_session_factory",
    "AsyncSessionLocal",
    "engine",
]
