import os

# Must be set before acrossmedia is imported: the engine and settings are
# built at import time.
os.environ["APP_ENV"] = "test"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["SECRET_KEY"] = "test-secret-key-0123456789abcdef0123"
os.environ["YOUTUBE_API_KEY"] = "test-youtube-key"
os.environ["EMAIL_ENABLED"] = "false"
os.environ["BACKEND_URL"] = "http://api.test"
os.environ["CLIENT_URL"] = "http://site.test"

from datetime import datetime, timezone
from typing import Any, Callable, Optional

import httpx
import pytest
from sqlalchemy import event
from sqlalchemy.ext.asyncio import create_async_engine

from acrossmedia.config.settings import Settings, get_settings
from acrossmedia.shared.adapters.youtube_adapter import YouTubeAdapter
from acrossmedia.shared.core.exceptions import NotificationError
from acrossmedia.shared.db.session import build_session_factory
from acrossmedia.shared.models import Account, AccountRole, AccountStatus, Base
from acrossmedia.shared.repositories.account_repository import AccountRepository
from acrossmedia.shared.services.notification_service import NotificationDispatcher
from acrossmedia.shared.utils.security import SecurityUtils


# Hashing the same password once keeps bcrypt out of every fixture
PASSWORD = "correct-horse-1"
PASSWORD_HASH = SecurityUtils.hash_password(PASSWORD)


class FakeTransport:
    """EmailTransport that records messages and can fail for chosen recipients."""

    def __init__(self, fail_for: Optional[set[str]] = None) -> None:
        self.sent: list[dict[str, str]] = []
        self.fail_for = fail_for or set()

    async def deliver(self, to_address: str, subject: str, html_body: str) -> None:
        if to_address in self.fail_for:
            raise NotificationError(to_address, message="SMTP delivery failed: connection refused")
        self.sent.append({"to": to_address, "subject": subject, "html": html_body})

    def recipients(self) -> list[str]:
        return [message["to"] for message in self.sent]


def youtube_item(
    video_id: str,
    *,
    title: str = "Live title",
    view_count: Optional[str] = "1500",
    duration: str = "PT4M5S",
    published_at: str = "2025-01-20T12:00:00Z",
    channel_title: str = "Live Channel",
) -> dict[str, Any]:
    """One entry of a YouTube Data API videos.list response."""
    statistics = {} if view_count is None else {"viewCount": view_count}
    return {
        "id": video_id,
        "snippet": {
            "title": title,
            "description": f"{title} description",
            "publishedAt": published_at,
            "channelTitle": channel_title,
            "thumbnails": {
                "default": {"url": f"https://i.ytimg.com/vi/{video_id}/default.jpg"},
                "high": {"url": f"https://i.ytimg.com/vi/{video_id}/hqdefault.jpg"},
            },
        },
        "statistics": statistics,
        "contentDetails": {"duration": duration},
    }


def youtube_handler(items_by_id: dict[str, dict[str, Any]]) -> Callable[[httpx.Request], httpx.Response]:
    """MockTransport handler answering known ids and returning no items otherwise."""

    def handler(request: httpx.Request) -> httpx.Response:
        video_id = request.url.params.get("id")
        item = items_by_id.get(video_id)
        return httpx.Response(200, json={"items": [item] if item else []})

    return handler


@pytest.fixture
def settings() -> Settings:
    return get_settings()


@pytest.fixture
async def engine(tmp_path):
    """
    File-backed SQLite engine with BEGIN IMMEDIATE transactions.

    Writers then queue on the database lock instead of failing, which is
    what concurrent approval tests need.
    """
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")

    @event.listens_for(engine.sync_engine, "connect")
    def _disable_driver_begin(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(engine.sync_engine, "begin")
    def _begin_immediate(conn):
        conn.exec_driver_sql("BEGIN IMMEDIATE")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return build_session_factory(engine)


@pytest.fixture
async def session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def dispatcher(transport) -> NotificationDispatcher:
    return NotificationDispatcher(transport)


@pytest.fixture
def make_youtube(settings):
    """Build a YouTubeAdapter backed by an httpx.MockTransport handler."""

    def factory(handler: Callable[[httpx.Request], httpx.Response]) -> YouTubeAdapter:
        client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        return YouTubeAdapter(settings, client=client)

    return factory


@pytest.fixture
def make_account(session):
    """Insert an account directly, bypassing the workflow."""

    async def factory(
        username: str,
        *,
        role: AccountRole = AccountRole.USER,
        status: AccountStatus = AccountStatus.ACTIVE,
        approval_token: Optional[str] = None,
    ) -> Account:
        account = await AccountRepository(session).create(
            username=username,
            email=f"{username}@example.com",
            password_hash=PASSWORD_HASH,
            role=role,
            status=status,
            approval_token=approval_token,
            approved_at=None if role == AccountRole.PENDING else datetime.now(timezone.utc),
        )
        await session.commit()
        return account

    return factory
