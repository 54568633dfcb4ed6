"""HTTP-level tests through the FastAPI application."""

import asyncio
from datetime import datetime, timezone
import re

import httpx
import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import NullPool

from acrossmedia.api.dependencies.database import get_db, get_session_factory
from acrossmedia.api.dependencies.services import get_email_transport, get_youtube_adapter
from acrossmedia.api.main import app
from acrossmedia.shared.adapters.youtube_adapter import YouTubeAdapter
from acrossmedia.shared.db.session import build_session_factory
from acrossmedia.shared.models import AccountRole, AccountStatus, Base, ContentStatus
from acrossmedia.shared.repositories.account_repository import AccountRepository
from acrossmedia.shared.repositories.content_repository import (
    ProjectRepository,
    VideoRepository,
)

from conftest import PASSWORD, PASSWORD_HASH, FakeTransport, youtube_handler, youtube_item

APPROVAL_LINK = re.compile(r"http://api\.test/api/auth/approve/([A-Za-z0-9_-]+)")


@pytest.fixture
def api_session_factory(tmp_path):
    # TestClient runs each request on its own event loop, so connections
    # must never outlive a request
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'api.db'}", poolclass=NullPool)

    async def create_tables():
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    asyncio.run(create_tables())
    yield build_session_factory(engine)
    asyncio.run(engine.dispose())


@pytest.fixture
def seed(api_session_factory):
    """Run an async callable against a fresh committed session."""

    def run(callback):
        async def _run():
            async with api_session_factory() as session:
                result = await callback(session)
                await session.commit()
                return result

        return asyncio.run(_run())

    return run


@pytest.fixture
def mail() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def client(api_session_factory, mail, settings):
    async def override_get_db():
        async with api_session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    handler = youtube_handler({"i0hQSDmj62I": youtube_item("i0hQSDmj62I", view_count="15230")})

    def override_youtube():
        return YouTubeAdapter(settings, client=httpx.AsyncClient(transport=httpx.MockTransport(handler)))

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_session_factory] = lambda: api_session_factory
    app.dependency_overrides[get_email_transport] = lambda: mail
    app.dependency_overrides[get_youtube_adapter] = override_youtube

    yield TestClient(app)

    app.dependency_overrides.clear()


def _create_account(seed, username: str, role: AccountRole = AccountRole.ADMIN) -> None:
    async def create(session):
        await AccountRepository(session).create(
            username=username,
            email=f"{username}@example.com",
            password_hash=PASSWORD_HASH,
            role=role,
            status=AccountStatus.ACTIVE,
            approved_at=datetime.now(timezone.utc),
        )

    seed(create)


def _login(client, identifier: str) -> dict[str, str]:
    response = client.post("/api/auth/admin/login", json={"identifier": identifier, "password": PASSWORD})
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


# ═══════════════════════════════════════════════════════════════════════════════
# HEALTH
# ═══════════════════════════════════════════════════════════════════════════════


def test_health_endpoints(client):
    health = client.get("/health")
    assert health.status_code == 200
    assert health.json()["status"] == "healthy"

    assert client.get("/ready").json() == {"status": "ready"}
    assert client.get("/live").json() == {"status": "alive"}


def test_request_id_header_is_echoed(client):
    response = client.get("/live", headers={"X-Request-ID": "req-123"})

    assert response.headers["X-Request-ID"] == "req-123"


# ═══════════════════════════════════════════════════════════════════════════════
# ACCOUNT LIFECYCLE
# ═══════════════════════════════════════════════════════════════════════════════


def test_register_approve_login(client, seed, mail):
    _create_account(seed, "admin1")

    registered = client.post(
        "/api/auth/register",
        json={"username": "alice", "email": "alice@example.com", "password": PASSWORD},
    )
    assert registered.status_code == 201
    assert registered.json()["account"]["role"] == "pending"
    assert "approval_token" not in registered.json()["account"]

    pending_login = client.post("/api/auth/admin/login", json={"identifier": "alice", "password": PASSWORD})
    assert pending_login.status_code == 401

    assert mail.recipients() == ["admin1@example.com"]
    token = APPROVAL_LINK.search(mail.sent[0]["html"]).group(1)

    approved = client.get(f"/api/auth/approve/{token}")
    assert approved.status_code == 200
    assert approved.json()["account"]["role"] == "user"
    assert mail.recipients()[-1] == "alice@example.com"

    again = client.get(f"/api/auth/approve/{token}")
    assert again.status_code == 404
    assert again.json()["error"]["message"] == "Approval link is invalid or has expired"

    headers = _login(client, "alice")
    me = client.get("/api/auth/admin/me", headers=headers)
    assert me.json()["username"] == "alice"

    # Plain users can log in but not reach admin routes
    assert client.get("/api/users", headers=headers).status_code == 403


def test_register_validation_errors_are_field_mapped(client):
    response = client.post(
        "/api/auth/register",
        json={"username": "a!", "email": "nope", "password": "short"},
    )

    assert response.status_code == 400
    body = response.json()["error"]
    assert body["code"] == "VALIDATION_ERROR"
    assert set(body["details"]["fields"]) == {"username", "email", "password"}


def test_admin_routes_require_token(client):
    assert client.get("/api/users").status_code == 401
    assert client.get("/api/admin/dashboard").status_code == 401
    assert client.get("/api/users", headers={"Authorization": "Bearer not-a-jwt"}).status_code == 401


def test_user_management(client, seed):
    _create_account(seed, "admin1")
    _create_account(seed, "root", role=AccountRole.SUPERADMIN)
    _create_account(seed, "bob", role=AccountRole.USER)
    headers = _login(client, "admin1")

    listing = client.get("/api/users", params={"search": "bo"}, headers=headers).json()
    assert [account["username"] for account in listing["data"]] == ["bob"]
    assert listing["pagination"]["total"] == 1
    bob_id = listing["data"][0]["id"]

    root_id = client.get("/api/users", params={"role": "superadmin"}, headers=headers).json()["data"][0]["id"]

    promoted = client.patch(f"/api/users/{bob_id}/role", json={"role": "admin"}, headers=headers)
    assert promoted.json()["role"] == "admin"

    escalate = client.patch(f"/api/users/{bob_id}/role", json={"role": "superadmin"}, headers=headers)
    assert escalate.status_code == 403

    suspended = client.patch(f"/api/users/{bob_id}/status", json={"status": "suspended"}, headers=headers)
    assert suspended.json()["status"] == "suspended"

    assert client.delete(f"/api/users/{root_id}", headers=headers).status_code == 403
    assert client.patch(f"/api/users/{root_id}/status", json={"status": "inactive"}, headers=headers).status_code == 403

    assert client.delete(f"/api/users/{bob_id}", headers=headers).status_code == 200
    assert client.get(f"/api/users/{bob_id}", headers=headers).status_code == 404


# ═══════════════════════════════════════════════════════════════════════════════
# CONTENT & GALLERY
# ═══════════════════════════════════════════════════════════════════════════════


def test_gallery_merges_projects_and_enriched_videos(client, seed, api_session_factory):
    async def create_content(session):
        await ProjectRepository(session).create(
            title="Summer Campaign",
            description="Sponsorship activation",
            category="Sponsorships",
            image_url="https://cdn.example.com/summer.jpg",
            status=ContentStatus.PUBLISHED,
        )
        video = await VideoRepository(session).create(
            title="Launch Film",
            description="Sixty seconds",
            category="Branded Content",
            url="https://youtube.com/shorts/i0hQSDmj62I",
            status=ContentStatus.ACTIVE,
        )
        return video.id

    video_id = seed(create_content)

    response = client.get("/api/gallery", params={"type": "video"})
    assert response.status_code == 200
    body = response.json()
    assert body["total_count"] == 1
    assert body["total_pages"] == 1
    item = body["items"][0]
    assert item["type"] == "video"
    assert item["views_display"] == "15.2K"
    assert item["channel_title"] == "Live Channel"

    everything = client.get("/api/gallery", params={"category": "Sponsorships"}).json()
    assert [item["title"] for item in everything["items"]] == ["Summer Campaign"]

    async def stored_views(session):
        return (await VideoRepository(session).get(video_id)).views

    assert seed(stored_views) == "15230"


def test_gallery_rejects_unknown_type(client):
    response = client.get("/api/gallery", params={"type": "podcast"})

    assert response.status_code == 400
    assert "type" in response.json()["error"]["details"]["fields"]


def test_video_admin_crud(client, seed):
    _create_account(seed, "admin1")
    headers = _login(client, "admin1")

    created = client.post(
        "/api/videos",
        json={
            "title": "Launch Film",
            "description": "Sixty seconds",
            "category": "Branded Content",
            "url": "https://www.youtube.com/watch?v=i0hQSDmj62I",
        },
        headers=headers,
    )
    assert created.status_code == 201
    video = created.json()
    assert video["views"] == "15230"

    assert client.get(f"/api/videos/{video['id']}").status_code == 200

    hidden = client.put(f"/api/videos/{video['id']}", json={"status": "inactive"}, headers=headers)
    assert hidden.json()["status"] == "inactive"
    assert client.get(f"/api/videos/{video['id']}").status_code == 404

    bad_url = client.post(
        "/api/videos",
        json={"title": "Elsewhere", "category": "Branded Content", "url": "https://vimeo.com/1"},
        headers=headers,
    )
    assert bad_url.status_code == 400

    assert client.delete(f"/api/videos/{video['id']}", headers=headers).status_code == 200


def test_youtube_lookup(client):
    response = client.get("/api/youtube/video/i0hQSDmj62I")

    assert response.status_code == 200
    assert response.json()["views_display"] == "15.2K"
    assert client.get("/api/youtube/video/zzzzzzzzzzz").status_code == 404
    assert client.get("/api/youtube/video/short").status_code == 400


# ═══════════════════════════════════════════════════════════════════════════════
# CONTACT & DASHBOARD
# ═══════════════════════════════════════════════════════════════════════════════


def test_contact_submission(client, seed, mail):
    _create_account(seed, "admin1")

    response = client.post(
        "/api/contact/submit",
        json={
            "name": "Jane Doe",
            "email": "jane@example.com",
            "subject": "Partnership",
            "message": "We would like to collaborate on a campaign.",
        },
    )

    assert response.status_code == 200
    assert mail.recipients() == ["admin1@example.com"]


def test_contact_validation(client):
    response = client.post(
        "/api/contact/submit",
        json={"name": "J4ne", "email": "jane@example.com", "subject": "Hi", "message": "Too short"},
    )

    assert response.status_code == 400
    assert set(response.json()["error"]["details"]["fields"]) == {"name", "subject", "message"}


def test_contact_without_admins_is_unavailable(client):
    response = client.post(
        "/api/contact/submit",
        json={
            "name": "Jane Doe",
            "email": "jane@example.com",
            "subject": "Partnership",
            "message": "We would like to collaborate on a campaign.",
        },
    )

    assert response.status_code == 503


def test_dashboard(client, seed):
    _create_account(seed, "admin1")
    headers = _login(client, "admin1")

    stats = client.get("/api/admin/dashboard", headers=headers).json()

    assert stats["total_accounts"] == 1
    assert stats["accounts_by_role"]["admin"] == 1
    assert stats["pending_approvals"] == 0
