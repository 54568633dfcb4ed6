import pytest
from sqlalchemy.exc import OperationalError

from acrossmedia.shared.core.exceptions import StorageError, ValidationError
from acrossmedia.shared.models import AccountRole, AccountStatus
from acrossmedia.shared.repositories.account_repository import AccountRepository

from conftest import PASSWORD_HASH


async def test_find_by_role_in_returns_only_requested_roles(session, make_account):
    await make_account("admin1", role=AccountRole.ADMIN)
    await make_account("root", role=AccountRole.SUPERADMIN)
    await make_account("plain", role=AccountRole.USER)
    await make_account("waiting", role=AccountRole.PENDING, approval_token="tok-1")

    approvers = await AccountRepository(session).find_by_role_in([AccountRole.ADMIN, AccountRole.SUPERADMIN])

    assert sorted(account.username for account in approvers) == ["admin1", "root"]


async def test_find_by_token(session, make_account):
    await make_account("waiting", role=AccountRole.PENDING, approval_token="tok-1")
    repo = AccountRepository(session)

    assert (await repo.find_by_token("tok-1")).username == "waiting"
    assert await repo.find_by_token("tok-unknown") is None


async def test_consume_approval_token_promotes_pending_account(session, make_account):
    await make_account("waiting", role=AccountRole.PENDING, approval_token="tok-1")
    repo = AccountRepository(session)

    account = await repo.consume_approval_token("tok-1")

    assert account.role == AccountRole.USER
    assert account.status == AccountStatus.ACTIVE
    assert account.approval_token is None
    assert account.approved_at is not None
    assert await repo.consume_approval_token("tok-1") is None


async def test_consume_approval_token_ignores_non_pending_accounts(session, make_account):
    # A stale token on an already-approved row must not re-approve it
    await make_account("odd", role=AccountRole.ADMIN, approval_token="tok-stale")

    assert await AccountRepository(session).consume_approval_token("tok-stale") is None


async def test_get_by_email_is_case_insensitive(session, make_account):
    await make_account("alice")

    account = await AccountRepository(session).get_by_email("Alice@Example.COM")

    assert account.username == "alice"


async def test_get_by_login_accepts_username_or_email(session, make_account):
    await make_account("alice")
    repo = AccountRepository(session)

    assert (await repo.get_by_login("alice")).username == "alice"
    assert (await repo.get_by_login("ALICE@example.com")).username == "alice"


async def test_duplicate_username_is_validation_error(session, make_account):
    await make_account("alice")

    with pytest.raises(ValidationError):
        await AccountRepository(session).create(
            username="alice",
            email="other@example.com",
            password_hash=PASSWORD_HASH,
        )


async def test_search_filters_and_counts(session, make_account):
    await make_account("alice", role=AccountRole.ADMIN)
    await make_account("albert", role=AccountRole.USER, status=AccountStatus.SUSPENDED)
    await make_account("bob", role=AccountRole.USER)
    repo = AccountRepository(session)

    assert {a.username for a in await repo.search(search_term="AL")} == {"alice", "albert"}
    assert [a.username for a in await repo.search(role=AccountRole.USER, status=AccountStatus.SUSPENDED)] == ["albert"]
    assert await repo.count_search(search_term="al") == 2
    assert await repo.count_search(role=AccountRole.USER) == 2

    page = await repo.search(offset=0, limit=2)
    assert len(page) == 2


async def test_count_by_role_reports_every_role(session, make_account):
    await make_account("admin1", role=AccountRole.ADMIN)
    await make_account("waiting", role=AccountRole.PENDING, approval_token="tok-1")

    counts = await AccountRepository(session).count_by_role()

    assert counts == {
        AccountRole.PENDING: 1,
        AccountRole.USER: 0,
        AccountRole.ADMIN: 1,
        AccountRole.SUPERADMIN: 0,
    }


async def _dropped_connection_refresh(instance, *args, **kwargs):
    raise OperationalError("SELECT accounts", {}, Exception("disk I/O error"))


async def test_create_refresh_failure_is_storage_error(session, monkeypatch):
    monkeypatch.setattr(session, "refresh", _dropped_connection_refresh)

    with pytest.raises(StorageError):
        await AccountRepository(session).create(
            username="alice",
            email="alice@example.com",
            password_hash=PASSWORD_HASH,
        )


async def test_update_refresh_failure_is_storage_error(session, make_account, monkeypatch):
    account = await make_account("alice")

    monkeypatch.setattr(session, "refresh", _dropped_connection_refresh)

    with pytest.raises(StorageError):
        await AccountRepository(session).update(account.id, role=AccountRole.ADMIN)
