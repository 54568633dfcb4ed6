import jwt
import pytest

from acrossmedia.shared.core.exceptions import AuthenticationError, ForbiddenError
from acrossmedia.shared.models import AccountRole, AccountStatus
from acrossmedia.shared.services.auth_service import AuthService

from conftest import PASSWORD


@pytest.fixture
def auth(session, settings) -> AuthService:
    return AuthService(session, settings=settings)


async def test_login_issues_token_with_role(auth, make_account, settings):
    admin = await make_account("admin1", role=AccountRole.ADMIN)

    account, token, expires_in = await auth.login("admin1", PASSWORD)

    payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
    assert account.id == admin.id
    assert payload["account_id"] == str(admin.id)
    assert payload["role"] == "admin"
    assert expires_in == settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60


async def test_login_by_email(auth, make_account):
    await make_account("admin1", role=AccountRole.ADMIN)

    account, _, _ = await auth.login("  ADMIN1@example.com ", PASSWORD)

    assert account.username == "admin1"


@pytest.mark.parametrize("identifier, password", [("admin1", "wrong-password"), ("nobody", PASSWORD)])
async def test_bad_credentials_share_one_message(auth, make_account, identifier, password):
    await make_account("admin1", role=AccountRole.ADMIN)

    with pytest.raises(AuthenticationError) as exc_info:
        await auth.login(identifier, password)

    assert exc_info.value.message == "Invalid username or password"


async def test_pending_account_cannot_log_in(auth, make_account):
    await make_account("waiting", role=AccountRole.PENDING, approval_token="tok-1")

    with pytest.raises(AuthenticationError):
        await auth.login("waiting", PASSWORD)


async def test_suspended_account_is_forbidden(auth, make_account):
    await make_account("plain", status=AccountStatus.SUSPENDED)

    with pytest.raises(ForbiddenError):
        await auth.login("plain", PASSWORD)
