"""
API Dependencies

FastAPI dependencies for injection into route handlers.

Dependencies:
=============
- Database: get_db(), DbSession, SessionFactory
- Authentication: get_current_account(), CurrentAccount, AdminAccount
- Services: get_*_service() functions and adapter providers

Type Aliases:
=============
Type aliases provide cleaner route signatures:

    # Instead of this:
    async def handler(
        db: AsyncSession = Depends(get_db),
        account: Account = Depends(require_admin)
    ):

    # Write this:
    async def handler(db: DbSession, account: AdminAccount):
"""

from acrossmedia.api.dependencies.database import (
    get_db,
    get_session_factory,
    DbSession,
    SessionFactory,
)
from acrossmedia.api.dependencies.auth import (
    get_token_payload,
    get_current_account,
    require_admin,
    CurrentAccount,
    AdminAccount,
)

__all__ = [
    # Database
    "get_db",
    "get_session_factory",
    "DbSession",
    "SessionFactory",
    # Authentication
    "get_token_payload",
    "get_current_account",
    "require_admin",
    "CurrentAccount",
    "AdminAccount",
]
