"""
ContactSubmission Repository

Stores messages from the public contact form.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from acrossmedia.shared.models.contact_submission import ContactSubmission
from acrossmedia.shared.repositories.base import BaseRepository


class ContactSubmissionRepository(BaseRepository[ContactSubmission]):
    """Repository for ContactSubmission database operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(ContactSubmission, session)
