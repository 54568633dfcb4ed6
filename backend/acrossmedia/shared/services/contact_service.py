"""
Contact Service

Public contact form: store the message, then email every admin.

The submission is committed before any email goes out, so an SMTP
outage never loses an enquiry. With no admin to notify the form is
refused outright.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from acrossmedia.shared.core.exceptions import ServiceUnavailableError
from acrossmedia.shared.core.logging import get_logger
from acrossmedia.shared.models.contact_submission import ContactSubmission
from acrossmedia.shared.models.enums import ADMIN_ROLES
from acrossmedia.shared.repositories.account_repository import AccountRepository
from acrossmedia.shared.repositories.contact_repository import ContactSubmissionRepository
from acrossmedia.shared.services.notification_service import (
    NotificationDispatcher,
    NotificationTemplate,
)

logger = get_logger("contact")


class ContactService:
    """Service for contact form submissions."""

    def __init__(self, session: AsyncSession, *, dispatcher: NotificationDispatcher) -> None:
        self.session = session
        self.account_repo = AccountRepository(session)
        self.repo = ContactSubmissionRepository(session)
        self.dispatcher = dispatcher

    async def submit(
        self,
        *,
        name: str,
        email: str,
        subject: str,
        message: str,
    ) -> ContactSubmission:
        """
        Store a contact message and notify admins.

        Raises:
            ServiceUnavailableError: No admin or superadmin exists
            StorageError: Persistence failure
        """
        admins = await self.account_repo.find_by_role_in(sorted(ADMIN_ROLES))
        if not admins:
            logger.error("No admins found to receive contact submission")
            raise ServiceUnavailableError("Unable to process your request at this time")

        submission = await self.repo.create(
            name=name,
            email=email.lower(),
            subject=subject,
            message=message,
        )
        await self.repo.commit()
        logger.info("Contact submission stored", submission_id=str(submission.id))

        await self.dispatcher.send_many(
            [admin.email for admin in admins],
            NotificationTemplate.CONTACT_SUBMISSION,
            {
                "name": submission.name,
                "email": submission.email,
                "subject": submission.subject,
                "message": submission.message,
            },
        )
        return submission
