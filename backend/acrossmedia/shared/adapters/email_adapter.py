"""
Email adapter - SMTP transport.

Provides:
- Delivery of one rendered HTML message over SMTP (STARTTLS optional)

smtplib is blocking, so each send runs in a worker thread via
asyncio.to_thread and never stalls the event loop.

Errors are raised as NotificationError; the notification dispatcher is
the only caller and it logs and swallows them.
"""

import asyncio
from email.message import EmailMessage
import smtplib
from typing import Protocol

from acrossmedia.config.settings import Settings
from acrossmedia.shared.core.exceptions import NotificationError
from acrossmedia.shared.core.logging import get_logger

logger = get_logger("email")


class EmailTransport(Protocol):
    """Anything that can deliver one rendered message."""

    async def deliver(self, to_address: str, subject: str, html_body: str) -> None:
        ...


class SMTPEmailAdapter:
    """
    SMTP implementation of EmailTransport.

    When EMAIL_ENABLED is false, messages are logged and dropped so local
    development needs no mail server.
    """

    def __init__(self, settings: Settings) -> None:
        self.enabled = settings.EMAIL_ENABLED
        self.host = settings.EMAIL_HOST
        self.port = settings.EMAIL_PORT
        self.use_tls = settings.EMAIL_USE_TLS
        self.username = settings.EMAIL_USER
        self.password = settings.EMAIL_PASSWORD
        self.sender = settings.email_sender
        self.timeout = settings.EMAIL_TIMEOUT_SECONDS

    def _build_message(self, to_address: str, subject: str, html_body: str) -> EmailMessage:
        message = EmailMessage()
        message["From"] = self.sender
        message["To"] = to_address
        message["Subject"] = subject
        message.set_content("This message requires an HTML-capable email client.")
        message.add_alternative(html_body, subtype="html")
        return message

    def _send_blocking(self, message: EmailMessage) -> None:
        with smtplib.SMTP(self.host, self.port, timeout=self.timeout) as smtp:
            if self.use_tls:
                smtp.starttls()
            if self.username:
                smtp.login(self.username, self.password)
            smtp.send_message(message)

    async def deliver(self, to_address: str, subject: str, html_body: str) -> None:
        """
        Send one message.

        Raises:
            NotificationError: On any SMTP or socket failure
        """
        if not self.enabled:
            logger.info("Email delivery disabled, skipping", to=to_address, subject=subject)
            return

        message = self._build_message(to_address, subject, html_body)
        try:
            await asyncio.to_thread(self._send_blocking, message)
        except (smtplib.SMTPException, OSError) as e:
            raise NotificationError(to_address, message=f"SMTP delivery failed: {e}") from e

        logger.info("Email sent", to=to_address, subject=subject)
