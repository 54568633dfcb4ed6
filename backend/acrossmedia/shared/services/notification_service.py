"""
Notification Service

Best-effort transactional email.

    Workflow ──send()──► NotificationDispatcher ──render──► EmailTransport
                              │
                              └── failure → NotificationError → logged here,
                                  returned as DeliveryResult(delivered=False)

send() never raises. The operations that trigger notifications have
already committed by the time they call it, so a delivery failure is
reported in the logs and otherwise ignored.

Templates:
==========
    approval_request    → admins, when an account registers
    approval_granted    → the account, once approved
    contact_submission  → admins, for each contact form message
"""

import asyncio
from dataclasses import dataclass
from enum import Enum
from html import escape
from typing import Any, Callable, Iterable, Optional

from acrossmedia.shared.adapters.email_adapter import EmailTransport
from acrossmedia.shared.core.exceptions import NotificationError
from acrossmedia.shared.core.logging import get_logger

logger = get_logger("notifications")


class NotificationTemplate(str, Enum):
    """Kinds of email the application sends."""

    APPROVAL_REQUEST = "approval_request"
    APPROVAL_GRANTED = "approval_granted"
    CONTACT_SUBMISSION = "contact_submission"


@dataclass
class DeliveryResult:
    """Outcome of one delivery attempt."""

    recipient: str
    template: NotificationTemplate
    delivered: bool
    error: Optional[str] = None


@dataclass
class RenderedEmail:
    subject: str
    html_body: str


# ═══════════════════════════════════════════════════════════════════════════════
# TEMPLATES
# ═══════════════════════════════════════════════════════════════════════════════

_LAYOUT = """<!DOCTYPE html>
<html lang="en">
<head><meta charset="UTF-8"><title>{title}</title></head>
<body style="font-family: Arial, sans-serif; background-color: #f4f4f4; padding: 20px;">
  <div style="max-width: 600px; margin: 0 auto; background: #ffffff; padding: 20px; border-radius: 8px;">
    <h2>{title}</h2>
    {content}
    <p style="margin-top: 20px; color: #777; font-size: 12px;">
      This email was sent from AcrossMedia Admin Portal. Please do not reply to this email.
    </p>
  </div>
</body>
</html>"""


def _render_approval_request(data: dict[str, Any]) -> RenderedEmail:
    link = escape(data["approval_link"])
    content = (
        "<p>Dear Admin,</p>"
        "<p>A new account has registered and is awaiting approval.</p>"
        "<ul>"
        f"<li><strong>Username:</strong> {escape(data['username'])}</li>"
        f"<li><strong>Email:</strong> {escape(data['email'])}</li>"
        f"<li><strong>Registration Date:</strong> {escape(str(data['registered_at']))}</li>"
        "</ul>"
        f'<p><a href="{link}">Review &amp; Approve</a></p>'
        f"<p>If the link above doesn't work, copy this URL into your browser: {link}</p>"
    )
    title = "New Admin Registration - Approval Required"
    return RenderedEmail(subject=title, html_body=_LAYOUT.format(title=title, content=content))


def _render_approval_granted(data: dict[str, Any]) -> RenderedEmail:
    content = (
        f"<p>Dear {escape(data['username'])},</p>"
        "<p>Your account has been approved. You can now log in.</p>"
        f'<p><a href="{escape(data["login_link"])}">Login to Admin Portal</a></p>'
    )
    return RenderedEmail(
        subject="AcrossMedia Admin Account Approved",
        html_body=_LAYOUT.format(title="Account Approved", content=content),
    )


def _render_contact_submission(data: dict[str, Any]) -> RenderedEmail:
    content = (
        "<ul>"
        f"<li><strong>Name:</strong> {escape(data['name'])}</li>"
        f"<li><strong>Email:</strong> {escape(data['email'])}</li>"
        f"<li><strong>Subject:</strong> {escape(data['subject'])}</li>"
        "</ul>"
        f"<p>{escape(data['message'])}</p>"
    )
    return RenderedEmail(
        subject=f"New Contact Form Submission: {data['subject']}",
        html_body=_LAYOUT.format(title="New Contact Form Submission", content=content),
    )


_RENDERERS: dict[NotificationTemplate, Callable[[dict[str, Any]], RenderedEmail]] = {
    NotificationTemplate.APPROVAL_REQUEST: _render_approval_request,
    NotificationTemplate.APPROVAL_GRANTED: _render_approval_granted,
    NotificationTemplate.CONTACT_SUBMISSION: _render_contact_submission,
}


def render(template: NotificationTemplate, data: dict[str, Any]) -> RenderedEmail:
    """Render subject and HTML body for a template."""
    return _RENDERERS[template](data)


# ═══════════════════════════════════════════════════════════════════════════════
# DISPATCHER
# ═══════════════════════════════════════════════════════════════════════════════


class NotificationDispatcher:
    """
    Renders and delivers notifications through an EmailTransport.

    Attributes:
        transport: The email transport (SMTP in production)
    """

    def __init__(self, transport: EmailTransport) -> None:
        self.transport = transport

    async def send(
        self,
        to_address: str,
        template: NotificationTemplate,
        template_data: dict[str, Any],
    ) -> DeliveryResult:
        """
        Deliver one notification.

        Never raises for delivery problems; failures are logged and
        returned as DeliveryResult(delivered=False).
        """
        try:
            email = render(template, template_data)
            await self.transport.deliver(to_address, email.subject, email.html_body)
        except NotificationError as e:
            logger.error(
                "Notification delivery failed",
                recipient=to_address,
                template=template.value,
                error=e.message,
            )
            return DeliveryResult(to_address, template, delivered=False, error=e.message)
        except Exception as e:
            logger.error(
                "Notification delivery failed unexpectedly",
                recipient=to_address,
                template=template.value,
                error=str(e),
                exc_info=True,
            )
            return DeliveryResult(to_address, template, delivered=False, error=str(e))

        logger.info("Notification delivered", recipient=to_address, template=template.value)
        return DeliveryResult(to_address, template, delivered=True)

    async def send_many(
        self,
        to_addresses: Iterable[str],
        template: NotificationTemplate,
        template_data: dict[str, Any],
    ) -> list[DeliveryResult]:
        """Deliver the same notification to several recipients concurrently."""
        results = await asyncio.gather(
            *(self.send(address, template, template_data) for address in to_addresses)
        )
        failed = [result.recipient for result in results if not result.delivered]
        if failed:
            logger.warning(
                "Some notifications were not delivered",
                template=template.value,
                failed=failed,
                total=len(results),
            )
        return list(results)
