"""
Contact Handler

    POST /api/contact/submit   → store the message and email every admin
"""

from fastapi import APIRouter, Depends

from acrossmedia.api.dependencies.services import get_contact_service
from acrossmedia.shared.schemas.contact import (
    ContactRequest,
    ContactResponse,
    ContactSubmissionResponse,
)
from acrossmedia.shared.services.contact_service import ContactService


router = APIRouter()


@router.post("/submit", response_model=ContactResponse)
async def submit_contact_form(
    data: ContactRequest,
    service: ContactService = Depends(get_contact_service),
):
    """
    Raises:
        400: Field validation failed
        503: No admin is available to receive the message
    """
    submission = await service.submit(
        name=data.name,
        email=data.email,
        subject=data.subject,
        message=data.message,
    )
    return ContactResponse(
        message="Your message has been sent successfully! We will get back to you soon.",
        submission=ContactSubmissionResponse.model_validate(submission),
    )
