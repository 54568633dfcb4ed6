"""
Contact Submission Model

A message sent through the public contact form. Stored so that a
failed notification never loses the enquiry.
"""

import uuid

from sqlalchemy import String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from acrossmedia.shared.models.base import Base, TimestampMixin


class ContactSubmission(Base, TimestampMixin):
    """Contact form submission."""

    __tablename__ = "contact_submissions"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    subject: Mapped[str] = mapped_column(String(200), nullable=False)
    message: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:
        return f"<ContactSubmission(id={self.id}, email={self.email})>"
