import logging
from datetime import datetime, timezone
from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from app.api.core.dependencies.send_mail import MailClient
from app.api.modules.contact.models.contact_model import Contact
from app.api.modules.contact.schemas.contact import (
    ContactData,
    ContactDetail,
    ContactSubmission,
)
from app.api.modules.contact.service.contact_repository import ContactCRUD
from app.api.modules.contact.validators.contact_validator import validate_submission

logger = logging.getLogger("app")

NOTIFICATION_TEMPLATE = "contact_notification.html"


class ContactService:
    """
    Service class to handle contact form logic.

    """

    def __init__(self, db: AsyncSession, mailer: MailClient, operator_email: str):
        """
        Initialize contact service.

        Args:
            db: Request-scoped database session
            mailer: Mail client used for the operator notification
            operator_email: Address that receives new-submission notifications
        """

        self.db = db
        self.mailer = mailer
        self.operator_email = operator_email

    async def submit_contact_form(self, submission: ContactSubmission) -> ContactData:
        """
        Handle contact form submission.

        Validates the submission, stores it as an unread message and then
        tries to notify the operator. The notification runs after the commit
        and its outcome never changes the result.

        Args:
            submission: Raw contact form body

        Returns:
            ContactData: The sanitized fields that were stored

        Raises:
            ContactValidationError: If any field check fails; nothing is stored
            ContactPersistenceError: If the message could not be stored
        """
        data = validate_submission(submission)

        logger.info("Processing contact form submission from email=%s", data.email)

        contact = await ContactCRUD.create(
            db=self.db,
            name=data.name,
            email=data.email,
            subject=data.subject,
            message=data.message,
        )

        await self._notify_operator(contact)

        return data

    async def list_contacts(self) -> List[ContactDetail]:
        """
        Get all stored contact messages ordered by creation time, newest first.

        Raises:
            ContactPersistenceError: If the messages could not be read
        """
        contacts = await ContactCRUD.get_all(self.db)
        return [ContactDetail.model_validate(contact) for contact in contacts]

    async def _notify_operator(self, contact: Contact) -> None:
        """Send the new-submission email; failures are logged and dropped."""
        if not self.mailer.enabled:
            logger.debug("Skipping contact notification for id=%s: mail disabled", contact.id)
            return

        context = {
            "name": contact.name,
            "email": contact.email,
            "subject": contact.subject,
            "message": contact.message,
            "submitted_at": datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S UTC"),
        }

        try:
            sent = await self.mailer.send_email(
                NOTIFICATION_TEMPLATE,
                f"New Contact Form: {contact.subject}",
                self.operator_email,
                context,
            )
        except Exception as e:
            logger.warning(
                "Contact notification failed for id=%s: %s", contact.id, str(e), exc_info=True
            )
            return

        if sent:
            logger.info("Contact notification sent for id=%s", contact.id)
