import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from app.api.core.exceptions import ContactPersistenceError
from app.api.modules.contact.models.contact_model import Contact, ContactStatus

logger = logging.getLogger("app")


class ContactCRUD:
    """CRUD operations for Contact model."""

    @staticmethod
    async def create(
        db: AsyncSession,
        name: str,
        email: str,
        subject: str,
        message: str,
    ) -> Contact:
        """
        Create and commit a new contact message.

        Args:
            db: Async database session
            name: Sender's name
            email: Sender's normalized email address
            subject: Message subject
            message: Message body

        Returns:
            Contact: The stored contact message

        Raises:
            ContactPersistenceError: If the database operation fails
        """
        try:
            contact = Contact(
                name=name,
                email=email,
                subject=subject,
                message=message,
                status=ContactStatus.UNREAD,
            )

            db.add(contact)
            await db.commit()

            logger.info("Created contact message: id=%s, email=%s", contact.id, contact.email)

            return contact

        except SQLAlchemyError as e:
            await db.rollback()
            logger.error(
                "Failed to create contact message for email=%s: %s",
                email,
                str(e),
                exc_info=True,
            )
            raise ContactPersistenceError("Failed to save contact message") from e

    @staticmethod
    async def get_all(db: AsyncSession) -> list[Contact]:
        """
        Get every contact message, newest first.

        Raises:
            ContactPersistenceError: If the query fails
        """
        try:
            result = await db.execute(select(Contact).order_by(Contact.created_at.desc()))
            contacts = list(result.scalars().all())

            logger.info("Retrieved %d contact messages", len(contacts))

            return contacts

        except SQLAlchemyError as e:
            logger.error("Failed to retrieve contact messages: %s", str(e), exc_info=True)
            raise ContactPersistenceError("Failed to retrieve contact messages") from e
