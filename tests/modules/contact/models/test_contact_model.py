from datetime import datetime
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy import Text
from sqlmodel import select

from app.api.modules.contact.models.contact_model import Contact, ContactStatus
from app.api.modules.contact.service.contact_repository import ContactCRUD


def test_contact_defaults():
    contact = Contact(name="A", email="a@b.com", subject="S", message="M")

    assert contact.status == ContactStatus.UNREAD
    assert isinstance(contact.created_at, datetime)
    assert contact.created_at.tzinfo is not None
    assert contact.id is not None


def test_contact_status_values():
    assert [status.value for status in ContactStatus] == ["unread", "read", "replied", "archived"]


@pytest.mark.parametrize("column", ["name", "subject", "message"])
def test_free_text_columns_are_unbounded(column):
    """Any non-empty name, subject or message is storable, whatever its length."""
    column_type = Contact.__table__.c[column].type

    assert isinstance(column_type, Text)
    assert getattr(column_type, "length", None) is None


@pytest.mark.asyncio
async def test_repository_create_and_read_back(test_session):
    contact = await ContactCRUD.create(
        test_session, name="A", email="a@b.com", subject="S", message="M"
    )

    result = await test_session.exec(select(Contact).where(Contact.id == contact.id))
    fetched = result.one()

    assert fetched.subject == "S"
    assert fetched.status == ContactStatus.UNREAD


@pytest.mark.asyncio
async def test_repository_create_needs_no_reload_after_commit():
    """The stored record is returned straight after commit; id and timestamp are set client-side."""
    db = MagicMock()
    db.commit = AsyncMock()
    db.rollback = AsyncMock()
    db.refresh = AsyncMock(side_effect=AssertionError("refresh should not be called"))

    contact = await ContactCRUD.create(db, name="A", email="a@b.com", subject="S", message="M")

    db.commit.assert_awaited_once()
    db.refresh.assert_not_awaited()
    db.rollback.assert_not_awaited()
    assert contact.id is not None
    assert contact.created_at is not None
