from unittest.mock import AsyncMock, MagicMock

import pytest

from app.api.core.dependencies.send_mail import MailClient
from app.api.core.exceptions import ContactValidationError
from app.api.modules.contact.models.contact_model import Contact, ContactStatus
from app.api.modules.contact.schemas.contact import ContactSubmission
from app.api.modules.contact.service.contact_service import ContactService


def _mock_db():
    db = MagicMock()
    db.commit = AsyncMock()
    db.rollback = AsyncMock()
    return db


def _mailer(enabled=True):
    mailer = MagicMock(spec=MailClient)
    mailer.enabled = enabled
    mailer.send_email = AsyncMock(return_value=True)
    return mailer


def _submission():
    return ContactSubmission(
        name="Jane Doe",
        email="jane@example.com",
        subject="Project inquiry",
        message="Hello, are you available?",
    )


@pytest.mark.asyncio
async def test_submit_contact_form_success():
    db = _mock_db()
    mailer = _mailer()
    service = ContactService(db=db, mailer=mailer, operator_email="owner@example.com")

    result = await service.submit_contact_form(_submission())

    assert result.email == "jane@example.com"
    stored = db.add.call_args.args[0]
    assert isinstance(stored, Contact)
    assert stored.status == ContactStatus.UNREAD
    db.commit.assert_awaited_once()
    mailer.send_email.assert_awaited_once()
    assert mailer.send_email.await_args.args[2] == "owner@example.com"


@pytest.mark.asyncio
async def test_notification_runs_after_commit():
    calls = []
    db = _mock_db()
    db.commit.side_effect = lambda: calls.append("commit")
    mailer = _mailer()
    mailer.send_email.side_effect = lambda *args: calls.append("send") or True

    service = ContactService(db=db, mailer=mailer, operator_email="owner@example.com")
    await service.submit_contact_form(_submission())

    assert calls == ["commit", "send"]


@pytest.mark.asyncio
async def test_submit_contact_form_email_error_is_swallowed():
    db = _mock_db()
    mailer = _mailer()
    mailer.send_email.side_effect = RuntimeError("Email service down")
    service = ContactService(db=db, mailer=mailer, operator_email="owner@example.com")

    result = await service.submit_contact_form(_submission())

    assert result.name == "Jane Doe"
    db.commit.assert_awaited_once()
    db.rollback.assert_not_awaited()


@pytest.mark.asyncio
async def test_submit_contact_form_skips_disabled_mailer():
    db = _mock_db()
    mailer = _mailer(enabled=False)
    service = ContactService(db=db, mailer=mailer, operator_email="")

    await service.submit_contact_form(_submission())

    db.commit.assert_awaited_once()
    mailer.send_email.assert_not_awaited()


@pytest.mark.asyncio
async def test_submit_contact_form_invalid_stores_nothing():
    db = _mock_db()
    mailer = _mailer()
    service = ContactService(db=db, mailer=mailer, operator_email="owner@example.com")

    with pytest.raises(ContactValidationError):
        await service.submit_contact_form(
            ContactSubmission(name="", email="x", subject="", message="")
        )

    db.add.assert_not_called()
    db.commit.assert_not_awaited()
    mailer.send_email.assert_not_awaited()
