from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from app.api.core.dependencies.send_mail import MailClient, get_mailer
from app.api.db.database import get_db

# Import models to ensure they are registered with SQLAlchemy before creating tables
from app.api.modules.contact.models.contact_model import Contact  # noqa: F401


@pytest.fixture
def database_url(tmp_path):
    return f"sqlite+aiosqlite:///{tmp_path / 'test.db'}"


@pytest_asyncio.fixture
async def test_session(database_url):
    """Provide a session on a fresh SQLite database with the contact table created."""

    engine = create_async_engine(database_url, echo=False)
    async_session_maker = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    async with async_session_maker() as session:
        yield session

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
def mock_mailer():
    """Enabled mail client whose send is recorded instead of delivered."""
    mailer = MagicMock(spec=MailClient)
    mailer.enabled = True
    mailer.send_email = AsyncMock(return_value=True)
    return mailer


@pytest.fixture
def app(test_session, mock_mailer):
    """Application with test DB and mail dependency overrides."""
    from main import create_app

    app = create_app(mailer=mock_mailer)

    async def override_get_db():
        yield test_session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_mailer] = lambda: mock_mailer

    return app


@pytest.fixture
def valid_payload():
    return {"name": "A", "email": "a@b.com", "subject": "S", "message": "M"}
