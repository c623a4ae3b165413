import pytest
from sqlmodel import select

from app.api.db.database import DatabaseClient
from app.api.modules.contact.models.contact_model import Contact


@pytest.mark.asyncio
async def test_database_write_and_read(database_url):
    """Connecting creates the tables; sessions from the client can write and read."""

    database = DatabaseClient(database_url, echo=False)
    await database.connect()

    async with database.session() as session:
        session.add(Contact(name="John Doe", email="john@example.com", subject="S", message="M"))
        await session.commit()

        result = await session.exec(select(Contact))
        saved = result.first()

    assert saved is not None
    assert saved.name == "John Doe"

    await database.close()
    assert not database.is_connected


@pytest.mark.asyncio
async def test_session_requires_connection(database_url):
    database = DatabaseClient(database_url)

    with pytest.raises(RuntimeError):
        database.session()


@pytest.mark.asyncio
async def test_connect_and_close_are_idempotent(database_url):
    database = DatabaseClient(database_url)

    await database.connect()
    engine = database.engine
    await database.connect()
    assert database.engine is engine

    await database.close()
    await database.close()
    assert database.engine is None
