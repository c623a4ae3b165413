import logging
from typing import AsyncIterator, Optional

from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from app.api.core.config import settings

logger = logging.getLogger("app")

Base = SQLModel


class DatabaseClient:
    """
    Owns the async engine and session factory for the contact store.

    The client is created once by the application and opened/closed by the
    lifespan handler; request handlers receive sessions through ``get_db``.
    """

    def __init__(self, url: Optional[str] = None, echo: Optional[bool] = None):
        self.url = url or settings.DATABASE_URL
        self.echo = settings.DEBUG if echo is None else echo
        self.engine: Optional[AsyncEngine] = None
        self.session_factory: Optional[async_sessionmaker] = None

    @property
    def is_connected(self) -> bool:
        return self.engine is not None

    async def connect(self) -> None:
        """Create the engine and make sure the tables exist."""
        if self.engine is not None:
            return

        self.engine = create_async_engine(self.url, echo=self.echo, future=True)
        self.session_factory = async_sessionmaker(
            bind=self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

        logger.info("Database connected: %s", self.engine.url.render_as_string(hide_password=True))

    async def close(self) -> None:
        if self.engine is None:
            return

        await self.engine.dispose()
        self.engine = None
        self.session_factory = None
        logger.info("Database connection closed")

    def session(self) -> AsyncSession:
        if self.session_factory is None:
            raise RuntimeError("Database client is not connected")

        return self.session_factory()


async def get_db(request: Request) -> AsyncIterator[AsyncSession]:
    database: DatabaseClient = request.app.state.database
    async with database.session() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
