import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api import router as api_router
from app.api.core.config import settings
from app.api.core.dependencies.send_mail import MailClient
from app.api.core.exceptions import (
    general_exception_handler,
    http_exception_handler,
    validation_exception_handler,
)
from app.api.core.logger import setup_logging
from app.api.db.database import DatabaseClient
from app.api.utils.response_payloads import success_response

setup_logging()
logger = logging.getLogger("app")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the storage and mail clients on startup and close them on shutdown.

    Args:
        app (FastAPI): FastAPI application instance supplied by the framework.

    Returns:
        AsyncIterator[None]: Asynchronous context manager controlling startup/shutdown.

    Examples:
        >>> async with lifespan(app):
        ...     yield
    """

    database: DatabaseClient = app.state.database
    mailer: MailClient = app.state.mailer

    await database.connect()
    await mailer.start()
    logger.info(f"Server running on port {settings.PORT}; contact endpoint at /api/contact")

    try:
        yield
    finally:
        await mailer.close()
        await database.close()


def create_app(
    database: Optional[DatabaseClient] = None,
    mailer: Optional[MailClient] = None,
) -> FastAPI:
    """Build the API with its storage and mail clients attached to ``app.state``."""

    app = FastAPI(
        title=f"{settings.APP_NAME} API",
        description=f"{settings.APP_NAME} contact form API",
        version=settings.APP_VERSION,
        docs_url="/docs",
        redoc_url="/redoc" if settings.DEBUG else None,
        lifespan=lifespan,
    )

    app.state.database = database if database is not None else DatabaseClient()
    app.state.mailer = mailer if mailer is not None else MailClient()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.FRONTEND_URL],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    app.include_router(api_router)

    @app.get("/")
    def read_root():
        return {"message": f"{settings.APP_NAME} API is running"}

    @app.get("/health")
    def health_check():
        return success_response(status_code=200, message="API is healthy")

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run("main:app", host="0.0.0.0", port=settings.PORT, reload=False)
