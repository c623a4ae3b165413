import logging
from typing import Any, Dict, List

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException

from app.api.utils.response_payloads import error_response

logger = logging.getLogger("app")

VALIDATION_FAILED_MESSAGE = "Validation failed"


class ContactValidationError(Exception):
    """
    Raised when a contact submission fails one or more field checks.

    Attributes:
        errors: Field-level failures in check order, each a dict with
            ``field``, ``message``, ``value`` and ``location`` keys.
    """

    def __init__(self, errors: List[Dict[str, Any]]):
        self.errors = errors
        super().__init__(VALIDATION_FAILED_MESSAGE)


class ContactPersistenceError(Exception):
    """Raised when a contact message cannot be written to or read from the store."""

    pass


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """
    Handle request parsing errors and return the contact validation envelope.

    A body that is not an object, or that carries non-string values, is a
    client error like any other failed field check.

    Args:
        request (Request): The incoming HTTP request.
        exc (RequestValidationError): The validation error raised by FastAPI/Pydantic.

    Returns:
        JSONResponse: 400 response containing field-level validation messages.
    """
    errors = []
    for err in exc.errors():
        loc = err.get("loc") or ()
        msg = err["msg"]
        if msg.startswith("Value error,"):
            msg = msg.replace("Value error,", "").strip()
        errors.append(
            {
                "field": str(loc[-1]) if len(loc) > 1 else None,
                "message": msg,
                "value": err.get("input"),
                "location": str(loc[0]) if loc else "body",
            }
        )

    logger.warning("Request validation failed on %s: %s", request.url.path, errors)

    return error_response(
        status_code=status.HTTP_400_BAD_REQUEST,
        message=VALIDATION_FAILED_MESSAGE,
        errors=errors,
    )


async def http_exception_handler(request: Request, exc: HTTPException):
    """
    Handle HTTP exceptions (4xx/5xx) and return a standardized JSON response.

    Args:
        request (Request): The incoming HTTP request.
        exc (HTTPException): The HTTP exception raised by FastAPI.

    Returns:
        JSONResponse: Standardized error response with HTTP status code and message.
    """
    logger.error(f"HTTP exception: {exc.detail} ({exc.status_code})")

    return error_response(status_code=exc.status_code, message=str(exc.detail))


async def general_exception_handler(request: Request, exc: Exception):
    """
    Handle uncaught exceptions and return a standardized JSON response.

    Args:
        request (Request): The incoming HTTP request.
        exc (Exception): The unhandled exception.

    Returns:
        JSONResponse: Standardized 500 error response.
    """
    logger.exception(f"Unhandled exception: {exc}")

    return error_response(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        message="Internal server error",
    )
