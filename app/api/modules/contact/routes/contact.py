import json
import logging

from fastapi import APIRouter, Depends, Request, status
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.core.config import settings
from app.api.core.dependencies.send_mail import MailClient, get_mailer
from app.api.core.exceptions import (
    VALIDATION_FAILED_MESSAGE,
    ContactPersistenceError,
    ContactValidationError,
)
from app.api.db.database import get_db
from app.api.modules.contact.routes.docs.contact_route import (
    contact_responses,
    list_contacts_responses,
)
from app.api.modules.contact.schemas.contact import (
    ContactListResponse,
    ContactResponse,
    ContactSubmission,
)
from app.api.modules.contact.service.contact_service import ContactService
from app.api.utils.response_payloads import error_response, success_response

router = APIRouter(tags=["Contact"])

logger = logging.getLogger("app")

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")
SUCCESS_MESSAGE = "Thank you for your message! I will get back to you soon."
SERVER_ERROR_MESSAGE = "Something went wrong. Please try again later."


async def parse_submission(request: Request) -> ContactSubmission:
    """
    Read a contact submission from a JSON or form-encoded body.

    Raises:
        RequestValidationError: If the body is not an object of string fields.
    """
    content_type = request.headers.get("content-type", "")
    try:
        if content_type.startswith(FORM_CONTENT_TYPES):
            form = await request.form()
            body = {key: value for key, value in form.items() if isinstance(value, str)}
        else:
            body = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        raise RequestValidationError(
            [{"type": "json_invalid", "loc": ("body",), "msg": "Invalid JSON body", "input": None}]
        )

    try:
        return ContactSubmission.model_validate(body)
    except ValidationError as e:
        raise RequestValidationError(
            [{**err, "loc": ("body", *err["loc"])} for err in e.errors(include_url=False)]
        )


def get_contact_service(
    db: AsyncSession = Depends(get_db),
    mailer: MailClient = Depends(get_mailer),
) -> ContactService:
    return ContactService(db, mailer, settings.OPERATOR_EMAIL)


@router.post(
    "/contact",
    response_model=ContactResponse,
    status_code=status.HTTP_201_CREATED,
    responses=contact_responses,
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {
                "application/json": {"schema": ContactSubmission.model_json_schema()},
                "application/x-www-form-urlencoded": {
                    "schema": ContactSubmission.model_json_schema()
                },
            },
        }
    },
)
async def submit_contact(
    submission: ContactSubmission = Depends(parse_submission),
    service: ContactService = Depends(get_contact_service),
):
    """
    Submit the portfolio contact form.

    Stores the message as unread and emails the site operator when mail
    credentials are configured. A failed email never fails the request.

    Returns:
        201 with the stored fields, 400 with field-level errors, or 500 if
        the message could not be stored.
    """
    try:
        data = await service.submit_contact_form(submission)

        return success_response(
            status_code=status.HTTP_201_CREATED,
            message=SUCCESS_MESSAGE,
            data=data.model_dump(),
        )

    except ContactValidationError as e:
        return error_response(
            status_code=status.HTTP_400_BAD_REQUEST,
            message=VALIDATION_FAILED_MESSAGE,
            errors=e.errors,
        )

    except ContactPersistenceError:
        return error_response(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            message=SERVER_ERROR_MESSAGE,
        )

    except Exception as e:
        logger.error("Failed to process contact form: %s", str(e), exc_info=True)
        return error_response(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            message=SERVER_ERROR_MESSAGE,
        )


@router.get(
    "/contacts",
    response_model=ContactListResponse,
    status_code=status.HTTP_200_OK,
    responses=list_contacts_responses,
)
async def list_contacts(service: ContactService = Depends(get_contact_service)):
    """
    List every contact message, newest first.

    Note: this endpoint performs no authentication. Anyone who can reach the
    API can read every submission; put it behind an authenticating proxy
    before exposing it publicly.
    """
    try:
        contacts = await service.list_contacts()

        return success_response(
            status_code=status.HTTP_200_OK,
            data=[contact.model_dump(by_alias=True) for contact in contacts],
        )

    except ContactPersistenceError as e:
        return error_response(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            message=str(e),
        )
