"""Field-level checks for contact form submissions.

Checks run in a fixed order and every failure is collected, so the caller
gets the full list of problems in one response.
"""

import logging
from dataclasses import asdict, dataclass
from typing import Any, Callable, Dict, List, Optional

from email_validator import EmailNotValidError, validate_email

from app.api.core.exceptions import ContactValidationError
from app.api.modules.contact.schemas.contact import ContactData, ContactSubmission

logger = logging.getLogger("app")


@dataclass(frozen=True)
class FieldError:
    field: str
    message: str
    value: Any
    location: str = "body"


@dataclass(frozen=True)
class FieldCheck:
    field: str
    predicate: Callable[[Optional[str]], bool]
    message: str


def is_not_blank(value: Optional[str]) -> bool:
    return value is not None and bool(value.strip())


def is_valid_email(value: Optional[str]) -> bool:
    if value is None:
        return False
    try:
        validate_email(value.strip(), check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def normalize_email(value: str) -> str:
    """Return the normalized form of an address that already passed ``is_valid_email``."""
    return validate_email(value.strip(), check_deliverability=False).normalized


CONTACT_CHECKS: List[FieldCheck] = [
    FieldCheck("name", is_not_blank, "Name is required"),
    FieldCheck("email", is_valid_email, "Please provide a valid email"),
    FieldCheck("subject", is_not_blank, "Subject is required"),
    FieldCheck("message", is_not_blank, "Message is required"),
]


def collect_errors(
    submission: ContactSubmission, checks: List[FieldCheck] = CONTACT_CHECKS
) -> List[FieldError]:
    errors = []
    for check in checks:
        value = getattr(submission, check.field)
        if not check.predicate(value):
            errors.append(FieldError(field=check.field, message=check.message, value=value))
    return errors


def validate_submission(submission: ContactSubmission) -> ContactData:
    """
    Run every contact check and return the sanitized submission.

    Args:
        submission: Raw form body.

    Returns:
        ContactData: Trimmed text fields and the normalized email address.

    Raises:
        ContactValidationError: If any check fails; carries all failures in check order.
    """
    errors = collect_errors(submission)
    if errors:
        details: List[Dict[str, Any]] = [asdict(error) for error in errors]
        logger.warning(
            "Contact submission rejected: %s",
            ", ".join(f"{error.field}={error.message}" for error in errors),
        )
        raise ContactValidationError(details)

    return ContactData(
        name=submission.name.strip(),
        email=normalize_email(submission.email),
        subject=submission.subject.strip(),
        message=submission.message.strip(),
    )
