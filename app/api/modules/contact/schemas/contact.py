from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from app.api.modules.contact.models.contact_model import ContactStatus


class ContactSubmission(BaseModel):
    """Raw contact form body; field checks run in the contact validator."""

    name: Optional[str] = None
    email: Optional[str] = None
    subject: Optional[str] = None
    message: Optional[str] = None

    model_config = ConfigDict(extra="ignore")


class ContactData(BaseModel):
    """Sanitized submission, as stored and echoed back to the caller."""

    name: str
    email: str
    subject: str
    message: str


class ContactDetail(BaseModel):
    id: UUID
    name: str
    email: str
    subject: str
    message: str
    status: ContactStatus
    created_at: datetime = Field(serialization_alias="createdAt")

    model_config = ConfigDict(from_attributes=True)


class ContactResponse(BaseModel):
    success: bool = True
    message: str
    data: ContactData


class ContactListResponse(BaseModel):
    success: bool = True
    data: List[ContactDetail]
