from pydantic import BaseModel, Field
from typing import Any, Dict, Optional


class ContactRequest(BaseModel):
    """Inbound contact form body. Presence is checked by the handler, not here."""
    name: Optional[str] = None
    email: Optional[str] = None  # Used verbatim, no format validation
    subject: Optional[str] = None
    message: Optional[str] = None


class ContactSubmission(BaseModel):
    name: str
    email: str
    subject: str
    message: str


class PersistedSubmission(ContactSubmission):
    id: str = Field(..., description="Identifier assigned by the record store")


class NotificationEmail(BaseModel):
    from_address: str
    to: str
    reply_to: str
    subject: str
    text: str
    html: str


class ContactResponse(BaseModel):
    message: str
    error: Optional[str] = None
    saved_data: Optional[PersistedSubmission] = Field(None, serialization_alias="savedData")


class SubmissionResult(BaseModel):
    status_code: int
    body: Dict[str, Any]
