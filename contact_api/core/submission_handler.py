"""
Contact submission workflow.

A submission is validated, saved to the record store, then relayed by email.
The two I/O steps are not transactional: once the record is saved it is kept
even if the email fails, and the response says which half succeeded.
"""

import logging
from typing import Protocol

from contact_api.core.errors import NotificationError, PersistenceError, ValidationError
from contact_api.core.notification import build_notification_email
from contact_api.models.contact import (
    ContactRequest,
    ContactResponse,
    ContactSubmission,
    NotificationEmail,
    PersistedSubmission,
    SubmissionResult,
)

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("name", "email", "subject", "message")

MSG_FIELDS_REQUIRED = "All fields are required"
MSG_SAVE_FAILED = "Failed to save message to database"
MSG_SUCCESS = "Message saved and email sent successfully"
MSG_EMAIL_FAILED = "Message saved to database, but failed to send email"


class RecordStore(Protocol):
    async def create(self, submission: ContactSubmission) -> PersistedSubmission:
        ...


class MailNotifier(Protocol):
    async def send(self, email: NotificationEmail) -> None:
        ...


def validate_submission(request: ContactRequest) -> ContactSubmission:
    """Raise ValidationError unless every required field is present and non-empty."""
    missing = [field for field in REQUIRED_FIELDS if not getattr(request, field)]
    if missing:
        raise ValidationError(f"Missing fields: {', '.join(missing)}")
    return ContactSubmission(**request.model_dump(include=set(REQUIRED_FIELDS)))


class SubmissionHandler:

    def __init__(self, store: RecordStore, notifier: MailNotifier, mailbox: str):
        self.store = store
        self.notifier = notifier
        self.mailbox = mailbox

    async def handle(self, request: ContactRequest) -> SubmissionResult:
        try:
            submission = validate_submission(request)
        except ValidationError as e:
            logger.warning(f"Validation error: {e}")
            return self._result(400, ContactResponse(message=MSG_FIELDS_REQUIRED))

        try:
            saved = await self._persist(submission)
        except PersistenceError as e:
            logger.error(f"MongoDB save error: {e}")
            return self._result(500, ContactResponse(message=MSG_SAVE_FAILED, error=str(e)))

        logger.info(f"Contact submission saved with id {saved.id}")

        try:
            await self._notify(saved)
        except NotificationError as e:
            logger.error(f"Error sending email for submission {saved.id}: {e}")
            return self._result(
                201,
                ContactResponse(message=MSG_EMAIL_FAILED, error=str(e), saved_data=saved),
            )

        logger.info(f"Email for submission {saved.id} sent to {self.mailbox}")
        return self._result(201, ContactResponse(message=MSG_SUCCESS))

    async def _persist(self, submission: ContactSubmission) -> PersistedSubmission:
        try:
            return await self.store.create(submission)
        except PersistenceError:
            raise
        except Exception as e:
            raise PersistenceError(str(e)) from e

    async def _notify(self, saved: PersistedSubmission) -> None:
        email = build_notification_email(saved, self.mailbox)
        try:
            await self.notifier.send(email)
        except NotificationError:
            raise
        except Exception as e:
            raise NotificationError(str(e)) from e

    @staticmethod
    def _result(status_code: int, response: ContactResponse) -> SubmissionResult:
        return SubmissionResult(status_code=status_code, body=response.model_dump(exclude_none=True, by_alias=True))
