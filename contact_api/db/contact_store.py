import logging
from datetime import datetime, timezone

from pymongo.errors import PyMongoError

from contact_api.core.errors import PersistenceError
from contact_api.models.contact import ContactSubmission, PersistedSubmission

logger = logging.getLogger(__name__)

CONTACTS_COLLECTION = "contacts"


class MongoContactStore:
    """Create-only store for contact submissions, one document per submission."""

    def __init__(self, db, collection_name: str = CONTACTS_COLLECTION):
        self.collection = db[collection_name]

    async def create(self, submission: ContactSubmission) -> PersistedSubmission:
        now = datetime.now(timezone.utc)
        document = {
            **submission.model_dump(),
            "createdAt": now,
            "updatedAt": now,
        }
        try:
            result = await self.collection.insert_one(document)
        except PyMongoError as e:
            raise PersistenceError(str(e)) from e

        logger.debug(f"Inserted contact document {result.inserted_id}")
        return PersistedSubmission(id=str(result.inserted_id), **submission.model_dump())
