"""Persistence operations for contact documents."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator, List, Optional

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo.errors import DuplicateKeyError, PyMongoError

from contactbook.core.exceptions import ConflictError, NotFoundError, StoreError
from contactbook.models.contact import ContactInput, ContactRecord

logger = logging.getLogger(__name__)

DUPLICATE_EMAIL_MESSAGE = "A contact with that email already exists"
DUPLICATE_ID_MESSAGE = "A contact with that id already exists"


@contextmanager
def store_operation(operation: str) -> Iterator[None]:
    """Translate driver failures raised inside the block into application errors."""

    try:
        yield
    except DuplicateKeyError as exc:
        key_pattern = (exc.details or {}).get("keyPattern") or {}
        if "_id" in key_pattern:
            raise ConflictError(DUPLICATE_ID_MESSAGE) from exc
        raise ConflictError(DUPLICATE_EMAIL_MESSAGE) from exc
    except PyMongoError as exc:
        logger.exception("%s failed", operation)
        raise StoreError() from exc


class ContactRepository:
    """Single-document operations against the ``contacts`` collection."""

    def __init__(self, collection: AsyncIOMotorCollection) -> None:
        self.collection = collection

    async def list_all(self) -> List[ContactRecord]:
        with store_operation("list contacts"):
            documents = await self.collection.find({}).to_list(length=None)
        return [ContactRecord.from_document(document) for document in documents]

    async def get(self, contact_id: ObjectId) -> ContactRecord:
        with store_operation("get contact"):
            document = await self.collection.find_one({"_id": contact_id})
        if not document:
            raise NotFoundError()
        return ContactRecord.from_document(document)

    async def email_exists(self, email: str) -> bool:
        with store_operation("find contact by email"):
            document = await self.collection.find_one({"email": email}, projection={"_id": 1})
        return document is not None

    async def insert(self, contact: ContactInput, contact_id: Optional[ObjectId] = None) -> str:
        """Insert ``contact`` and return its id as a hex string.

        Uniqueness of the email is only guaranteed by the store's unique
        index; callers doing a pre-check with `email_exists` can still race.
        """

        document = contact.to_document()
        if contact_id is not None:
            document["_id"] = contact_id
        with store_operation("insert contact"):
            result = await self.collection.insert_one(document)
        return str(result.inserted_id)

    async def replace(self, contact_id: ObjectId, contact: ContactInput) -> None:
        with store_operation("replace contact"):
            result = await self.collection.replace_one({"_id": contact_id}, contact.to_document())
        if result.matched_count == 0:
            raise NotFoundError()

    async def delete(self, contact_id: ObjectId) -> None:
        with store_operation("delete contact"):
            result = await self.collection.delete_one({"_id": contact_id})
        if result.deleted_count == 0:
            raise NotFoundError()
