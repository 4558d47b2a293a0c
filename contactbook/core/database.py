"""Database connectivity layer for the contacts service."""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection, AsyncIOMotorDatabase
from pymongo.errors import OperationFailure, PyMongoError

from contactbook.core.config import Settings
from contactbook.core.exceptions import StoreConnectionError, UninitializedError

logger = logging.getLogger(__name__)

CONTACTS_COLLECTION = "contacts"


class ContactStore:
    """Lazily establishes and caches one MongoDB connection.

    The application factory owns the instance and the FastAPI lifespan calls
    `connect()` on startup and `close()` on shutdown. Handlers only ever see
    the handle through `get_handle()` / `collection`.
    """

    def __init__(
        self,
        uri: str,
        database_name: str,
        *,
        server_selection_timeout_ms: int = 5000,
        enforce_unique_email: bool = True,
        client_factory: Callable[..., Any] = AsyncIOMotorClient,
    ) -> None:
        self.uri = uri
        self.database_name = database_name
        self.server_selection_timeout_ms = server_selection_timeout_ms
        self.enforce_unique_email = enforce_unique_email
        self._client_factory = client_factory
        self._client: Optional[AsyncIOMotorClient] = None
        self._db: Optional[AsyncIOMotorDatabase] = None
        self.unique_email_enforced = False

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs: Any) -> "ContactStore":
        return cls(
            settings.MONGODB_URI,
            settings.DB_NAME,
            server_selection_timeout_ms=settings.MONGODB_SERVER_SELECTION_TIMEOUT_MS,
            enforce_unique_email=settings.ENFORCE_UNIQUE_EMAIL,
            **kwargs,
        )

    @property
    def is_connected(self) -> bool:
        return self._db is not None

    async def connect(self) -> AsyncIOMotorDatabase:
        """Connect on first use and return the cached database handle."""

        if self._db is not None:
            return self._db

        logger.info("Connecting to MongoDB database %s", self.database_name)
        client = None
        try:
            client = self._client_factory(self.uri, serverSelectionTimeoutMS=self.server_selection_timeout_ms)
            db = client[self.database_name]
            await db.command("ping")
        except (PyMongoError, ValueError, TypeError) as exc:
            logger.error("Failed to connect to MongoDB: %s", exc)
            if client is not None:
                client.close()
            raise StoreConnectionError() from exc

        self._client = client
        self._db = db
        logger.info("MongoDB connection established")

        if self.enforce_unique_email:
            try:
                await self._ensure_unique_email(db)
            except PyMongoError as exc:
                logger.error("Lost MongoDB connection while creating indexes: %s", exc)
                await self.close()
                raise StoreConnectionError() from exc
        return db

    async def _ensure_unique_email(self, db: AsyncIOMotorDatabase) -> None:
        """Create the unique email index; existing duplicates leave it off."""

        try:
            await db[CONTACTS_COLLECTION].create_index("email", unique=True, name="email_unique")
        except OperationFailure as exc:
            self.unique_email_enforced = False
            logger.warning(
                "Email uniqueness is not enforced by the store (%s.email index rejected: %s); "
                "concurrent creates with the same email can both succeed",
                CONTACTS_COLLECTION,
                exc,
            )
            return
        self.unique_email_enforced = True
        logger.info("Ensured unique index on %s.email", CONTACTS_COLLECTION)

    def get_handle(self) -> AsyncIOMotorDatabase:
        if self._db is None:
            raise UninitializedError("Database not initialized. Call connect() first.")
        return self._db

    @property
    def collection(self) -> AsyncIOMotorCollection:
        return self.get_handle()[CONTACTS_COLLECTION]

    async def close(self) -> None:
        """Release the client; safe to call repeatedly."""

        if self._client is not None:
            logger.info("Closing MongoDB connection")
            self._client.close()
        self._client = None
        self._db = None
        self.unique_email_enforced = False
