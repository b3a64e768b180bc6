"""Durable storage of user documents (posts are embedded)."""

from typing import Any, Protocol
from uuid import UUID

import structlog
from pymongo.asynchronous.collection import AsyncCollection
from pymongo.errors import DuplicateKeyError, PyMongoError

from postkeeper.core.modules.user.models import User
from postkeeper.errors import ConflictError, NotFoundError, StoreError

logger = structlog.get_logger(__name__)


class UserStore(Protocol):
    """One record per user. Every call applies fully or not at all."""

    async def on_start(self) -> None: ...

    async def on_stop(self) -> None: ...

    async def insert(self, user: User) -> None: ...

    async def find_by_email(self, email: str) -> User | None: ...

    async def find_by_id(self, user_id: UUID) -> User | None: ...

    async def replace(self, user: User) -> None: ...


class MongoUserStore:
    """UserStore backed by the `users` MongoDB collection."""

    def __init__(self, collection: AsyncCollection[dict[str, Any]]) -> None:
        self._collection = collection

    async def on_start(self) -> None:
        """Create the unique email index."""
        await self._collection.create_index([("email", 1)], unique=True)

    async def on_stop(self) -> None:
        """Nothing to release; the client is owned by Core."""

    async def insert(self, user: User) -> None:
        try:
            await self._collection.insert_one(user.to_mongo())
        except DuplicateKeyError as e:
            raise ConflictError(f"Email '{user.email}' is already registered") from e
        except PyMongoError as e:
            logger.warning("store_insert_failed", user_id=str(user.id), error=str(e))
            raise StoreError(str(e)) from e

    async def find_by_email(self, email: str) -> User | None:
        try:
            document = await self._collection.find_one({"email": email})
        except PyMongoError as e:
            raise StoreError(str(e)) from e
        return User.from_mongo(document)

    async def find_by_id(self, user_id: UUID) -> User | None:
        try:
            document = await self._collection.find_one({"_id": user_id})
        except PyMongoError as e:
            raise StoreError(str(e)) from e
        return User.from_mongo(document)

    async def replace(self, user: User) -> None:
        """Replace the whole user document (last write wins)."""
        try:
            result = await self._collection.replace_one({"_id": user.id}, user.to_mongo())
        except PyMongoError as e:
            logger.warning("store_replace_failed", user_id=str(user.id), error=str(e))
            raise StoreError(str(e)) from e
        if result.matched_count == 0:
            raise NotFoundError("User not found")
