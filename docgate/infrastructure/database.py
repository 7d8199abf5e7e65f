"""Document Store - shared motor client with driver error mapping and health checks.

Invariants:
    - One MongoDocumentStore per process, created by init_store() at startup
    - Every collection method is a single driver round-trip
    - All pymongo exceptions mapped to DatabaseError (core/errors.py)
    - Inserted documents are copies; request bodies are never mutated

Design Decisions:
    - Singleton store initialized in the FastAPI lifespan, handed to routes
      through the get_store dependency
    - connect_store() pings the server: motor connects lazily, so the ping is
      what makes a bad URL fail at startup
"""

import logging
from contextlib import contextmanager
from typing import Iterator

from bson import ObjectId
from motor.motor_asyncio import (
    AsyncIOMotorClient, AsyncIOMotorCollection, AsyncIOMotorDatabase,
)
from pymongo.errors import PyMongoError

from docgate.core.documents import Document
from docgate.core.errors import DatabaseError

logger = logging.getLogger(__name__)


@contextmanager
def _driver_errors(operation: str, collection: str | None = None) -> Iterator[None]:
    try:
        yield
    except PyMongoError as e:
        logger.error(
            f"Mongo {operation} error: {e}",
            extra={"collection": collection},
        )
        raise DatabaseError(str(e), operation, collection)


class MongoDocumentCollection:
    """DocumentCollection backed by a motor collection."""

    def __init__(self, collection: AsyncIOMotorCollection):
        self._collection = collection
        self.name = collection.name

    async def find_all(self) -> list[Document]:
        with _driver_errors("find", self.name):
            return await self._collection.find({}).to_list(length=None)

    async def find_by_id(self, document_id: ObjectId) -> Document | None:
        with _driver_errors("find_one", self.name):
            return await self._collection.find_one({"_id": document_id})

    async def insert(self, documents: list[Document]) -> list[Document]:
        """Insert documents; returns them with their assigned _id."""
        inserted = [dict(d) for d in documents]
        with _driver_errors("insert", self.name):
            await self._collection.insert_many(inserted)
        return inserted

    async def update_fields(self, document_id: ObjectId, fields: Document) -> int:
        """$set the given fields; returns the matched count."""
        with _driver_errors("update", self.name):
            result = await self._collection.update_one(
                {"_id": document_id}, {"$set": fields},
            )
        return result.matched_count

    async def delete_by_id(self, document_id: ObjectId) -> int:
        with _driver_errors("delete", self.name):
            result = await self._collection.delete_one({"_id": document_id})
        return result.deleted_count


class MongoDocumentStore:
    """DocumentStore backed by one motor client and database."""

    def __init__(self, mongodb_url: str, database_name: str, timeout_ms: int = 5000):
        self.client = AsyncIOMotorClient(
            mongodb_url, serverSelectionTimeoutMS=timeout_ms,
        )
        self.database: AsyncIOMotorDatabase = self.client[database_name]

    def collection(self, name: str) -> MongoDocumentCollection:
        return MongoDocumentCollection(self.database.get_collection(name))

    async def connect(self) -> None:
        """Round-trip to the server; raises DatabaseError when unreachable."""
        with _driver_errors("connect"):
            await self.client.admin.command("ping")

    async def ping(self) -> bool:
        """Check store connectivity (for readiness probes)."""
        try:
            await self.connect()
            return True
        except DatabaseError as e:
            logger.error(f"Store health check failed: {e}")
            return False

    def close(self) -> None:
        self.client.close()


# Singleton (initialized on startup)
store: MongoDocumentStore | None = None


def init_store(mongodb_url: str, database_name: str, **kwargs) -> MongoDocumentStore:
    global store
    store = MongoDocumentStore(mongodb_url, database_name, **kwargs)
    return store


def close_store() -> None:
    global store
    if store is not None:
        store.close()
        store = None


def get_store() -> MongoDocumentStore:
    """FastAPI dependency for the shared store handle."""
    if store is None:
        raise RuntimeError("Database not initialized")
    return store


def get_store_or_none() -> MongoDocumentStore | None:
    """FastAPI dependency for probes that must answer before startup completes."""
    return store
