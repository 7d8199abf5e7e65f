"""Document Store - motor adapter round-trips and driver error mapping.

Invariants:
    - Each adapter method issues exactly one driver call
    - PyMongoError from the driver surfaces as DatabaseError
    - get_store() refuses to hand out an uninitialized store
"""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest
from bson import ObjectId
from pymongo.errors import OperationFailure, ServerSelectionTimeoutError

import docgate.infrastructure.database as db_module
from docgate.core.errors import DatabaseError
from docgate.infrastructure.database import (
    MongoDocumentCollection, MongoDocumentStore, close_store, get_store,
    get_store_or_none, init_store,
)


@pytest.fixture
def motor_collection():
    collection = MagicMock()
    collection.name = "widgets"
    return collection


async def test_find_all_reads_whole_collection(motor_collection):
    cursor = MagicMock()
    cursor.to_list = AsyncMock(return_value=[{"_id": 1}])
    motor_collection.find.return_value = cursor

    docs = await MongoDocumentCollection(motor_collection).find_all()

    assert docs == [{"_id": 1}]
    motor_collection.find.assert_called_once_with({})


async def test_find_by_id_filters_on_id(motor_collection):
    oid = ObjectId()
    motor_collection.find_one = AsyncMock(return_value=None)

    assert await MongoDocumentCollection(motor_collection).find_by_id(oid) is None
    motor_collection.find_one.assert_awaited_once_with({"_id": oid})


async def test_insert_returns_copies_with_ids(motor_collection):
    async def fake_insert_many(docs):
        for d in docs:
            d["_id"] = ObjectId()
    motor_collection.insert_many = AsyncMock(side_effect=fake_insert_many)
    body = [{"a": 1}]

    [inserted] = await MongoDocumentCollection(motor_collection).insert(body)

    assert inserted["a"] == 1
    assert isinstance(inserted["_id"], ObjectId)
    assert body == [{"a": 1}]


async def test_update_fields_uses_set_and_returns_matched(motor_collection):
    oid = ObjectId()
    motor_collection.update_one = AsyncMock(
        return_value=SimpleNamespace(matched_count=1, modified_count=0),
    )

    matched = await MongoDocumentCollection(motor_collection).update_fields(oid, {"a": 2})

    assert matched == 1
    motor_collection.update_one.assert_awaited_once_with(
        {"_id": oid}, {"$set": {"a": 2}},
    )


async def test_delete_by_id_returns_deleted_count(motor_collection):
    motor_collection.delete_one = AsyncMock(return_value=SimpleNamespace(deleted_count=0))
    assert await MongoDocumentCollection(motor_collection).delete_by_id(ObjectId()) == 0


async def test_driver_errors_mapped_to_database_error(motor_collection):
    motor_collection.update_one = AsyncMock(side_effect=OperationFailure("'$set' is empty"))

    with pytest.raises(DatabaseError) as info:
        await MongoDocumentCollection(motor_collection).update_fields(ObjectId(), {})

    assert info.value.operation == "update"
    assert info.value.context.collection == "widgets"
    assert info.value.http_status == 500


async def test_ping_reports_unreachable_server():
    store = MongoDocumentStore("mongodb://localhost:27017", "Webstore")
    store.client = MagicMock()
    store.client.admin.command = AsyncMock(side_effect=ServerSelectionTimeoutError("down"))

    assert await store.ping() is False
    with pytest.raises(DatabaseError):
        await store.connect()


async def test_ping_reports_reachable_server():
    store = MongoDocumentStore("mongodb://localhost:27017", "Webstore")
    store.client = MagicMock()
    store.client.admin.command = AsyncMock(return_value={"ok": 1.0})

    assert await store.ping() is True
    store.client.admin.command.assert_awaited_with("ping")


async def test_collection_resolves_any_name():
    store = MongoDocumentStore("mongodb://localhost:27017", "Webstore")
    try:
        collection = store.collection("never-created")
        assert collection.name == "never-created"
    finally:
        store.close()


async def test_store_lifecycle(monkeypatch):
    monkeypatch.setattr(db_module, "store", None)
    assert get_store_or_none() is None
    with pytest.raises(RuntimeError, match="Database not initialized"):
        get_store()

    created = init_store("mongodb://localhost:27017", "Webstore", timeout_ms=100)
    assert get_store() is created
    assert get_store_or_none() is created

    close_store()
    assert db_module.store is None
