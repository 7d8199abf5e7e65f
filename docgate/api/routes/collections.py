"""Collection Routes - generic CRUD over any named collection.

Invariants:
    - Collection resolved per request by get_collection (never cached)
    - Identifier-scoped routes validate the id before the store is touched
    - PUT/DELETE answer {"msg": "success"} iff exactly one document matched
    - PUT is a $set merge; any field may be written

Design Decisions:
    - Store failures propagate as DatabaseError to the global handler (500)
"""

import logging
from typing import Any

from bson import ObjectId
from fastapi import APIRouter, Body, Depends

from docgate.api.dependencies import get_collection, valid_object_id
from docgate.core.documents import (
    Document, as_document_list, describe, to_json_document, to_json_documents,
)
from docgate.core.errors import DocumentNotFoundError
from docgate.core.store_protocols import DocumentCollection
from docgate.schemas.document import StatusMessage

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/collection/{collection_name}", tags=["collections"])


@router.get("")
async def list_documents(
    collection: DocumentCollection = Depends(get_collection),
) -> list[Document]:
    """Fetch every document in the collection."""
    documents = await collection.find_all()
    logger.info(f"Fetched from collection: {collection.name}")
    return to_json_documents(documents)


@router.post("")
async def insert_documents(
    body: dict[str, Any] | list[dict[str, Any]] = Body(...),
    collection: DocumentCollection = Depends(get_collection),
) -> list[Document]:
    """Insert one document (or a list of them); echo them back with _id."""
    inserted = await collection.insert(as_document_list(body))
    logger.info(
        f"Inserted into collection: {collection.name} - Data: {describe(body)}",
    )
    return to_json_documents(inserted)


@router.get("/{document_id}")
async def get_document(
    document_id: ObjectId = Depends(valid_object_id),
    collection: DocumentCollection = Depends(get_collection),
) -> Document:
    document = await collection.find_by_id(document_id)
    if document is None:
        logger.info(
            f"Document not found in collection: {collection.name} - ID: {document_id}",
        )
        raise DocumentNotFoundError(collection.name, str(document_id))
    logger.info(
        f"Fetched document from collection: {collection.name} - ID: {document_id}",
    )
    return to_json_document(document)


@router.put("/{document_id}", response_model=StatusMessage)
async def update_document(
    body: dict[str, Any] = Body(...),
    document_id: ObjectId = Depends(valid_object_id),
    collection: DocumentCollection = Depends(get_collection),
):
    """Merge the body's fields into the document."""
    matched = await collection.update_fields(document_id, body)
    logger.info(
        f"Updated document in collection: {collection.name} - ID: {document_id}",
    )
    return StatusMessage.for_count(matched)


@router.delete("/{document_id}", response_model=StatusMessage)
async def delete_document(
    document_id: ObjectId = Depends(valid_object_id),
    collection: DocumentCollection = Depends(get_collection),
):
    deleted = await collection.delete_by_id(document_id)
    logger.info(
        f"Deleted from collection: {collection.name} - ID: {document_id}",
    )
    return StatusMessage.for_count(deleted)
