"""Route Dependencies - collection resolution and identifier validation.

Invariants:
    - get_collection() always succeeds and never calls the store
    - valid_object_id() rejects malformed ids before any store call
"""

import logging

from bson import ObjectId
from fastapi import Depends

from docgate.core.errors import InvalidObjectIdError
from docgate.core.object_ids import parse_object_id
from docgate.core.store_protocols import DocumentCollection, DocumentStore
from docgate.infrastructure.database import get_store

logger = logging.getLogger(__name__)


def get_collection(
    collection_name: str, store: DocumentStore = Depends(get_store),
) -> DocumentCollection:
    """Bind the named collection for the rest of the request."""
    collection = store.collection(collection_name)
    logger.info(f"Accessing collection: {collection_name}")
    return collection


def valid_object_id(document_id: str) -> ObjectId:
    """Parse the {document_id} path segment or raise a 400."""
    try:
        return parse_object_id(document_id)
    except InvalidObjectIdError:
        logger.info(f"Invalid ObjectId format: {document_id}")
        raise
