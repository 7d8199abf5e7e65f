"""Document Boundary - conversion between store documents and JSON bodies.

Invariants:
    - Store identifiers are rendered as their 24-hex string
    - Input documents are shallow-copied before insertion (the driver adds _id in place)
"""

import json
from typing import Any

from bson import ObjectId
from fastapi.encoders import jsonable_encoder

Document = dict[str, Any]

_STORE_ENCODERS = {ObjectId: str}


def to_json_document(document: Document) -> Document:
    """Render one store document as a JSON-compatible mapping."""
    return jsonable_encoder(document, custom_encoder=_STORE_ENCODERS)


def to_json_documents(documents: list[Document]) -> list[Document]:
    return [to_json_document(d) for d in documents]


def as_document_list(payload: Document | list[Document]) -> list[Document]:
    """Normalize a request body holding one document or a list of them."""
    if isinstance(payload, dict):
        return [dict(payload)]
    return [dict(d) for d in payload]


def describe(payload: Any) -> str:
    """Compact JSON text for activity log lines."""
    return json.dumps(
        jsonable_encoder(payload, custom_encoder=_STORE_ENCODERS),
        separators=(",", ":"), ensure_ascii=False,
    )
