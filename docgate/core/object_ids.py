"""Identifier Validation - parse path segments into store identifiers.

Invariants:
    - parse_object_id() never touches the store
    - Any string the driver rejects raises InvalidObjectIdError
"""

from bson import ObjectId
from bson.errors import InvalidId

from docgate.core.errors import InvalidObjectIdError


def parse_object_id(raw: str) -> ObjectId:
    """Return the ObjectId for a 24-hex-character string."""
    if not isinstance(raw, str) or not ObjectId.is_valid(raw):
        raise InvalidObjectIdError(str(raw))
    try:
        return ObjectId(raw)
    except (InvalidId, TypeError):
        raise InvalidObjectIdError(raw)
