"""Boundary Protocols - contracts between the HTTP layer and the document store.

Invariants:
    - Route handlers only see DocumentStore / DocumentCollection, never the driver
    - DocumentStore.collection() always succeeds: a name is collection identity
      without any existence guarantee
    - Every async method is exactly one round-trip to the store

Design Decisions:
    - Protocol over ABC: structural subtyping, tests supply an in-memory store
"""

from typing import Protocol

from bson import ObjectId

from docgate.core.documents import Document


class DocumentCollection(Protocol):
    """One named collection on the shared store."""
    name: str

    async def find_all(self) -> list[Document]: ...
    async def find_by_id(self, document_id: ObjectId) -> Document | None: ...
    async def insert(self, documents: list[Document]) -> list[Document]: ...
    async def update_fields(
        self, document_id: ObjectId, fields: Document,
    ) -> int: ...
    async def delete_by_id(self, document_id: ObjectId) -> int: ...


class DocumentStore(Protocol):
    """Shared store handle, established once per process."""
    def collection(self, name: str) -> DocumentCollection: ...
    async def ping(self) -> bool: ...
