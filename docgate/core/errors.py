"""Error Hierarchy - typed, categorized exceptions for every gateway failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client errors (400-level) are raised before any store call
    - to_response() produces the {"msg": ...} envelope returned to clients
    - Infrastructure errors (500-level) never reach the client with detail

Design Decisions:
    - Single hierarchy with GatewayError base: one global handler catches all
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Request-scoped details kept for the log, never sent to the client."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    collection: str | None = None
    document_id: str | None = None
    debug_info: dict[str, Any] | None = None


class GatewayError(Exception):
    """Base exception for all gateway errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    @property
    def is_client_error(self) -> bool:
        return 400 <= self.http_status < 500

    def to_response(self) -> dict:
        """Convert to the client-facing JSON body."""
        return {"msg": self.message}


# ─── Client Errors (400-level) ──────────────────────────────────

class InvalidObjectIdError(GatewayError):
    """Path segment is not a store identifier."""
    def __init__(self, raw: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.document_id = raw
        super().__init__(
            "Invalid ObjectId format", "INVALID_OBJECT_ID",
            ErrorCategory.VALIDATION, ErrorSeverity.WARNING, ctx, 400,
        )
        self.raw = raw


class InvalidOrderError(GatewayError):
    """Order payload lacks a customer name or a non-empty cart."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Invalid order data", "INVALID_ORDER",
            ErrorCategory.VALIDATION, ErrorSeverity.WARNING, context, 400,
        )


class DocumentNotFoundError(GatewayError):
    """Valid identifier with no matching document."""
    def __init__(
        self, collection: str, document_id: str, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.collection = collection
        ctx.document_id = document_id
        super().__init__(
            "Document not found", "DOCUMENT_NOT_FOUND",
            ErrorCategory.RESOURCE_NOT_FOUND, ErrorSeverity.INFO, ctx, 404,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(GatewayError):
    """Store operation failed."""
    def __init__(
        self, message: str, operation: str, collection: str | None = None,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.collection = collection
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, ctx, 500,
        )
        self.operation = operation
