"""Error Hierarchy - status codes, categories and client bodies."""

from docgate.core.errors import (
    DatabaseError, DocumentNotFoundError, ErrorCategory, ErrorSeverity,
    GatewayError, InvalidObjectIdError, InvalidOrderError,
)


def test_client_errors_carry_msg_envelope():
    assert InvalidOrderError().to_response() == {"msg": "Invalid order data"}
    assert DocumentNotFoundError("widgets", "x").to_response() == {
        "msg": "Document not found",
    }


def test_client_errors_are_4xx():
    assert InvalidObjectIdError("x").http_status == 400
    assert InvalidOrderError().http_status == 400
    assert DocumentNotFoundError("widgets", "x").http_status == 404
    assert InvalidOrderError().is_client_error


def test_not_found_keeps_lookup_in_context():
    err = DocumentNotFoundError("widgets", "abc")
    assert err.category is ErrorCategory.RESOURCE_NOT_FOUND
    assert err.context.collection == "widgets"
    assert err.context.document_id == "abc"


def test_database_error_is_critical_500():
    err = DatabaseError("timed out", "find", "widgets")
    assert err.http_status == 500
    assert not err.is_client_error
    assert err.severity is ErrorSeverity.CRITICAL
    assert err.message == "Database find failed: timed out"
    assert err.operation == "find"
    assert isinstance(err, GatewayError)
