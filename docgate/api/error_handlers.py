"""Error Handlers - global exception handlers for the gateway.

Invariants:
    - Client GatewayErrors (4xx) -> {"msg": ...} JSON
    - Infrastructure GatewayErrors and any other Exception -> 500 plain text
      "Something went wrong!", detail kept in the log only
    - RequestValidationError (undecodable or non-object body) -> 400 with field details
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse

from docgate.core.errors import GatewayError

logger = logging.getLogger(__name__)

GENERIC_ERROR_TEXT = "Something went wrong!"


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_gateway_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _something_went_wrong() -> PlainTextResponse:
    return PlainTextResponse(
        GENERIC_ERROR_TEXT, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def _register_gateway_error_handler(app: FastAPI) -> None:

    @app.exception_handler(GatewayError)
    async def gateway_error_handler(request: Request, exc: GatewayError):
        """Handle all gateway domain/infrastructure errors."""
        if exc.is_client_error:
            return JSONResponse(
                status_code=exc.http_status, content=exc.to_response(),
            )
        logger.error(
            f"Error: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return _something_went_wrong()


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.error(f"Error: {exc}", exc_info=True)
        return _something_went_wrong()


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    return {
        "msg": "Invalid request data",
        "details": [
            {
                "field": ".".join(str(loc) for loc in e["loc"]),
                "message": e["msg"],
                "type": e["type"],
            }
            for e in exc.errors()
        ],
    }
