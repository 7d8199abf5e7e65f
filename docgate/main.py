"""docgate API - FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Every request produces exactly one "Request: <METHOD> <url>" log line
    - Global error handlers map GatewayError and any Exception to responses
    - The store is connected in the lifespan; a failed connect aborts startup
    - CORS configured from settings (all origins by default)
"""

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from docgate.api.error_handlers import register_error_handlers
from docgate.api.routes import collections, health, home, orders
from docgate.config import get_settings
from docgate.infrastructure.database import close_store, init_store
from docgate.infrastructure.observability import setup_logging, teardown_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    listener = setup_logging(
        settings.log_level, settings.log_format, settings.log_file,
    )
    store = init_store(
        settings.mongodb_url, settings.database_name,
        timeout_ms=settings.mongodb_timeout_ms,
    )
    try:
        await store.connect()
    except Exception:
        logger.critical("Error connecting to MongoDB", exc_info=True)
        close_store()
        teardown_logging(listener)
        raise
    logger.info("Connected to MongoDB")
    logger.info(f"Server started on port {settings.port}")
    yield
    logger.info("Server shutting down")
    close_store()
    teardown_logging(listener)


app = FastAPI(title="docgate", version="1.0.0", lifespan=lifespan)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    url = request.url.path
    if request.url.query:
        url = f"{url}?{request.url.query}"
    logger.info(f"Request: {request.method} {url}")
    return await call_next(request)


# Routes: explicit registration
app.include_router(home.router)
app.include_router(health.router)
app.include_router(collections.router)
app.include_router(orders.router)

if os.path.isdir(settings.static_dir):
    app.mount("/static", StaticFiles(directory=settings.static_dir), name="static")

register_error_handlers(app)
