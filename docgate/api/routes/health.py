"""Health Probes - /health/ for liveness, /health/ready for store reachability.

Invariants:
    - Liveness never touches the store
    - Readiness answers 503 until the store exists and answers a ping
"""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from docgate.core.store_protocols import DocumentStore
from docgate.infrastructure.database import get_store_or_none

router = APIRouter(prefix="/health", tags=["health"])

NOT_READY = {"status": "not_ready", "reason": "database_unavailable"}


@router.get("/")
async def liveness():
    return {"status": "healthy", "service": "docgate"}


@router.get("/ready")
async def readiness(store: DocumentStore | None = Depends(get_store_or_none)):
    if store is None or not await store.ping():
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE, content=NOT_READY,
        )
    return {"status": "ready", "checks": {"database": "healthy"}}
