"""Home Route - plain-text banner at GET /."""

import logging

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

logger = logging.getLogger(__name__)
router = APIRouter(tags=["home"])

BANNER = "Select a collection, e.g., /collection/messages"


@router.get("/", response_class=PlainTextResponse)
async def homepage():
    logger.info("Homepage accessed")
    return BANNER
