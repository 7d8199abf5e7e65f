"""Order Route - POST /place-order into the fixed "orders" collection.

Invariants:
    - Shape is checked (OrderCreate) before the store is touched
    - Any body that is not a valid order, undecodable JSON included,
      answers 400 {"msg": "Invalid order data"}
    - The stored document is the payload as received, plus _id
"""

import json
import logging
from typing import Any

from fastapi import APIRouter, Depends, Request
from pydantic import ValidationError

from docgate.core.documents import describe
from docgate.core.errors import InvalidOrderError
from docgate.core.store_protocols import DocumentStore
from docgate.infrastructure.database import get_store
from docgate.schemas.order import ORDERS_COLLECTION, OrderCreate, OrderPlaced

logger = logging.getLogger(__name__)
router = APIRouter(tags=["orders"])


async def order_payload(request: Request) -> Any:
    """Decoded JSON body, or None when the body is empty or not JSON."""
    raw = await request.body()
    if not raw:
        return None
    try:
        return json.loads(raw)
    except ValueError:
        logger.info("Undecodable order body")
        return None


@router.post("/place-order", response_model=OrderPlaced)
async def place_order(
    payload: Any = Depends(order_payload),
    store: DocumentStore = Depends(get_store),
):
    """Validate and store an order."""
    logger.info(f"Received Order: {describe(payload)}")
    try:
        OrderCreate.model_validate(payload)
    except ValidationError:
        logger.info("Invalid order data received")
        raise InvalidOrderError()

    orders = store.collection(ORDERS_COLLECTION)
    [stored] = await orders.insert([payload])
    logger.info(f"Order placed successfully - Data: {describe(payload)}")
    return OrderPlaced(orderId=str(stored["_id"]))
