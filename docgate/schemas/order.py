"""Order Schema - the one document shape the gateway checks.

Invariants:
    - customerName must be truthy (any non-empty value)
    - cart must be a non-empty list; entries are not inspected
    - Only the "customerName" key counts; "customer_name" is just an extra field
    - Unknown fields are kept and stored verbatim
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

ORDERS_COLLECTION = "orders"


class OrderCreate(BaseModel):
    """Order placed through POST /place-order."""

    model_config = ConfigDict(extra="allow")

    customer_name: Any = Field(alias="customerName")
    cart: list[Any] = Field(min_length=1)

    @field_validator("customer_name")
    @classmethod
    def require_customer_name(cls, v: Any) -> Any:
        if not v:
            raise ValueError("customerName cannot be empty")
        return v


class OrderPlaced(BaseModel):
    """Acknowledgement returned after the order is stored."""
    msg: str = "Order placed successfully"
    orderId: str
