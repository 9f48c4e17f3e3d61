# app/models/order.py
import uuid
from datetime import datetime

from pydantic import ConfigDict, field_validator, model_validator
from sqlmodel import SQLModel, Field

# Canonical "paid" value of Order.payment_status. Exact, case-sensitive.
PAYMENT_SUCCESS = "success"


class OrderItem(SQLModel):
    """
    Line item inside an order (stored in the `items` JSON column).

    `price` is the unit price at the time of the order, not the current
    product price.
    """

    model_config = ConfigDict(extra="ignore")

    product_id: str | None = Field(default=None, description="Id of the ordered product")
    name: str = Field(default="", description="Product name at time of order")
    size: str | None = None
    quantity: int = Field(default=0, ge=0)
    price: float = Field(default=0.0, description="Unit price at time of order")

    @field_validator("product_id", mode="before")
    @classmethod
    def stringify_id(cls, v):
        # Lines written without a product id stay None, never "None"
        if v is None or v == "":
            return None
        return str(v)


class Order(SQLModel):
    """
    Customer order, a row of the `orders` table.

    Created by the storefront checkout; read-only from the admin side.

      - payment_status: pending | success | failed
      - status: fulfillment status; rows without one report their
        payment status instead
    """

    model_config = ConfigDict(extra="ignore")

    id: uuid.UUID
    order_id: str = Field(description="Human readable order number")

    customer_name: str = ""
    customer_email: str = ""
    customer_phone: str | None = None

    items: list[OrderItem] = Field(default_factory=list)

    total_amount: float = 0.0

    payment_status: str = "pending"
    status: str | None = None

    created_at: datetime = Field(description="Creation timestamp (UTC)")

    @field_validator("total_amount", mode="before")
    @classmethod
    def default_amount(cls, v):
        return v or 0.0

    @field_validator("items", mode="before")
    @classmethod
    def default_items(cls, v):
        return v or []

    @model_validator(mode="after")
    def fill_status(self) -> "Order":
        if not self.status:
            self.status = self.payment_status
        return self

    @property
    def is_successful(self) -> bool:
        return self.payment_status == PAYMENT_SUCCESS
