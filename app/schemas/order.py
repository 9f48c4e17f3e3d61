# app/schemas/order.py
import uuid
from datetime import datetime
from typing import Literal

from sqlmodel import SQLModel

PaymentStatus = Literal["pending", "success", "failed"]


class OrderItemRead(SQLModel):
    """
    Representation of a single order line item.
    """

    product_id: str | None
    name: str
    size: str | None
    quantity: int
    price: float
    line_total: float


class OrderRead(SQLModel):
    """
    Order as listed to staff, with its line items.
    """

    id: uuid.UUID
    order_id: str
    customer_name: str
    customer_email: str
    customer_phone: str | None
    items: list[OrderItemRead]
    total_amount: float
    payment_status: str
    status: str
    created_at: datetime
