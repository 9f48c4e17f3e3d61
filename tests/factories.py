"""Builders for store rows and models used across tests."""

import uuid
from datetime import datetime, timezone
from typing import Any
from unittest.mock import MagicMock

from app.models.order import Order
from app.models.product import Product
from app.models.user import User


def order_row(
    *,
    total_amount: float = 100.0,
    payment_status: str = "success",
    status: str | None = None,
    created_at: str = "2025-06-10T09:00:00+00:00",
    items: list[dict[str, Any]] | None = None,
    order_id: str | None = None,
    customer_name: str = "Aina Rahman",
) -> dict[str, Any]:
    """A row as PostgREST returns it from the `orders` table."""
    return {
        "id": str(uuid.uuid4()),
        "order_id": order_id or f"ORD-{uuid.uuid4().hex[:6].upper()}",
        "customer_name": customer_name,
        "customer_email": "aina@example.com",
        "customer_phone": "+60123456789",
        "items": items if items is not None else [],
        "total_amount": total_amount,
        "payment_status": payment_status,
        "status": status,
        "created_at": created_at,
    }


def make_order(**kwargs: Any) -> Order:
    return Order.model_validate(order_row(**kwargs))


def item(product_id: str, name: str, quantity: int, price: float, size: str | None = "UK 9") -> dict[str, Any]:
    return {
        "product_id": product_id,
        "name": name,
        "size": size,
        "quantity": quantity,
        "price": price,
    }


def product_row(
    *,
    name: str = "Air Zoom Pegasus",
    category: str | None = "Running",
    stock: int = 5,
    price: str = "RM 459.00",
) -> dict[str, Any]:
    return {
        "id": str(uuid.uuid4()),
        "name": name,
        "category": category,
        "brand": "Nike",
        "price": price,
        "stock": stock,
        "availability": None,
        "image": None,
        "images": None,
        "description": None,
        "created_at": "2025-01-01T00:00:00+00:00",
    }


def make_product(**kwargs: Any) -> Product:
    return Product.model_validate(product_row(**kwargs))


def user_row(
    *,
    user_id: uuid.UUID | None = None,
    email: str = "aina@example.com",
    first_name: str = "Aina",
    last_name: str = "Rahman",
    role: str | None = "user",
    created_at: str | None = "2025-06-02T00:00:00+00:00",
) -> dict[str, Any]:
    return {
        "id": str(user_id or uuid.uuid4()),
        "email": email,
        "first_name": first_name,
        "last_name": last_name,
        "phone_number": "",
        "gender": "",
        "photo_url": None,
        "address": None,
        "role": role,
        "created_at": created_at,
        "updated_at": created_at,
    }


def make_user(**kwargs: Any) -> User:
    return User.model_validate(user_row(**kwargs))


def mock_client(rows: list[dict[str, Any]] | None = None) -> MagicMock:
    """
    Supabase client whose query builder chains back onto itself and whose
    execute() returns `rows`.
    """
    client = MagicMock()
    query = client.table.return_value
    for method in ("select", "eq", "order", "limit", "update"):
        getattr(query, method).return_value = query
    query.execute.return_value = MagicMock(data=rows or [])
    return client


def utc(year: int, month: int, day: int, hour: int = 12) -> datetime:
    return datetime(year, month, day, hour, tzinfo=timezone.utc)
