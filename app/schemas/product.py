# app/schemas/product.py
import uuid
from datetime import datetime
from typing import Literal

from sqlmodel import SQLModel

# Columns the product listing may be sorted by
ProductSortField = Literal["name", "price", "stock", "created_at"]


class ProductRead(SQLModel):
    """
    Product as listed to staff.
    """

    id: uuid.UUID
    name: str
    category: str | None
    brand: str | None
    price: str
    stock: int
    availability: str
    image: str | None
    images: list[str]
    description: str | None
    created_at: datetime | None
