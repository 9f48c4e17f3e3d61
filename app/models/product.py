# app/models/product.py
import uuid
from datetime import datetime

from pydantic import ConfigDict, field_validator, model_validator
from sqlmodel import SQLModel, Field

IN_STOCK = "IN STOCK"
OUT_OF_STOCK = "OUT OF STOCK"


class Product(SQLModel):
    """
    Product catalog entry, a row of the `products` table.

    Fields:
      - id, name, category, brand, price, stock, availability,
        image, images, description, created_at
    """

    model_config = ConfigDict(extra="ignore")

    id: uuid.UUID

    name: str = Field(description="Display name of the product")

    category: str | None = Field(
        default=None,
        description="Explicit category; reports fall back to name keywords when empty",
    )
    brand: str | None = None

    # Kept as entered by staff, currency prefix included (e.g. "RM 459.00")
    price: str = ""

    stock: int = Field(default=0, ge=0)
    availability: str | None = None

    image: str | None = None
    images: list[str] = Field(default_factory=list)

    description: str | None = None

    created_at: datetime | None = None

    @field_validator("stock", mode="before")
    @classmethod
    def default_stock(cls, v):
        return v or 0

    @field_validator("images", mode="before")
    @classmethod
    def default_images(cls, v):
        return v or []

    @model_validator(mode="after")
    def derive_availability(self) -> "Product":
        if not self.availability:
            self.availability = IN_STOCK if self.stock > 0 else OUT_OF_STOCK
        return self
