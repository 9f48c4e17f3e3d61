# app/schemas/common.py
from typing import Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class Page(BaseModel, Generic[T]):
    """
    One page of a filtered listing.

    `total` counts all matches, not just this page.
    """

    items: list[T]
    total: int
    page: int
    per_page: int
    total_pages: int
