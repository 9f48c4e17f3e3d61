# app/services/pagination.py
import math
from typing import Sequence, TypeVar

from app.schemas.common import Page

T = TypeVar("T")


def paginate(items: Sequence[T], page: int = 1, per_page: int = 10) -> Page[T]:
    """
    Slice an already-filtered sequence into one page.

    Pages are 1-based; a page past the end is empty rather than an error.
    """
    page = max(page, 1)
    per_page = max(per_page, 1)
    total = len(items)
    start = (page - 1) * per_page
    return Page(
        items=list(items[start : start + per_page]),
        total=total,
        page=page,
        per_page=per_page,
        total_pages=math.ceil(total / per_page),
    )
