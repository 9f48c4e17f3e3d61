# app/services/order_service.py
import uuid
from typing import Iterable

from fastapi import HTTPException, status
from supabase import Client

from app.models.order import Order
from app.repositories.order_repo import OrderRepository
from app.schemas.common import Page
from app.schemas.order import OrderItemRead, OrderRead
from app.services.pagination import paginate

# How many recent orders the admin orders page searches through
ORDER_SEARCH_WINDOW = 50


def build_order_dto(order: Order) -> OrderRead:
    """
    Compose OrderRead from a stored order, including line totals.
    """
    items = [
        OrderItemRead(
            product_id=it.product_id,
            name=it.name,
            size=it.size,
            quantity=it.quantity,
            price=it.price,
            line_total=it.price * it.quantity,
        )
        for it in order.items
    ]
    return OrderRead(
        id=order.id,
        order_id=order.order_id,
        customer_name=order.customer_name,
        customer_email=order.customer_email,
        customer_phone=order.customer_phone,
        items=items,
        total_amount=order.total_amount,
        payment_status=order.payment_status,
        status=order.status or order.payment_status,
        created_at=order.created_at,
    )


def filter_orders(
    orders: Iterable[Order],
    search: str = "",
    status_filter: str = "all",
) -> list[Order]:
    """
    Case-insensitive search on order number or customer name, plus an
    optional fulfillment status filter ("all" disables it).
    """
    needle = (search or "").strip().lower()
    wanted = (status_filter or "all").lower()

    matches: list[Order] = []
    for order in orders:
        if needle and needle not in order.order_id.lower() and needle not in order.customer_name.lower():
            continue
        if wanted != "all" and (order.status or "").lower() != wanted:
            continue
        matches.append(order)
    return matches


class OrderService:
    """
    Admin order browsing.

    Responsibilities:
      - search/filter/paginate the most recent orders
      - fetch a single order with its items
    """

    def __init__(self, order_repo: OrderRepository):
        self.order_repo = order_repo

    def search_orders(
        self,
        client: Client,
        search: str = "",
        status_filter: str = "all",
        page: int = 1,
        per_page: int = 10,
    ) -> Page[OrderRead]:
        """
        Search the ORDER_SEARCH_WINDOW most recent orders.
        """
        recent = self.order_repo.list_recent(client, ORDER_SEARCH_WINDOW)
        matches = filter_orders(recent, search, status_filter)
        result = paginate(matches, page, per_page)
        result.items = [build_order_dto(o) for o in result.items]
        return result

    def get_order(self, client: Client, order_id: uuid.UUID) -> OrderRead:
        """
        Get any order with items.

        - 404 if order not found.
        """
        order = self.order_repo.get_by_id(client, order_id)
        if not order:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Order not found",
            )
        return build_order_dto(order)
