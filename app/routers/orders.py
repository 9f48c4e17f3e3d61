# app/routers/orders.py
import uuid

from fastapi import APIRouter, Depends, Query
from supabase import Client

from app.core.auth import require_admin
from app.database import get_client
from app.repositories.order_repo import OrderRepository
from app.schemas.common import Page
from app.schemas.order import OrderRead
from app.services.order_service import OrderService

router = APIRouter(prefix="/admin/orders", tags=["Orders"])

order_repo = OrderRepository()
service = OrderService(order_repo)


@router.get(
    "",
    response_model=Page[OrderRead],
    dependencies=[Depends(require_admin)],
)
def search_orders(
    client: Client = Depends(get_client),
    search: str = "",
    status: str = "all",
    page: int = Query(1, ge=1),
    per_page: int = Query(10, ge=1, le=50),
):
    """
    Search recent orders (admin only).

      - search: matches order number or customer name
      - status: fulfillment status, or "all"
    """
    return service.search_orders(client, search, status, page, per_page)


@router.get(
    "/{order_id}",
    response_model=OrderRead,
    dependencies=[Depends(require_admin)],
)
def get_order(
    order_id: uuid.UUID,
    client: Client = Depends(get_client),
):
    """
    Get any order with items (admin only).
    """
    return service.get_order(client, order_id)
