# app/routers/admin_stats.py
from fastapi import APIRouter, Depends, Query
from supabase import Client

from app.core.auth import get_auth_gate, require_admin
from app.core.auth_gate import AuthGate
from app.core.config import get_settings
from app.database import get_client
from app.repositories.order_repo import OrderRepository
from app.repositories.product_repo import ProductRepository
from app.repositories.user_repo import UserRepository
from app.schemas.order import OrderRead
from app.schemas.stats import (
    AdminDashboardStats,
    CategoryShare,
    ChartDataPoint,
    ChartPeriod,
    TopProductRead,
)
from app.services.stats_service import StatsService

settings = get_settings()

router = APIRouter(prefix="/admin/stats", tags=["Admin Stats"])

service = StatsService(
    OrderRepository(),
    ProductRepository(),
    UserRepository(),
    auth_timeout=settings.auth_wait_timeout,
    currency_symbol=settings.CURRENCY_SYMBOL,
)


@router.get(
    "",
    response_model=AdminDashboardStats,
    dependencies=[Depends(require_admin)],
)
async def get_admin_dashboard_stats(
    client: Client = Depends(get_client),
    gate: AuthGate = Depends(get_auth_gate),
):
    """
    Headline statistics for the admin dashboard.

      - lifetime revenue of successful orders
      - order / product / user counts
      - month-over-month revenue and order growth (%)

    Only accessible to users with role='admin'.
    """
    return await service.get_dashboard_stats(client, gate)


@router.get(
    "/recent-orders",
    response_model=list[OrderRead],
    dependencies=[Depends(require_admin)],
)
async def get_recent_orders(
    limit: int = Query(10, ge=1, le=100),
    client: Client = Depends(get_client),
    gate: AuthGate = Depends(get_auth_gate),
):
    """
    Latest orders by created_at, any status.
    """
    return await service.get_recent_orders(client, gate, limit)


@router.get(
    "/top-products",
    response_model=list[TopProductRead],
    dependencies=[Depends(require_admin)],
)
async def get_top_products(
    limit: int = Query(5, ge=1, le=50),
    client: Client = Depends(get_client),
    gate: AuthGate = Depends(get_auth_gate),
):
    """
    Best selling products by units sold across successful orders.
    """
    return await service.get_top_products(client, gate, limit)


@router.get(
    "/categories",
    response_model=list[CategoryShare],
    dependencies=[Depends(require_admin)],
)
async def get_category_distribution(
    client: Client = Depends(get_client),
    gate: AuthGate = Depends(get_auth_gate),
):
    """
    Percentage of units sold per product category.
    """
    return await service.get_category_distribution(client, gate)


@router.get(
    "/chart",
    response_model=list[ChartDataPoint],
    dependencies=[Depends(require_admin)],
)
async def get_chart_data(
    period: ChartPeriod = "month",
    client: Client = Depends(get_client),
    gate: AuthGate = Depends(get_auth_gate),
):
    """
    Revenue and order counts over time.

    Query params:
      - period: "day" (last 30 days with sales) or "month" (last 12 months)
    """
    return await service.get_chart_data(client, gate, period)
