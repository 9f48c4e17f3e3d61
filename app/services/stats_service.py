# app/services/stats_service.py
import logging
from datetime import datetime, timezone

from fastapi.concurrency import run_in_threadpool
from supabase import Client

from app.core.auth_gate import AuthGate
from app.models.order import PAYMENT_SUCCESS
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
from app.services import aggregations
from app.services.order_service import build_order_dto

logger = logging.getLogger(__name__)


class StatsService:
    """
    Orchestrates the admin dashboard reports.

    Every report:
      1. waits for the auth gate to produce a principal,
      2. reads full snapshots through the repositories (in the threadpool,
         the Supabase client is blocking),
      3. reduces them with the pure functions in `aggregations`.

    Failures are logged and re-raised unchanged; nothing is retried and no
    partial result is returned.
    """

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
        user_repo: UserRepository,
        auth_timeout: float = 4.0,
        currency_symbol: str = "RM",
    ):
        self.order_repo = order_repo
        self.product_repo = product_repo
        self.user_repo = user_repo
        self.auth_timeout = auth_timeout
        self.currency_symbol = currency_symbol

    async def get_dashboard_stats(
        self,
        client: Client,
        gate: AuthGate,
        now: datetime | None = None,
    ) -> AdminDashboardStats:
        try:
            await gate.await_principal(self.auth_timeout)

            orders = await run_in_threadpool(self.order_repo.fetch_all, client)
            total_products = await run_in_threadpool(self.product_repo.count, client)
            total_users = await run_in_threadpool(self.user_repo.count, client)

            return aggregations.compute_dashboard_stats(
                orders,
                total_products=total_products,
                total_users=total_users,
                now=now or datetime.now(timezone.utc),
            )
        except Exception as exc:
            logger.error("Error fetching dashboard stats: %s", exc)
            raise

    async def get_recent_orders(
        self,
        client: Client,
        gate: AuthGate,
        limit: int = 10,
    ) -> list[OrderRead]:
        try:
            await gate.await_principal(self.auth_timeout)
            orders = await run_in_threadpool(self.order_repo.list_recent, client, limit)
            return [build_order_dto(o) for o in orders]
        except Exception as exc:
            logger.error("Error fetching recent orders: %s", exc)
            raise

    async def get_top_products(
        self,
        client: Client,
        gate: AuthGate,
        limit: int = 5,
    ) -> list[TopProductRead]:
        try:
            await gate.await_principal(self.auth_timeout)
            orders = await run_in_threadpool(
                self.order_repo.fetch_all, client, PAYMENT_SUCCESS
            )
            ranked = aggregations.compute_top_products(orders, limit)
        except Exception as exc:
            logger.error("Error fetching top products: %s", exc)
            raise

        # Formatting happens here, at the edge; the ranking stays numeric.
        return [
            TopProductRead(
                product_id=p.product_id,
                name=p.name,
                sales=p.sales,
                revenue=aggregations.format_currency(p.revenue, self.currency_symbol),
            )
            for p in ranked
        ]

    async def get_category_distribution(
        self,
        client: Client,
        gate: AuthGate,
    ) -> list[CategoryShare]:
        try:
            await gate.await_principal(self.auth_timeout)
            orders = await run_in_threadpool(
                self.order_repo.fetch_all, client, PAYMENT_SUCCESS
            )
            products = await run_in_threadpool(self.product_repo.fetch_all, client)
            return aggregations.compute_category_distribution(orders, products)
        except Exception as exc:
            logger.error("Error fetching category distribution: %s", exc)
            raise

    async def get_chart_data(
        self,
        client: Client,
        gate: AuthGate,
        period: ChartPeriod = "month",
    ) -> list[ChartDataPoint]:
        try:
            await gate.await_principal(self.auth_timeout)
            orders = await run_in_threadpool(self.order_repo.fetch_all, client)
            return aggregations.compute_chart_series(orders, period)
        except Exception as exc:
            logger.error("Error fetching chart data: %s", exc)
            raise
