# print_dashboard_report.py
"""
Print the admin dashboard report from the command line.

Signs a staff account in with the Supabase client while the report is
already waiting on the auth gate, the same way a freshly opened dashboard
waits for its session to be restored.

    REPORT_EMAIL=admin@example.com REPORT_PASSWORD=... python print_dashboard_report.py
"""
import asyncio
import logging
import os

from app.core.auth_gate import SubscriptionAuthGate, SupabaseAuthStateSource
from app.core.config import get_settings
from app.core.supabase_client import supabase_public
from app.repositories.order_repo import OrderRepository
from app.repositories.product_repo import ProductRepository
from app.repositories.user_repo import UserRepository
from app.services.aggregations import format_currency
from app.services.stats_service import StatsService

logging.basicConfig(level=logging.INFO)


async def main() -> None:
    settings = get_settings()
    client = supabase_public()
    gate = SubscriptionAuthGate(SupabaseAuthStateSource(client))
    service = StatsService(
        OrderRepository(),
        ProductRepository(),
        UserRepository(),
        auth_timeout=settings.auth_wait_timeout,
        currency_symbol=settings.CURRENCY_SYMBOL,
    )

    sign_in = asyncio.create_task(
        asyncio.to_thread(
            client.auth.sign_in_with_password,
            {
                "email": os.environ["REPORT_EMAIL"],
                "password": os.environ["REPORT_PASSWORD"],
            },
        )
    )

    stats = await service.get_dashboard_stats(client, gate)
    await sign_in

    top_products = await service.get_top_products(client, gate, limit=5)
    categories = await service.get_category_distribution(client, gate)

    print("Dashboard")
    print(f"  Revenue:  {format_currency(stats.total_revenue, settings.CURRENCY_SYMBOL)} ({stats.revenue_growth:+.1f}%)")
    print(f"  Orders:   {stats.total_orders} ({stats.orders_growth:+.1f}%)")
    print(f"  Products: {stats.total_products}")
    print(f"  Users:    {stats.total_users}")

    print("Top products")
    for rank, product in enumerate(top_products, start=1):
        print(f"  {rank}. {product.name} - {product.sales} sold, {product.revenue}")

    print("Categories")
    for share in categories:
        print(f"  {share.name}: {share.value}%")


if __name__ == "__main__":
    asyncio.run(main())
