# app/services/aggregations.py
"""
Pure reductions behind the admin dashboard.

Every function takes already-fetched snapshots (orders, products) and
returns plain derived records. Nothing here talks to Supabase, so each
report is recomputed from scratch on every call.

Only orders whose payment_status is exactly "success" contribute to
revenue, categories, chart series, and rankings.
"""
import math
from datetime import datetime, timedelta, timezone
from typing import Iterable

from app.models.order import Order
from app.models.product import Product
from app.schemas.stats import (
    AdminDashboardStats,
    CategoryShare,
    ChartDataPoint,
    ChartPeriod,
    TopProduct,
)

# How many of the most recent buckets a chart keeps
CHART_BUCKET_LIMITS: dict[str, int] = {
    "day": 30,
    "month": 12,
}

CATEGORY_COLORS: dict[str, str] = {
    "Basketball": "#0088FE",
    "Running": "#00C49F",
    "Clothing": "#FFBB28",
    "Sneakers": "#FF8042",
    "Other": "#8884D8",
}
FALLBACK_CATEGORY_COLOR = "#8884D8"

# Ordered: first matching rule wins.
CATEGORY_KEYWORDS: list[tuple[str, tuple[str, ...]]] = [
    ("Basketball", ("basketball", "ball")),
    ("Running", ("running", "run")),
    ("Clothing", ("shirt", "clothing", "shorts", "apparel")),
    ("Sneakers", ("sneaker", "shoe", "nike", "adidas")),
]
DEFAULT_CATEGORY = "Other"


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def round_half_up(value: float, digits: int = 0) -> float:
    """
    Round to `digits` decimals with halves going toward +infinity.

    round_half_up(2.5) == 3.0, round_half_up(-2.5) == -2.0
    """
    factor = 10**digits
    return math.floor(value * factor + 0.5) / factor


def as_utc(value: datetime) -> datetime:
    """Naive timestamps are taken to be UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def successful_orders(orders: Iterable[Order]) -> list[Order]:
    return [o for o in orders if o.is_successful]


# ---------------------------------------------------------------------------
# Dashboard stats
# ---------------------------------------------------------------------------


def month_boundaries(now: datetime) -> tuple[datetime, datetime]:
    """
    Return (current_month_start, previous_month_start) for `now`, in UTC.

    The previous month is the half-open window
    [previous_month_start, current_month_start).
    """
    now = as_utc(now)
    current_start = datetime(now.year, now.month, 1, tzinfo=timezone.utc)
    previous_start = (current_start - timedelta(days=1)).replace(day=1)
    return current_start, previous_start


def growth_percent(current: float, previous: float) -> float:
    """
    Month-over-month change in percent, one decimal.

      previous > 0             -> (current - previous) / previous * 100
      previous == 0, current>0 -> 100
      both 0                   -> 0
    """
    if previous > 0:
        growth = (current - previous) / previous * 100
    elif current > 0:
        growth = 100.0
    else:
        growth = 0.0
    return round_half_up(growth, 1)


def compute_dashboard_stats(
    orders: Iterable[Order],
    total_products: int,
    total_users: int,
    now: datetime,
) -> AdminDashboardStats:
    """
    Lifetime revenue plus month-over-month growth from an orders snapshot.

    total_orders counts every order regardless of payment status; the
    revenue figures and growth buckets only use successful orders.
    Successful orders older than the previous month count toward the
    lifetime total but toward neither growth bucket.
    """
    current_start, previous_start = month_boundaries(now)

    total_orders = 0
    total_revenue = 0.0
    current_revenue = 0.0
    previous_revenue = 0.0
    current_orders = 0
    previous_orders = 0

    for order in orders:
        total_orders += 1
        if not order.is_successful:
            continue

        amount = order.total_amount or 0.0
        created = as_utc(order.created_at)
        total_revenue += amount

        if created >= current_start:
            current_revenue += amount
            current_orders += 1
        elif previous_start <= created < current_start:
            previous_revenue += amount
            previous_orders += 1

    return AdminDashboardStats(
        total_revenue=total_revenue,
        total_orders=total_orders,
        total_products=total_products,
        total_users=total_users,
        revenue_growth=growth_percent(current_revenue, previous_revenue),
        orders_growth=growth_percent(current_orders, previous_orders),
    )


# ---------------------------------------------------------------------------
# Categories
# ---------------------------------------------------------------------------


def categorize_by_name(name: str) -> str:
    """Keyword fallback when a product has no explicit category."""
    lowered = (name or "").lower()
    for category, keywords in CATEGORY_KEYWORDS:
        if any(keyword in lowered for keyword in keywords):
            return category
    return DEFAULT_CATEGORY


def build_category_lookup(products: Iterable[Product]) -> dict[str, str]:
    """Map lower-cased product name -> category (explicit or by keywords)."""
    lookup: dict[str, str] = {}
    for product in products:
        if not product.name:
            continue
        lookup[product.name.lower()] = product.category or categorize_by_name(product.name)
    return lookup


def compute_category_distribution(
    orders: Iterable[Order],
    products: Iterable[Product],
) -> list[CategoryShare]:
    """
    Share of units sold per category, as whole percentages, largest first.

    Items are matched to the catalog by lower-cased name; unknown names
    are classified by keywords. No units sold -> empty list.
    """
    lookup = build_category_lookup(products)

    counts: dict[str, int] = {}
    total_items = 0
    for order in successful_orders(orders):
        for item in order.items:
            category = lookup.get(item.name.lower()) or categorize_by_name(item.name)
            counts[category] = counts.get(category, 0) + item.quantity
            total_items += item.quantity

    if total_items <= 0:
        return []

    shares = [
        CategoryShare(
            name=name,
            value=int(round_half_up(count / total_items * 100)),
            color=CATEGORY_COLORS.get(name, FALLBACK_CATEGORY_COLOR),
        )
        for name, count in counts.items()
    ]
    return sorted(shares, key=lambda share: share.value, reverse=True)


# ---------------------------------------------------------------------------
# Chart series
# ---------------------------------------------------------------------------


def bucket_key(created_at: datetime, period: ChartPeriod) -> str:
    """YYYY-MM-DD for day buckets, YYYY-MM for month buckets (UTC)."""
    created = as_utc(created_at)
    if period == "day":
        return created.date().isoformat()
    return f"{created.year:04d}-{created.month:02d}"


def compute_chart_series(
    orders: Iterable[Order],
    period: ChartPeriod = "month",
) -> list[ChartDataPoint]:
    """
    Revenue and order count per bucket, oldest first, most recent
    30 days / 12 months only.
    """
    if period not in CHART_BUCKET_LIMITS:
        raise ValueError(f"Unsupported chart period: {period!r}")

    buckets: dict[str, list[float]] = {}
    for order in successful_orders(orders):
        key = bucket_key(order.created_at, period)
        bucket = buckets.setdefault(key, [0.0, 0])
        bucket[0] += order.total_amount or 0.0
        bucket[1] += 1

    # Keys are fixed-width and zero-padded, so string order is date order
    points = [
        ChartDataPoint(
            date=key,
            revenue=round_half_up(revenue, 2),
            orders=int(count),
        )
        for key, (revenue, count) in sorted(buckets.items())
    ]
    return points[-CHART_BUCKET_LIMITS[period]:]


# ---------------------------------------------------------------------------
# Top products
# ---------------------------------------------------------------------------


def compute_top_products(orders: Iterable[Order], limit: int = 5) -> list[TopProduct]:
    """
    Units sold and revenue per product id, best sellers first.

    Revenue uses the unit price recorded on each order line. Products
    with equal unit counts keep the order they were first seen in. Lines
    without a product id cannot be attributed and are left out.
    """
    totals: dict[str, TopProduct] = {}
    for order in successful_orders(orders):
        for item in order.items:
            if item.product_id is None:
                continue
            entry = totals.get(item.product_id)
            if entry is None:
                entry = TopProduct(product_id=item.product_id, name=item.name, sales=0, revenue=0.0)
                totals[item.product_id] = entry
            entry.sales += item.quantity
            entry.revenue += item.price * item.quantity

    ranked = sorted(totals.values(), key=lambda p: p.sales, reverse=True)
    return ranked[: max(limit, 0)]


def format_currency(amount: float, symbol: str = "RM") -> str:
    """Money for display: `RM1,234.50`, `-RM12.00`."""
    sign = "-" if amount < 0 else ""
    return f"{sign}{symbol}{abs(amount):,.2f}"
