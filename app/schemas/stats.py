# app/schemas/stats.py
from typing import Literal

from pydantic import ConfigDict
from sqlmodel import SQLModel

ChartPeriod = Literal["day", "month"]


class AdminDashboardStats(SQLModel):
    """
    Headline numbers for the admin dashboard.

    Growth values are month-over-month percentages with one decimal.
    """
    model_config = ConfigDict(extra="forbid")

    total_revenue: float
    total_orders: int
    total_products: int
    total_users: int
    revenue_growth: float
    orders_growth: float


class CategoryShare(SQLModel):
    """
    Percentage of units sold falling in one category.
    """
    model_config = ConfigDict(extra="forbid")

    name: str
    value: int
    color: str


class ChartDataPoint(SQLModel):
    """
    Revenue and order count for one day (YYYY-MM-DD) or month (YYYY-MM).
    """
    model_config = ConfigDict(extra="forbid")

    date: str
    revenue: float
    orders: int


class TopProduct(SQLModel):
    """
    Units sold and revenue for a single product id.
    """
    model_config = ConfigDict(extra="forbid")

    product_id: str
    name: str
    sales: int
    revenue: float


class TopProductRead(SQLModel):
    """
    Top product as shown to staff, revenue already formatted.
    """
    model_config = ConfigDict(extra="forbid")

    product_id: str
    name: str
    sales: int
    revenue: str
