# app/repositories/order_repo.py
import uuid

from supabase import Client

from app.models.order import Order
from app.repositories.base import SupabaseRepository


class OrderRepository(SupabaseRepository):
    """
    Data access layer for the `orders` table.

    Read-only: orders are written by the storefront checkout.
    """

    table_name = "orders"

    def fetch_all(
        self,
        client: Client,
        payment_status: str | None = None,
    ) -> list[Order]:
        """
        Full collection read, optionally filtered on payment_status.
        """
        query = self._table(client).select("*")
        if payment_status is not None:
            query = query.eq("payment_status", payment_status)
        return self._parse(Order, self._execute(query))

    def list_recent(self, client: Client, limit: int = 10) -> list[Order]:
        query = (
            self._table(client)
            .select("*")
            .order("created_at", desc=True)
            .limit(limit)
        )
        return self._parse(Order, self._execute(query))

    def get_by_id(self, client: Client, order_id: uuid.UUID) -> Order | None:
        query = self._table(client).select("*").eq("id", str(order_id)).limit(1)
        rows = self._execute(query)
        return self._parse_one(Order, rows)
