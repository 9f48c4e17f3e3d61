# app/repositories/product_repo.py
from supabase import Client

from app.models.product import Product
from app.repositories.base import SupabaseRepository


class ProductRepository(SupabaseRepository):
    """
    Data access layer for the `products` table.

    - Pure store operations (queries only).
    - No FastAPI, no business logic.
    """

    table_name = "products"

    def fetch_all(
        self,
        client: Client,
        category: str | None = None,
        order_by: str | None = None,
    ) -> list[Product]:
        query = self._table(client).select("*")
        if category is not None:
            query = query.eq("category", category)
        if order_by is not None:
            query = query.order(order_by)
        return self._parse(Product, self._execute(query))

    def count(self, client: Client) -> int:
        """Number of products, as the size of a full collection read."""
        return len(self.fetch_all(client))
