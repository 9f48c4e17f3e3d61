# app/services/product_service.py
from supabase import Client

from app.models.product import Product
from app.repositories.product_repo import ProductRepository


class ProductService:
    """
    Read side of the product catalog for staff.
    """

    def __init__(self, repo: ProductRepository):
        self.repo = repo

    def list_products(
        self,
        client: Client,
        category: str = "all",
        sort_by: str = "name",
    ) -> list[Product]:
        """
        List products, optionally restricted to one category ("all" = any),
        sorted by `sort_by` on the store side.
        """
        wanted = None if not category or category == "all" else category
        return self.repo.fetch_all(client, category=wanted, order_by=sort_by)

    def list_categories(self, client: Client) -> list[str]:
        """Distinct non-empty categories, alphabetically."""
        products = self.repo.fetch_all(client)
        return sorted({p.category for p in products if p.category})
