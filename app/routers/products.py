# app/routers/products.py
from fastapi import APIRouter, Depends
from supabase import Client

from app.core.auth import require_admin
from app.database import get_client
from app.repositories.product_repo import ProductRepository
from app.schemas.product import ProductRead, ProductSortField
from app.services.product_service import ProductService

router = APIRouter(prefix="/admin/products", tags=["Products"])

repo = ProductRepository()
service = ProductService(repo)


@router.get(
    "",
    response_model=list[ProductRead],
    dependencies=[Depends(require_admin)],
)
def list_products(
    client: Client = Depends(get_client),
    category: str = "all",
    sort_by: ProductSortField = "name",
):
    """
    List products (admin only).

    Query params:
      - category: exact category name, or "all"
      - sort_by: name | price | stock | created_at
    """
    return service.list_products(client, category, sort_by)


@router.get(
    "/categories",
    response_model=list[str],
    dependencies=[Depends(require_admin)],
)
def list_categories(client: Client = Depends(get_client)):
    """
    Distinct product categories in use.
    """
    return service.list_categories(client)
