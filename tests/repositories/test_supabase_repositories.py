"""Tests for the Supabase-backed repositories with a mocked client."""

import uuid

import httpx
import pytest
from postgrest.exceptions import APIError

from app.core.errors import DataFetchError, PermissionDeniedError
from app.repositories.base import is_permission_denied
from app.repositories.order_repo import OrderRepository
from app.repositories.product_repo import ProductRepository
from app.repositories.user_repo import UserRepository
from tests.factories import item, mock_client, order_row, product_row, user_row


def api_error(message: str, code: str | None = None) -> APIError:
    return APIError({"message": message, "code": code, "hint": None, "details": None})


class TestIsPermissionDenied:
    def test_postgres_privilege_code(self):
        assert is_permission_denied(api_error("permission denied for table orders", "42501"))

    def test_message_marker(self):
        assert is_permission_denied(api_error("Missing or insufficient permissions"))

    def test_other_errors(self):
        assert not is_permission_denied(api_error("relation does not exist", "42P01"))


class TestOrderRepository:
    def test_fetch_all_parses_rows(self):
        rows = [order_row(items=[item("p1", "Air Max", 2, 500.0)])]
        client = mock_client(rows)

        orders = OrderRepository().fetch_all(client)

        client.table.assert_called_once_with("orders")
        client.table.return_value.select.assert_called_once_with("*")
        client.table.return_value.eq.assert_not_called()
        assert len(orders) == 1
        assert orders[0].items[0].quantity == 2

    def test_fetch_all_filters_on_payment_status(self):
        client = mock_client([])

        OrderRepository().fetch_all(client, payment_status="success")

        client.table.return_value.eq.assert_called_once_with("payment_status", "success")

    def test_list_recent_orders_newest_first(self):
        client = mock_client([])

        OrderRepository().list_recent(client, limit=7)

        query = client.table.return_value
        query.order.assert_called_once_with("created_at", desc=True)
        query.limit.assert_called_once_with(7)

    def test_get_by_id_missing(self):
        client = mock_client([])
        assert OrderRepository().get_by_id(client, uuid.uuid4()) is None

    def test_permission_denied_names_table(self):
        client = mock_client()
        client.table.return_value.execute.side_effect = api_error(
            "permission denied for table orders", "42501"
        )

        with pytest.raises(PermissionDeniedError) as excinfo:
            OrderRepository().fetch_all(client)

        assert excinfo.value.collection == "orders"
        assert "'orders'" in excinfo.value.message

    def test_other_api_error_keeps_message(self):
        client = mock_client()
        client.table.return_value.execute.side_effect = api_error("column does not exist", "42703")

        with pytest.raises(DataFetchError) as excinfo:
            OrderRepository().fetch_all(client)

        assert excinfo.value.message == "column does not exist"

    def test_connection_error_is_fetch_failure(self):
        client = mock_client()
        client.table.return_value.execute.side_effect = httpx.ConnectError("connection refused")

        with pytest.raises(DataFetchError) as excinfo:
            OrderRepository().fetch_all(client)

        assert "connection refused" in excinfo.value.message


class TestProductRepository:
    def test_category_filter_and_order(self):
        client = mock_client([product_row(name="Ultraboost", category="Running", stock=0)])

        products = ProductRepository().fetch_all(client, category="Running", order_by="price")

        query = client.table.return_value
        query.eq.assert_called_once_with("category", "Running")
        query.order.assert_called_once_with("price")
        assert products[0].availability == "OUT OF STOCK"

    def test_count_is_collection_size(self):
        client = mock_client([product_row(), product_row(), product_row()])
        assert ProductRepository().count(client) == 3


class TestUserRepository:
    def test_missing_role_defaults_to_user(self):
        client = mock_client([user_row(role=None)])

        users = UserRepository().fetch_all(client)

        assert users[0].role == "user"
        client.table.return_value.order.assert_called_once_with("created_at", desc=True)

    def test_update_role(self):
        user_id = uuid.uuid4()
        client = mock_client([user_row(user_id=user_id, role="admin")])

        updated = UserRepository().update_role(client, user_id, "admin")

        query = client.table.return_value
        payload = query.update.call_args.args[0]
        assert payload["role"] == "admin"
        assert "updated_at" in payload
        query.eq.assert_called_once_with("id", str(user_id))
        assert updated.is_admin


class TestMalformedRows:
    def test_order_without_created_at_is_fetch_failure(self):
        row = order_row()
        row["created_at"] = None
        client = mock_client([row])

        with pytest.raises(DataFetchError) as excinfo:
            OrderRepository().fetch_all(client)

        assert excinfo.value.collection == "orders"
        assert excinfo.value.status_code == 502

    def test_negative_quantity_is_fetch_failure(self):
        client = mock_client([order_row(items=[item("p1", "Air Max", -1, 500.0)])])

        with pytest.raises(DataFetchError):
            OrderRepository().get_by_id(client, uuid.uuid4())

    def test_malformed_product_names_products_table(self):
        row = product_row()
        row["id"] = "not-a-uuid"
        client = mock_client([row])

        with pytest.raises(DataFetchError) as excinfo:
            ProductRepository().fetch_all(client)

        assert excinfo.value.collection == "products"
