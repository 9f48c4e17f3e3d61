"""Tests for the admin listing services: orders, users, products."""

import uuid
from unittest.mock import MagicMock

import pytest
from fastapi import HTTPException

from app.schemas.user import UserRoleUpdate
from app.services.order_service import ORDER_SEARCH_WINDOW, OrderService, filter_orders
from app.services.pagination import paginate
from app.services.product_service import ProductService
from app.services.user_service import UserService, filter_users
from tests.factories import item, make_order, make_product, make_user, utc


class TestPaginate:
    def test_first_page(self):
        page = paginate(list(range(25)), page=1, per_page=10)
        assert page.items == list(range(10))
        assert page.total == 25
        assert page.total_pages == 3

    def test_last_partial_page(self):
        page = paginate(list(range(25)), page=3, per_page=10)
        assert page.items == [20, 21, 22, 23, 24]

    def test_past_the_end_is_empty(self):
        page = paginate([1, 2], page=5, per_page=10)
        assert page.items == []
        assert page.total == 2

    def test_empty(self):
        page = paginate([], page=1, per_page=10)
        assert page.total_pages == 0

    def test_page_is_clamped(self):
        assert paginate([1, 2, 3], page=0, per_page=2).page == 1


class TestFilterOrders:
    @pytest.fixture
    def orders(self):
        return [
            make_order(order_id="ORD-1001", customer_name="Aina Rahman", status="shipped"),
            make_order(order_id="ORD-1002", customer_name="Daniel Tan", status="pending"),
            make_order(order_id="ORD-2001", customer_name="Priya Nair", status="delivered"),
        ]

    def test_search_order_number(self, orders):
        assert [o.order_id for o in filter_orders(orders, "ord-10")] == ["ORD-1001", "ORD-1002"]

    def test_search_customer_name(self, orders):
        assert [o.order_id for o in filter_orders(orders, "  PRIYA ")] == ["ORD-2001"]

    def test_status_filter(self, orders):
        assert [o.order_id for o in filter_orders(orders, status_filter="Shipped")] == ["ORD-1001"]

    def test_all_disables_filters(self, orders):
        assert len(filter_orders(orders, "", "all")) == 3


class TestOrderService:
    def test_search_reads_recent_window(self):
        repo = MagicMock()
        repo.list_recent.return_value = [
            make_order(order_id=f"ORD-{i}", items=[item("p1", "Air Max", 2, 10.0)]) for i in range(12)
        ]
        client = MagicMock()

        page = OrderService(repo).search_orders(client, page=2, per_page=5)

        repo.list_recent.assert_called_once_with(client, ORDER_SEARCH_WINDOW)
        assert page.total == 12
        assert [o.order_id for o in page.items] == [f"ORD-{i}" for i in range(5, 10)]
        assert page.items[0].items[0].line_total == 20.0

    def test_get_order_not_found(self):
        repo = MagicMock()
        repo.get_by_id.return_value = None

        with pytest.raises(HTTPException) as excinfo:
            OrderService(repo).get_order(MagicMock(), uuid.uuid4())
        assert excinfo.value.status_code == 404


class TestFilterUsers:
    @pytest.fixture
    def users(self):
        return [
            make_user(email="aina@example.com", first_name="Aina", last_name="Rahman", role="admin"),
            make_user(email="dan@example.com", first_name="Daniel", last_name="Tan", role=None),
        ]

    def test_search_full_name(self, users):
        assert [u.email for u in filter_users(users, "daniel tan")] == ["dan@example.com"]

    def test_missing_role_is_user(self, users):
        assert [u.email for u in filter_users(users, role="user")] == ["dan@example.com"]

    def test_admin_role(self, users):
        assert [u.email for u in filter_users(users, role="admin")] == ["aina@example.com"]


class TestUserService:
    def test_summary(self):
        repo = MagicMock()
        repo.fetch_all.return_value = [
            make_user(role="admin", created_at="2025-01-05T00:00:00+00:00"),
            make_user(role="user", created_at="2025-06-02T00:00:00+00:00"),
            make_user(role=None, created_at="2025-06-30T23:00:00+00:00"),
            make_user(role="user", created_at=None),
        ]

        summary = UserService(repo).get_summary(MagicMock(), now=utc(2025, 6, 15))

        assert summary.total == 4
        assert summary.admins == 1
        assert summary.customers == 3
        assert summary.new_this_month == 2

    def test_update_role(self):
        user = make_user(role="user")
        promoted = make_user(user_id=user.id, role="admin")
        repo = MagicMock()
        repo.get_by_id.return_value = user
        repo.update_role.return_value = promoted
        client = MagicMock()

        result = UserService(repo).update_role(client, user.id, UserRoleUpdate(role="admin"))

        repo.update_role.assert_called_once_with(client, user.id, "admin")
        assert result.is_admin

    def test_update_role_unknown_user(self):
        repo = MagicMock()
        repo.get_by_id.return_value = None

        with pytest.raises(HTTPException) as excinfo:
            UserService(repo).update_role(MagicMock(), uuid.uuid4(), UserRoleUpdate(role="admin"))
        assert excinfo.value.status_code == 404
        repo.update_role.assert_not_called()

    def test_is_admin(self):
        repo = MagicMock()
        repo.get_by_id.return_value = None
        assert UserService(repo).is_admin(MagicMock(), uuid.uuid4()) is False


class TestProductService:
    def test_all_means_no_category_filter(self):
        repo = MagicMock()
        client = MagicMock()

        ProductService(repo).list_products(client, category="all", sort_by="price")

        repo.fetch_all.assert_called_once_with(client, category=None, order_by="price")

    def test_categories_sorted_and_distinct(self):
        repo = MagicMock()
        repo.fetch_all.return_value = [
            make_product(category="Running"),
            make_product(category="Basketball"),
            make_product(category="Running"),
            make_product(category=None),
        ]

        assert ProductService(repo).list_categories(MagicMock()) == ["Basketball", "Running"]
