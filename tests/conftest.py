import os

# Settings are read at import time by the app modules.
os.environ.setdefault("SUPABASE_URL", "https://test-project.supabase.co")
os.environ.setdefault("SUPABASE_KEY", "test-anon-key")
os.environ.setdefault("SUPABASE_JWT_SECRET", "test-jwt-secret")

import pytest  # noqa: E402

from tests.factories import make_order, make_product  # noqa: E402


@pytest.fixture
def june_orders():
    """Three orders around a June 2025 "now": paid June, paid May, pending June."""
    return [
        make_order(total_amount=100.0, payment_status="success", created_at="2025-06-10T09:00:00+00:00"),
        make_order(total_amount=50.0, payment_status="success", created_at="2025-05-20T09:00:00+00:00"),
        make_order(total_amount=999.0, payment_status="pending", created_at="2025-06-11T09:00:00+00:00"),
    ]


@pytest.fixture
def catalog():
    return [
        make_product(name="Air Jordan 1 Retro", category="Basketball"),
        make_product(name="Ultraboost Light", category="Running"),
        make_product(name="Team Hoodie", category=None),
    ]
