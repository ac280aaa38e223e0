"""Root conftest: shared fixtures for order tests.

Invariants:
    - Every test builds its own store; nothing is shared across tests
    - Ids are deterministic ("order-1", "order-2", ...) unless a test seeds its own
"""

import itertools
import os

import pytest

# Keep test runs independent of a developer's .env
os.environ.setdefault("LOG_FORMAT", "text")
os.environ.setdefault("SEED_DEMO_ORDERS", "false")

from grubdash.core.order import Order  # noqa: E402
from grubdash.infrastructure.order_store import InMemoryOrderStore  # noqa: E402
from grubdash.services.order_service import OrderService  # noqa: E402


PENDING_ID = "pending-order"
PREPARING_ID = "preparing-order"


def make_order(order_id: str, status: str = "pending", **fields) -> Order:
    data = {
        "id": order_id,
        "deliverTo": "308 Negra Arroyo Lane, Albuquerque, NM",
        "mobileNumber": "(505) 143-3369",
        "status": status,
        "dishes": [{"id": "d1", "name": "Falafel bagel", "price": 6, "quantity": 1}],
    }
    data.update(fields)
    return Order.from_dict(data)


def counter_ids():
    counter = itertools.count(1)
    return lambda: f"order-{next(counter)}"


@pytest.fixture
def store() -> InMemoryOrderStore:
    return InMemoryOrderStore(
        [make_order(PENDING_ID, "pending"), make_order(PREPARING_ID, "preparing")],
        id_supplier=counter_ids(),
    )


@pytest.fixture
def service(store) -> OrderService:
    return OrderService(store)


@pytest.fixture
def valid_payload() -> dict:
    return {
        "deliverTo": "Rick Sanchez (C-132)",
        "mobileNumber": "(202) 456-1111",
        "dishes": [{"id": "d1", "quantity": 2}],
    }


@pytest.fixture
def order_factory():
    return make_order
