"""In-Memory Order Store: the ordered order collection plus its id supplier.

Invariants:
    - Storage order is insertion order; list_all never sorts or filters
    - Ids are unique: next_id retries the supplier until it misses every stored id,
      append refuses an id already present
    - Ids are compared as strings in find and remove
    - locked() is re-entrant so a service can hold it across a whole validator chain

Design Decisions:
    - Owned instance injected into the service (no module-level list): each app
      and each test gets its own collection
"""

import logging
import threading
from contextlib import contextmanager
from typing import Callable, Iterable, Iterator
from uuid import uuid4

from grubdash.core.domain_types import OrderId
from grubdash.core.errors import ConflictError
from grubdash.core.order import Order

logger = logging.getLogger(__name__)

IdSupplier = Callable[[], str]

MAX_ID_ATTEMPTS: int = 100


def random_hex_id() -> str:
    """32-char hex id, the default supplier."""
    return uuid4().hex


class InMemoryOrderStore:
    """Mutable ordered collection of orders with serialized access."""

    def __init__(
        self,
        orders: Iterable[Order] | None = None,
        id_supplier: IdSupplier = random_hex_id,
    ):
        self._orders: list[Order] = []
        self._id_supplier = id_supplier
        self._lock = threading.RLock()
        for order in orders or ():
            self.append(order)

    def __len__(self) -> int:
        return len(self._orders)

    @contextmanager
    def locked(self) -> Iterator["InMemoryOrderStore"]:
        with self._lock:
            yield self

    def list_all(self) -> list[Order]:
        with self._lock:
            return list(self._orders)

    def find(self, order_id: str) -> Order | None:
        with self._lock:
            return next(
                (o for o in self._orders if o.id == str(order_id)), None,
            )

    def append(self, order: Order) -> None:
        with self._lock:
            if self.find(order.id) is not None:
                raise ConflictError(
                    f"Order id already exists: {order.id}",
                    code="DUPLICATE_ORDER_ID",
                )
            self._orders.append(order)

    def remove(self, order_id: str) -> Order | None:
        """Remove by id. Returns the removed order, None if it was not stored."""
        with self._lock:
            for index, order in enumerate(self._orders):
                if order.id == str(order_id):
                    return self._orders.pop(index)
            return None

    def next_id(self) -> OrderId:
        with self._lock:
            for _ in range(MAX_ID_ATTEMPTS):
                candidate = str(self._id_supplier())
                if candidate and self.find(candidate) is None:
                    return OrderId(candidate)
                logger.warning(
                    f"Id supplier returned unusable id {candidate!r}, retrying",
                )
        raise RuntimeError(
            f"Id supplier produced no unique id in {MAX_ID_ATTEMPTS} attempts",
        )
