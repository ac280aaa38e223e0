"""Boundary Protocols: contracts between the order core and the store.

Invariants:
    - Core NEVER imports from infrastructure; the store is handed in
    - Ids are compared as strings everywhere

Design Decisions:
    - Protocol over ABC: structural subtyping, tests may pass any list-backed fake
    - Methods are synchronous: the store is in-memory and every call completes immediately
"""

from contextlib import AbstractContextManager
from typing import Protocol

from grubdash.core.domain_types import OrderId
from grubdash.core.order import Order


class OrderRepository(Protocol):
    """Contract for the order collection, implemented by infrastructure."""

    def list_all(self) -> list[Order]: ...
    def find(self, order_id: str) -> Order | None: ...
    def append(self, order: Order) -> None: ...
    def remove(self, order_id: str) -> Order | None: ...
    def next_id(self) -> OrderId: ...
    def locked(self) -> AbstractContextManager: ...
