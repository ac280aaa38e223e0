"""Domain Types: rich types that replace bare primitives in order logic.

Invariants:
    - OrderId wraps the opaque string id issued by the id supplier
    - All valid order states encoded as an Enum, never matched as loose substrings

Design Decisions:
    - str Enums serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

OrderId = NewType("OrderId", str)


# ─── Enums ───────────────────────────────────────────────────────

class OrderStatus(str, Enum):
    """Order lifecycle stages. Only PENDING orders may be deleted."""
    PENDING = "pending"
    PREPARING = "preparing"
    OUT_FOR_DELIVERY = "out-for-delivery"
    DELIVERED = "delivered"


class OrderRoute(str, Enum):
    """The five order operations; keys of the route validator table."""
    LIST = "list"
    READ = "read"
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


VALID_STATUSES: frozenset[str] = frozenset(s.value for s in OrderStatus)
