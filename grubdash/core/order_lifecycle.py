"""Order Lifecycle Rules: default status on create and the deletion gate.

Invariants:
    - Only an order whose status is exactly "pending" may be deleted
    - The create payload never chooses its own status; the policy does
"""

from grubdash.core.domain_types import OrderStatus
from grubdash.core.errors import ConflictError
from grubdash.core.order import Order


DELETABLE_STATUS: OrderStatus = OrderStatus.PENDING
DEFAULT_ORDER_STATUS: OrderStatus = OrderStatus.OUT_FOR_DELIVERY


def initial_status(default: OrderStatus | str | None = None) -> str:
    """Status assigned to a freshly created order."""
    return OrderStatus(default or DEFAULT_ORDER_STATUS).value


def check_order_deletable(order: Order) -> ConflictError | None:
    if order.status == DELETABLE_STATUS.value:
        return None
    return ConflictError(
        "order cannot be deleted unless order status = 'pending'",
        code="ORDER_NOT_DELETABLE",
    )
