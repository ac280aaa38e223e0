"""Order Service: runs each route's validator chain, then its one terminal operation.

Invariants:
    - The store lock is held from the first validator to the end of the terminal
      operation, so find-then-mutate is atomic
    - Mutation happens only after the whole chain passed (no partial writes)
    - Every call ends in exactly one outcome: a return value or one raised GrubDashError
    - Returned orders are snapshots (to_dict), never live store objects
"""

import copy
import logging
from typing import Any

from grubdash.core.domain_types import OrderRoute, OrderStatus
from grubdash.core.enforce_order import OrderRequest
from grubdash.core.errors import NotFoundError
from grubdash.core.order import Order
from grubdash.core.order_lifecycle import check_order_deletable, initial_status
from grubdash.core.order_pipeline import validate_route
from grubdash.core.repository_protocols import OrderRepository

logger = logging.getLogger(__name__)


class OrderService:
    """List, read, create, update and delete orders against an injected store."""

    def __init__(
        self,
        orders: OrderRepository,
        default_status: OrderStatus | str | None = None,
    ):
        self.orders = orders
        self.default_status = initial_status(default_status)

    def _validate(
        self,
        route: OrderRoute,
        payload: dict[str, Any] | None = None,
        order_id: str | None = None,
    ) -> None:
        request = OrderRequest(
            orders=self.orders, payload=payload or {}, order_id=order_id,
        )
        error = validate_route(route, request)
        if error is not None:
            logger.info(
                f"Rejected {route.value}: {error.message}",
                extra={
                    "route": route.value,
                    "order_id": order_id,
                    "error_code": error.code,
                },
            )
            raise error

    def _found(self, order_id: str) -> Order:
        order = self.orders.find(order_id)
        if order is None:
            raise NotFoundError(order_id)
        return order

    def list_orders(self) -> list[dict[str, Any]]:
        with self.orders.locked():
            self._validate(OrderRoute.LIST)
            return [order.to_dict() for order in self.orders.list_all()]

    def read_order(self, order_id: str) -> dict[str, Any]:
        with self.orders.locked():
            self._validate(OrderRoute.READ, order_id=order_id)
            return self._found(order_id).to_dict()

    def create_order(self, payload: dict[str, Any] | None) -> dict[str, Any]:
        with self.orders.locked():
            self._validate(OrderRoute.CREATE, payload)
            order = Order(
                id=self.orders.next_id(),
                deliver_to=payload["deliverTo"],
                mobile_number=payload["mobileNumber"],
                status=self.default_status,
                dishes=copy.deepcopy(payload["dishes"]),
            )
            self.orders.append(order)
            logger.info(
                f"Created order {order.id}",
                extra={"route": OrderRoute.CREATE.value, "order_id": order.id},
            )
            return order.to_dict()

    def update_order(
        self, order_id: str, payload: dict[str, Any] | None,
    ) -> dict[str, Any]:
        with self.orders.locked():
            self._validate(OrderRoute.UPDATE, payload, order_id)
            order = self._found(order_id)
            order.overwrite(payload)
            logger.info(
                f"Updated order {order.id} (status={order.status})",
                extra={"route": OrderRoute.UPDATE.value, "order_id": order.id},
            )
            return order.to_dict()

    def delete_order(self, order_id: str) -> None:
        with self.orders.locked():
            self._validate(OrderRoute.DELETE, order_id=order_id)
            error = check_order_deletable(self._found(order_id))
            if error is not None:
                error.context.route = OrderRoute.DELETE.value
                error.context.order_id = order_id
                logger.info(
                    f"Rejected delete: {error.message}",
                    extra={
                        "route": OrderRoute.DELETE.value,
                        "order_id": order_id,
                        "error_code": error.code,
                    },
                )
                raise error
            self.orders.remove(order_id)
            logger.info(
                f"Deleted order {order_id}",
                extra={"route": OrderRoute.DELETE.value, "order_id": order_id},
            )
