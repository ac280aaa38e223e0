"""Order Payload Enforcement: single-responsibility checks run before any mutation.

Invariants:
    - All functions are PURE: no IO, no side effects, the store is only read
    - Return an error object on violation, None on success
    - Every check reads one concern of the payload, so routes can reorder them freely
    - Presence follows JSON truthiness: null, false, "", 0, NaN and Infinity are absent;
      [] and {} are present (an empty dishes list fails the array check instead)

Design Decisions:
    - Return errors (not raise): the chain runner stops at the first one and the
      service decides when to raise
"""

import math
from dataclasses import dataclass, field
from typing import Any, Callable

from grubdash.core.domain_types import VALID_STATUSES
from grubdash.core.errors import GrubDashError, NotFoundError, ValidationError
from grubdash.core.repository_protocols import OrderRepository


@dataclass
class OrderRequest:
    """Everything a validator may inspect: body data, path id, and the store."""
    orders: OrderRepository
    payload: dict[str, Any] = field(default_factory=dict)
    order_id: str | None = None


Validator = Callable[[OrderRequest], GrubDashError | None]


def is_present(value: Any) -> bool:
    """JSON truthiness: the value counts as supplied."""
    if value is None or value is False:
        return False
    if isinstance(value, str):
        return value != ""
    if isinstance(value, (int, float)):
        return value != 0 and math.isfinite(value)
    return True


def _require(request: OrderRequest, name: str) -> ValidationError | None:
    if is_present(request.payload.get(name)):
        return None
    return ValidationError(f"A '{name}' property is required.", field=name)


# ─── Presence ────────────────────────────────────────────────────

def check_has_deliver_to(request: OrderRequest) -> ValidationError | None:
    return _require(request, "deliverTo")


def check_has_mobile_number(request: OrderRequest) -> ValidationError | None:
    return _require(request, "mobileNumber")


def check_has_dishes(request: OrderRequest) -> ValidationError | None:
    return _require(request, "dishes")


def check_has_status(request: OrderRequest) -> ValidationError | None:
    return _require(request, "status")


# ─── Shape ───────────────────────────────────────────────────────

def check_dishes_is_array(request: OrderRequest) -> ValidationError | None:
    """dishes must be a list with at least one entry."""
    dishes = request.payload.get("dishes")
    if isinstance(dishes, list) and dishes:
        return None
    return ValidationError(
        "invalid dishes property: dishes property must be non-empty array",
        field="dishes",
    )


def is_valid_quantity(quantity: Any) -> bool:
    """A number with no fractional part, strictly above zero. Booleans are not numbers."""
    if isinstance(quantity, bool) or not isinstance(quantity, (int, float)):
        return False
    if isinstance(quantity, float) and not quantity.is_integer():
        return False
    return quantity > 0


def check_dishes_quantity(request: OrderRequest) -> ValidationError | None:
    """Every dish needs an integer quantity > 0. Reports the first offender.

    A dish without an id is named by its position in the list.
    """
    dishes = request.payload.get("dishes")
    if not isinstance(dishes, list):
        return None  # shape is check_dishes_is_array's concern
    for index, dish in enumerate(dishes):
        entry = dish if isinstance(dish, dict) else {}
        if is_valid_quantity(entry.get("quantity")):
            continue
        dish_id = entry.get("id")
        label = dish_id if dish_id is not None else index
        return ValidationError(
            f"dish {label} must have quantity property, quantity must be an "
            f"integer, and it must not be equal to or less than 0",
            field=f"dishes.{index}.quantity",
        )
    return None


def check_status_is_valid(request: OrderRequest) -> ValidationError | None:
    status = request.payload.get("status")
    if isinstance(status, str) and status in VALID_STATUSES:
        return None
    return ValidationError(
        "status property must be valid string: 'pending', 'preparing', "
        "'out-for-delivery', or 'delivered'",
        field="status",
    )


# ─── Identity ────────────────────────────────────────────────────

def check_id_matches_path(request: OrderRequest) -> ValidationError | None:
    """A body id is optional; when given it must equal the path id."""
    body_id = request.payload.get("id")
    if body_id is None or body_id == "" or body_id == request.order_id:
        return None
    return ValidationError(
        f"id {body_id} must match orderId provided in parameters",
        field="id",
    )


def check_order_exists(request: OrderRequest) -> NotFoundError | None:
    if request.order_id is not None and request.orders.find(request.order_id):
        return None
    return NotFoundError(str(request.order_id))
