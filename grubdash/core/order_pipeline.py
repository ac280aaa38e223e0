"""Route Validator Chains: which checks run, in what order, for each operation.

Invariants:
    - ROUTE_VALIDATORS is the single source of truth for per-route composition
    - run_validators stops at the first error; later validators never run
    - Every OrderRoute has an entry (LIST has an empty chain)
"""

from typing import Iterable

from grubdash.core.domain_types import OrderRoute
from grubdash.core.errors import GrubDashError
from grubdash.core.enforce_order import (
    OrderRequest,
    Validator,
    check_has_deliver_to,
    check_has_mobile_number,
    check_has_dishes,
    check_has_status,
    check_dishes_is_array,
    check_dishes_quantity,
    check_status_is_valid,
    check_id_matches_path,
    check_order_exists,
)


ROUTE_VALIDATORS: dict[OrderRoute, tuple[Validator, ...]] = {
    OrderRoute.LIST: (),
    OrderRoute.READ: (check_order_exists,),
    OrderRoute.CREATE: (
        check_has_deliver_to,
        check_has_mobile_number,
        check_has_dishes,
        check_dishes_is_array,
        check_dishes_quantity,
    ),
    OrderRoute.UPDATE: (
        check_order_exists,
        check_id_matches_path,
        check_has_deliver_to,
        check_has_mobile_number,
        check_has_dishes,
        check_has_status,
        check_status_is_valid,
        check_dishes_is_array,
        check_dishes_quantity,
    ),
    OrderRoute.DELETE: (check_order_exists,),
}


def run_validators(
    validators: Iterable[Validator], request: OrderRequest,
) -> GrubDashError | None:
    """Run checks in order. Returns the first error or None."""
    for validator in validators:
        error = validator(request)
        if error is not None:
            return error
    return None


def validate_route(route: OrderRoute, request: OrderRequest) -> GrubDashError | None:
    """Run the chain registered for route."""
    error = run_validators(ROUTE_VALIDATORS[route], request)
    if error is not None:
        error.context.route = route.value
        if request.order_id is not None:
            error.context.order_id = request.order_id
    return error
