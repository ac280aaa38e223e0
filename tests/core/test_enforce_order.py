"""Order Payload Enforcement: tests for the pure validators.

Tests cover:
    - presence checks follow JSON truthiness ([] present, "" and 0 absent)
    - dishes must be a non-empty list
    - quantity must be an integer > 0 and the offending dish is named
    - status must be one of the four lifecycle values
    - body id must match the path id when given
    - order_exists reports 404 with the requested id
"""

import pytest

from grubdash.core.enforce_order import (
    OrderRequest,
    is_present,
    is_valid_quantity,
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
from grubdash.core.errors import NotFoundError, ValidationError

QUANTITY_MESSAGE = (
    "must have quantity property, quantity must be an integer, "
    "and it must not be equal to or less than 0"
)


@pytest.fixture
def request_for(store):
    def _build(payload=None, order_id=None):
        return OrderRequest(orders=store, payload=payload or {}, order_id=order_id)
    return _build


# ─── is_present ──────────────────────────────────────────────────

@pytest.mark.parametrize(
    "value", [None, False, "", 0, 0.0, float("nan"), float("inf"), float("-inf")],
)
def test_is_present_rejects_falsy_json_values(value):
    assert is_present(value) is False


@pytest.mark.parametrize("value", ["a", 1, -1, True, [], {}, [0]])
def test_is_present_accepts_truthy_json_values(value):
    assert is_present(value) is True


# ─── presence ────────────────────────────────────────────────────

def test_check_has_deliver_to_missing(request_for):
    error = check_has_deliver_to(request_for({"mobileNumber": "555"}))
    assert isinstance(error, ValidationError)
    assert error.http_status == 400
    assert error.message == "A 'deliverTo' property is required."
    assert error.field == "deliverTo"


def test_check_has_deliver_to_empty_string(request_for):
    error = check_has_deliver_to(request_for({"deliverTo": ""}))
    assert error is not None


def test_check_has_deliver_to_passes(request_for):
    assert check_has_deliver_to(request_for({"deliverTo": "A"})) is None


def test_check_has_mobile_number_missing(request_for):
    error = check_has_mobile_number(request_for({"deliverTo": "A"}))
    assert error.message == "A 'mobileNumber' property is required."


def test_check_has_dishes_missing(request_for):
    error = check_has_dishes(request_for({}))
    assert error.message == "A 'dishes' property is required."


def test_check_has_dishes_accepts_empty_list(request_for):
    # An empty list is reported by the array check, not the presence check
    assert check_has_dishes(request_for({"dishes": []})) is None


def test_check_has_status_missing(request_for):
    error = check_has_status(request_for({"status": ""}))
    assert error.message == "A 'status' property is required."


# ─── dishes shape ────────────────────────────────────────────────

@pytest.mark.parametrize("dishes", [[], "dish", {"id": "d1"}, 3])
def test_check_dishes_is_array_rejects(request_for, dishes):
    error = check_dishes_is_array(request_for({"dishes": dishes}))
    assert error.message == (
        "invalid dishes property: dishes property must be non-empty array"
    )


def test_check_dishes_is_array_passes(request_for):
    payload = {"dishes": [{"id": "d1", "quantity": 1}]}
    assert check_dishes_is_array(request_for(payload)) is None


# ─── quantity ────────────────────────────────────────────────────

@pytest.mark.parametrize("quantity", [1, 2, 100, 3.0])
def test_is_valid_quantity_accepts(quantity):
    assert is_valid_quantity(quantity) is True


@pytest.mark.parametrize(
    "quantity", [None, 0, -1, 1.5, "2", True, float("nan"), float("inf")],
)
def test_is_valid_quantity_rejects(quantity):
    assert is_valid_quantity(quantity) is False


@pytest.mark.parametrize("quantity", [0, -3, 2.5, "2"])
def test_check_dishes_quantity_names_offending_dish(request_for, quantity):
    payload = {"dishes": [{"id": "ok", "quantity": 1}, {"id": "bad", "quantity": quantity}]}
    error = check_dishes_quantity(request_for(payload))
    assert error.message == f"dish bad {QUANTITY_MESSAGE}"
    assert error.field == "dishes.1.quantity"


def test_check_dishes_quantity_missing_quantity(request_for):
    error = check_dishes_quantity(request_for({"dishes": [{"id": "d7"}]}))
    assert error.message == f"dish d7 {QUANTITY_MESSAGE}"


def test_check_dishes_quantity_reports_first_offender_only(request_for):
    payload = {"dishes": [{"id": "a", "quantity": 0}, {"id": "b", "quantity": 0}]}
    error = check_dishes_quantity(request_for(payload))
    assert error.message.startswith("dish a ")


def test_check_dishes_quantity_uses_index_without_id(request_for):
    payload = {"dishes": [{"id": "a", "quantity": 1}, {"quantity": -1}]}
    error = check_dishes_quantity(request_for(payload))
    assert error.message == f"dish 1 {QUANTITY_MESSAGE}"


def test_check_dishes_quantity_non_object_entry(request_for):
    error = check_dishes_quantity(request_for({"dishes": ["d1"]}))
    assert error is not None


def test_check_dishes_quantity_passes(request_for):
    payload = {"dishes": [{"id": "a", "quantity": 1}, {"id": "b", "quantity": 4}]}
    assert check_dishes_quantity(request_for(payload)) is None


def test_check_dishes_quantity_ignores_non_list(request_for):
    assert check_dishes_quantity(request_for({"dishes": "x"})) is None


# ─── status ──────────────────────────────────────────────────────

@pytest.mark.parametrize(
    "status", ["pending", "preparing", "out-for-delivery", "delivered"],
)
def test_check_status_is_valid_accepts_lifecycle_values(request_for, status):
    assert check_status_is_valid(request_for({"status": status})) is None


@pytest.mark.parametrize(
    "status", ["invalid", "PENDING", "not-pending", "delivered!", 1, ["pending"]],
)
def test_check_status_is_valid_rejects(request_for, status):
    error = check_status_is_valid(request_for({"status": status}))
    assert error.message == (
        "status property must be valid string: 'pending', 'preparing', "
        "'out-for-delivery', or 'delivered'"
    )


# ─── identity ────────────────────────────────────────────────────

@pytest.mark.parametrize("body_id", [None, "", "abc"])
def test_check_id_matches_path_passes(request_for, body_id):
    payload = {} if body_id is None else {"id": body_id}
    assert check_id_matches_path(request_for(payload, order_id="abc")) is None


def test_check_id_matches_path_rejects_mismatch(request_for):
    error = check_id_matches_path(request_for({"id": "xyz"}, order_id="abc"))
    assert error.message == "id xyz must match orderId provided in parameters"
    assert error.http_status == 400


def test_check_id_matches_path_compares_strictly(request_for):
    error = check_id_matches_path(request_for({"id": 5}, order_id="5"))
    assert error is not None


def test_check_order_exists_passes(request_for):
    assert check_order_exists(request_for(order_id="pending-order")) is None


def test_check_order_exists_not_found(request_for):
    error = check_order_exists(request_for(order_id="missing"))
    assert isinstance(error, NotFoundError)
    assert error.http_status == 404
    assert error.message == "Order id not found: missing"


def test_validators_do_not_mutate_store(request_for, store):
    before = [o.to_dict() for o in store.list_all()]
    check_order_exists(request_for(order_id="pending-order"))
    check_dishes_quantity(request_for({"dishes": [{"id": "a", "quantity": 0}]}))
    assert [o.to_dict() for o in store.list_all()] == before
