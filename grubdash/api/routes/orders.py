"""Order Routes: /orders and /orders/{order_id}.

Invariants:
    - Each handler makes exactly one OrderService call; the service runs the
      route's validators before its terminal operation
    - Errors leave as GrubDashError and are rendered by api/error_handlers.py
    - DELETE answers 204 with an empty body on success
"""

from fastapi import APIRouter, Depends, Request, Response, status

from grubdash.schemas.order import (
    ErrorBody, OrderEnvelope, OrderListEnvelope, OrderRequestBody,
)
from grubdash.services.order_service import OrderService

router = APIRouter(
    prefix="/orders",
    tags=["orders"],
    responses={400: {"model": ErrorBody}, 404: {"model": ErrorBody}},
)


def get_order_service(request: Request) -> OrderService:
    """The service built by create_app, shared by every request of that app."""
    return request.app.state.order_service


def _payload(body: OrderRequestBody | None) -> dict:
    return body.data if body is not None else {}


@router.get("", response_model=OrderListEnvelope)
async def list_orders(service: OrderService = Depends(get_order_service)):
    """List every order in storage order."""
    return {"data": service.list_orders()}


@router.post(
    "", response_model=OrderEnvelope, status_code=status.HTTP_201_CREATED,
)
async def create_order(
    body: OrderRequestBody | None = None,
    service: OrderService = Depends(get_order_service),
):
    """Create an order. Status is set by the default-status policy."""
    return {"data": service.create_order(_payload(body))}


@router.get("/{order_id}", response_model=OrderEnvelope)
async def read_order(
    order_id: str, service: OrderService = Depends(get_order_service),
):
    return {"data": service.read_order(order_id)}


@router.put("/{order_id}", response_model=OrderEnvelope)
async def update_order(
    order_id: str,
    body: OrderRequestBody | None = None,
    service: OrderService = Depends(get_order_service),
):
    """Overwrite deliverTo, mobileNumber, status and dishes."""
    return {"data": service.update_order(order_id, _payload(body))}


@router.delete("/{order_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_order(
    order_id: str, service: OrderService = Depends(get_order_service),
):
    """Delete a pending order."""
    service.delete_order(order_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
