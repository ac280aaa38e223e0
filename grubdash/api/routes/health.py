"""Health & Readiness Probes.

Invariants:
    - GET /health/ always returns 200 if the process is up (liveness)
    - GET /health/ready returns 200 with the current order count (readiness)
"""

from fastapi import APIRouter, Depends, Request, status

from grubdash.api.routes.orders import get_order_service
from grubdash.services.order_service import OrderService

router = APIRouter(prefix="/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check(request: Request):
    """Basic liveness probe. Returns 200 if the process is up."""
    settings = request.app.state.settings
    return {
        "status": "healthy",
        "service": settings.app_name,
        "version": settings.app_version,
    }


@router.get("/ready")
async def readiness_check(service: OrderService = Depends(get_order_service)):
    return {
        "status": "ready",
        "checks": {"order_store": "healthy"},
        "orders": len(service.orders.list_all()),
    }
