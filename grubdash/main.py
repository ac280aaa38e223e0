"""GrubDash Orders API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - The order store and service are built per app and kept on app.state
    - Logging configured on startup via the lifespan context manager
    - CORS configured from settings (not hardcoded)

Run with: uvicorn grubdash.main:app
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from grubdash.api.error_handlers import register_error_handlers
from grubdash.api.routes import health, orders
from grubdash.config import Settings, get_settings
from grubdash.infrastructure.observability import setup_logging
from grubdash.infrastructure.order_store import InMemoryOrderStore
from grubdash.infrastructure.seed_data import demo_orders
from grubdash.services.order_service import OrderService

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings: Settings = app.state.settings
    setup_logging(settings.log_level, settings.log_format)
    logger.info(
        f"{settings.app_name} started with "
        f"{len(app.state.order_service.orders.list_all())} order(s)",
    )
    yield
    logger.info(f"{settings.app_name} shutting down")


def create_app(
    settings: Settings | None = None,
    store: InMemoryOrderStore | None = None,
) -> FastAPI:
    """Build the API around an injected (or fresh) order store."""
    settings = settings or get_settings()
    if store is None:
        store = InMemoryOrderStore(
            demo_orders() if settings.seed_demo_orders else None,
        )

    app = FastAPI(
        title=settings.app_name, version=settings.app_version, lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.order_service = OrderService(
        store, default_status=settings.default_order_status,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(orders.router)

    register_error_handlers(app)
    return app


app = create_app()
