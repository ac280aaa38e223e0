"""Structured Logging: JSON formatter and setup for the orders API.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (order_id, route, error_code, path) surfaced when present
    - JSON format in production, human-readable in development

Design Decisions:
    - setup_logging called once on startup via lifespan
"""

import logging
import json
from datetime import datetime, timezone
from enum import Enum
from typing import Any

from grubdash.core.errors import GrubDashError


EXTRA_FIELDS: tuple[str, ...] = (
    "order_id", "route", "error_code", "path", "method", "status_code",
)


def _jsonable(value: Any) -> Any:
    """Enums (OrderRoute, OrderStatus) log as their wire value, datetimes as ISO 8601."""
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, datetime):
        return value.isoformat()
    return value


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging in production.

    A GrubDashError attached via exc_info contributes its code, status and
    context (route, order id) unless the record already names them.
    """

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = _jsonable(val)
        if record.exc_info:
            exc = record.exc_info[1]
            if isinstance(exc, GrubDashError):
                log.setdefault("error_code", exc.code)
                log.setdefault("status_code", exc.http_status)
                if exc.context.route is not None:
                    log.setdefault("route", exc.context.route)
                if exc.context.order_id is not None:
                    log.setdefault("order_id", exc.context.order_id)
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Configure root logging. Replaces a handler installed by an earlier call."""
    handler = logging.StreamHandler()
    handler.set_name("grubdash")
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s",
        ))
    for existing in list(logging.root.handlers):
        if existing.get_name() == "grubdash":
            logging.root.removeHandler(existing)
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
