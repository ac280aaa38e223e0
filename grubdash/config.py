"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache): single instance per process
    - default_order_status must be a valid OrderStatus (rejected at load time otherwise)

Design Decisions:
    - Defaults provided for every setting: the API starts with no .env at all
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from grubdash.core.domain_types import OrderStatus
from grubdash.core.order_lifecycle import DEFAULT_ORDER_STATUS


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    app_name: str = "GrubDash Orders API"
    app_version: str = "1.0.0"

    # Orders
    default_order_status: OrderStatus = DEFAULT_ORDER_STATUS
    seed_demo_orders: bool = False

    # API
    cors_origins: list[str] = ["http://localhost:3000"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @field_validator("log_format")
    @classmethod
    def check_log_format(cls, v: str) -> str:
        v = v.lower()
        if v not in ("json", "text"):
            raise ValueError("log_format must be 'json' or 'text'")
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
