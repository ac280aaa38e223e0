"""Order Schemas: {"data": ...} envelopes for requests and responses.

Invariants:
    - A missing body, a body that is not an object, and a missing or non-object
      data all become data == {}, so the route's validator chain runs and reports
      its own error (404 for an unknown order, a field message otherwise)
    - NaN and Infinity anywhere in the body are rejected: they are not JSON
    - Response dishes are passed through untouched (extra keys kept)
"""

import math
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


def _has_non_finite(value: Any) -> bool:
    if isinstance(value, float):
        return not math.isfinite(value)
    if isinstance(value, dict):
        return any(_has_non_finite(v) for v in value.values())
    if isinstance(value, list):
        return any(_has_non_finite(v) for v in value)
    return False


class OrderRequestBody(BaseModel):
    """Request envelope for POST/PUT: {"data": {deliverTo?, mobileNumber?, ...}}."""
    model_config = ConfigDict(extra="ignore")

    data: Any = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def non_object_body_is_empty(cls, v: Any) -> Any:
        if _has_non_finite(v):
            raise ValueError("NaN and Infinity are not valid JSON numbers")
        return v if isinstance(v, dict) else {}

    @field_validator("data", mode="before")
    @classmethod
    def non_object_data_is_empty(cls, v: Any) -> dict[str, Any]:
        return v if isinstance(v, dict) else {}


class OrderOut(BaseModel):
    """Public order representation."""
    model_config = ConfigDict(populate_by_name=True)

    id: str
    deliver_to: Any = Field(alias="deliverTo")
    mobile_number: Any = Field(alias="mobileNumber")
    status: str
    dishes: list[dict[str, Any]]


class OrderEnvelope(BaseModel):
    data: OrderOut


class OrderListEnvelope(BaseModel):
    data: list[OrderOut]


class ErrorBody(BaseModel):
    """Documented error shape. "message" is the contract field."""
    message: str
    error: dict[str, Any] | None = None
