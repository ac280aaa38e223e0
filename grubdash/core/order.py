"""Order Entity: the record kept in the order store.

Invariants:
    - id is assigned once by the store's id supplier and never reassigned
    - to_dict() is the only place snake_case fields become wire names
    - dishes are stored as submitted (extra keys such as name or price survive)
"""

import copy
from dataclasses import dataclass, field
from typing import Any

from grubdash.core.domain_types import OrderId


@dataclass
class Order:
    """A customer order: delivery info, contact number, status, dishes."""

    id: OrderId
    deliver_to: str
    mobile_number: str
    status: str
    dishes: list[dict[str, Any]] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "deliverTo": self.deliver_to,
            "mobileNumber": self.mobile_number,
            "status": self.status,
            "dishes": copy.deepcopy(self.dishes),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Order":
        """Build from wire-shaped data (seed files, fixtures)."""
        return cls(
            id=OrderId(str(data["id"])),
            deliver_to=data["deliverTo"],
            mobile_number=data["mobileNumber"],
            status=data["status"],
            dishes=copy.deepcopy(list(data.get("dishes") or [])),
        )

    def overwrite(self, payload: dict[str, Any]) -> None:
        """Replace the four mutable fields from a validated update payload."""
        self.deliver_to = payload.get("deliverTo")
        self.mobile_number = payload.get("mobileNumber")
        self.status = payload.get("status")
        self.dishes = copy.deepcopy(payload.get("dishes"))
