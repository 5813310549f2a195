"""
Domain models for the Shipping context.

Shipping only cares about weights and declared values, so its view of an
order is a ShippableOrder made of PackageItems rather than the Order
context's CustomerOrder.
"""

from datetime import datetime
from enum import Enum
from typing import Optional
from uuid import uuid4

from pydantic import BaseModel, Field

# Parcels declared above this value need additional taxes
TAXABLE_VALUE_THRESHOLD = 100.0


class ShipmentStatus(str, Enum):
    """Shipment states reported by the Shipping context."""
    SHIPPED = "SHIPPED"


class PackageItem(BaseModel):
    """One packed product: total weight and declared value for its quantity."""
    product_id: int = Field(..., description="Reference to product")
    weight: float = Field(..., ge=0)
    estimated_value: float = Field(..., ge=0)


class ShippableOrder(BaseModel):
    """Shipping context projection of an order."""
    order_id: int
    address: str
    package_items: list[PackageItem] = Field(default_factory=list)


class Parcel(BaseModel):
    """
    Shipment record for one order.

    Created when the Shipping context handles a ReadyForShipment event and
    stored keyed by order id.
    """
    order_id: int
    address: str
    package_items: list[PackageItem] = Field(default_factory=list)
    tracking_id: str = Field(default_factory=lambda: uuid4().hex[:12].upper())
    shipped_at: Optional[datetime] = Field(default=None)

    @classmethod
    def from_shippable_order(cls, order: ShippableOrder) -> "Parcel":
        return cls(
            order_id=order.order_id,
            address=order.address,
            package_items=list(order.package_items),
        )

    def calculate_total_weight(self) -> float:
        return sum(item.weight for item in self.package_items)

    def calculate_estimated_value(self) -> float:
        return sum(item.estimated_value for item in self.package_items)

    def is_taxable(self) -> bool:
        """True when the declared value exceeds the tax threshold."""
        return self.calculate_estimated_value() > TAXABLE_VALUE_THRESHOLD

    def handle(self) -> None:
        """Hand the parcel over to the carrier."""
        self.shipped_at = datetime.utcnow()

    @property
    def is_shipped(self) -> bool:
        return self.shipped_at is not None
