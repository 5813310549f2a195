"""
Domain models for the Order context.

CustomerOrder is the aggregate root; OrderItem only exists inside an order.
Prices and weights are per unit, the order computes its own total.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class OrderStatus(str, Enum):
    """Order lifecycle states as seen by the Order context."""
    PLACED = "PLACED"                              # Accepted, not yet persisted
    READY_FOR_SHIPMENT = "READY_FOR_SHIPMENT"      # Persisted and announced


class OrderItem(BaseModel):
    """A single line of a customer order."""
    product_id: int = Field(..., description="Reference to product")
    quantity: int = Field(..., ge=1, description="Quantity ordered")
    unit_price: float = Field(..., ge=0, description="Price per unit")
    unit_weight: float = Field(..., ge=0, description="Weight per unit")

    def calculate_price(self) -> float:
        return self.unit_price * self.quantity

    def calculate_weight(self) -> float:
        return self.unit_weight * self.quantity


class CustomerOrder(BaseModel):
    """
    Order aggregate root.

    The order id doubles as the key under which both contexts find it.
    """
    order_id: int = Field(..., description="Unique order identifier")
    payment_method: str = Field(..., description="How the customer pays")
    address: str = Field(..., description="Delivery address")
    order_items: list[OrderItem] = Field(default_factory=list)
    status: OrderStatus = Field(default=OrderStatus.PLACED)

    model_config = ConfigDict(use_enum_values=True)

    def calculate_total_price(self) -> float:
        """Sum of unit price times quantity over all items."""
        return sum(item.calculate_price() for item in self.order_items)
