"""Repository contract owned by the Shipping context."""

from abc import ABC, abstractmethod
from typing import Optional

from shippingcontext.models import ShippableOrder


class ShippingOrderRepository(ABC):
    """Read port for orders, as the Shipping context sees them."""

    @abstractmethod
    def find_shippable_order(self, order_id: int) -> Optional[ShippableOrder]:
        """Return the shippable projection of an order, or None if unknown."""
