"""Repository contract owned by the Order context."""

from abc import ABC, abstractmethod
from typing import Optional

from ordercontext.models import CustomerOrder


class CustomerOrderRepository(ABC):
    """Persistence port for customer orders."""

    @abstractmethod
    def save_customer_order(self, order: CustomerOrder) -> None:
        """Store ``order`` keyed by its order id, replacing any previous version."""

    @abstractmethod
    def find_customer_order(self, order_id: int) -> Optional[CustomerOrder]:
        """Return the order, or None if it was never saved."""
