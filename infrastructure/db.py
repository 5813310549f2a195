"""
In-memory order store.

One store backs the repository contracts of both bounded contexts:
- Order context writes CustomerOrders through CustomerOrderRepository
- Shipping context reads ShippableOrders through ShippingOrderRepository

Design decisions:
- Orders are stored once, as the Order context's CustomerOrder
- The shipping view is projected on read, so the two contexts never share a
  model class
- Last write wins for the same order id; there is no transactional isolation

The store must be a single shared instance for both contracts, otherwise
writes from the Order context would be invisible to the Shipping context.
The service registry takes care of that.
"""

import logging
from typing import Optional

from ordercontext.models import CustomerOrder
from ordercontext.repository import CustomerOrderRepository
from shippingcontext.models import PackageItem, ShippableOrder
from shippingcontext.repository import ShippingOrderRepository

logger = logging.getLogger("order_store")


class InMemoryOrderStore(CustomerOrderRepository, ShippingOrderRepository):
    """
    Dict-backed store keyed by order id.

    Example:
        store = InMemoryOrderStore()
        store.save_customer_order(order)
        store.find_shippable_order(order.order_id)  # ShippableOrder
        store.find_shippable_order(999)             # None
    """

    def __init__(self):
        self._orders: dict[int, CustomerOrder] = {}

    # =========================================================================
    # CustomerOrderRepository
    # =========================================================================

    def save_customer_order(self, order: CustomerOrder) -> None:
        self._orders[order.order_id] = order
        logger.debug(f"Saved order {order.order_id}")

    def find_customer_order(self, order_id: int) -> Optional[CustomerOrder]:
        return self._orders.get(order_id)

    # =========================================================================
    # ShippingOrderRepository
    # =========================================================================

    def find_shippable_order(self, order_id: int) -> Optional[ShippableOrder]:
        """
        Project a stored order into the Shipping context's view.

        Each order item becomes a package item whose weight and estimated
        value cover the whole quantity.
        """
        order = self._orders.get(order_id)
        if order is None:
            return None

        package_items = [
            PackageItem(
                product_id=item.product_id,
                weight=item.calculate_weight(),
                estimated_value=item.calculate_price(),
            )
            for item in order.order_items
        ]
        return ShippableOrder(
            order_id=order.order_id,
            address=order.address,
            package_items=package_items,
        )

    # =========================================================================
    # Utility Methods
    # =========================================================================

    def count(self) -> int:
        """Number of stored orders."""
        return len(self._orders)

    def clear(self) -> None:
        """Drop every stored order (useful for testing)."""
        self._orders.clear()
