"""
Order service for the Order context.

This service persists orders and publishes an event once they are ready to
ship. It is the only publisher in the system.

Key insight:
- This service ONLY publishes events
- It does NOT call the shipping service
- It doesn't even know a shipping service exists
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional

from ordercontext.models import CustomerOrder, OrderStatus
from ordercontext.repository import CustomerOrderRepository
from sharedkernel.events import EventBus, order_ready_for_shipment
from sharedkernel.service import ApplicationService

logger = logging.getLogger("order_service")


class OrderService(ApplicationService, ABC):
    """Order context capability: place orders."""

    @abstractmethod
    def place_order(self, order: CustomerOrder) -> CustomerOrder:
        """Persist ``order`` and announce that it is ready for shipment."""

    @abstractmethod
    def set_order_repository(self, order_repository: CustomerOrderRepository) -> None:
        ...


class CustomerOrderService(OrderService):
    """
    Default OrderService implementation.

    Example:
        service = CustomerOrderService(event_bus=bus, order_repository=store)
        service.place_order(order)
        # A ReadyForShipment event with order_id=str(order.order_id) was published
    """

    def __init__(
        self,
        event_bus: Optional[EventBus] = None,
        order_repository: Optional[CustomerOrderRepository] = None,
    ):
        super().__init__(event_bus)
        self.order_repository = order_repository

    def set_order_repository(self, order_repository: CustomerOrderRepository) -> None:
        self.order_repository = order_repository

    def place_order(self, order: CustomerOrder) -> CustomerOrder:
        """
        Place an order: persist it, then publish ReadyForShipment.

        Persisting happens before publishing so that subscribers reading the
        shared store find the order.

        Args:
            order: The order to place

        Returns:
            The order as stored, with status READY_FOR_SHIPMENT
        """
        ready = order.model_copy(update={"status": OrderStatus.READY_FOR_SHIPMENT})

        if self.order_repository is None:
            logger.warning(f"No order repository set, order {order.order_id} not persisted")
        else:
            self.order_repository.save_customer_order(ready)

        logger.info(
            f"Order {order.order_id} placed: {len(order.order_items)} item(s), "
            f"total {order.calculate_total_price():.2f}"
        )

        self.publish_event(order_ready_for_shipment(order.order_id))

        return ready
