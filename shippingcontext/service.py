"""
Shipping service for the Shipping context.

This service subscribes to ReadyForShipment events and ships the order they
name. It is the only subscriber in the system.

Design decisions:
- The service is its own subscriber (it implements ``handle``), so
  subscribing it twice never causes a double shipment
- The event only carries the order id; the service looks up everything else
  through its own repository contract
- An unknown order id is an expected miss: logged, nothing shipped
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional

from sharedkernel.events import Event, EventBus, EventTypes
from sharedkernel.service import ApplicationService
from shippingcontext.models import Parcel, ShipmentStatus
from shippingcontext.repository import ShippingOrderRepository

logger = logging.getLogger("shipping_service")


class ShippingService(ApplicationService, ABC):
    """Shipping context capability: ship orders announced on the bus."""

    @abstractmethod
    def ship_order(self, order_id: int) -> Optional[Parcel]:
        """Ship the order with ``order_id`` if it can be found."""

    @abstractmethod
    def listen_to_order_events(self) -> None:
        """Subscribe to the events that trigger shipments."""

    @abstractmethod
    def get_parcel_by_order_id(self, order_id: int) -> Optional[Parcel]:
        ...

    @abstractmethod
    def get_shipment_status(self, order_id: int) -> Optional[ShipmentStatus]:
        ...

    @abstractmethod
    def set_order_repository(self, order_repository: ShippingOrderRepository) -> None:
        ...


class ParcelShippingService(ShippingService):
    """
    Default ShippingService implementation, keeping shipped parcels in memory.

    Example:
        service = ParcelShippingService(event_bus=bus, order_repository=store)
        service.listen_to_order_events()

        # Later, when the Order context publishes ReadyForShipment for order 1:
        service.get_shipment_status(1)  # ShipmentStatus.SHIPPED
    """

    def __init__(
        self,
        event_bus: Optional[EventBus] = None,
        order_repository: Optional[ShippingOrderRepository] = None,
    ):
        super().__init__(event_bus)
        self.order_repository = order_repository
        # Written on the publisher's thread; not safe for concurrent publishes
        self._shipped_parcels: dict[int, Parcel] = {}

    def set_order_repository(self, order_repository: ShippingOrderRepository) -> None:
        self.order_repository = order_repository

    def listen_to_order_events(self) -> None:
        self.subscribe_to_event(EventTypes.ORDER_READY_FOR_SHIPMENT, self)
        logger.info("Listening for ReadyForShipment events")

    def stop_listening(self) -> None:
        self.unsubscribe_from_event(EventTypes.ORDER_READY_FOR_SHIPMENT, self)

    def handle(self, event: Event) -> None:
        """
        Handle a ReadyForShipment event.

        Raises:
            ValueError: If the event has no integer ``order_id``
        """
        raw_order_id = event.get_payload_value("order_id")
        if raw_order_id is None:
            raise ValueError(f"{event} has no order_id")

        self.ship_order(int(raw_order_id))

    def ship_order(self, order_id: int) -> Optional[Parcel]:
        """
        Build and store a parcel for the order.

        Args:
            order_id: The order to ship

        Returns:
            The shipped parcel, or None if the order was not found
        """
        if self.order_repository is None:
            logger.error(f"No order repository set, cannot ship order {order_id}")
            return None

        shippable = self.order_repository.find_shippable_order(order_id)
        if shippable is None:
            logger.warning(f"Order not found: {order_id}")
            return None

        parcel = Parcel.from_shippable_order(shippable)
        if parcel.is_taxable():
            logger.info(
                f"Parcel for order {order_id} is taxable "
                f"(declared value {parcel.calculate_estimated_value():.2f})"
            )

        parcel.handle()
        self._shipped_parcels[order_id] = parcel

        logger.info(
            f"Order {order_id} shipped: tracking={parcel.tracking_id}, "
            f"weight={parcel.calculate_total_weight():.2f}"
        )
        return parcel

    def get_parcel_by_order_id(self, order_id: int) -> Optional[Parcel]:
        return self._shipped_parcels.get(order_id)

    def get_shipment_status(self, order_id: int) -> Optional[ShipmentStatus]:
        """SHIPPED once a parcel exists for the order, None otherwise."""
        if order_id in self._shipped_parcels:
            return ShipmentStatus.SHIPPED
        return None
