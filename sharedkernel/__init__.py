"""
Shared kernel for the Order and Shipping bounded contexts.

This package holds the contracts both contexts agree on:
- Event: the immutable named payload carried by the bus
- EventBus / EventSubscriber: the pub/sub contracts
- ApplicationService: the capability that gives a domain service bus access

Nothing here knows about orders or shipments.
"""

from sharedkernel.events import (
    Event,
    EventBus,
    EventSubscriber,
    EventTypes,
    order_ready_for_shipment,
)
from sharedkernel.providers import Provider
from sharedkernel.service import (
    ApplicationService,
    publish_event,
    subscribe_to_event,
    unsubscribe_from_event,
)

__all__ = [
    "Event",
    "EventBus",
    "EventSubscriber",
    "EventTypes",
    "order_ready_for_shipment",
    "Provider",
    "ApplicationService",
    "publish_event",
    "subscribe_to_event",
    "unsubscribe_from_event",
]
