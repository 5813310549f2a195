"""
Application service capability.

A domain service that takes part in event-driven communication holds an
optional reference to the event bus. The pub/sub helpers below take that
optional reference and do nothing when it is absent, so a service can be
constructed and unit-tested without any bus at all.
"""

import logging
from typing import Optional

from sharedkernel.events import Event, EventBus, EventSubscriber

logger = logging.getLogger("application_service")


def publish_event(bus: Optional[EventBus], event: Event) -> int:
    """Publish ``event`` on ``bus``. Returns 0 without a bus."""
    if bus is None:
        logger.debug(f"No event bus set, dropping {event}")
        return 0
    return bus.publish(event)


def subscribe_to_event(
    bus: Optional[EventBus],
    event_type: str,
    subscriber: EventSubscriber,
) -> None:
    """Subscribe ``subscriber`` to ``event_type`` on ``bus`` if there is one."""
    if bus is None:
        return
    bus.subscribe(event_type, subscriber)


def unsubscribe_from_event(
    bus: Optional[EventBus],
    event_type: str,
    subscriber: EventSubscriber,
) -> bool:
    """Unsubscribe ``subscriber`` from ``event_type`` on ``bus`` if there is one."""
    if bus is None:
        return False
    return bus.unsubscribe(event_type, subscriber)


class ApplicationService:
    """
    Base class for domain services that need bus access.

    The bus is set once during wiring and read thereafter.

    Example:
        service = SomeService()
        service.publish_event(event)      # no-op, no bus yet
        service.set_event_bus(bus)
        service.publish_event(event)      # delivered
    """

    def __init__(self, event_bus: Optional[EventBus] = None):
        self._event_bus = event_bus

    def get_event_bus(self) -> Optional[EventBus]:
        return self._event_bus

    def set_event_bus(self, event_bus: Optional[EventBus]) -> None:
        self._event_bus = event_bus

    def publish_event(self, event: Event) -> int:
        return publish_event(self._event_bus, event)

    def subscribe_to_event(self, event_type: str, subscriber: EventSubscriber) -> None:
        subscribe_to_event(self._event_bus, event_type, subscriber)

    def unsubscribe_from_event(self, event_type: str, subscriber: EventSubscriber) -> bool:
        return unsubscribe_from_event(self._event_bus, event_type, subscriber)
