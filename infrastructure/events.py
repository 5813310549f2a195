"""
In-memory event bus.

This module provides the concrete pub/sub mechanism behind the shared
kernel's EventBus contract. Services publish events here, and other services
subscribe to them by event type.

Design decisions:
- Synchronous delivery on the publisher's call stack
- Type-based subscriptions with set semantics (subscribing twice is a no-op)
- No ordering guarantee among subscribers of the same type
- No persistence (events are delivered, not stored)
- A failing subscriber is logged and skipped; the others still receive the
  event and publish() itself never raises because of a subscriber
- Thread-safe: each event type maps to a frozenset that is replaced, never
  mutated, under a lock. publish() reads the current snapshot without locking

Key insight:
- Publishers don't know who is listening
- Subscribers don't know who is publishing
"""

import logging
import threading

from sharedkernel.events import Event, EventBus, EventSubscriber

logger = logging.getLogger("event_bus")


class SimpleEventBus(EventBus):
    """
    Simple in-memory event bus implementing the pub/sub pattern.

    Example usage:
        bus = SimpleEventBus()

        class Printer:
            def handle(self, event):
                print(f"Received: {event}")

        bus.subscribe("ReadyForShipment", Printer())
        bus.publish(Event(
            event_type="ReadyForShipment",
            source="order-service",
            payload={"order_id": "1"},
        ))
    """

    def __init__(self):
        # Map of event_type -> frozenset of subscribers
        self._subscribers: dict[str, frozenset[EventSubscriber]] = {}
        self._lock = threading.Lock()

    def subscribe(self, event_type: str, subscriber: EventSubscriber) -> None:
        """
        Subscribe to events of a specific type.

        Args:
            event_type: The type of event to subscribe to (e.g., "ReadyForShipment")
            subscriber: Object whose ``handle(event)`` is called on publish

        Note: Subscribing the same subscriber again has no effect.
        """
        with self._lock:
            current = self._subscribers.get(event_type, frozenset())
            if subscriber in current:
                return
            self._subscribers[event_type] = current | {subscriber}
        logger.debug(f"Subscribed {subscriber!r} to '{event_type}' events")

    def unsubscribe(self, event_type: str, subscriber: EventSubscriber) -> bool:
        """
        Unsubscribe a subscriber from an event type.

        Returns:
            True if the subscriber was found and removed, False otherwise
        """
        with self._lock:
            current = self._subscribers.get(event_type, frozenset())
            if subscriber not in current:
                return False
            remaining = current - {subscriber}
            if remaining:
                self._subscribers[event_type] = remaining
            else:
                del self._subscribers[event_type]
        logger.debug(f"Unsubscribed {subscriber!r} from '{event_type}' events")
        return True

    def publish(self, event: Event) -> int:
        """
        Publish an event to all subscribers of its type.

        Args:
            event: The event to publish

        Returns:
            Number of subscribers that were invoked

        Note: Subscribers registered or removed while this call is delivering
        only affect later publishes.
        """
        subscribers = self._subscribers.get(event.event_type, frozenset())

        if not subscribers:
            logger.debug(f"No subscribers for event type '{event.event_type}'")
            return 0

        logger.info(f"Publishing: {event}")

        for subscriber in subscribers:
            try:
                subscriber.handle(event)
            except Exception:
                logger.exception(f"Subscriber {subscriber!r} raised for {event}")

        return len(subscribers)

    def get_subscriber_count(self, event_type: str) -> int:
        """Get the number of subscribers for an event type."""
        return len(self._subscribers.get(event_type, frozenset()))

    def clear_subscribers(self) -> None:
        """Remove all subscribers (useful for testing)."""
        with self._lock:
            self._subscribers.clear()
