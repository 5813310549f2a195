"""
Event contracts shared by every bounded context.

Design decisions:
- One concrete Event type carries a type tag and a string payload; there is
  no subclass per event kind
- Events are immutable once constructed (frozen pydantic model with a
  read-only payload mapping)
- The bus is an abstract contract here; the concrete implementation lives in
  the infrastructure package so contexts never depend on it directly

Key insight:
- The Order context publishes ReadyForShipment without knowing who listens
- The Shipping context subscribes without knowing who publishes
"""

from abc import ABC, abstractmethod
from datetime import datetime
from types import MappingProxyType
from typing import Mapping, Optional, Protocol, runtime_checkable
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, field_validator


class EventTypes:
    """
    Constants for event type names.

    Using constants prevents typos in publishers and subscribers.
    """
    ORDER_READY_FOR_SHIPMENT = "ReadyForShipment"


class Event(BaseModel):
    """
    Immutable record of something that happened in a bounded context.

    Attributes:
        event_type: String name of the event type (used for routing)
        payload: String key/value data carried by the event
        source: Which service/component published the event
        event_id: Unique identifier for this event instance
        timestamp: When the event was created
    """
    event_type: str = Field(..., min_length=1, description="Routing key")
    payload: Mapping[str, str] = Field(default_factory=dict, validate_default=True)
    source: str = Field(default="unknown")
    event_id: str = Field(default_factory=lambda: str(uuid4()))
    timestamp: datetime = Field(default_factory=datetime.utcnow)

    model_config = ConfigDict(frozen=True)

    @field_validator("payload")
    @classmethod
    def freeze_payload(cls, value: Mapping[str, str]) -> Mapping[str, str]:
        # One instance is shared by every subscriber of a publish
        return MappingProxyType(dict(value))

    def get_payload_value(self, key: str) -> Optional[str]:
        """Get a payload value, or None when the key is absent."""
        return self.payload.get(key)

    def __str__(self) -> str:
        return f"Event({self.event_type}, id={self.event_id[:8]}, source={self.source})"


@runtime_checkable
class EventSubscriber(Protocol):
    """Anything with a ``handle(event)`` method can receive events."""

    def handle(self, event: Event) -> None:
        ...


class EventBus(ABC):
    """
    Publish/subscribe contract.

    Implementations must deliver synchronously on the publisher's call stack,
    treat subscriptions as a set per event type, and make publishing to an
    event type with no subscribers a silent no-op.
    """

    @abstractmethod
    def publish(self, event: Event) -> int:
        """Deliver ``event`` to every subscriber of its type. Returns the number invoked."""

    @abstractmethod
    def subscribe(self, event_type: str, subscriber: EventSubscriber) -> None:
        """Register ``subscriber`` for future events of ``event_type``."""

    @abstractmethod
    def unsubscribe(self, event_type: str, subscriber: EventSubscriber) -> bool:
        """Remove ``subscriber`` from ``event_type``. Returns False if it was not registered."""


# =============================================================================
# Event factories
# =============================================================================

def order_ready_for_shipment(order_id: int, source: str = "order-service") -> Event:
    """
    Create a ReadyForShipment event.

    Published by the Order context once an order has been persisted. The
    order id is the only thing the Shipping context needs; it looks up the
    rest through its own repository.
    """
    return Event(
        event_type=EventTypes.ORDER_READY_FOR_SHIPMENT,
        source=source,
        payload={"order_id": str(order_id)},
    )
