"""
Shared pytest fixtures for the DDD modules tests.

These fixtures provide fresh buses, stores and services so tests don't
interfere with each other.
"""

import pytest

from infrastructure.db import InMemoryOrderStore
from infrastructure.events import SimpleEventBus
from mainapp.registry import ServiceRegistry, default_providers
from ordercontext.models import CustomerOrder, OrderItem
from ordercontext.service import CustomerOrderService
from shippingcontext.service import ParcelShippingService


class RecordingSubscriber:
    """Subscriber that remembers every event it receives."""

    def __init__(self, name: str = "recorder"):
        self.name = name
        self.events = []

    def handle(self, event) -> None:
        self.events.append(event)

    def __repr__(self) -> str:
        return f"RecordingSubscriber({self.name})"


class FailingSubscriber:
    """Subscriber that always raises."""

    def __init__(self):
        self.calls = 0

    def handle(self, event) -> None:
        self.calls += 1
        raise ValueError("I'm broken!")


@pytest.fixture
def event_bus() -> SimpleEventBus:
    """Fresh event bus for each test."""
    return SimpleEventBus()


@pytest.fixture
def order_store() -> InMemoryOrderStore:
    """Fresh, empty order store for each test."""
    return InMemoryOrderStore()


@pytest.fixture
def make_recorder():
    """Factory for RecordingSubscriber instances."""
    def _make(name: str = "recorder") -> RecordingSubscriber:
        return RecordingSubscriber(name)
    return _make


@pytest.fixture
def failing_subscriber() -> FailingSubscriber:
    return FailingSubscriber()


@pytest.fixture
def order_service(event_bus, order_store) -> CustomerOrderService:
    return CustomerOrderService(event_bus=event_bus, order_repository=order_store)


@pytest.fixture
def shipping_service(event_bus, order_store) -> ParcelShippingService:
    return ParcelShippingService(event_bus=event_bus, order_repository=order_store)


@pytest.fixture
def services() -> dict:
    """Services wired by a fresh registry from the default provider tables."""
    return ServiceRegistry(default_providers()).wire()


# =============================================================================
# Order Fixtures
# =============================================================================

@pytest.fixture
def example_order() -> CustomerOrder:
    """
    Order 1 with three line items.

    Total price 2*1.0 + 1*20.0 + 4*30.0 = 142.0
    Total weight 2*1.0 + 1*10.0 + 4*0.5 = 14.0
    """
    return CustomerOrder(
        order_id=1,
        payment_method="Visa",
        address="Main Street 1",
        order_items=[
            OrderItem(product_id=1, quantity=2, unit_price=1.0, unit_weight=1.0),
            OrderItem(product_id=2, quantity=1, unit_price=20.0, unit_weight=10.0),
            OrderItem(product_id=3, quantity=4, unit_price=30.0, unit_weight=0.5),
        ],
    )


@pytest.fixture
def cheap_order() -> CustomerOrder:
    """Order 2 with a single inexpensive item (not taxable)."""
    return CustomerOrder(
        order_id=2,
        payment_method="Cash",
        address="Side Street 9",
        order_items=[
            OrderItem(product_id=5, quantity=1, unit_price=9.5, unit_weight=0.2),
        ],
    )
