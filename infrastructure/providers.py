"""
Services the infrastructure package provides to the service registry.

InMemoryOrderStore is declared for both repository contracts; the registry
builds it once and hands the same instance to both.
"""

from infrastructure.db import InMemoryOrderStore
from infrastructure.events import SimpleEventBus
from ordercontext.repository import CustomerOrderRepository
from sharedkernel.events import EventBus
from sharedkernel.providers import Provider
from shippingcontext.repository import ShippingOrderRepository

PROVIDERS = [
    Provider(EventBus, SimpleEventBus),
    Provider(CustomerOrderRepository, InMemoryOrderStore),
    Provider(ShippingOrderRepository, InMemoryOrderStore),
]
