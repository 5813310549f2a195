"""
Tests for service discovery and wiring.
"""

import pytest

from infrastructure.db import InMemoryOrderStore
from infrastructure.events import SimpleEventBus
from mainapp.registry import (
    REQUIRED_CAPABILITIES,
    ConfigurationError,
    ServiceRegistry,
    default_providers,
    load_services,
)
from ordercontext.repository import CustomerOrderRepository
from ordercontext.service import CustomerOrderService, OrderService
from sharedkernel.events import EventBus, EventTypes
from sharedkernel.providers import Provider
from shippingcontext.repository import ShippingOrderRepository
from shippingcontext.service import ParcelShippingService, ShippingService


def providers_without(capability: type) -> list[Provider]:
    return [p for p in default_providers() if p.capability is not capability]


class TestDefaultProviders:

    def test_every_capability_has_one_provider(self):
        providers = default_providers()

        for capability in REQUIRED_CAPABILITIES:
            assert len([p for p in providers if p.capability is capability]) == 1

    def test_store_declared_for_both_repositories(self):
        factories = {p.capability: p.factory for p in default_providers()}

        assert factories[CustomerOrderRepository] is InMemoryOrderStore
        assert factories[ShippingOrderRepository] is InMemoryOrderStore


class TestWiring:

    def test_resolves_concrete_types(self, services):
        assert isinstance(services[EventBus], SimpleEventBus)
        assert isinstance(services[CustomerOrderRepository], InMemoryOrderStore)
        assert isinstance(services[ShippingOrderRepository], InMemoryOrderStore)
        assert isinstance(services[OrderService], CustomerOrderService)
        assert isinstance(services[ShippingService], ParcelShippingService)

    def test_repositories_share_one_instance(self, services, example_order):
        order_repo = services[CustomerOrderRepository]
        shipping_repo = services[ShippingOrderRepository]

        assert order_repo is shipping_repo

        order_repo.save_customer_order(example_order)
        assert shipping_repo.find_shippable_order(1) is not None

    def test_services_share_one_bus(self, services):
        bus = services[EventBus]

        assert services[OrderService].get_event_bus() is bus
        assert services[ShippingService].get_event_bus() is bus

    def test_repositories_injected(self, services):
        assert services[OrderService].order_repository is services[CustomerOrderRepository]
        assert services[ShippingService].order_repository is services[ShippingOrderRepository]

    def test_shipping_service_is_listening(self, services):
        bus = services[EventBus]

        assert bus.get_subscriber_count(EventTypes.ORDER_READY_FOR_SHIPMENT) == 1

    def test_wire_is_idempotent(self):
        registry = ServiceRegistry(default_providers())

        first = registry.wire()
        second = registry.wire()

        for capability in REQUIRED_CAPABILITIES:
            assert first[capability] is second[capability]
        assert second[EventBus].get_subscriber_count(EventTypes.ORDER_READY_FOR_SHIPMENT) == 1

    def test_separate_registries_build_separate_instances(self):
        first = load_services()
        second = load_services()

        assert first[EventBus] is not second[EventBus]


class TestConfigurationErrors:

    @pytest.mark.parametrize("capability", REQUIRED_CAPABILITIES)
    def test_missing_provider(self, capability):
        registry = ServiceRegistry(providers_without(capability))

        with pytest.raises(ConfigurationError) as exc_info:
            registry.wire()

        assert exc_info.value.capability is capability
        assert exc_info.value.provider_count == 0

    def test_two_providers(self):
        providers = default_providers() + [Provider(OrderService, CustomerOrderService)]

        with pytest.raises(ConfigurationError) as exc_info:
            load_services(providers)

        assert exc_info.value.capability is OrderService
        assert exc_info.value.provider_count == 2
        assert "OrderService" in str(exc_info.value)

    def test_provider_of_wrong_type(self):
        providers = providers_without(EventBus) + [Provider(EventBus, InMemoryOrderStore)]

        with pytest.raises(ConfigurationError, match="does not implement"):
            load_services(providers)

    def test_shared_factory_of_wrong_type(self):
        providers = providers_without(ShippingOrderRepository) + [
            Provider(ShippingOrderRepository, SimpleEventBus)
        ]

        with pytest.raises(ConfigurationError, match="does not implement") as exc_info:
            load_services(providers)

        assert exc_info.value.capability is ShippingOrderRepository

    def test_cached_instance_checked_on_every_resolve(self):
        registry = ServiceRegistry(
            [Provider(EventBus, SimpleEventBus), Provider(ShippingOrderRepository, SimpleEventBus)]
        )

        assert isinstance(registry.resolve(EventBus), SimpleEventBus)
        with pytest.raises(ConfigurationError):
            registry.resolve(ShippingOrderRepository)

    def test_nothing_wired_on_error(self):
        shipping_service = ParcelShippingService()
        providers = providers_without(OrderService)
        providers = [
            Provider(ShippingService, lambda: shipping_service) if p.capability is ShippingService else p
            for p in providers
        ]

        with pytest.raises(ConfigurationError):
            load_services(providers)

        assert shipping_service.get_event_bus() is None
        assert shipping_service.order_repository is None

    def test_resolve_single_capability(self):
        registry = ServiceRegistry(default_providers())

        assert registry.resolve(EventBus) is registry.resolve(EventBus)
