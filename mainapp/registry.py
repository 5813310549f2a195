"""
Service discovery and wiring.

At start-up the registry resolves exactly one provider for each capability
the application needs, injects the bus and repositories into the domain
services, and hands back a capability -> instance mapping.

Design decisions:
- Providers come from explicit PROVIDERS tables declared by each package;
  nothing is discovered by scanning or reflection
- Zero or several providers for a capability is a ConfigurationError,
  raised before anything is wired
- Instances are cached per factory, so a factory declared for two
  capabilities (InMemoryOrderStore) yields one shared instance
- wire() is idempotent: a second call returns the same instances and does
  not subscribe the shipping service again

Example:
    services = load_services()
    order_service = services[OrderService]
    shipping_service = services[ShippingService]
"""

import logging
from typing import Any, Iterable, Optional

from ordercontext.repository import CustomerOrderRepository
from ordercontext.service import OrderService
from sharedkernel.events import EventBus
from sharedkernel.providers import Provider
from shippingcontext.repository import ShippingOrderRepository
from shippingcontext.service import ShippingService

logger = logging.getLogger("service_registry")


# Resolution order matters only for error reporting: the first capability
# without exactly one provider is the one reported.
REQUIRED_CAPABILITIES: tuple[type, ...] = (
    EventBus,
    CustomerOrderRepository,
    ShippingOrderRepository,
    ShippingService,
    OrderService,
)


class ConfigurationError(RuntimeError):
    """
    Raised when the provider tables cannot satisfy a required capability.

    Attributes:
        capability: The capability that could not be resolved
        provider_count: How many providers were declared for it
    """

    def __init__(self, capability: type, provider_count: int, reason: Optional[str] = None):
        self.capability = capability
        self.provider_count = provider_count
        if reason is None:
            reason = f"expected exactly one provider, found {provider_count}"
        super().__init__(f"Cannot resolve {capability.__name__}: {reason}")


class ServiceRegistry:
    """
    Resolves capabilities to instances from a list of provider declarations.

    Example:
        registry = ServiceRegistry(default_providers())
        services = registry.wire()
        services[CustomerOrderRepository] is services[ShippingOrderRepository]  # True
    """

    def __init__(self, providers: Iterable[Provider]):
        self._providers: list[Provider] = list(providers)
        # factory -> instance, so shared factories give shared instances
        self._instances: dict[Any, Any] = {}
        self._services: Optional[dict[type, Any]] = None

    def providers_for(self, capability: type) -> list[Provider]:
        """All declared providers for ``capability``."""
        return [p for p in self._providers if p.capability is capability]

    def resolve(self, capability: type) -> Any:
        """
        Get the single instance providing ``capability``.

        Raises:
            ConfigurationError: If zero or several providers are declared, or
                the provider builds something that does not implement it
        """
        providers = self.providers_for(capability)
        if len(providers) != 1:
            raise ConfigurationError(capability, len(providers))

        factory = providers[0].factory
        if factory not in self._instances:
            self._instances[factory] = factory()

        # Checked on every call: a shared factory may be declared for a
        # capability it does not implement
        instance = self._instances[factory]
        if not isinstance(instance, capability):
            raise ConfigurationError(
                capability,
                1,
                f"{type(instance).__name__} does not implement it",
            )

        logger.debug(f"Resolved {capability.__name__} -> {type(instance).__name__}")
        return instance

    def wire(self) -> dict[type, Any]:
        """
        Resolve every required capability and connect the services.

        Returns:
            Mapping of capability class -> instance

        Raises:
            ConfigurationError: If any required capability cannot be resolved.
                Nothing is wired in that case.
        """
        if self._services is not None:
            return dict(self._services)

        services = {capability: self.resolve(capability) for capability in REQUIRED_CAPABILITIES}

        event_bus = services[EventBus]
        shipping_service = services[ShippingService]
        order_service = services[OrderService]

        shipping_service.set_event_bus(event_bus)
        shipping_service.set_order_repository(services[ShippingOrderRepository])
        order_service.set_event_bus(event_bus)
        order_service.set_order_repository(services[CustomerOrderRepository])

        shipping_service.listen_to_order_events()

        self._services = services
        logger.info(
            "Wired services: "
            + ", ".join(f"{c.__name__}={type(i).__name__}" for c, i in services.items())
        )
        return dict(services)


def default_providers() -> list[Provider]:
    """The provider tables of every package shipped with the application."""
    from infrastructure.providers import PROVIDERS as infrastructure_providers
    from ordercontext.providers import PROVIDERS as order_providers
    from shippingcontext.providers import PROVIDERS as shipping_providers

    return [*infrastructure_providers, *order_providers, *shipping_providers]


def load_services(providers: Optional[Iterable[Provider]] = None) -> dict[type, Any]:
    """Build a registry from ``providers`` (default: all packages) and wire it."""
    if providers is None:
        providers = default_providers()
    return ServiceRegistry(providers).wire()
