"""Services this context provides to the service registry."""

from sharedkernel.providers import Provider
from ordercontext.service import CustomerOrderService, OrderService

PROVIDERS = [
    Provider(OrderService, CustomerOrderService),
]
