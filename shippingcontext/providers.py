"""Services this context provides to the service registry."""

from sharedkernel.providers import Provider
from shippingcontext.service import ParcelShippingService, ShippingService

PROVIDERS = [
    Provider(ShippingService, ParcelShippingService),
]
