"""
Shipping bounded context.

Listens for ReadyForShipment events and turns the shippable projection of an
order into a parcel. It has its own view of an order (ShippableOrder) and
never imports anything from the Order context.
"""

from shippingcontext.models import PackageItem, Parcel, ShipmentStatus, ShippableOrder
from shippingcontext.repository import ShippingOrderRepository
from shippingcontext.service import ParcelShippingService, ShippingService

__all__ = [
    "PackageItem",
    "Parcel",
    "ShipmentStatus",
    "ShippableOrder",
    "ShippingOrderRepository",
    "ParcelShippingService",
    "ShippingService",
]
