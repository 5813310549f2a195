"""
Order bounded context.

Customers place orders here. Once an order is persisted the context publishes
a ReadyForShipment event; it does not know that a Shipping context exists.
"""

from ordercontext.models import CustomerOrder, OrderItem, OrderStatus
from ordercontext.repository import CustomerOrderRepository
from ordercontext.service import CustomerOrderService, OrderService

__all__ = [
    "CustomerOrder",
    "OrderItem",
    "OrderStatus",
    "CustomerOrderRepository",
    "CustomerOrderService",
    "OrderService",
]
