"""
Example application: place one order and check that it shipped.

This shows the whole flow:
1. The registry wires the services (the shipping service starts listening)
2. OrderService places an order (persists it, publishes ReadyForShipment)
3. ShippingService receives the event and ships the order
4. We ask the Shipping context whether the order shipped

The key insight: OrderService never calls ShippingService!
"""

from typing import Any, Optional

from mainapp.registry import load_services
from ordercontext.models import CustomerOrder, OrderItem
from ordercontext.service import OrderService
from shippingcontext.models import ShipmentStatus
from shippingcontext.service import ShippingService


def build_example_order(order_id: int = 1) -> CustomerOrder:
    """An order with three line items, paid by card."""
    return CustomerOrder(
        order_id=order_id,
        payment_method="Visa",
        address="Main Street 1",
        order_items=[
            OrderItem(product_id=1, quantity=2, unit_price=1.0, unit_weight=1.0),
            OrderItem(product_id=2, quantity=1, unit_price=20.0, unit_weight=10.0),
            OrderItem(product_id=3, quantity=4, unit_price=30.0, unit_weight=0.5),
        ],
    )


def run_order_shipment_demo(
    order_id: int = 1,
    services: Optional[dict[type, Any]] = None,
) -> bool:
    """
    Place the example order and report whether it reached Shipped.

    Args:
        order_id: Id of the order to place
        services: Already wired services (defaults to a fresh registry)

    Returns:
        True if the Shipping context reports the order as shipped
    """
    if services is None:
        services = load_services()

    order_service: OrderService = services[OrderService]
    shipping_service: ShippingService = services[ShippingService]
    shipping_service.listen_to_order_events()

    print("\n" + "=" * 70)
    print(f"DDD MODULES DEMO: placing order {order_id}")
    print("=" * 70 + "\n")

    order_service.place_order(build_example_order(order_id))

    status = shipping_service.get_shipment_status(order_id)
    shipped = status == ShipmentStatus.SHIPPED

    print("\n" + "-" * 70)
    if shipped:
        parcel = shipping_service.get_parcel_by_order_id(order_id)
        print(f"RESULT: Order {order_id} has been shipped (tracking {parcel.tracking_id})")
    else:
        print(f"RESULT: Order {order_id} has not been shipped")
    print("-" * 70)

    return shipped
