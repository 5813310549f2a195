"""
Infrastructure for the Order and Shipping contexts.

Concrete implementations of the shared contracts:
- SimpleEventBus: in-process pub/sub behind the EventBus contract
- InMemoryOrderStore: one store behind both repository contracts
"""

from infrastructure.db import InMemoryOrderStore
from infrastructure.events import SimpleEventBus

__all__ = [
    "InMemoryOrderStore",
    "SimpleEventBus",
]
