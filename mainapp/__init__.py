"""
Main application.

Assembles the bounded contexts at start-up and runs the example order.
"""

from mainapp.registry import (
    ConfigurationError,
    ServiceRegistry,
    default_providers,
    load_services,
)

__all__ = [
    "ConfigurationError",
    "ServiceRegistry",
    "default_providers",
    "load_services",
]
