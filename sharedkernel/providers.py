"""
Provider declarations.

Each package that implements a shared capability lists what it provides in a
``PROVIDERS`` table of ``Provider`` records. The service registry reads those
tables instead of naming concrete classes itself, so contexts stay unaware of
each other's implementations.
"""

from typing import Any, Callable, NamedTuple


class Provider(NamedTuple):
    """Declares that ``factory()`` builds an implementation of ``capability``."""
    capability: type
    factory: Callable[[], Any]
