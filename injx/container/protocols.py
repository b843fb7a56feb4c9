#!/usr/bin/env python3

"""
Hierarchy Protocols

Structural types a host object satisfies to take part in a service chain.
``ServiceProvider`` is enough to act as a parent for lookups, ``Linkable``
is enough to be linked by ``link_to``, and a ``Promotable`` parent lets
promotion continue through it. ``Injectable`` is the full capability set.
"""

from enum import Enum
from typing import Any, Optional, Protocol, runtime_checkable


class NodeRole(Enum):
    """Position of a node relative to its chain"""
    UNBOUND = "unbound"
    LINKED = "linked"
    CAPPED = "capped"


@runtime_checkable
class ServiceProvider(Protocol):
    """Anything that can resolve a service key."""

    def get_service(self, key: str) -> Any:
        ...


@runtime_checkable
class Linkable(Protocol):
    """Anything that accepts a parent."""

    def link_from(self, caller: ServiceProvider) -> Any:
        ...


@runtime_checkable
class Promotable(ServiceProvider, Protocol):
    """A provider that can take over services and keep raising them."""

    def set_service(self, key: str, service: Any) -> Any:
        ...

    def raise_service(self, key: str, safe: Optional[bool] = None) -> int:
        ...


@runtime_checkable
class Injectable(Promotable, Linkable, Protocol):
    """Full participant: can be linked, hold services and promote them."""
