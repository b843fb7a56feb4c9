#!/usr/bin/env python3

"""
Injectable Node

Hierarchical service resolution without a central registry. Each node keeps
its own key -> service registry and an optional, non-owning link to a parent.
Lookups walk upward until a node owns the key; promotion ("raise") hands a
locally owned service to the parent, one hop per call, until it reaches the
effective root of the chain.

Host objects adopt the capability by subclassing ``InjectableNode``.
"""

import logging
import weakref
from typing import Dict, Any, Optional, Callable, Iterator

from ..config.settings import InjxConfig, SafeCheck, get_config
from ..functional.result_monad import Result, from_callable
from .errors import InjxError, IncompatibleCallerError, UnboundError, UnknownServiceError
from .protocols import NodeRole, ServiceProvider, Linkable, Promotable

logger = logging.getLogger(__name__)

def _reference(target: Any) -> Callable[[], Any]:
    """Non-owning reference to ``target``; strong only if weakrefs are unsupported"""
    try:
        return weakref.ref(target)
    except TypeError:
        logger.debug(f"{type(target).__name__} does not support weak references, parent held strongly")
        return lambda: target

def _provides(provider: Any, key: str) -> bool:
    """True when ``provider`` resolves ``key``, asking ``has_service`` when it has one"""
    has_service = getattr(provider, "has_service", None)
    if callable(has_service):
        return has_service(key)

    try:
        provider.get_service(key)
    except LookupError:
        return False
    return True

class InjectableNode:
    """
    Participant in a service hierarchy

    A node starts unbound. ``link_from`` (or the reciprocal ``link_to`` called
    on the future parent) binds it. The parent is never owned: if it is
    garbage-collected the node reads as unbound again.
    """

    def __init__(self, *args,
                 sentinel: bool = False,
                 config: Optional[InjxConfig] = None,
                 name: Optional[str] = None,
                 **kwargs):
        super().__init__(*args, **kwargs)
        self._services: Dict[str, Any] = {}
        self._parent_ref: Optional[Callable[[], Any]] = None
        self._parent_role = NodeRole.UNBOUND
        self._sentinel = sentinel
        self._config = config
        self._node_name = name

    @property
    def is_sentinel(self) -> bool:
        return self._sentinel

    @property
    def node_name(self) -> str:
        return self._node_name or type(self).__name__

    @property
    def config(self) -> InjxConfig:
        """Config given at construction, else the current process-wide one"""
        return self._config or get_config()

    @property
    def parent(self) -> Optional[Any]:
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    @property
    def role(self) -> NodeRole:
        if self.parent is None:
            return NodeRole.UNBOUND
        return self._parent_role

    # Linking

    def link_from(self, caller: Any) -> 'InjectableNode':
        """
        Use ``caller`` as parent for every lookup this node cannot satisfy.

        Re-linking replaces the previous parent. A sentinel parent, or one
        that only resolves services, caps the chain: this node becomes the
        effective root for promotion.

        Raises:
            IncompatibleCallerError: ``caller`` has no ``get_service``.
        """
        if not isinstance(caller, ServiceProvider):
            logger.debug(f"{self.node_name}: rejected link from {type(caller).__name__}")
            raise IncompatibleCallerError(caller)

        if isinstance(caller, Promotable) and not getattr(caller, "is_sentinel", False):
            role = NodeRole.LINKED
        else:
            role = NodeRole.CAPPED

        self._parent_ref = _reference(caller)
        self._parent_role = role
        logger.debug(f"{self.node_name}: linked from {type(caller).__name__} ({role.value})")

        self.on_linked(caller)
        return self

    def link_to(self, target: Any) -> Any:
        """Make this node the parent of ``target`` when it supports it; returns ``target``"""
        if isinstance(target, Linkable):
            target.link_from(self)
        else:
            logger.debug(f"{self.node_name}: link_to ignored for {type(target).__name__}")
        return target

    def is_bound(self) -> bool:
        return self.parent is not None

    def on_linked(self, caller: Any) -> None:
        """Override to get informed that the caller's services are available"""
        pass

    # Registration and lookup

    def set_service(self, key: str, service: Any) -> 'InjectableNode':
        """
        Register ``service`` under ``key``, visible from every node linked below.

        An existing local entry is replaced; an ancestor entry is masked.
        """
        self._services[key] = service
        logger.debug(f"{self.node_name}: service set: {key}")
        return self

    def get_service(self, key: str) -> Any:
        """
        Resolve ``key`` locally, then through the parent chain.

        Raises:
            UnboundError: the key is not local and there is no parent to ask.
        """
        if key in self._services:
            return self._services[key]

        parent = self.parent
        if parent is not None:
            return parent.get_service(key)

        logger.debug(f"{self.node_name}: unbound lookup for {key}")
        raise UnboundError(key)

    def try_get_service(self, key: str) -> Result[Any, InjxError]:
        return from_callable(lambda: self.get_service(key), catch=(InjxError,))

    def has_service(self, key: str) -> bool:
        """True when ``key`` resolves from this node"""
        if key in self._services:
            return True

        parent = self.parent
        if parent is None:
            return False
        return _provides(parent, key)

    def owns_service(self, key: str) -> bool:
        return key in self._services

    def local_services(self) -> Dict[str, Any]:
        return dict(self._services)

    def ancestors(self) -> Iterator[Any]:
        """Live parent chain, nearest first"""
        current = self.parent
        while current is not None:
            yield current
            current = current.parent if isinstance(current, InjectableNode) else None

    # Promotion

    def raise_service(self, key: str, safe: Optional[bool] = None) -> int:
        """
        Raises a service to make it available to ascendants and their children.

        Each call moves a locally owned service one level up and recurses
        from the parent, so the service ends at the effective root unless an
        ancestor already provides ``key`` and ``safe`` is set. Nodes that do
        not own ``key`` forward the call unchanged.

        Args:
            key: Service to raise
            safe: Stop before overriding an existing ancestor service.
                Defaults to ``config.default_safe``.

        Returns:
            The number of hops walked by this call.

        Raises:
            UnknownServiceError: no node up to the effective root owns ``key``.
        """
        if safe is None:
            safe = self.config.default_safe

        mine = key in self._services
        parent = self.parent

        if parent is None or self._parent_role is not NodeRole.LINKED:
            if mine:
                return 0
            logger.debug(f"{self.node_name}: cannot raise unknown service {key}")
            raise UnknownServiceError(key)

        if safe and mine and self._parent_provides(parent, key):
            logger.debug(f"{self.node_name}: {key} already provided above, kept local")
            return 0

        if mine:
            parent.set_service(key, self._services[key])
            del self._services[key]
            logger.debug(f"{self.node_name}: {key} promoted to {type(parent).__name__}")

        return parent.raise_service(key, safe) + 1

    def try_raise_service(self, key: str, safe: Optional[bool] = None) -> Result[int, InjxError]:
        return from_callable(lambda: self.raise_service(key, safe), catch=(InjxError,))

    def _parent_provides(self, parent: Any, key: str) -> bool:
        if not _provides(parent, key):
            return False
        if self.config.safe_check is SafeCheck.TRUTHY:
            return bool(parent.get_service(key))
        return True

    def __repr__(self) -> str:
        return (f"{type(self).__name__}(name={self.node_name!r}, role={self.role.value}, "
                f"services={sorted(self._services)})")

class SentinelNode(InjectableNode):
    """
    Placeholder that caps a chain: nodes linked from it are effective roots

    Promotion never moves a service into a sentinel. It still keeps a
    registry of its own, so services set on it directly (host-wide
    configuration, for instance) resolve for every node linked below.
    """

    def __init__(self, *args, **kwargs):
        kwargs["sentinel"] = True
        super().__init__(*args, **kwargs)
