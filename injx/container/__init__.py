"""
Service Hierarchy Module

Linking, lookup and promotion of services across a parent/child chain.
"""

from .injectable_node import InjectableNode, SentinelNode
from .protocols import NodeRole, ServiceProvider, Linkable, Promotable, Injectable
from .errors import InjxError, IncompatibleCallerError, UnboundError, UnknownServiceError

__all__ = [
    "InjectableNode",
    "SentinelNode",
    "NodeRole",
    "ServiceProvider",
    "Linkable",
    "Promotable",
    "Injectable",
    "InjxError",
    "IncompatibleCallerError",
    "UnboundError",
    "UnknownServiceError"
]
