"""
injx

Hierarchical service resolution: link objects into parent/child chains,
register services on any node, resolve them upward and promote them toward
the root.
"""

from .container import (
    InjectableNode,
    SentinelNode,
    NodeRole,
    ServiceProvider,
    Injectable,
    InjxError,
    IncompatibleCallerError,
    UnboundError,
    UnknownServiceError
)
from .config import InjxConfig, SafeCheck, get_config, set_config, setup_logging
from .status import describe_chain

__version__ = "1.0.0"

__all__ = [
    "InjectableNode",
    "SentinelNode",
    "NodeRole",
    "ServiceProvider",
    "Injectable",
    "InjxError",
    "IncompatibleCallerError",
    "UnboundError",
    "UnknownServiceError",
    "InjxConfig",
    "SafeCheck",
    "get_config",
    "set_config",
    "setup_logging",
    "describe_chain"
]
