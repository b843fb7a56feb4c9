"""
Chain Status Module

Diagnostic snapshots of service hierarchies.
"""

from .chain_status import NodeStatus, ChainStatus, PROVIDER_ROLE, describe_chain

__all__ = [
    "NodeStatus",
    "ChainStatus",
    "PROVIDER_ROLE",
    "describe_chain"
]
