#!/usr/bin/env python3

"""
Chain Status

Read-only snapshots of a node and its ancestors, for diagnostics and logs.
"""

import logging
from typing import List, Optional

from pydantic import BaseModel, Field

from ..container.injectable_node import InjectableNode

logger = logging.getLogger(__name__)

PROVIDER_ROLE = "provider"

class NodeStatus(BaseModel):
    """One node of a chain

    Parents that are not InjectableNodes are reported with role "provider".
    Their registry cannot be listed, so `local_keys` stays empty and
    `inspectable` is False.
    """
    name: str
    role: str
    sentinel: bool = False
    inspectable: bool = True
    local_keys: List[str] = Field(default_factory=list)

class ChainStatus(BaseModel):
    """A node and its live ancestors, requesting node first

    `resolvable_keys` only covers inspectable nodes; keys served by a
    provider ancestor resolve but are not listed.
    """
    nodes: List[NodeStatus]
    depth: int
    resolvable_keys: List[str] = Field(default_factory=list)

    def owner_of(self, key: str) -> Optional[int]:
        """Index of the nearest node owning ``key``, if any"""
        for index, node in enumerate(self.nodes):
            if key in node.local_keys:
                return index
        return None

def _node_status(node) -> NodeStatus:
    if not isinstance(node, InjectableNode):
        return NodeStatus(name=type(node).__name__, role=PROVIDER_ROLE, inspectable=False)

    return NodeStatus(
        name=node.node_name,
        role=node.role.value,
        sentinel=node.is_sentinel,
        local_keys=sorted(node.local_services())
    )

def describe_chain(node: InjectableNode) -> ChainStatus:
    """Snapshot ``node`` and every live ancestor"""
    nodes = [_node_status(node)] + [_node_status(ancestor) for ancestor in node.ancestors()]

    keys = set()
    for status in nodes:
        keys.update(status.local_keys)

    status = ChainStatus(
        nodes=nodes,
        depth=len(nodes) - 1,
        resolvable_keys=sorted(keys)
    )
    logger.debug(f"Chain status for {node.node_name}: depth={status.depth}")
    return status
