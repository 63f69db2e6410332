"""Graph store and mutation engine.

This module contains:
- Graph, Node: Immutable snapshot records
- InputConnection, OutputConnection: Connections stored on sockets
- EdgeSource, EdgeTarget: Edge endpoints passed to mutations
- add_node, remove_node, update_node_data, add_edge, remove_edge: Pure mutations
- reachable_from: Downstream traversal used by invalidation
"""

from ._algorithms import reachable_from
from ._model import EdgeSource, EdgeTarget, Graph, InputConnection, Node, OutputConnection
from ._mutations import RemovalResult, add_edge, add_node, remove_edge, remove_node, update_node_data

__all__ = [
    "EdgeSource",
    "EdgeTarget",
    "Graph",
    "InputConnection",
    "Node",
    "OutputConnection",
    "RemovalResult",
    "add_edge",
    "add_node",
    "reachable_from",
    "remove_edge",
    "remove_node",
    "update_node_data",
]
