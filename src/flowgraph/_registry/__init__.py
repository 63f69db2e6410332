"""Node type registry.

This module holds the static, per-kind definitions of every node the engine
knows about: socket shapes and types, connection limits, config slots with
their defaults, and the pure logic that computes a node's value.

Key types:
- NodeKind: Closed enum of node kinds
- ValueType: Socket type tags, including the ANY wildcard
- NodeTypeDef: Definition of one node kind
- lookup: Resolve a kind name to its definition
"""

from typing import Any

from flowgraph._errors import UnknownNodeType

from ._definitions import NODE_TYPES
from ._kinds import NodeKind, SlotWidget, SocketWidget, ValueType
from ._logic import Value, compute
from ._types import ConfigSlotDef, NodeTypeDef, SocketDef

__all__ = [
    "ConfigSlotDef",
    "NodeKind",
    "NodeTypeDef",
    "SlotWidget",
    "SocketDef",
    "SocketWidget",
    "Value",
    "ValueType",
    "compute",
    "lookup",
    "node_kinds",
    "produce_default_config",
]


def lookup(name: NodeKind | str) -> NodeTypeDef:
    """Get the definition of a node kind.

    Args:
        name: A NodeKind or its string value (e.g. ``"numberLiteral"``).

    Returns:
        The registered NodeTypeDef.

    Raises:
        UnknownNodeType: If no kind with that name is registered.

    """
    try:
        kind = NodeKind(name)
    except ValueError:
        raise UnknownNodeType(str(name)) from None
    return NODE_TYPES[kind]


def produce_default_config(name: NodeKind | str) -> tuple[Any, ...]:
    """Produce the default config for a node kind."""
    return lookup(name).default_config()


def node_kinds() -> list[NodeKind]:
    """List every registered node kind in registration order."""
    return list(NODE_TYPES)
