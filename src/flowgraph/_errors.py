"""Errors raised by the graph engine.

Every error is a caller/input error: it is raised synchronously by the
operation that detects it, carries the offending ids and indices as
attributes, and is never retried by the engine.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ._graph import EdgeSource, EdgeTarget


class GraphError(Exception):
    """Base class for all graph engine errors."""


class UnknownNodeType(GraphError):  # noqa: N818
    """Raised when a node kind is not in the registry."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown node type: {name!r}")


class DuplicateId(GraphError):  # noqa: N818
    """Raised when adding a node whose id is already taken."""

    def __init__(self, node_id: str) -> None:
        self.node_id = node_id
        super().__init__(f"Node with ID {node_id!r} already exists.")


class NodeNotFound(GraphError):  # noqa: N818
    """Raised when an operation names a node that is not in the graph."""

    def __init__(self, node_id: str) -> None:
        self.node_id = node_id
        super().__init__(f"Node with ID {node_id!r} not found.")


class SocketIndexError(GraphError):
    """Raised when an edge endpoint names a socket the node does not have."""

    def __init__(self, node_id: str, direction: str, index: int) -> None:
        self.node_id = node_id
        self.direction = direction
        self.index = index
        super().__init__(f"Node {node_id!r} has no {direction} socket at index {index}.")


class SocketMaxConnectionsExceeded(GraphError):  # noqa: N818
    """Raised when a socket already holds its maximum number of connections."""

    def __init__(self, node_id: str, direction: str, index: int, max_connections: int) -> None:
        self.node_id = node_id
        self.direction = direction
        self.index = index
        self.max_connections = max_connections
        super().__init__(
            f"Node {node_id!r} {direction} index {index} has reached its maximum of {max_connections} connections.",
        )


class DuplicateEdge(GraphError):  # noqa: N818
    """Raised when the exact same edge already exists."""

    def __init__(self, source: EdgeSource, target: EdgeTarget) -> None:
        self.source = source
        self.target = target
        super().__init__(
            f"An edge from {source.node_id!r} output index {source.output_index}"
            f" to {target.node_id!r} input index {target.input_index} already exists.",
        )


class SelfLoopEdge(GraphError):  # noqa: N818
    """Raised when an edge would connect a node to itself."""

    def __init__(self, node_id: str) -> None:
        self.node_id = node_id
        super().__init__(f"Self-loops are not allowed: {node_id!r} cannot connect to itself.")


class TypeMismatchEdge(GraphError):  # noqa: N818
    """Raised when an output type cannot feed the target input type."""

    def __init__(self, source_type: str, target_type: str) -> None:
        self.source_type = source_type
        self.target_type = target_type
        super().__init__(
            f"Type mismatch: cannot connect output type {source_type!r} to input type {target_type!r}.",
        )


class CyclicGraph(GraphError):  # noqa: N818
    """Raised when evaluation reaches a node that is still being evaluated."""

    def __init__(self, path: Sequence[str]) -> None:
        self.path = tuple(path)
        super().__init__(f"Cycle detected during evaluation: {' -> '.join(self.path)}")


class EvaluationDepthExceeded(GraphError):  # noqa: N818
    """Raised when evaluation nests deeper than the configured limit."""

    def __init__(self, node_id: str, max_depth: int) -> None:
        self.node_id = node_id
        self.max_depth = max_depth
        super().__init__(f"Evaluation of {node_id!r} exceeded the maximum depth of {max_depth}.")
