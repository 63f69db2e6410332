"""Pure snapshot-to-snapshot graph mutations.

Every operation takes a Graph and returns a new one; the input snapshot is
never modified. All checks run before the new snapshot is built, so a failed
mutation never yields a partially applied graph.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from flowgraph._errors import (
    DuplicateEdge,
    DuplicateId,
    SelfLoopEdge,
    SocketIndexError,
    SocketMaxConnectionsExceeded,
    TypeMismatchEdge,
)

from ._model import EdgeSource, EdgeTarget, Graph, InputConnection, Node, OutputConnection

if TYPE_CHECKING:
    from collections.abc import Sequence

    from flowgraph._registry import NodeKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RemovalResult:
    """Result of removing a node.

    Attributes:
        graph: The new snapshot.
        touched: Ids of former neighbours that lost a connection.

    """

    graph: Graph
    touched: frozenset[str]


def add_node(
    graph: Graph,
    kind: NodeKind | str,
    node_id: str,
    config: Sequence[Any] | None = None,
) -> Graph:
    """Insert a fresh, unconnected node.

    Args:
        graph: The current snapshot.
        kind: The node kind.
        node_id: Id of the new node.
        config: Initial config. Defaults to the kind's default config.

    Returns:
        A new snapshot containing the node.

    Raises:
        DuplicateId: If ``node_id`` is already taken.
        UnknownNodeType: If the kind is not registered.

    """
    if node_id in graph:
        raise DuplicateId(node_id)
    node = Node.create(kind, node_id, config)
    logger.debug("Adding node %s of kind %s", node_id, node.kind)
    return graph.with_nodes({node_id: node})


def remove_node(graph: Graph, node_id: str) -> RemovalResult:
    """Delete a node and strip it from every neighbour's sockets.

    Args:
        graph: The current snapshot.
        node_id: Id of the node to remove.

    Returns:
        The new snapshot and the ids of the neighbours that were touched.

    Raises:
        NodeNotFound: If ``node_id`` is not in the graph.

    """
    node = graph.node(node_id)
    touched = frozenset(peer for peer in node.neighbours() if peer in graph)
    updates = {peer: graph.node(peer).without_peer(node_id) for peer in touched}
    logger.debug("Removing node %s, touching %s", node_id, sorted(touched))
    return RemovalResult(graph=graph.with_nodes(updates, removed=(node_id,)), touched=touched)


def update_node_data(graph: Graph, node_id: str, config: Sequence[Any]) -> Graph:
    """Replace a node's config verbatim.

    Raises:
        NodeNotFound: If ``node_id`` is not in the graph.

    """
    node = graph.node(node_id)
    logger.debug("Updating config of %s to %r", node_id, config)
    return graph.with_nodes({node_id: node.with_config(config)})


def _check_indices(source_node: Node, source: EdgeSource, target_node: Node, target: EdgeTarget) -> None:
    if not 0 <= source.output_index < len(source_node.outputs):
        raise SocketIndexError(source.node_id, "output", source.output_index)
    if not 0 <= target.input_index < len(target_node.inputs):
        raise SocketIndexError(target.node_id, "input", target.input_index)


def add_edge(graph: Graph, source: EdgeSource, target: EdgeTarget) -> Graph:
    """Connect an output socket to an input socket.

    Checks run in this order and fail fast: both endpoints exist, both socket
    indices exist, the edge is not a self-loop, the same edge does not exist
    yet, the target socket has room, the source socket has room, and the
    output type can feed the input type.

    Args:
        graph: The current snapshot.
        source: The output end of the edge.
        target: The input end of the edge.

    Returns:
        A new snapshot containing the edge.

    Raises:
        NodeNotFound: If either endpoint is missing.
        SocketIndexError: If either socket index is out of range.
        SelfLoopEdge: If source and target are the same node.
        DuplicateEdge: If the edge already exists.
        SocketMaxConnectionsExceeded: If either socket is full.
        TypeMismatchEdge: If the output type cannot feed the input type.

    """
    source_node = graph.node(source.node_id)
    target_node = graph.node(target.node_id)
    _check_indices(source_node, source, target_node, target)

    if source.node_id == target.node_id:
        raise SelfLoopEdge(source.node_id)

    outgoing = source_node.outputs[source.output_index]
    incoming = target_node.inputs[target.input_index]
    if OutputConnection(target.node_id, target.input_index) in outgoing:
        raise DuplicateEdge(source, target)

    source_socket = source_node.definition.outputs[source.output_index]
    target_socket = target_node.definition.inputs[target.input_index]
    if not target_socket.has_capacity(len(incoming)):
        raise SocketMaxConnectionsExceeded(
            target.node_id, "input", target.input_index, target_socket.max_connections or 0
        )
    if not source_socket.has_capacity(len(outgoing)):
        raise SocketMaxConnectionsExceeded(
            source.node_id, "output", source.output_index, source_socket.max_connections or 0
        )
    if not target_socket.accepts(source_socket.value_type):
        raise TypeMismatchEdge(str(source_socket.value_type), str(target_socket.value_type))

    logger.debug(
        "Adding edge %s[%d] -> %s[%d]",
        source.node_id,
        source.output_index,
        target.node_id,
        target.input_index,
    )
    new_source = source_node.with_output(
        source.output_index,
        (*outgoing, OutputConnection(target.node_id, target.input_index)),
    )
    new_target = target_node.with_input(
        target.input_index,
        (*incoming, InputConnection(source.node_id, source.output_index)),
    )
    return graph.with_nodes({source.node_id: new_source, target.node_id: new_target})


def remove_edge(graph: Graph, source: EdgeSource, target: EdgeTarget) -> Graph:
    """Disconnect an edge from both of its endpoints.

    Removing an edge that does not exist is a no-op and returns the same
    snapshot.

    Raises:
        NodeNotFound: If either endpoint is missing.
        SocketIndexError: If either socket index is out of range.

    """
    source_node = graph.node(source.node_id)
    target_node = graph.node(target.node_id)
    _check_indices(source_node, source, target_node, target)

    outgoing = source_node.outputs[source.output_index]
    incoming = target_node.inputs[target.input_index]
    kept_outgoing = [c for c in outgoing if c != OutputConnection(target.node_id, target.input_index)]
    kept_incoming = [c for c in incoming if c != InputConnection(source.node_id, source.output_index)]
    if len(kept_outgoing) == len(outgoing) and len(kept_incoming) == len(incoming):
        logger.debug("No edge %s -> %s to remove", source.node_id, target.node_id)
        return graph

    logger.debug(
        "Removing edge %s[%d] -> %s[%d]",
        source.node_id,
        source.output_index,
        target.node_id,
        target.input_index,
    )
    return graph.with_nodes(
        {
            source.node_id: source_node.with_output(source.output_index, kept_outgoing),
            target.node_id: target_node.with_input(target.input_index, kept_incoming),
        },
    )
