"""Evaluation traces: live socket values for a node and its upstream nodes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from flowgraph._errors import CyclicGraph

from ._engine import evaluate_node

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

    from flowgraph._graph import Graph, Node


@dataclass(frozen=True, slots=True)
class NodeTrace:
    """Values seen by one node during evaluation.

    Attributes:
        inputs: First connected value per input socket, None for sockets
            without connections.
        output: The node's computed value.

    """

    inputs: tuple[Any, ...]
    output: Any


def trace_evaluation(
    graph: Graph,
    cache: Mapping[str, Any],
    node_id: str,
    *,
    max_depth: int | None = None,
) -> tuple[dict[str, NodeTrace], Mapping[str, Any]]:
    """Evaluate a node and report the values flowing through it and its ancestors.

    Hosts use the trace to annotate every socket upstream of a displayed node
    with its current value.

    Args:
        graph: The graph snapshot.
        cache: Previously computed values, keyed by node id.
        node_id: The node to trace.
        max_depth: Optional limit on how deeply evaluation may nest.

    Returns:
        A tuple of the traces keyed by node id (upstream nodes first) and the
        resulting cache.

    Raises:
        NodeNotFound: If ``node_id`` or an upstream node is missing.
        CyclicGraph: If the upstream graph contains a cycle.

    """
    _, values = evaluate_node(graph, cache, node_id, max_depth=max_depth)
    traces: dict[str, NodeTrace] = {}
    active: dict[str, None] = {}
    stack: list[tuple[Node, Iterator[str]]] = []

    def enter(current: str) -> None:
        if current in active:
            path = list(active)
            raise CyclicGraph([*path[path.index(current) :], current])
        node = graph.node(current)
        active[current] = None
        stack.append((node, (conn.peer_id for socket in node.inputs for conn in socket)))

    enter(node_id)
    while stack:
        node, pending = stack[-1]
        for peer_id in pending:
            if peer_id not in traces:
                enter(peer_id)
                break
        else:
            stack.pop()
            del active[node.id]
            output, values = evaluate_node(graph, values, node.id, max_depth=max_depth)
            socket_values = tuple(values[socket[0].peer_id] if socket else None for socket in node.inputs)
            traces[node.id] = NodeTrace(inputs=socket_values, output=output)

    return traces, values
