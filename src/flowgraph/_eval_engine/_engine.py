"""Memoized, post-order evaluation of node values."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from flowgraph._errors import CyclicGraph, EvaluationDepthExceeded

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

    from flowgraph._graph import Graph, Node

logger = logging.getLogger(__name__)


def _evaluate(
    graph: Graph,
    values: dict[str, Any],
    node_id: str,
    max_depth: int | None,
) -> Any:
    if node_id in values:
        return values[node_id]

    # Explicit stack of (node, pending upstream ids); ``active`` mirrors it for cycle checks.
    active: dict[str, None] = {}
    stack: list[tuple[Node, Iterator[str]]] = []

    def enter(current: str) -> None:
        if current in active:
            path = list(active)
            raise CyclicGraph([*path[path.index(current) :], current])
        node = graph.node(current)
        if max_depth is not None and len(active) >= max_depth:
            raise EvaluationDepthExceeded(current, max_depth)
        active[current] = None
        stack.append((node, (conn.peer_id for socket in node.inputs for conn in socket)))

    enter(node_id)
    while stack:
        node, pending = stack[-1]
        for peer_id in pending:
            if peer_id not in values:
                enter(peer_id)
                break
        else:
            # Every input is resolved before this node's logic runs.
            stack.pop()
            del active[node.id]
            inputs = [[values[conn.peer_id] for conn in socket] for socket in node.inputs]
            value = node.definition.evaluate(inputs, node.config)
            logger.debug("Evaluated %s (%s) = %r", node.id, node.kind, value)
            values[node.id] = value

    return values[node_id]


def evaluate_node(
    graph: Graph,
    cache: Mapping[str, Any],
    node_id: str,
    *,
    max_depth: int | None = None,
) -> tuple[Any, Mapping[str, Any]]:
    """Evaluate a node, filling the cache from the leaves up.

    This is a pure function: a cache hit returns the given cache unchanged,
    and a miss returns a new cache holding the node's value and the values of
    every upstream node computed on the way. Each upstream node is computed at
    most once per call.

    Args:
        graph: The graph snapshot.
        cache: Previously computed values, keyed by node id.
        node_id: The node to evaluate.
        max_depth: Optional limit on how deeply evaluation may nest.

    Returns:
        A tuple of the node's value and the resulting cache.

    Raises:
        NodeNotFound: If ``node_id`` or an upstream node is missing.
        CyclicGraph: If a node is reached again while still being evaluated.
        EvaluationDepthExceeded: If evaluation nests deeper than ``max_depth``.

    Example:
        >>> value, cache = evaluate_node(graph, {}, "N4")
        >>> value
        8

    """
    if node_id in cache:
        logger.debug("Cache hit for %s", node_id)
        return cache[node_id], cache

    values = dict(cache)
    value = _evaluate(graph, values, node_id, max_depth)
    return value, values
