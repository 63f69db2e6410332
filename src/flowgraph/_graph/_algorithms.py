"""Graph traversal over output connections."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ._model import Graph


def reachable_from(graph: Graph, start_id: str) -> frozenset[str]:
    """Get ``start_id`` and every node reachable from it along output connections.

    A visited set guards the walk, so cyclic graphs terminate. An id that is
    not in the graph only reaches itself.

    Args:
        graph: The graph snapshot.
        start_id: The node to start from.

    Returns:
        Set of reached node ids, including ``start_id``.

    """
    visited: set[str] = set()
    stack = [start_id]
    while stack:
        current = stack.pop()
        if current in visited:
            continue
        visited.add(current)
        node = graph.get(current)
        if node is not None:
            stack.extend(node.dependents())
    return frozenset(visited)
