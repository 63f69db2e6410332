"""Host-facing session owning one evolving graph and its cache."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from flowgraph import _graph as graph_ops
from flowgraph._config import EngineConfig
from flowgraph._eval_engine import evaluate_node, trace_evaluation
from flowgraph._invalidation import mark_dirty, mark_dirty_many

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from flowgraph._eval_engine import NodeTrace
    from flowgraph._graph import EdgeSource, EdgeTarget, Graph, Node
    from flowgraph._registry import NodeKind

logger = logging.getLogger(__name__)


class GraphSession:
    """A context object owning a graph snapshot, its cache and an id counter.

    Each mutation runs the pure core operation against the latest snapshot,
    purges the cache entries it may have affected, and only then publishes the
    new ``(graph, cache)`` pair. A failed mutation leaves the session
    unchanged.

    Sessions are independent of each other; create one per document, host
    or test. A session is not thread-safe: hosts serialize access to it.

    Example:
        >>> session = GraphSession()
        >>> a = session.add_node("numberLiteral", config=[5])
        >>> sink = session.add_node("sink")
        >>> session.add_edge(EdgeSource(a.id), EdgeTarget(sink.id))
        >>> session.evaluate(sink.id)
        5

    """

    def __init__(self, config: EngineConfig | None = None, graph: Graph | None = None) -> None:
        self.config = config if config is not None else EngineConfig()
        self._graph = graph if graph is not None else graph_ops.Graph()
        self._cache: Mapping[str, Any] = {}
        self._counter = 0

    @property
    def graph(self) -> Graph:
        """The latest graph snapshot."""
        return self._graph

    @property
    def cache(self) -> Mapping[str, Any]:
        """The latest cache."""
        return self._cache

    def snapshot(self) -> tuple[Graph, Mapping[str, Any]]:
        """Return the latest ``(graph, cache)`` pair."""
        return self._graph, self._cache

    def next_id(self) -> str:
        """Generate the next unused node id, e.g. ``"N1"``."""
        while True:
            self._counter += 1
            node_id = f"{self.config.id_prefix}{self._counter}"
            if node_id not in self._graph:
                return node_id

    def _publish(self, graph: Graph, cache: Mapping[str, Any]) -> frozenset[str]:
        purged = frozenset(self._cache.keys() - cache.keys())
        self._graph = graph
        self._cache = cache
        return purged

    def add_node(
        self,
        kind: NodeKind | str,
        node_id: str | None = None,
        config: Sequence[Any] | None = None,
    ) -> Node:
        """Add an unconnected node, generating an id if none is given.

        Raises:
            DuplicateId: If ``node_id`` is already taken.
            UnknownNodeType: If the kind is not registered.

        """
        if node_id is None:
            node_id = self.next_id()
        graph = graph_ops.add_node(self._graph, kind, node_id, config)
        # A node without connections cannot affect any cached value.
        self._publish(graph, self._cache)
        return graph.node(node_id)

    def remove_node(self, node_id: str) -> frozenset[str]:
        """Remove a node and its connections.

        Returns:
            Ids whose cached values were purged.

        Raises:
            NodeNotFound: If ``node_id`` is not in the graph.

        """
        result = graph_ops.remove_node(self._graph, node_id)
        cache = mark_dirty_many(result.graph, self._cache, result.touched)
        cache.pop(node_id, None)
        purged = self._publish(result.graph, cache)
        logger.debug("Removed %s, purged %s", node_id, sorted(purged))
        return purged

    def update_node_data(self, node_id: str, config: Sequence[Any]) -> frozenset[str]:
        """Replace a node's config.

        Returns:
            Ids whose cached values were purged.

        Raises:
            NodeNotFound: If ``node_id`` is not in the graph.

        """
        graph = graph_ops.update_node_data(self._graph, node_id, config)
        return self._publish(graph, mark_dirty(graph, self._cache, node_id))

    def add_edge(self, source: EdgeSource, target: EdgeTarget) -> frozenset[str]:
        """Connect two sockets.

        Returns:
            Ids whose cached values were purged.

        Raises:
            GraphError: Any of the edge validation errors of ``add_edge``.

        """
        graph = graph_ops.add_edge(self._graph, source, target)
        return self._publish(graph, mark_dirty(graph, self._cache, target.node_id))

    def remove_edge(self, source: EdgeSource, target: EdgeTarget) -> frozenset[str]:
        """Disconnect two sockets. Removing a missing edge is a no-op.

        Returns:
            Ids whose cached values were purged.

        Raises:
            NodeNotFound: If either endpoint is missing.

        """
        graph = graph_ops.remove_edge(self._graph, source, target)
        if graph is self._graph:
            return frozenset()
        return self._publish(graph, mark_dirty(graph, self._cache, target.node_id))

    def evaluate(self, node_id: str) -> Any:
        """Evaluate a node against the latest snapshot, keeping the filled cache."""
        value, cache = evaluate_node(self._graph, self._cache, node_id, max_depth=self.config.max_eval_depth)
        self._cache = cache
        return value

    def trace(self, node_id: str) -> dict[str, NodeTrace]:
        """Evaluate a node and return the traces of it and its upstream nodes."""
        traces, cache = trace_evaluation(self._graph, self._cache, node_id, max_depth=self.config.max_eval_depth)
        self._cache = cache
        return traces
