"""Invalidation of cached node values.

A cached value for a node stays valid only while the node's config and
everything upstream of it are unchanged. When a node changes, its own entry
and the entries of every node downstream of it are purged.

Which node to start from depends on the mutation:
- add_node: nothing to purge
- remove_node: every touched neighbour, plus the removed node's own entry
- update_node_data: the updated node
- add_edge / remove_edge: the edge's target (the source's value is unchanged)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, TypeAlias

from flowgraph._graph import reachable_from

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from flowgraph._graph import Graph

logger = logging.getLogger(__name__)

Cache: TypeAlias = "Mapping[str, Any]"


def mark_dirty(graph: Graph, cache: Cache, start_id: str) -> dict[str, Any]:
    """Purge the cache entries of ``start_id`` and everything downstream of it.

    The walk follows output connections with a visited set, so it terminates
    on cyclic graphs. The input cache is not modified.

    Args:
        graph: The graph snapshot to walk.
        cache: The current cache.
        start_id: The node whose value may have changed.

    Returns:
        A new cache without the purged entries.

    """
    dirty = reachable_from(graph, start_id)
    purged = cache.keys() & dirty
    if purged:
        logger.debug("Invalidating %s (from %s)", sorted(purged), start_id)
    return {node_id: value for node_id, value in cache.items() if node_id not in dirty}


def mark_dirty_many(graph: Graph, cache: Cache, start_ids: Iterable[str]) -> dict[str, Any]:
    """Apply mark_dirty from several start nodes."""
    new_cache = dict(cache)
    for start_id in start_ids:
        new_cache = mark_dirty(graph, new_cache, start_id)
    return new_cache
