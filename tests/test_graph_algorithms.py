"""Tests for graph traversal."""

import flowgraph as fg
from flowgraph import EdgeSource, EdgeTarget


def chain(*kinds: str) -> fg.Graph:
    """Build N1 -> N2 -> ... connecting output 0 to input 0."""
    graph = fg.Graph()
    for index, kind in enumerate(kinds, start=1):
        graph = fg.add_node(graph, kind, f"N{index}")
    for index in range(1, len(kinds)):
        graph = fg.add_edge(graph, EdgeSource(f"N{index}"), EdgeTarget(f"N{index + 1}"))
    return graph


class TestReachableFrom:
    """Tests for reachable_from."""

    def test_includes_start(self) -> None:
        graph = fg.add_node(fg.Graph(), "sink", "N1")
        assert fg.reachable_from(graph, "N1") == frozenset({"N1"})

    def test_follows_downstream_only(self) -> None:
        graph = chain("numberLiteral", "add", "sink")
        assert fg.reachable_from(graph, "N2") == frozenset({"N2", "N3"})
        assert fg.reachable_from(graph, "N1") == frozenset({"N1", "N2", "N3"})

    def test_fan_out(self) -> None:
        graph = chain("numberLiteral", "sink")
        graph = fg.add_node(graph, "sink", "N3")
        graph = fg.add_edge(graph, EdgeSource("N1"), EdgeTarget("N3"))
        assert fg.reachable_from(graph, "N1") == frozenset({"N1", "N2", "N3"})

    def test_terminates_on_cycle(self) -> None:
        graph = fg.add_edge(chain("add", "add"), EdgeSource("N2"), EdgeTarget("N1", 0))
        assert fg.reachable_from(graph, "N1") == frozenset({"N1", "N2"})

    def test_unknown_start(self) -> None:
        assert fg.reachable_from(fg.Graph(), "N9") == frozenset({"N9"})

    def test_long_chain(self) -> None:
        graph = chain("numberLiteral", *["add"] * 2000)
        assert len(fg.reachable_from(graph, "N1")) == 2001
