"""Tests for the snapshot records."""

from collections.abc import Hashable

import pytest

import flowgraph as fg
from flowgraph import InputConnection, Node, OutputConnection


class TestNode:
    """Tests for Node."""

    def test_create_sizes_sockets(self) -> None:
        node = Node.create("conditional", "N1")
        assert node.inputs == ((), (), ())
        assert node.outputs == ((),)
        assert node.config == (False, 0, 0)

    def test_create_accepts_kind_enum(self) -> None:
        assert Node.create(fg.NodeKind.SINK, "N1").kind is fg.NodeKind.SINK

    def test_create_unknown_kind(self) -> None:
        with pytest.raises(fg.UnknownNodeType):
            Node.create("nope", "N1")

    def test_definition(self) -> None:
        assert Node.create("divide", "N1").definition.title == "Divide"

    def test_without_peer(self) -> None:
        node = Node(
            id="N2",
            kind=fg.NodeKind.ADD,
            config=(0, 0),
            inputs=((InputConnection("N1", 0),), (InputConnection("N3", 0),)),
            outputs=((OutputConnection("N1", 0), OutputConnection("N4", 0)),),
        )
        stripped = node.without_peer("N1")
        assert stripped.inputs == ((), (InputConnection("N3", 0),))
        assert stripped.outputs == ((OutputConnection("N4", 0),),)
        assert node.neighbours() == frozenset({"N1", "N3", "N4"})
        assert node.dependents() == frozenset({"N1", "N4"})

    def test_is_immutable(self) -> None:
        node = Node.create("sink", "N1")
        with pytest.raises(AttributeError):
            node.config = (1,)  # type: ignore[misc]


class TestGraph:
    """Tests for Graph."""

    def test_empty(self) -> None:
        graph = fg.Graph()
        assert len(graph) == 0
        assert list(graph) == []
        assert graph.ids == frozenset()

    def test_from_nodes(self) -> None:
        graph = fg.Graph.from_nodes([Node.create("sink", "N1"), Node.create("add", "N2")])
        assert list(graph) == ["N1", "N2"]
        assert "N2" in graph
        assert graph.get("N3") is None

    def test_node_not_found(self) -> None:
        with pytest.raises(fg.NodeNotFound, match="N1"):
            fg.Graph().node("N1")

    def test_structural_equality(self) -> None:
        first = fg.add_node(fg.Graph(), "add", "N1")
        second = fg.add_node(fg.Graph(), "add", "N1")
        assert first == second
        assert first is not second

    def test_unhashable(self) -> None:
        graph = fg.add_node(fg.Graph(), "add", "N1")
        assert not isinstance(graph, Hashable)
        with pytest.raises(TypeError, match="unhashable"):
            hash(graph)

    def test_nodes_stay_hashable(self) -> None:
        node = Node.create("add", "N1")
        assert hash(node) == hash(Node.create("add", "N1"))

    def test_with_nodes_keeps_source_graph(self) -> None:
        graph = fg.Graph.from_nodes([Node.create("sink", "N1")])
        changed = graph.with_nodes({"N2": Node.create("sink", "N2")}, removed=("N1",))
        assert list(graph) == ["N1"]
        assert list(changed) == ["N2"]


class TestCheckIntegrity:
    """Tests for Graph.check_integrity."""

    def test_consistent_graph(self) -> None:
        graph = fg.add_node(fg.Graph(), "numberLiteral", "N1")
        graph = fg.add_node(graph, "sink", "N2")
        graph = fg.add_edge(graph, fg.EdgeSource("N1"), fg.EdgeTarget("N2"))
        assert graph.check_integrity() == []

    def test_missing_mirror(self) -> None:
        source = Node.create("numberLiteral", "N1")
        target = Node.create("sink", "N2").with_input(0, [InputConnection("N1", 0)])
        errors = fg.Graph.from_nodes([source, target]).check_integrity()
        assert len(errors) == 1
        assert "no mirror" in errors[0]

    def test_dangling_reference(self) -> None:
        node = Node.create("numberLiteral", "N1").with_output(0, [OutputConnection("N9", 0)])
        errors = fg.Graph.from_nodes([node]).check_integrity()
        assert any("missing 'N9'" in error for error in errors)

    def test_wrong_socket_count(self) -> None:
        node = Node(id="N1", kind=fg.NodeKind.ADD)
        errors = fg.Graph.from_nodes([node]).check_integrity()
        assert errors == ["Node 'N1' has socket lists that do not match its type 'add'"]
