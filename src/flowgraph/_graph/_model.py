"""Immutable graph snapshot records."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any

from flowgraph._errors import NodeNotFound
from flowgraph._registry import NodeKind, NodeTypeDef, lookup

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Mapping, Sequence


@dataclass(frozen=True, slots=True)
class InputConnection:
    """Connection stored on an input socket, naming the source node and its output index."""

    peer_id: str
    peer_socket: int


@dataclass(frozen=True, slots=True)
class OutputConnection:
    """Connection stored on an output socket, naming the target node and its input index."""

    peer_id: str
    peer_socket: int


@dataclass(frozen=True, slots=True)
class EdgeSource:
    """The output end of an edge."""

    node_id: str
    output_index: int = 0


@dataclass(frozen=True, slots=True)
class EdgeTarget:
    """The input end of an edge."""

    node_id: str
    input_index: int = 0


@dataclass(frozen=True, slots=True)
class Node:
    """A node in a graph snapshot.

    Attributes:
        id: Unique node id.
        kind: The node kind, resolved through the registry.
        config: Stored config values, one per config slot.
        inputs: Connections per input socket.
        outputs: Connections per output socket.

    """

    id: str
    kind: NodeKind
    config: tuple[Any, ...] = ()
    inputs: tuple[tuple[InputConnection, ...], ...] = ()
    outputs: tuple[tuple[OutputConnection, ...], ...] = ()

    @classmethod
    def create(cls, kind: NodeKind | str, node_id: str, config: Sequence[Any] | None = None) -> Node:
        """Create a node with empty sockets sized by its type definition.

        Args:
            kind: The node kind.
            node_id: Id of the new node.
            config: Initial config. Defaults to the kind's default config.

        Returns:
            A new, unconnected Node.

        Raises:
            UnknownNodeType: If the kind is not registered.

        """
        definition = lookup(kind)
        return cls(
            id=node_id,
            kind=definition.kind,
            config=tuple(config) if config is not None else definition.default_config(),
            inputs=tuple(() for _ in definition.inputs),
            outputs=tuple(() for _ in definition.outputs),
        )

    @property
    def definition(self) -> NodeTypeDef:
        """The type definition of this node."""
        return lookup(self.kind)

    def neighbours(self) -> frozenset[str]:
        """Ids of every node connected to this one, upstream or downstream."""
        upstream = {conn.peer_id for socket in self.inputs for conn in socket}
        downstream = {conn.peer_id for socket in self.outputs for conn in socket}
        return frozenset(upstream | downstream)

    def dependents(self) -> frozenset[str]:
        """Ids of nodes fed by this node's outputs."""
        return frozenset(conn.peer_id for socket in self.outputs for conn in socket)

    def with_config(self, config: Sequence[Any]) -> Node:
        return replace(self, config=tuple(config))

    def with_input(self, index: int, connections: Iterable[InputConnection]) -> Node:
        inputs = list(self.inputs)
        inputs[index] = tuple(connections)
        return replace(self, inputs=tuple(inputs))

    def with_output(self, index: int, connections: Iterable[OutputConnection]) -> Node:
        outputs = list(self.outputs)
        outputs[index] = tuple(connections)
        return replace(self, outputs=tuple(outputs))

    def without_peer(self, peer_id: str) -> Node:
        """Return a copy with every connection to ``peer_id`` stripped."""
        return replace(
            self,
            inputs=tuple(tuple(c for c in socket if c.peer_id != peer_id) for socket in self.inputs),
            outputs=tuple(tuple(c for c in socket if c.peer_id != peer_id) for socket in self.outputs),
        )


@dataclass(frozen=True, slots=True)
class Graph:
    """An immutable snapshot mapping node ids to nodes.

    Mutations never modify a Graph; they build a new one that shares every
    unchanged Node with its predecessor, so older snapshots stay valid for
    concurrent readers. Equality is structural. Snapshots hold a dict of
    nodes and are unhashable; key caches by node id instead.

    Attributes:
        _nodes: Mapping from node id to Node.

    """

    _nodes: dict[str, Node] = field(default_factory=dict)

    __hash__ = None  # type: ignore[assignment]

    @classmethod
    def from_nodes(cls, nodes: Iterable[Node]) -> Graph:
        """Build a graph from node records, keyed by their ids."""
        return cls(_nodes={node.id: node for node in nodes})

    def node(self, node_id: str) -> Node:
        """Get a node by id.

        Raises:
            NodeNotFound: If no node has that id.

        """
        try:
            return self._nodes[node_id]
        except KeyError:
            raise NodeNotFound(node_id) from None

    def get(self, node_id: str) -> Node | None:
        """Get a node by id, or None if absent."""
        return self._nodes.get(node_id)

    @property
    def ids(self) -> frozenset[str]:
        """All node ids in the graph."""
        return frozenset(self._nodes)

    def nodes(self) -> list[Node]:
        """All nodes in insertion order."""
        return list(self._nodes.values())

    def with_nodes(self, updates: Mapping[str, Node], removed: Iterable[str] = ()) -> Graph:
        """Build a new snapshot with some nodes replaced, added or removed."""
        nodes = dict(self._nodes)
        for node_id in removed:
            nodes.pop(node_id, None)
        nodes.update(updates)
        return Graph(_nodes=nodes)

    def check_integrity(self) -> list[str]:  # noqa: C901
        """Check the graph invariants and return a list of violations.

        Checks for:
        - Socket lists sized differently from the type definition
        - Connections to missing nodes or sockets, and self connections
        - Connections without a symmetric mirror on the peer
        - Sockets holding more connections than allowed
        - Edges whose output type cannot feed the input type

        Returns:
            List of error messages. Empty list if the graph is consistent.

        """
        errors: list[str] = []

        for node in self._nodes.values():
            definition = node.definition
            if len(node.inputs) != len(definition.inputs) or len(node.outputs) != len(definition.outputs):
                errors.append(f"Node '{node.id}' has socket lists that do not match its type '{node.kind}'")
                continue

            for index, socket in enumerate(node.inputs):
                socket_def = definition.inputs[index]
                if not socket_def.has_capacity(len(socket) - 1):
                    errors.append(f"Node '{node.id}' input {index} exceeds its maximum connections")
                for conn in socket:
                    peer = self._nodes.get(conn.peer_id)
                    if conn.peer_id == node.id:
                        errors.append(f"Node '{node.id}' input {index} is connected to itself")
                    elif peer is None or conn.peer_socket >= len(peer.outputs):
                        errors.append(f"Node '{node.id}' input {index} references missing '{conn.peer_id}'")
                    elif OutputConnection(node.id, index) not in peer.outputs[conn.peer_socket]:
                        errors.append(f"Node '{node.id}' input {index} has no mirror on '{conn.peer_id}'")
                    elif not socket_def.accepts(peer.definition.outputs[conn.peer_socket].value_type):
                        errors.append(f"Node '{node.id}' input {index} has a type mismatch with '{conn.peer_id}'")

            for index, socket in enumerate(node.outputs):
                if not definition.outputs[index].has_capacity(len(socket) - 1):
                    errors.append(f"Node '{node.id}' output {index} exceeds its maximum connections")
                for conn in socket:
                    peer = self._nodes.get(conn.peer_id)
                    if peer is None or conn.peer_socket >= len(peer.inputs):
                        errors.append(f"Node '{node.id}' output {index} references missing '{conn.peer_id}'")
                    elif InputConnection(node.id, index) not in peer.inputs[conn.peer_socket]:
                        errors.append(f"Node '{node.id}' output {index} has no mirror on '{conn.peer_id}'")

        return errors

    def __len__(self) -> int:
        """Return the number of nodes in the graph."""
        return len(self._nodes)

    def __contains__(self, node_id: object) -> bool:
        """Check if a node id is in the graph."""
        return node_id in self._nodes

    def __iter__(self) -> Iterator[str]:
        """Iterate over node ids in insertion order."""
        return iter(self._nodes)
