"""Static node type definitions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from ._kinds import NodeKind, SlotWidget, SocketWidget, ValueType
from ._logic import compute

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ._logic import Value


@dataclass(frozen=True, slots=True)
class SocketDef:
    """Definition of an input or output socket.

    Attributes:
        name: Socket name shown by hosts.
        value_type: Type tag used to validate edges.
        max_connections: Maximum number of connections, or None for unbounded.
        widget: Rendering hint for hosts.

    """

    name: str
    value_type: ValueType
    max_connections: int | None = 1
    widget: SocketWidget = SocketWidget.SHOW

    def has_capacity(self, connection_count: int) -> bool:
        """Check whether one more connection fits in this socket."""
        return self.max_connections is None or connection_count < self.max_connections

    def accepts(self, source_type: ValueType) -> bool:
        """Check whether an output of ``source_type`` may feed this input socket."""
        return self.value_type == ValueType.ANY or self.value_type == source_type


@dataclass(frozen=True, slots=True)
class ConfigSlotDef:
    """Definition of a config slot.

    A config slot stores a value that stands in for the input socket it is
    mapped to whenever that socket has no connection.

    Attributes:
        input_index: Index of the input socket this slot backs.
        default: Value used by the default config.
        widget: Rendering hint for hosts.

    """

    input_index: int
    default: Any
    widget: SlotWidget = SlotWidget.INPUT


@dataclass(frozen=True, slots=True)
class NodeTypeDef:
    """Definition of a node kind.

    This is an immutable, registered-once description of the sockets, config
    slots and logic shared by every node of one kind.

    Attributes:
        kind: The node kind, also the registry name.
        title: Human readable name.
        inputs: Ordered input socket definitions.
        outputs: Ordered output socket definitions.
        config_slots: Ordered config slot definitions.
        auto_evaluate_on_connect: Hosts re-evaluate the node whenever an edge
            lands on it.

    """

    kind: NodeKind
    title: str
    inputs: tuple[SocketDef, ...]
    outputs: tuple[SocketDef, ...]
    config_slots: tuple[ConfigSlotDef, ...] = ()
    auto_evaluate_on_connect: bool = False

    def default_config(self) -> tuple[Any, ...]:
        """Produce a fresh config holding every slot's default value."""
        return tuple(slot.default for slot in self.config_slots)

    def fallbacks(self, config: Sequence[Any]) -> tuple[Value, ...]:
        """Map a config onto the input sockets.

        Args:
            config: The node's stored config. It may be shorter than the slot
                list, in which case the missing slots use their defaults.

        Returns:
            One value per input socket; None for sockets without a slot.

        """
        values: list[Value] = [None] * len(self.inputs)
        for slot_index, slot in enumerate(self.config_slots):
            if slot.input_index >= len(values):
                continue
            values[slot.input_index] = config[slot_index] if slot_index < len(config) else slot.default
        return tuple(values)

    def evaluate(self, inputs: Sequence[Sequence[Value]], config: Sequence[Any]) -> Value:
        """Run this kind's logic.

        Args:
            inputs: Values arriving over connections, one list per input socket.
            config: The node's stored config.

        Returns:
            The node's output value.

        """
        return compute(self.kind, inputs, self.fallbacks(config))
