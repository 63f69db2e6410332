"""Serializable node type schemas for hosts.

A schema is the part of a node type definition a host needs to render a node
and pre-validate edges: sockets, types, connection limits, config slots and
the default config. Field names dump in camelCase (``maxConnections``,
``defaultConfig``...); an unbounded socket dumps ``maxConnections`` as null.
"""

from typing import Any, Self

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from ._registry import (
    ConfigSlotDef,
    NodeKind,
    NodeTypeDef,
    SlotWidget,
    SocketDef,
    SocketWidget,
    ValueType,
    lookup,
    node_kinds,
)


class _SchemaModel(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class SocketSchema(_SchemaModel):
    """Schema of one socket."""

    name: str
    value_type: ValueType
    max_connections: int | None
    widget: SocketWidget

    @classmethod
    def from_definition(cls, socket: SocketDef) -> Self:
        return cls(
            name=socket.name,
            value_type=socket.value_type,
            max_connections=socket.max_connections,
            widget=socket.widget,
        )


class ConfigSlotSchema(_SchemaModel):
    """Schema of one config slot."""

    input_index: int
    default_value: Any
    widget: SlotWidget

    @classmethod
    def from_definition(cls, slot: ConfigSlotDef) -> Self:
        return cls(input_index=slot.input_index, default_value=slot.default, widget=slot.widget)


class NodeTypeSchema(_SchemaModel):
    """Schema of a node kind, as exposed to hosts."""

    kind: NodeKind
    title: str
    inputs: tuple[SocketSchema, ...]
    outputs: tuple[SocketSchema, ...]
    config_slots: tuple[ConfigSlotSchema, ...]
    default_config: tuple[Any, ...]
    auto_evaluate_on_connect: bool

    @classmethod
    def from_definition(cls, definition: NodeTypeDef) -> Self:
        """Build the schema of a registered definition."""
        return cls(
            kind=definition.kind,
            title=definition.title,
            inputs=tuple(SocketSchema.from_definition(s) for s in definition.inputs),
            outputs=tuple(SocketSchema.from_definition(s) for s in definition.outputs),
            config_slots=tuple(ConfigSlotSchema.from_definition(s) for s in definition.config_slots),
            default_config=definition.default_config(),
            auto_evaluate_on_connect=definition.auto_evaluate_on_connect,
        )


def get_node_type(name: NodeKind | str) -> NodeTypeSchema:
    """Get the schema of a node kind.

    Raises:
        UnknownNodeType: If the kind is not registered.

    """
    return NodeTypeSchema.from_definition(lookup(name))


def node_type_schemas() -> dict[str, NodeTypeSchema]:
    """Get the schemas of every registered node kind, keyed by kind name."""
    return {str(kind): get_node_type(kind) for kind in node_kinds()}
