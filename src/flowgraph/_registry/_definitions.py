"""The reference set of node kinds."""

from typing import Any

from ._kinds import NodeKind, SlotWidget, SocketWidget, ValueType
from ._types import ConfigSlotDef, NodeTypeDef, SocketDef


def _output(name: str, value_type: ValueType) -> SocketDef:
    return SocketDef(name=name, value_type=value_type, max_connections=None)


def _literal(kind: NodeKind, title: str, value_type: ValueType, default: Any) -> NodeTypeDef:
    # The input socket accepts no connections; it only anchors the editable constant.
    return NodeTypeDef(
        kind=kind,
        title=title,
        inputs=(SocketDef("value", value_type, max_connections=0, widget=SocketWidget.NONE),),
        outputs=(_output("value", value_type),),
        config_slots=(ConfigSlotDef(input_index=0, default=default),),
    )


def _binary(
    kind: NodeKind,
    title: str,
    operand_type: ValueType,
    output: SocketDef,
) -> NodeTypeDef:
    return NodeTypeDef(
        kind=kind,
        title=title,
        inputs=(SocketDef("a", operand_type), SocketDef("b", operand_type)),
        outputs=(output,),
        config_slots=(ConfigSlotDef(input_index=0, default=0), ConfigSlotDef(input_index=1, default=0)),
    )


_DEFINITIONS: tuple[NodeTypeDef, ...] = (
    _literal(NodeKind.BOOLEAN_LITERAL, "Boolean", ValueType.BOOLEAN, default=False),
    _literal(NodeKind.NUMBER_LITERAL, "Number", ValueType.NUMBER, default=0),
    _literal(NodeKind.STRING_LITERAL, "String", ValueType.STRING, default=""),
    _binary(NodeKind.ADD, "Add", ValueType.ANY, _output("sum", ValueType.ANY)),
    _binary(NodeKind.SUBTRACT, "Subtract", ValueType.NUMBER, _output("difference", ValueType.ANY)),
    _binary(NodeKind.MULTIPLY, "Multiply", ValueType.NUMBER, _output("product", ValueType.ANY)),
    _binary(NodeKind.DIVIDE, "Divide", ValueType.NUMBER, _output("quotient", ValueType.ANY)),
    _binary(NodeKind.COMPARE, "Compare", ValueType.ANY, _output("isEqual", ValueType.BOOLEAN)),
    NodeTypeDef(
        kind=NodeKind.CONDITIONAL,
        title="If",
        inputs=(
            SocketDef("condition", ValueType.BOOLEAN),
            SocketDef("whenTrue", ValueType.ANY),
            SocketDef("whenFalse", ValueType.ANY),
        ),
        outputs=(_output("output", ValueType.ANY),),
        config_slots=(
            ConfigSlotDef(input_index=0, default=False),
            ConfigSlotDef(input_index=1, default=0),
            ConfigSlotDef(input_index=2, default=0),
        ),
    ),
    NodeTypeDef(
        kind=NodeKind.SINK,
        title="Output",
        inputs=(SocketDef("input", ValueType.ANY, widget=SocketWidget.NONE),),
        outputs=(),
        config_slots=(ConfigSlotDef(input_index=0, default=" ", widget=SlotWidget.DISPLAY),),
        auto_evaluate_on_connect=True,
    ),
)

NODE_TYPES: dict[NodeKind, NodeTypeDef] = {definition.kind: definition for definition in _DEFINITIONS}
