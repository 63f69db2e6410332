"""Closed enumerations shared by node definitions and node logic."""

from enum import StrEnum, auto


class NodeKind(StrEnum):
    """The kind of a node. The value is the name hosts use to look it up."""

    BOOLEAN_LITERAL = "booleanLiteral"  # Editable boolean constant
    NUMBER_LITERAL = "numberLiteral"  # Editable number constant
    STRING_LITERAL = "stringLiteral"  # Editable string constant
    ADD = "add"  # Sum, or text concatenation for non-numeric operands
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    DIVIDE = "divide"
    COMPARE = "compare"  # Strict equality of two values
    CONDITIONAL = "conditional"  # Select a branch by a boolean condition
    SINK = "sink"  # Terminal node that displays its input


class ValueType(StrEnum):
    """Type tag carried by a socket."""

    BOOLEAN = auto()
    NUMBER = auto()
    STRING = auto()
    ANY = auto()  # Universal wildcard, accepts every output type


class SocketWidget(StrEnum):
    """How a host renders a socket."""

    NONE = auto()  # Socket is only an anchor for a config slot
    SHOW = auto()  # Socket shows its current value


class SlotWidget(StrEnum):
    """How a host renders a config slot."""

    INPUT = auto()  # Editable field
    DISPLAY = auto()  # Read-only display of the node's value
