"""Pure evaluation logic for every node kind.

Node logic receives, for each input socket, the list of values arriving over
its connections, together with the fallback value stored in the config slot
mapped to that socket. An empty socket falls back to its config value, except
for the sink, which reports ``None`` when nothing is connected.

The coercion rules below are part of the observable behavior hosts rely on:

- ``add`` treats ``None`` as the identity, coerces booleans to 0/1, adds two
  numbers and concatenates anything else as text. It never raises.
- ``subtract``, ``multiply`` and ``divide`` treat ``None`` as the identity and
  coerce operands to numbers; unreadable operands become NaN. Division by
  zero follows IEEE semantics (``inf`` with the dividend's sign, NaN for
  ``0 / 0``).
- Integers too large for a float count as a signed infinity, and only plain
  ASCII decimal strings (``"12"``, ``"-1.5e3"``) read as numbers.
- ``compare`` is strict: a boolean never equals a number.
- ``conditional`` yields ``None`` unless the condition is exactly ``True`` or
  ``False``.
"""

import math
import operator
import re
from collections.abc import Callable, Sequence
from functools import reduce
from typing import Any, TypeAlias, assert_never

from ._kinds import NodeKind

Value: TypeAlias = bool | int | float | str | None

# Plain ASCII decimal notation only: no digit separators, no non-ASCII digits.
_NUMBER_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def _is_number(value: Any) -> bool:
    return isinstance(value, int | float) and not isinstance(value, bool)


def _in_float_range(value: Any) -> Any:
    """Map an int too large for a float to the infinity of the same sign."""
    if isinstance(value, int):
        try:
            float(value)
        except OverflowError:
            return math.inf if value > 0 else -math.inf
    return value


def _parse_number(text: str) -> int | float | None:
    """Parse a decimal string, returning None when it is not a number."""
    stripped = text.strip()
    if not _NUMBER_RE.fullmatch(stripped):
        return None
    number = float(stripped)
    if _INTEGER_RE.fullmatch(stripped) and math.isfinite(number):
        return int(stripped)
    return number


def _to_number(value: Any) -> int | float:
    if isinstance(value, bool):
        return int(value)
    if _is_number(value):
        return _in_float_range(value)
    if isinstance(value, str):
        parsed = _parse_number(value)
        if parsed is not None:
            return parsed
    return math.nan


def _to_text(value: Any) -> str:
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer():
            return str(int(value))
    return str(value)


def _read_stored_operand(value: Value) -> Value:
    """Read a config fallback for ``add``: numeric strings count as numbers."""
    if isinstance(value, str):
        parsed = _parse_number(value)
        if parsed is not None:
            return parsed
    return value


def _operands(
    inputs: Sequence[Sequence[Value]],
    fallbacks: Sequence[Value],
    index: int,
    read_fallback: Callable[[Value], Value] | None = None,
) -> list[Value]:
    connected = inputs[index] if index < len(inputs) else ()
    if connected:
        return list(connected)
    fallback = fallbacks[index] if index < len(fallbacks) else None
    return [read_fallback(fallback) if read_fallback else fallback]


def _first(inputs: Sequence[Sequence[Value]], fallbacks: Sequence[Value], index: int) -> Value:
    return _operands(inputs, fallbacks, index)[0]


def _add_pair(acc: Value, val: Value) -> Value:
    if val is None:
        return acc
    if acc is None:
        return val
    left = _in_float_range(int(acc) if isinstance(acc, bool) else acc)
    right = _in_float_range(int(val) if isinstance(val, bool) else val)
    if _is_number(left) and _is_number(right):
        return _in_float_range(left + right)
    return _to_text(left) + _to_text(right)


def _divide(dividend: float, divisor: float) -> float:
    if divisor == 0:
        if dividend == 0 or math.isnan(dividend):
            return math.nan
        return math.copysign(math.inf, dividend) * math.copysign(1.0, divisor)
    return dividend / divisor


def _numeric_pair(op: Callable[[Any, Any], Value]) -> Callable[[Value, Value], Value]:
    def combine(acc: Value, val: Value) -> Value:
        if val is None:
            return acc
        if acc is None:
            return val
        return _in_float_range(op(_to_number(acc), _to_number(val)))

    return combine


_subtract_pair = _numeric_pair(operator.sub)
_multiply_pair = _numeric_pair(operator.mul)
_divide_pair = _numeric_pair(_divide)


def _fold_binary(
    combine: Callable[[Value, Value], Value],
    inputs: Sequence[Sequence[Value]],
    fallbacks: Sequence[Value],
    read_fallback: Callable[[Value], Value] | None = None,
) -> Value:
    left = reduce(combine, _operands(inputs, fallbacks, 0, read_fallback), None)
    right = reduce(combine, _operands(inputs, fallbacks, 1, read_fallback), None)
    return combine(left, right)


def _strict_equal(a: Value, b: Value) -> bool:
    if isinstance(a, bool) != isinstance(b, bool):
        return False
    if _is_number(a) and _is_number(b):
        return a == b
    if type(a) is not type(b):
        return False
    return a == b


def compute(kind: NodeKind, inputs: Sequence[Sequence[Value]], fallbacks: Sequence[Value]) -> Value:
    """Compute a node's output value.

    Args:
        kind: The kind of node being evaluated.
        inputs: Connected values, one list per input socket.
        fallbacks: Config value mapped to each input socket.

    Returns:
        The node's single output value.

    """
    match kind:
        case NodeKind.BOOLEAN_LITERAL | NodeKind.NUMBER_LITERAL | NodeKind.STRING_LITERAL:
            return fallbacks[0] if fallbacks else None
        case NodeKind.ADD:
            return _fold_binary(_add_pair, inputs, fallbacks, _read_stored_operand)
        case NodeKind.SUBTRACT:
            return _fold_binary(_subtract_pair, inputs, fallbacks)
        case NodeKind.MULTIPLY:
            return _fold_binary(_multiply_pair, inputs, fallbacks)
        case NodeKind.DIVIDE:
            return _fold_binary(_divide_pair, inputs, fallbacks)
        case NodeKind.COMPARE:
            return _strict_equal(_first(inputs, fallbacks, 0), _first(inputs, fallbacks, 1))
        case NodeKind.CONDITIONAL:
            condition = _first(inputs, fallbacks, 0)
            if condition is True:
                return _first(inputs, fallbacks, 1)
            if condition is False:
                return _first(inputs, fallbacks, 2)
            return None
        case NodeKind.SINK:
            return inputs[0][0] if inputs and inputs[0] else None
        case _:
            assert_never(kind)
