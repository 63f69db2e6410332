"""Tests for the pure node logic."""

import math

import pytest

import flowgraph as fg


def run(kind: str, inputs: list[list], config: tuple | None = None):
    definition = fg.lookup(kind)
    return definition.evaluate(inputs, definition.default_config() if config is None else config)


class TestLiterals:
    def test_number(self) -> None:
        assert run("numberLiteral", [[]], (42,)) == 42

    def test_boolean(self) -> None:
        assert run("booleanLiteral", [[]], (True,)) is True

    def test_string(self) -> None:
        assert run("stringLiteral", [[]], ("hi",)) == "hi"

    def test_default(self) -> None:
        assert run("numberLiteral", [[]]) == 0


class TestAdd:
    """Addition: None identity, bool coercion, text concatenation fallback."""

    def test_uses_config_when_unconnected(self) -> None:
        assert run("add", [[], []], (2, 3)) == 5

    def test_connected_values_override_config(self) -> None:
        assert run("add", [[5], [3]], (100, 100)) == 8

    def test_mixes_connection_and_config(self) -> None:
        assert run("add", [[5], []], (100, 1)) == 6

    def test_none_is_identity(self) -> None:
        assert run("add", [[None], [4]]) == 4
        assert run("add", [[4], [None]]) == 4

    def test_both_none(self) -> None:
        assert run("add", [[None], [None]]) is None

    def test_booleans_coerce(self) -> None:
        assert run("add", [[True], [True]]) == 2
        assert run("add", [[True], [2.5]]) == 3.5

    def test_string_concatenation(self) -> None:
        assert run("add", [["foo"], ["bar"]]) == "foobar"

    def test_number_and_string_concatenate(self) -> None:
        assert run("add", [[1], ["a"]]) == "1a"
        assert run("add", [["a"], [2.0]]) == "a2"
        assert run("add", [[1.5], ["a"]]) == "1.5a"

    def test_boolean_and_string(self) -> None:
        assert run("add", [[True], ["x"]]) == "1x"

    def test_numeric_string_config_reads_as_number(self) -> None:
        assert run("add", [[], []], ("5", 1)) == 6

    def test_connected_numeric_string_stays_text(self) -> None:
        assert run("add", [["5"], [1]]) == "51"

    def test_never_raises_on_odd_types(self) -> None:
        assert run("add", [[math.inf], ["x"]]) == "Infinityx"


class TestArithmetic:
    def test_subtract(self) -> None:
        assert run("subtract", [[], []], (10, 4)) == 6

    def test_multiply(self) -> None:
        assert run("multiply", [[6], [7]]) == 42

    def test_divide(self) -> None:
        assert run("divide", [[], []], (9, 3)) == 3

    def test_none_first_operand_is_identity(self) -> None:
        assert run("subtract", [[None], [4]]) == 4
        assert run("multiply", [[3], [None]]) == 3

    def test_booleans_coerce(self) -> None:
        assert run("subtract", [[True], [False]]) == 1

    def test_unreadable_operand_is_nan(self) -> None:
        assert math.isnan(run("multiply", [["abc"], [2]]))

    def test_numeric_string_operand(self) -> None:
        assert run("subtract", [[], []], ("10", 3)) == 7


class TestHugeIntegers:
    """Integers beyond float range behave as infinity instead of raising."""

    def test_add_numeric_string_config(self) -> None:
        assert run("add", [[], []], ("1" * 400, 0.5)) == math.inf

    def test_add_int_and_float(self) -> None:
        assert run("add", [[10**400], [0.5]]) == math.inf
        assert run("add", [[-(10**400)], [0.5]]) == -math.inf

    def test_add_renders_as_infinity(self) -> None:
        assert run("add", [[10**400], ["x"]]) == "Infinityx"

    def test_multiply(self) -> None:
        assert run("multiply", [[], []], (10**400, 1.5)) == math.inf
        assert run("multiply", [[], []], (-(10**400), 2)) == -math.inf

    def test_int_product_overflowing(self) -> None:
        assert run("multiply", [[10**200], [10**200]]) == math.inf

    def test_divide(self) -> None:
        assert run("divide", [[], []], (10**400, 3)) == math.inf
        assert run("divide", [[], []], (3, 10**400)) == 0

    def test_very_long_numeric_string(self) -> None:
        assert run("subtract", [[], []], ("9" * 5000, 1)) == math.inf


class TestNumericStrings:
    """Only plain ASCII decimal strings read as numbers."""

    @pytest.mark.parametrize("text", ["1_000", "١٢", "inf", "nan", "0x10", "1e", ""])
    def test_rejected_strings_are_nan(self, text: str) -> None:
        assert math.isnan(run("subtract", [[], []], (text, 1)))

    @pytest.mark.parametrize(
        ("text", "expected"),
        [(" 5 ", 4), ("-2", -3), ("1.5", 0.5), (".5", -0.5), ("5.", 4), ("1e3", 999)],
    )
    def test_accepted_strings(self, text: str, expected: float) -> None:
        assert run("subtract", [[], []], (text, 1)) == expected

    def test_add_keeps_separator_string_as_text(self) -> None:
        assert run("add", [[], []], ("1_000", 1)) == "1_0001"


class TestDivisionByZero:
    """Division by zero follows IEEE semantics."""

    def test_positive_over_zero(self) -> None:
        assert run("divide", [[], []], (10, 0)) == math.inf

    def test_negative_over_zero(self) -> None:
        assert run("divide", [[], []], (-10, 0)) == -math.inf

    def test_negative_zero_divisor(self) -> None:
        assert run("divide", [[], []], (10, -0.0)) == -math.inf

    def test_zero_over_zero(self) -> None:
        assert math.isnan(run("divide", [[], []], (0, 0)))


class TestCompare:
    def test_equal_numbers(self) -> None:
        assert run("compare", [[3], [3]]) is True

    def test_int_equals_float(self) -> None:
        assert run("compare", [[1], [1.0]]) is True

    def test_strict_against_bool(self) -> None:
        assert run("compare", [[True], [1]]) is False

    def test_strict_against_string(self) -> None:
        assert run("compare", [["1"], [1]]) is False

    def test_uses_config(self) -> None:
        assert run("compare", [[], []]) is True
        assert run("compare", [[], []], ("a", "b")) is False


class TestConditional:
    @pytest.mark.parametrize(
        ("condition", "expected"),
        [(True, "yes"), (False, "no"), (None, None), (1, None), ("true", None)],
    )
    def test_selects_branch(self, condition, expected) -> None:
        assert run("conditional", [[condition], [], []], (False, "yes", "no")) == expected

    def test_connected_branches(self) -> None:
        assert run("conditional", [[True], [10], [20]]) == 10

    def test_condition_from_config(self) -> None:
        assert run("conditional", [[], [], []], (True, 1, 2)) == 1


class TestSink:
    def test_passes_through(self) -> None:
        assert run("sink", [[7]]) == 7

    def test_unconnected_is_none(self) -> None:
        assert run("sink", [[]]) is None
