"""Tests for function tables and the built-in functions."""

import math

import pytest

from numeval.expressions import (
    EvaluationError,
    FunctionCategory,
    FunctionDefinition,
    FunctionError,
    FunctionParameter,
    FunctionTable,
    default_functions,
    evaluate,
    parse,
)


@pytest.fixture
def functions():
    return default_functions()


def run(source, scope=None, functions=None):
    return evaluate(parse(source), scope or {}, functions or default_functions())


# =============================================================================
# Function Table Tests
# =============================================================================


class TestFunctionTable:
    """Tests for FunctionTable."""

    def test_register_and_lookup(self):
        table = FunctionTable()
        func_def = FunctionDefinition(
            name="double",
            implementation=lambda args: args[0] * 2,
            parameters=[FunctionParameter("value")],
        )
        table.register(func_def)

        assert table.is_registered("double")
        assert "double" in table
        assert table.lookup("double") is func_def
        assert table["double"]([4.0]) == 8.0

    def test_lookup_unknown(self):
        with pytest.raises(ValueError, match="Unknown function: nope"):
            FunctionTable().lookup("nope")

    def test_behaves_as_mapping(self):
        table = FunctionTable()
        table.register_callable("a", lambda args: 1.0)
        table.register_callable("b", lambda args: 2.0)
        assert len(table) == 2
        assert sorted(table) == ["a", "b"]
        assert dict(table).keys() == {"a", "b"}

    def test_register_replaces_existing(self):
        table = FunctionTable()
        table.register_callable("f", lambda args: 1.0)
        table.register_callable("f", lambda args: 2.0)
        assert len(table) == 1
        assert table["f"]([]) == 2.0

    def test_register_callable_has_no_arity(self):
        table = FunctionTable()
        table.register_callable("count", lambda args: float(len(args)))
        assert run("count()", functions=table) == 0.0
        assert run("count(1, 2, 3)", functions=table) == 3.0

    def test_tables_are_independent(self):
        first = default_functions()
        second = default_functions()
        first.clear()
        assert len(first) == 0
        assert "max" in second

    def test_list_by_category(self, functions):
        names = {f.name for f in functions.list_by_category(FunctionCategory.ROUNDING)}
        assert names == {"round", "floor", "ceil"}

    def test_aggregate_parameters_are_not_shared(self, functions):
        functions.lookup("min").parameters.append(FunctionParameter("extra"))
        assert len(functions.lookup("max").parameters) == 1
        assert functions.lookup("max").signature() == "max(values...)"

    def test_export_documentation(self, functions):
        doc = functions.export_documentation()
        assert "max" in doc["functions"]
        assert doc["functions"]["max"]["signature"] == "max(values...)"
        assert {f["name"] for f in doc["byCategory"]["aggregate"]} == {
            "min",
            "max",
            "sum",
            "avg",
        }

    def test_plain_dict_of_callables(self):
        assert run("twice(x)", {"x": 3.0}, {"twice": lambda args: args[0] * 2}) == 6.0


# =============================================================================
# Function Definition Tests
# =============================================================================


class TestFunctionDefinition:
    """Tests for arity checking and error conversion."""

    def test_signature(self, functions):
        assert functions.lookup("round").signature() == "round(value, [decimals])"
        assert functions.lookup("clamp").signature() == "clamp(value, low, high)"

    def test_too_few_arguments(self):
        with pytest.raises(FunctionError) as exc_info:
            run("sqrt()")
        assert exc_info.value.function == "sqrt"
        assert "expected 1 argument(s), got 0" in str(exc_info.value)

    def test_too_many_arguments(self):
        with pytest.raises(FunctionError, match="expected 1 to 2 argument"):
            run("round(1, 2, 3)")

    def test_variadic_requires_one(self):
        with pytest.raises(FunctionError, match="at least 1"):
            run("max()")

    def test_value_error_becomes_function_error(self):
        with pytest.raises(FunctionError) as exc_info:
            run("sqrt(x)", {"x": -1.0})
        assert exc_info.value.function == "sqrt"
        assert isinstance(exc_info.value.__cause__, ValueError)

    def test_domain_error_from_computed_argument(self):
        with pytest.raises(FunctionError):
            run("sqrt(0 - 1)")

    def test_overflow_becomes_function_error(self):
        with pytest.raises(FunctionError):
            run("exp(1000)")

    def test_function_error_is_evaluation_error(self):
        with pytest.raises(EvaluationError):
            run("ln(0)")

    def test_other_exceptions_are_not_converted(self):
        def broken(args):
            raise KeyError("boom")

        func_def = FunctionDefinition(name="broken", implementation=broken)
        with pytest.raises(KeyError):
            func_def([])


# =============================================================================
# Built-in Function Tests
# =============================================================================


class TestBuiltins:
    """Tests for the built-in functions."""

    @pytest.mark.parametrize(
        "source,expected",
        [
            ("abs(x)", 2.5),
            ("clamp(5, 0, 1)", 1.0),
            ("clamp(x, 0, 1)", 0.0),
            ("round(1.234, 2)", 1.23),
            ("round(2.5)", 2.0),
            ("floor(x)", -3.0),
            ("ceil(x)", -2.0),
            ("min(4, 1, 3)", 1.0),
            ("max(4, 1, 3)", 4.0),
            ("sum(1, 2, 3)", 6.0),
            ("avg(1, 2, 3)", 2.0),
            ("sqrt(16)", 4.0),
            ("pow(2, 10)", 1024.0),
            ("exp(0)", 1.0),
            ("ln(1)", 0.0),
            ("log10(1000)", 3.0),
            ("hypot(3, 4)", 5.0),
            ("sin(0)", 0.0),
            ("cos(0)", 1.0),
            ("tan(0)", 0.0),
        ],
    )
    def test_builtin(self, source, expected):
        assert run(source, {"x": -2.5}) == pytest.approx(expected)

    def test_sum_is_exact(self):
        assert run("sum(0.1, 0.2, 0.3)") == 0.6

    def test_floor_keeps_infinity(self):
        assert run("floor(x)", {"x": math.inf}) == math.inf

    def test_round_keeps_nan(self):
        assert math.isnan(run("round(x, 2)", {"x": math.nan}))

    def test_round_rejects_fractional_places(self):
        with pytest.raises(FunctionError):
            run("round(1.5, 0.5)")

    def test_clamp_rejects_inverted_range(self):
        with pytest.raises(FunctionError, match="greater than high bound"):
            run("clamp(0.5, 1, 0)")

    def test_builtins_in_larger_expression(self):
        assert run("sqrt(x) + max(a, b) / 2", {"x": 16.0, "a": 3.0, "b": 7.0}) == 7.5

    def test_builtins_not_injected_by_default(self):
        with pytest.raises(EvaluationError):
            evaluate(parse("sqrt(4)"))
