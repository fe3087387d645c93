"""Built-in numeric functions.

Nothing here is available to expressions unless the caller puts it in the
function table it evaluates with:

    functions = default_functions()
    evaluate(parse("sqrt(x) + 1"), {"x": 16}, functions)

Categories:
- Arithmetic: abs, clamp
- Rounding: round, floor, ceil
- Aggregate: min, max, sum, avg
- Exponential: sqrt, pow, exp, ln, log10, hypot
- Trigonometric: sin, cos, tan
"""

import math
from typing import Callable, Sequence

from numeval.expressions.functions import (
    FunctionCategory,
    FunctionDefinition,
    FunctionParameter,
    FunctionTable,
)


def default_functions() -> FunctionTable:
    """Return a new table holding every built-in function."""
    table = FunctionTable()
    register_all_builtins(table)
    return table


def register_all_builtins(table: FunctionTable) -> None:
    """Register all built-in functions with the given table."""
    _register_arithmetic_functions(table)
    _register_rounding_functions(table)
    _register_aggregate_functions(table)
    _register_exponential_functions(table)
    _register_trigonometric_functions(table)


def _unary(
    name: str,
    description: str,
    category: FunctionCategory,
    implementation: Callable[[float], float],
    examples: list[str],
) -> FunctionDefinition:
    """Wrap a single-argument function as a definition."""
    return FunctionDefinition(
        name=name,
        description=description,
        category=category,
        parameters=[FunctionParameter("value", "The number")],
        examples=examples,
        implementation=lambda args: implementation(args[0]),
    )


# -----------------------------------------------------------------------------
# Arithmetic Functions
# -----------------------------------------------------------------------------


def _clamp(args: Sequence[float]) -> float:
    """Limit a value to the closed range [low, high]."""
    value, low, high = args
    if low > high:
        raise ValueError(f"low bound {low} is greater than high bound {high}")
    return min(max(value, low), high)


def _register_arithmetic_functions(table: FunctionTable) -> None:
    table.register(
        _unary(
            "abs",
            "Returns absolute value",
            FunctionCategory.ARITHMETIC,
            abs,
            ["abs(balance) < 1000"],
        )
    )

    table.register(
        FunctionDefinition(
            name="clamp",
            description="Limits a value to a range",
            category=FunctionCategory.ARITHMETIC,
            parameters=[
                FunctionParameter("value", "The number"),
                FunctionParameter("low", "Lower bound"),
                FunctionParameter("high", "Upper bound"),
            ],
            examples=["clamp(ratio, 0, 1)"],
            implementation=_clamp,
        )
    )


# -----------------------------------------------------------------------------
# Rounding Functions
# -----------------------------------------------------------------------------


def _round_num(args: Sequence[float]) -> float:
    """Round to specified decimal places (half to even)."""
    value = args[0]
    if not math.isfinite(value):
        return value
    decimals = args[1] if len(args) > 1 else 0
    if decimals != int(decimals):
        raise ValueError(f"decimal places must be a whole number, got {decimals}")
    return float(round(value, int(decimals)))


def _floor(value: float) -> float:
    """Round down to nearest integer."""
    if not math.isfinite(value):
        return value
    return float(math.floor(value))


def _ceil(value: float) -> float:
    """Round up to nearest integer."""
    if not math.isfinite(value):
        return value
    return float(math.ceil(value))


def _register_rounding_functions(table: FunctionTable) -> None:
    table.register(
        FunctionDefinition(
            name="round",
            description="Rounds to specified decimal places",
            category=FunctionCategory.ROUNDING,
            parameters=[
                FunctionParameter("value", "The number"),
                FunctionParameter("decimals", "Decimal places", required=False),
            ],
            examples=["round(total, 2)", "round(percentage)"],
            implementation=_round_num,
        )
    )

    table.register(
        _unary(
            "floor",
            "Rounds down to nearest integer",
            FunctionCategory.ROUNDING,
            _floor,
            ["floor(rating)"],
        )
    )

    table.register(
        _unary(
            "ceil",
            "Rounds up to nearest integer",
            FunctionCategory.ROUNDING,
            _ceil,
            ["ceil(quantity / boxSize)"],
        )
    )


# -----------------------------------------------------------------------------
# Aggregate Functions
# -----------------------------------------------------------------------------


def _min_val(args: Sequence[float]) -> float:
    return min(args)


def _max_val(args: Sequence[float]) -> float:
    return max(args)


def _sum(args: Sequence[float]) -> float:
    return math.fsum(args)


def _avg(args: Sequence[float]) -> float:
    return math.fsum(args) / len(args)


def _register_aggregate_functions(table: FunctionTable) -> None:
    def values() -> list[FunctionParameter]:
        return [FunctionParameter("values", "Numbers to aggregate", variadic=True)]

    table.register(
        FunctionDefinition(
            name="min",
            description="Returns minimum value",
            category=FunctionCategory.AGGREGATE,
            parameters=values(),
            examples=["min(price, maxPrice)"],
            implementation=_min_val,
        )
    )

    table.register(
        FunctionDefinition(
            name="max",
            description="Returns maximum value",
            category=FunctionCategory.AGGREGATE,
            parameters=values(),
            examples=["max(minQuantity, 1)"],
            implementation=_max_val,
        )
    )

    table.register(
        FunctionDefinition(
            name="sum",
            description="Returns the sum of all values",
            category=FunctionCategory.AGGREGATE,
            parameters=values(),
            examples=["sum(q1, q2, q3, q4)"],
            implementation=_sum,
        )
    )

    table.register(
        FunctionDefinition(
            name="avg",
            description="Returns the arithmetic mean of all values",
            category=FunctionCategory.AGGREGATE,
            parameters=values(),
            examples=["avg(low, high)"],
            implementation=_avg,
        )
    )


# -----------------------------------------------------------------------------
# Exponential Functions
# -----------------------------------------------------------------------------


def _pow(args: Sequence[float]) -> float:
    base, exponent = args
    return math.pow(base, exponent)


def _hypot(args: Sequence[float]) -> float:
    return math.hypot(*args)


def _register_exponential_functions(table: FunctionTable) -> None:
    table.register(
        _unary(
            "sqrt",
            "Returns the square root",
            FunctionCategory.EXPONENTIAL,
            math.sqrt,
            ["sqrt(area)"],
        )
    )

    table.register(
        FunctionDefinition(
            name="pow",
            description="Raises base to the power of exponent",
            category=FunctionCategory.EXPONENTIAL,
            parameters=[
                FunctionParameter("base", "The base"),
                FunctionParameter("exponent", "The exponent"),
            ],
            examples=["pow(1 + rate, years)"],
            implementation=_pow,
        )
    )

    table.register(
        _unary(
            "exp",
            "Returns e raised to the value",
            FunctionCategory.EXPONENTIAL,
            math.exp,
            ["exp(growth * t)"],
        )
    )

    table.register(
        _unary(
            "ln",
            "Returns the natural logarithm",
            FunctionCategory.EXPONENTIAL,
            math.log,
            ["ln(ratio)"],
        )
    )

    table.register(
        _unary(
            "log10",
            "Returns the base-10 logarithm",
            FunctionCategory.EXPONENTIAL,
            math.log10,
            ["log10(intensity)"],
        )
    )

    table.register(
        FunctionDefinition(
            name="hypot",
            description="Returns the Euclidean norm of the values",
            category=FunctionCategory.EXPONENTIAL,
            parameters=[FunctionParameter("values", "Vector components", variadic=True)],
            examples=["hypot(dx, dy)"],
            implementation=_hypot,
        )
    )


# -----------------------------------------------------------------------------
# Trigonometric Functions
# -----------------------------------------------------------------------------


def _register_trigonometric_functions(table: FunctionTable) -> None:
    for name, implementation in (("sin", math.sin), ("cos", math.cos), ("tan", math.tan)):
        table.register(
            _unary(
                name,
                f"Returns the {name} of an angle in radians",
                FunctionCategory.TRIGONOMETRIC,
                implementation,
                [f"{name}(angle)"],
            )
        )
