"""Function table for numeric expressions.

Functions are callable from expressions (e.g., ``max(a, b)``, ``sqrt(x)``).
Each one receives the evaluated arguments as a single ordered sequence of
floats and returns a float, raising on failure.

A table is built by the caller for each evaluation; there is no global
registry.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Iterator, Protocol, Sequence

from numeval.expressions.errors import FunctionError


class NumericFunction(Protocol):
    """Anything callable with an ordered sequence of floats."""

    def __call__(self, args: Sequence[float]) -> float: ...


class FunctionCategory(Enum):
    """Categories for organizing functions in documentation."""

    ARITHMETIC = "arithmetic"
    ROUNDING = "rounding"
    AGGREGATE = "aggregate"
    EXPONENTIAL = "exponential"
    TRIGONOMETRIC = "trigonometric"
    CUSTOM = "custom"


@dataclass
class FunctionParameter:
    """Definition of a function parameter.

    Attributes:
        name: Parameter name
        description: Human-readable description
        required: Whether this parameter is required
        variadic: If True, this parameter accepts any number of values
    """

    name: str
    description: str = ""
    required: bool = True
    variadic: bool = False


@dataclass
class FunctionDefinition:
    """Complete definition of an expression function.

    Calling a definition checks the argument count against ``parameters``
    and forwards the arguments to ``implementation``. Arity mismatches and
    ``ValueError``/``OverflowError`` raised by the implementation surface
    as ``FunctionError``.

    Attributes:
        name: Function name as used in expressions
        implementation: Callable taking the ordered argument list
        description: Human-readable description
        category: Category for documentation organization
        parameters: List of parameter definitions
        examples: Example expressions using this function
    """

    name: str
    implementation: Callable[[Sequence[float]], float]
    description: str = ""
    category: FunctionCategory = FunctionCategory.CUSTOM
    parameters: list[FunctionParameter] = field(default_factory=list)
    examples: list[str] = field(default_factory=list)

    @property
    def min_args(self) -> int:
        return sum(1 for p in self.parameters if p.required)

    @property
    def max_args(self) -> int | None:
        if any(p.variadic for p in self.parameters):
            return None
        return len(self.parameters)

    def __call__(self, args: Sequence[float]) -> float:
        self._check_arity(len(args))
        try:
            return self.implementation(args)
        except (ValueError, OverflowError) as e:
            raise FunctionError(self.name, str(e)) from e

    def _check_arity(self, count: int) -> None:
        """Raise FunctionError when count doesn't fit the parameter list."""
        minimum = self.min_args
        maximum = self.max_args

        if count < minimum or (maximum is not None and count > maximum):
            if maximum is None:
                expected = f"at least {minimum}"
            elif minimum == maximum:
                expected = str(minimum)
            else:
                expected = f"{minimum} to {maximum}"
            raise FunctionError(
                self.name, f"expected {expected} argument(s), got {count}"
            )

    def signature(self) -> str:
        """Render a short signature such as ``clamp(value, low, high)``."""
        parts = []
        for p in self.parameters:
            part = f"{p.name}..." if p.variadic else p.name
            if not p.required:
                part = f"[{part}]"
            parts.append(part)
        return f"{self.name}({', '.join(parts)})"

    def to_dict(self) -> dict[str, Any]:
        """Export for documentation output."""
        return {
            "name": self.name,
            "description": self.description,
            "category": self.category.value,
            "parameters": [
                {
                    "name": p.name,
                    "description": p.description,
                    "required": p.required,
                    "variadic": p.variadic,
                }
                for p in self.parameters
            ],
            "signature": self.signature(),
            "examples": self.examples,
        }


class FunctionTable(Mapping[str, NumericFunction]):
    """Named functions available to call expressions.

    Behaves as a read-only mapping from name to callable, so it can be
    handed straight to the evaluator.

    Example:
        table = FunctionTable()
        table.register(FunctionDefinition(
            name="double",
            implementation=lambda args: args[0] * 2,
            parameters=[FunctionParameter("value")],
        ))

        evaluate(parse("double(x)"), {"x": 4}, table)  # Returns 8.0
    """

    def __init__(self, definitions: list[FunctionDefinition] | None = None):
        self._functions: dict[str, FunctionDefinition] = {}
        for definition in definitions or []:
            self.register(definition)

    # Mapping protocol

    def __getitem__(self, name: str) -> FunctionDefinition:
        return self._functions[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._functions)

    def __len__(self) -> int:
        return len(self._functions)

    def __repr__(self) -> str:
        return f"FunctionTable({sorted(self._functions)!r})"

    # Registration

    def register(self, func_def: FunctionDefinition) -> None:
        """Register a function definition, replacing any with the same name."""
        self._functions[func_def.name] = func_def

    def register_callable(
        self,
        name: str,
        implementation: Callable[[Sequence[float]], float],
        description: str = "",
    ) -> FunctionDefinition:
        """Register a bare callable with no arity checking.

        Returns:
            The definition that was registered
        """
        func_def = FunctionDefinition(
            name=name,
            implementation=implementation,
            description=description,
            parameters=[FunctionParameter("args", required=False, variadic=True)],
        )
        self.register(func_def)
        return func_def

    def lookup(self, name: str) -> FunctionDefinition:
        """Get a function definition by name.

        Raises:
            ValueError: If function is not registered
        """
        if name not in self._functions:
            raise ValueError(f"Unknown function: {name}")
        return self._functions[name]

    def is_registered(self, name: str) -> bool:
        return name in self._functions

    def list_all(self) -> list[FunctionDefinition]:
        return list(self._functions.values())

    def list_by_category(self, category: FunctionCategory) -> list[FunctionDefinition]:
        """List functions in a specific category."""
        return [f for f in self._functions.values() if f.category == category]

    def export_documentation(self) -> dict[str, Any]:
        """Export the table for documentation output.

        Returns:
            Dict with all function definitions, also grouped by category
        """
        by_category: dict[str, list[dict[str, Any]]] = {}
        for func_def in self._functions.values():
            by_category.setdefault(func_def.category.value, []).append(func_def.to_dict())

        return {
            "functions": {name: f.to_dict() for name, f in self._functions.items()},
            "byCategory": by_category,
        }

    def clear(self) -> None:
        self._functions.clear()
