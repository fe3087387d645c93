"""Errors raised while parsing or evaluating expressions.

Every evaluation failure derives from ``EvaluationError`` so callers can
catch the whole family at once, or a single subclass when they care which
part of the tree was responsible.
"""

from typing import Any, Iterable


class EvaluationError(Exception):
    """Error during expression evaluation."""
    pass


def _format_names(names: Iterable[str] | None) -> str:
    if names is None:
        return ""
    listed = ", ".join(sorted(names))
    return f" (available: {listed or 'none'})"


class UnsupportedNodeError(EvaluationError):
    """Node kind the evaluator does not know how to reduce.

    Also raised for call expressions whose callee is not a plain identifier.
    """

    def __init__(self, node: Any, message: str | None = None):
        self.node = node
        self.kind = type(node).__name__
        super().__init__(message or f"unsupported node {node!r} (type {self.kind})")


class UnboundVariableError(EvaluationError):
    """Identifier not present in the scope."""

    def __init__(self, name: str, available: Iterable[str] | None = None):
        self.name = name
        self.available = sorted(available) if available is not None else None
        super().__init__(f"no value for '{name}' in scope{_format_names(available)}")


class UnsupportedOperatorError(EvaluationError):
    """Binary operator outside + - * /."""

    def __init__(self, operator: str):
        self.operator = operator
        super().__init__(f"unsupported binary operation: {operator}")


class MalformedLiteralError(EvaluationError):
    """Literal text that does not parse as a number."""

    def __init__(self, text: str, reason: str):
        self.text = text
        super().__init__(f"malformed numeric literal {text!r}: {reason}")


class UnknownFunctionError(EvaluationError):
    """Callee name not present in the function table."""

    def __init__(self, name: str, available: Iterable[str] | None = None):
        self.name = name
        self.available = sorted(available) if available is not None else None
        super().__init__(f"no function '{name}' in functions{_format_names(available)}")


class DepthLimitError(EvaluationError):
    """Expression tree nested deeper than the configured limit."""

    def __init__(self, limit: int):
        self.limit = limit
        super().__init__(f"expression nesting exceeds maximum depth of {limit}")


class FunctionError(EvaluationError):
    """Failure reported by a function implementation.

    Raised by callables (arity or domain problems); the evaluator passes it
    through without wrapping.
    """

    def __init__(self, function: str, message: str):
        self.function = function
        super().__init__(f"{function}: {message}")


class ParseError(Exception):
    """Error while turning source text into an expression tree."""

    def __init__(self, message: str, position: int | None = None):
        self.position = position
        if position is not None:
            message = f"{message} at position {position}"
        super().__init__(message)
