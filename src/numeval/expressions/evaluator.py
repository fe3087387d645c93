"""Evaluator for numeric expression trees.

Walks the tree leaf-first and reduces every node to a float, resolving
identifiers against a scope and calls against a function table.
"""

import logging
import math
from types import GeneratorType
from typing import Any, Callable, Generator, Mapping

from numeval.config import EvaluatorConfig
from numeval.expressions.errors import (
    DepthLimitError,
    EvaluationError,
    MalformedLiteralError,
    UnboundVariableError,
    UnknownFunctionError,
    UnsupportedNodeError,
    UnsupportedOperatorError,
)
from numeval.expressions.functions import NumericFunction
from numeval.expressions.nodes import (
    NODE_KINDS,
    BinaryOperation,
    Call,
    Expression,
    Identifier,
    Literal,
    Node,
    Parenthesized,
)
from numeval.expressions.parsing import parse

logger = logging.getLogger(__name__)


def _divide(left: float, right: float) -> float:
    """IEEE-754 division: x/0 is a signed infinity, 0/0 is NaN."""
    if right == 0:
        if left == 0 or math.isnan(left):
            return math.nan
        return math.copysign(math.inf, left) * math.copysign(1.0, right)
    return left / right


BINARY_OPERATORS: dict[str, Callable[[float, float], float]] = {
    "+": lambda left, right: left + right,
    "-": lambda left, right: left - right,
    "*": lambda left, right: left * right,
    "/": _divide,
}


class Evaluator:
    """Evaluates an expression tree against a scope and a function table.

    Nodes are reduced with an explicit stack rather than Python recursion.
    Handlers for leaf kinds return a value; handlers for composite kinds are
    generators that yield each child node and receive its value back.

    Usage:
        evaluator = Evaluator({"x": 1.0, "y": 4.0}, {"max": max_fn})
        result = evaluator.evaluate(tree.root)
    """

    def __init__(
        self,
        scope: Mapping[str, float],
        functions: Mapping[str, NumericFunction],
        config: EvaluatorConfig | None = None,
    ):
        self.scope = scope
        self.functions = functions
        self.config = config or EvaluatorConfig()

    def evaluate(self, node: Node) -> float:
        """Evaluate a node and return its value."""
        pending: list[Generator[Node, Any, float]] = []
        value = self._enter(node, pending)

        while pending:
            try:
                child = pending[-1].send(value)
            except StopIteration as done:
                pending.pop()
                value = done.value
                continue
            value = self._enter(child, pending)

        return value

    def _enter(self, node: Node, pending: list[Generator[Node, Any, float]]) -> Any:
        """Start reducing node: return a leaf value or push a composite handler.

        ``pending`` holds one generator per ancestor of ``node``.
        """
        handler = _HANDLERS.get(type(node))

        if handler is None:
            raise UnsupportedNodeError(node)

        if len(pending) >= self.config.max_depth:
            raise DepthLimitError(self.config.max_depth)

        result = handler(self, node)
        if isinstance(result, GeneratorType):
            pending.append(result)
            return None
        return result

    # -------------------------------------------------------------------------
    # Node type evaluators
    # -------------------------------------------------------------------------

    def _eval_identifier(self, node: Identifier) -> float:
        """Resolve a variable against the scope."""
        if node.name not in self.scope:
            raise UnboundVariableError(node.name, self._names(self.scope))
        return self.scope[node.name]

    def _eval_binaryoperation(self, node: BinaryOperation):
        """Evaluate left, then right, then apply the operator."""
        left = yield node.left
        right = yield node.right

        operation = BINARY_OPERATORS.get(node.operator)
        if operation is None:
            raise UnsupportedOperatorError(node.operator)

        return operation(left, right)

    def _eval_parenthesized(self, node: Parenthesized):
        return (yield node.expression)

    def _eval_literal(self, node: Literal) -> float:
        """Parse the literal's text as a float."""
        try:
            value = float(node.text)
        except (TypeError, ValueError) as e:
            raise MalformedLiteralError(node.text, str(e)) from e

        # float() saturates out-of-range text such as 1e400 to infinity
        if math.isinf(value) and "inf" not in node.text.lower():
            raise MalformedLiteralError(node.text, "value out of range")
        return value

    def _eval_call(self, node: Call):
        """Evaluate arguments left to right, then invoke the function."""
        args = []
        for arg in node.arguments:
            args.append((yield arg))

        if not isinstance(node.callee, Identifier):
            raise UnsupportedNodeError(
                node.callee,
                f"unsupported callee {node.callee!r} (type {type(node.callee).__name__}); "
                "functions must be called by name",
            )

        name = node.callee.name
        if name not in self.functions:
            raise UnknownFunctionError(name, self._names(self.functions))

        # Failures raised by the function propagate as-is
        return self.functions[name](args)

    # -------------------------------------------------------------------------
    # Helper methods
    # -------------------------------------------------------------------------

    def _names(self, mapping: Mapping[str, Any]) -> list[str] | None:
        """Names listed in error messages, or None when diagnostics are off."""
        if not self.config.diagnostics:
            return None
        return list(mapping.keys())


def _build_handlers() -> dict[type, Callable[[Evaluator, Any], Any]]:
    """Map every node kind to its evaluator method, failing on any gap."""
    handlers = {}
    for kind in NODE_KINDS:
        method = getattr(Evaluator, f"_eval_{kind.__name__.lower()}", None)
        if method is None:
            raise TypeError(f"Evaluator has no handler for node kind {kind.__name__}")
        handlers[kind] = method
    return handlers


_HANDLERS = _build_handlers()


# -----------------------------------------------------------------------------
# Convenience functions
# -----------------------------------------------------------------------------


def evaluate(
    expression: Expression | Node,
    scope: Mapping[str, float] | None = None,
    functions: Mapping[str, NumericFunction] | None = None,
    config: EvaluatorConfig | None = None,
) -> float:
    """Evaluate an expression tree.

    This is the main entry point for expression evaluation.

    Args:
        expression: The parsed expression (or a bare root node)
        scope: Variable bindings, name to number
        functions: Callables available to call expressions, by name
        config: Evaluation limits and error options

    Returns:
        The numeric result

    Raises:
        EvaluationError: The first failure met while walking the tree.
            Exceptions raised by user functions propagate unchanged.

    Example:
        result = evaluate(parse("max(a, b) * 2"), {"a": 3, "b": 7}, {"max": max_fn})
        # result = 14
    """
    root = expression.root if isinstance(expression, Expression) else expression
    evaluator = Evaluator(scope or {}, functions or {}, config)
    try:
        return evaluator.evaluate(root)
    except EvaluationError as e:
        logger.debug("Evaluation of %s failed: %s", expression, e)
        raise


def evaluate_source(
    source: str,
    scope: Mapping[str, float] | None = None,
    functions: Mapping[str, NumericFunction] | None = None,
    config: EvaluatorConfig | None = None,
) -> float:
    """Parse an expression string and evaluate it.

    Example:
        evaluate_source("(2 + 3) * 4")
        # 20.0
    """
    return evaluate(parse(source), scope, functions, config)
