"""numeval: evaluate parsed arithmetic expression trees.

Usage:
    from numeval import default_functions, evaluate, parse

    evaluate(parse("max(a, b) / 2"), {"a": 3, "b": 7}, default_functions())
    # 3.5
"""

from numeval.config import EvaluatorConfig
from numeval.expressions import (
    EvaluationError,
    Expression,
    FunctionTable,
    ParseError,
    default_functions,
    evaluate,
    evaluate_source,
    parse,
)

__version__ = "0.1.0"

__all__ = [
    "EvaluationError",
    "EvaluatorConfig",
    "Expression",
    "FunctionTable",
    "ParseError",
    "default_functions",
    "evaluate",
    "evaluate_source",
    "parse",
]
