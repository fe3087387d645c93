"""Numeric expression trees and their evaluator.

This module provides:
- Node types: Identifier, BinaryOperation, Parenthesized, Literal, Call
- parse: Builds a tree from source text via Python's own parser
- Evaluator: Reduces a tree to a float against a scope and function table
- FunctionTable: Caller-built table of named numeric functions
"""

from numeval.expressions.builtins import default_functions, register_all_builtins
from numeval.expressions.errors import (
    DepthLimitError,
    EvaluationError,
    FunctionError,
    MalformedLiteralError,
    ParseError,
    UnboundVariableError,
    UnknownFunctionError,
    UnsupportedNodeError,
    UnsupportedOperatorError,
)
from numeval.expressions.evaluator import (
    BINARY_OPERATORS,
    Evaluator,
    evaluate,
    evaluate_source,
)
from numeval.expressions.functions import (
    FunctionCategory,
    FunctionDefinition,
    FunctionParameter,
    FunctionTable,
    NumericFunction,
)
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

__all__ = [
    # Evaluator
    "BINARY_OPERATORS",
    "Evaluator",
    "evaluate",
    "evaluate_source",
    # Errors
    "DepthLimitError",
    "EvaluationError",
    "FunctionError",
    "MalformedLiteralError",
    "ParseError",
    "UnboundVariableError",
    "UnknownFunctionError",
    "UnsupportedNodeError",
    "UnsupportedOperatorError",
    # Functions
    "FunctionCategory",
    "FunctionDefinition",
    "FunctionParameter",
    "FunctionTable",
    "NumericFunction",
    "default_functions",
    "register_all_builtins",
    # Nodes
    "NODE_KINDS",
    "BinaryOperation",
    "Call",
    "Expression",
    "Identifier",
    "Literal",
    "Node",
    "Parenthesized",
    "parse",
]
