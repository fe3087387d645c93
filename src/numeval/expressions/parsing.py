"""Adapter from Python's expression parser to numeval trees.

Parsing itself is delegated to ``ast.parse(..., mode="eval")``; this module
only maps the resulting Python syntax tree onto the five numeval node kinds.

Mapping:
- ``Name`` -> Identifier
- ``BinOp`` -> BinaryOperation, keyed by the operator's source symbol
- numeric or string ``Constant`` -> Literal holding the exact source text
- ``Call`` with positional arguments only -> Call

Anything else (unary minus, attribute access, comparisons, keyword
arguments, ...) is kept as the original ``ast`` node. The evaluator reports
such nodes as unsupported when it reaches them, so a tree with an
unsupported branch that is never reached still parses.

Python's parser discards grouping parentheses, so the trees built here
never contain Parenthesized nodes.
"""

import ast
from typing import Any

from numeval.expressions.errors import ParseError
from numeval.expressions.nodes import BinaryOperation, Call, Expression, Identifier, Literal

OPERATOR_SYMBOLS: dict[type, str] = {
    ast.Add: "+",
    ast.Sub: "-",
    ast.Mult: "*",
    ast.Div: "/",
    ast.FloorDiv: "//",
    ast.Mod: "%",
    ast.Pow: "**",
    ast.MatMult: "@",
    ast.LShift: "<<",
    ast.RShift: ">>",
    ast.BitAnd: "&",
    ast.BitOr: "|",
    ast.BitXor: "^",
}


class _TreeBuilder:
    """Converts a Python expression syntax tree into numeval nodes."""

    def __init__(self, source: str):
        self.source = source

    def build(self, node: ast.AST) -> Any:
        if isinstance(node, ast.Name):
            return Identifier(node.id)

        if isinstance(node, ast.BinOp):
            symbol = OPERATOR_SYMBOLS.get(type(node.op), type(node.op).__name__)
            return BinaryOperation(symbol, self.build(node.left), self.build(node.right))

        if isinstance(node, ast.Constant) and self._is_literal(node.value):
            text = ast.get_source_segment(self.source, node)
            return Literal(text if text is not None else repr(node.value))

        if isinstance(node, ast.Call) and not node.keywords:
            if any(isinstance(arg, ast.Starred) for arg in node.args):
                return node
            return Call(
                self.build(node.func),
                tuple(self.build(arg) for arg in node.args),
            )

        return node

    @staticmethod
    def _is_literal(value: Any) -> bool:
        # bool is an int subclass, True/False are not numeric literals here
        if isinstance(value, bool):
            return False
        return isinstance(value, (int, float, complex, str))


def parse(source: str) -> Expression:
    """Parse an expression string into a tree.

    Args:
        source: The expression string

    Returns:
        The parsed expression

    Raises:
        ParseError: If the text is not a valid Python expression
    """
    text = source.strip()
    if not text:
        raise ParseError("Empty expression", 0)

    try:
        python_tree = ast.parse(text, mode="eval")
    except SyntaxError as e:
        # Some interpreter versions report no offset for errors at end of input
        position = e.offset - 1 if e.offset else len(text)
        raise ParseError(e.msg, position) from e
    except ValueError as e:
        raise ParseError(str(e)) from e
    except RecursionError:
        raise ParseError("Expression is nested too deeply") from None

    try:
        root = _TreeBuilder(text).build(python_tree.body)
    except RecursionError:
        raise ParseError("Expression is nested too deeply") from None

    return Expression(root=root, source=text)
