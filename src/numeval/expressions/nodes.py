"""Expression tree node types.

Trees are produced by an upstream parser (see ``numeval.expressions.parsing``)
or built by hand, and are consumed read-only by the evaluator.

Node kinds (closed set):
- Identifier: variable reference resolved against the scope
- BinaryOperation: operator symbol with left/right operands
- Parenthesized: explicit grouping around a single expression
- Literal: textual numeric representation
- Call: function call with positional arguments
"""

from dataclasses import dataclass
from typing import Union


# -----------------------------------------------------------------------------
# Node Types
# -----------------------------------------------------------------------------


@dataclass(frozen=True)
class Identifier:
    """A variable reference (e.g., ``x``, ``rate``)."""
    name: str


@dataclass(frozen=True)
class BinaryOperation:
    """Binary operation (e.g., a + b, x / y)."""
    operator: str
    left: "Node"
    right: "Node"


@dataclass(frozen=True)
class Parenthesized:
    """Grouped sub-expression (e.g., (a + b))."""
    expression: "Node"


@dataclass(frozen=True)
class Literal:
    """A numeric literal, kept as the text it was written with."""
    text: str


@dataclass(frozen=True)
class Call:
    """Function call (e.g., max(a, b), sqrt(x))."""
    callee: "Node"
    arguments: tuple["Node", ...] = ()


Node = Union[Identifier, BinaryOperation, Parenthesized, Literal, Call]

NODE_KINDS: tuple[type, ...] = (
    Identifier,
    BinaryOperation,
    Parenthesized,
    Literal,
    Call,
)


@dataclass(frozen=True)
class Expression:
    """A parsed expression tree.

    Attributes:
        root: The root node of the tree
        source: The text the tree was parsed from, if known
    """

    root: Node
    source: str | None = None

    def __str__(self) -> str:
        if self.source is not None:
            return self.source
        return repr(self.root)
