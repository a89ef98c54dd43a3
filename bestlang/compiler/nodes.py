"""
bestlang.compiler.nodes - AST node types

The node set is closed: a Program wrapping an ordered tuple of literal
nodes. Every node carries a SourceLocation and is immutable.
"""

from dataclasses import dataclass, field
from enum import Enum

from bestlang.compiler.lexer import Token, TokenType
from bestlang.compiler.source import SourceLocation


class NodeType(Enum):
    PROGRAM = "Program"
    NUMBER_LITERAL = "NumberLiteral"
    STRING_LITERAL = "StringLiteral"
    BOOLEAN_LITERAL = "BooleanLiteral"
    KEYWORD_LITERAL = "KeywordLiteral"
    NIL_LITERAL = "NilLiteral"


@dataclass(frozen=True)
class Node:
    """Base class of all AST nodes."""

    location: SourceLocation

    type = None  # NodeType of the concrete class


@dataclass(frozen=True)
class Literal(Node):
    """
    A literal expression.

    Attributes:
        value: Raw source text of the literal (strings keep their quotes,
               keywords keep their leading colon)
        location: Where the literal starts in the source
    """

    value: str = ""

    @classmethod
    def from_token(cls, token: Token) -> "Literal":
        return cls(location=token.location, value=token.value)


@dataclass(frozen=True)
class NumberLiteral(Literal):
    type = NodeType.NUMBER_LITERAL


@dataclass(frozen=True)
class StringLiteral(Literal):
    type = NodeType.STRING_LITERAL


@dataclass(frozen=True)
class BooleanLiteral(Literal):
    type = NodeType.BOOLEAN_LITERAL


@dataclass(frozen=True)
class KeywordLiteral(Literal):
    type = NodeType.KEYWORD_LITERAL


@dataclass(frozen=True)
class NilLiteral(Literal):
    type = NodeType.NIL_LITERAL


@dataclass(frozen=True)
class Program(Node):
    """Top-level node: the literals of a source text in source order."""

    body: tuple[Literal, ...] = field(default_factory=tuple)

    type = NodeType.PROGRAM

    @classmethod
    def of(cls, exprs) -> "Program":
        """Build a Program located at its first expression."""
        body = tuple(exprs)
        loc = body[0].location if body else SourceLocation.none()
        return cls(location=loc, body=body)


# Token kind -> literal node class (1:1)
LITERAL_FOR_TOKEN: dict[TokenType, type[Literal]] = {
    TokenType.NUMBER: NumberLiteral,
    TokenType.STRING: StringLiteral,
    TokenType.BOOLEAN: BooleanLiteral,
    TokenType.KEYWORD: KeywordLiteral,
    TokenType.NIL: NilLiteral,
}


__all__ = [
    "NodeType",
    "Node",
    "Literal",
    "NumberLiteral",
    "StringLiteral",
    "BooleanLiteral",
    "KeywordLiteral",
    "NilLiteral",
    "Program",
    "LITERAL_FOR_TOKEN",
]
