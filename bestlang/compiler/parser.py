"""
bestlang.compiler.parser - Raw forms to AST

This module handles Phase 3 of compilation: mapping each raw form to its
typed literal node and wrapping the sequence in a Program.
"""

from bestlang.compiler.errors import BestLangSyntaxError
from bestlang.compiler.lexer import Token
from bestlang.compiler.nodes import LITERAL_FOR_TOKEN, Literal, Program
from bestlang.compiler.reader import Reader


def parse_primitive(reader: Reader) -> Literal:
    """Parse the current form as a literal node."""
    form = reader.peek()
    node_cls = LITERAL_FOR_TOKEN.get(form.type)
    if node_cls is None:
        raise BestLangSyntaxError(form.value, form.location)
    reader.skip()
    return node_cls.from_token(form)


def parse_expr(reader: Reader) -> Literal:
    # Only primitives exist for now
    return parse_primitive(reader)


def parse(forms: list[Token]) -> Program:
    """Parse raw forms into a Program."""
    reader = Reader(forms)
    body = []
    while not reader.eof():
        body.append(parse_expr(reader))
    return Program.of(body)


__all__ = ["parse_primitive", "parse_expr", "parse"]
