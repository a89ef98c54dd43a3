"""
bestlang.compiler.printer - AST pretty printer

Debug view of a parsed program, one line per literal:

    NumberLiteral: 42
    KeywordLiteral: :name
    NilLiteral: nil
"""

from typing import Optional

from bestlang.compiler.desugar import desugar
from bestlang.compiler.lexer import tokenize
from bestlang.compiler.macros import expand
from bestlang.compiler.nodes import Literal, NilLiteral, Node, Program
from bestlang.compiler.parser import parse
from bestlang.compiler.reader import read
from bestlang.config import DEFAULT_FILE_NAME


class ASTPrinter:
    def __init__(self, program: Program):
        self.program = program

    def print_primitive(self, node: Literal, indent: int) -> str:
        value = "nil" if isinstance(node, NilLiteral) else node.value
        return f"{' ' * indent}{node.type.value}: {value}"

    def print_program(self, node: Program, indent: int) -> str:
        return "\n".join(self.print(n, indent) for n in node.body)

    def print(self, node: Optional[Node] = None, indent: int = 0) -> str:
        if node is None:
            node = self.program
        if isinstance(node, Program):
            return self.print_program(node, indent)
        return self.print_primitive(node, indent)


def print_ast(ast: Program) -> str:
    return ASTPrinter(ast).print()


def pprint_ast(src: str, file_name: str = DEFAULT_FILE_NAME) -> str:
    """Dump the AST of ``src`` as produced by the parser."""
    return print_ast(parse(expand(read(tokenize(src, file_name)))))


def pprint_desugared_ast(src: str, file_name: str = DEFAULT_FILE_NAME) -> str:
    """Dump the AST of ``src`` after desugaring."""
    return print_ast(desugar(parse(expand(read(tokenize(src, file_name))))))


__all__ = ["ASTPrinter", "print_ast", "pprint_ast", "pprint_desugared_ast"]
