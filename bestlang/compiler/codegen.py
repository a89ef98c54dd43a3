"""
bestlang.compiler.codegen - JavaScript code generation

This module handles Phase 5 of compilation and exposes the pipeline
entry points:

- Emitter: renders AST nodes to JavaScript source text
- emit(): convenience wrapper around Emitter
- compile(): text -> JavaScript, running every phase in order
- compile_file(): compile a source file from disk

Literal mapping:
    42        -> 42
    true      -> true
    nil       -> null
    :name     -> Symbol.for(":name")
    "text"    -> `text`
"""

from typing import Optional

from bestlang.compiler.desugar import desugar
from bestlang.compiler.errors import BestLangSyntaxError
from bestlang.compiler.lexer import tokenize
from bestlang.compiler.macros import expand
from bestlang.compiler.nodes import (
    BooleanLiteral,
    KeywordLiteral,
    NilLiteral,
    Node,
    NumberLiteral,
    Program,
    StringLiteral,
)
from bestlang.compiler.parser import parse
from bestlang.compiler.reader import read
from bestlang.config import DEFAULT_FILE_NAME, DEFAULT_SEPARATOR, CompilerOptions

JS_NULL = "null"
JS_STRING_DELIMITER = "`"


class Emitter:
    """
    Walks an AST and produces one JavaScript fragment per node.

    Top-level fragments are joined with ``separator``; the default empty
    separator concatenates them as they are.
    """

    def __init__(self, program: Program, separator: str = DEFAULT_SEPARATOR):
        self.program = program
        self.separator = separator

    def emit(self, node: Optional[Node] = None) -> str:
        if node is None:
            node = self.program
        if isinstance(node, Program):
            return self.emit_program(node)
        if isinstance(node, NumberLiteral):
            return self.emit_number(node)
        if isinstance(node, StringLiteral):
            return self.emit_string(node)
        if isinstance(node, BooleanLiteral):
            return self.emit_boolean(node)
        if isinstance(node, KeywordLiteral):
            return self.emit_keyword(node)
        if isinstance(node, NilLiteral):
            return self.emit_nil(node)
        raise BestLangSyntaxError(type(node).__name__, node.location)

    def emit_program(self, node: Program) -> str:
        return self.separator.join(self.emit(n) for n in node.body)

    def emit_number(self, node: NumberLiteral) -> str:
        return node.value

    def emit_string(self, node: StringLiteral) -> str:
        # Escapes were resolved by the lexer; only the quotes change
        body = node.value[1:-1]
        return f"{JS_STRING_DELIMITER}{body}{JS_STRING_DELIMITER}"

    def emit_boolean(self, node: BooleanLiteral) -> str:
        return node.value

    def emit_keyword(self, node: KeywordLiteral) -> str:
        name = node.value.replace("\\", "\\\\").replace('"', '\\"')
        return f'Symbol.for("{name}")'

    def emit_nil(self, node: NilLiteral) -> str:
        return JS_NULL


def emit(ast: Program, separator: str = DEFAULT_SEPARATOR) -> str:
    """Phase 5: Emit - render a Program to JavaScript."""
    return Emitter(ast, separator).emit()


def compile(
    src: str,
    file_name: str = DEFAULT_FILE_NAME,
    options: Optional[CompilerOptions] = None,
) -> str:
    """
    Process BestLang source through all compilation phases.
    Returns the JavaScript source text.

    Raises BestLangSyntaxError or BestLangError from whichever phase fails.
    """
    separator = options.separator if options is not None else DEFAULT_SEPARATOR
    # Phase 1: Read
    forms = read(tokenize(src, file_name))
    # Phase 2: Macroexpand
    forms = expand(forms)
    # Phase 3: Parse
    ast = parse(forms)
    # Phase 4: Desugar
    ast = desugar(ast)
    # Phase 5: Emit
    return emit(ast, separator)


def compile_file(path: str, options: Optional[CompilerOptions] = None) -> str:
    """Compile a BestLang source file to JavaScript."""
    with open(path, encoding="utf-8") as f:
        src = f.read()
    return compile(src, path, options)


__all__ = ["Emitter", "emit", "compile", "compile_file", "JS_NULL"]
