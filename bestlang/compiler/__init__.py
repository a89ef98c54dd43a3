"""
bestlang.compiler - The BestLang Compiler Toolchain

This package compiles BestLang source code to JavaScript source text.

Phases:
1. Read (lexer.py, reader.py): Text -> Tokens -> raw forms
2. Macroexpand (macros.py): raw forms -> raw forms (identity for now)
3. Parse (parser.py, nodes.py): raw forms -> AST
4. Desugar (desugar.py): AST -> AST (identity for now)
5. Emit (codegen.py): AST -> JavaScript
"""

from bestlang.compiler.codegen import (
    Emitter,
    compile,
    compile_file,
    emit,
)
from bestlang.compiler.desugar import desugar
from bestlang.compiler.errors import BestLangError, BestLangSyntaxError
from bestlang.compiler.lexer import Lexer, Token, TokenType, tokenize
from bestlang.compiler.macros import expand
from bestlang.compiler.nodes import (
    BooleanLiteral,
    KeywordLiteral,
    Literal,
    NilLiteral,
    Node,
    NodeType,
    NumberLiteral,
    Program,
    StringLiteral,
)
from bestlang.compiler.parser import parse, parse_expr, parse_primitive
from bestlang.compiler.printer import (
    ASTPrinter,
    pprint_ast,
    pprint_desugared_ast,
    print_ast,
)
from bestlang.compiler.reader import Reader, read, read_str
from bestlang.compiler.source import Cursor, SourceLocation

__all__ = [
    # Main API
    "compile",
    "compile_file",
    # Phases
    "tokenize",
    "read",
    "read_str",
    "expand",
    "parse",
    "parse_expr",
    "parse_primitive",
    "desugar",
    "emit",
    # Components
    "Cursor",
    "Lexer",
    "Reader",
    "Emitter",
    "ASTPrinter",
    "print_ast",
    "pprint_ast",
    "pprint_desugared_ast",
    # Data
    "SourceLocation",
    "Token",
    "TokenType",
    "NodeType",
    "Node",
    "Literal",
    "Program",
    "NumberLiteral",
    "StringLiteral",
    "BooleanLiteral",
    "KeywordLiteral",
    "NilLiteral",
    # Errors
    "BestLangError",
    "BestLangSyntaxError",
]
