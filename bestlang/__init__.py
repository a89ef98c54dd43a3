"""
BestLang - a literal-oriented language that compiles to JavaScript.

    >>> from bestlang import compile
    >>> compile(':hello')
    'Symbol.for(":hello")'
"""

from bestlang.compiler import (
    BestLangError,
    BestLangSyntaxError,
    compile,
    compile_file,
    pprint_ast,
    pprint_desugared_ast,
)
from bestlang.config import CompilerOptions

__version__ = "0.1.0"

__all__ = [
    "compile",
    "compile_file",
    "pprint_ast",
    "pprint_desugared_ast",
    "CompilerOptions",
    "BestLangError",
    "BestLangSyntaxError",
]
