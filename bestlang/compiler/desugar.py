"""
bestlang.compiler.desugar - Syntactic sugar removal

Phase 4 of compilation rewrites the AST into core forms before code
generation. Literals have no sugar, so the Program passes through as is.
"""

from bestlang.compiler.nodes import Program


def desugar(ast: Program) -> Program:
    return ast


__all__ = ["desugar"]
