"""
bestlang.compiler.macros - Macro expansion phase

Phase 2 of compilation runs between reading and parsing. The grammar has
no compound forms yet, so there is nothing to expand and the phase returns
the raw forms unchanged. It stays a separate stage so that expansion rules
have a place to live once lists exist.
"""

from bestlang.compiler.lexer import Token


def expand(forms: list[Token]) -> list[Token]:
    """Apply macroexpansion to all forms."""
    return forms


__all__ = ["expand"]
