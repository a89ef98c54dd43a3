"""
bestlang.compiler.reader - Reader for BestLang tokens

This module handles Phase 1b of compilation: validating the token stream
and producing raw forms. The grammar has no grouping syntax, so a raw
form is simply a validated Token.
"""

from typing import Optional

from bestlang.compiler.errors import BestLangError, BestLangSyntaxError
from bestlang.compiler.lexer import Token, TokenType, tokenize

# Token kinds that may appear as a form
ATOM_TYPES = frozenset(TokenType)


class Reader:
    """
    Position cursor over a sequence of tokens (or raw forms).
    Shared by the reader and the parser.
    """

    def __init__(self, tokens: list[Token]):
        self.tokens = tokens
        self.i = 0

    def __len__(self):
        return len(self.tokens)

    def eof(self) -> bool:
        return self.i >= len(self.tokens)

    def peek(self) -> Optional[Token]:
        if self.eof():
            return None
        return self.tokens[self.i]

    def next(self) -> Optional[Token]:
        tok = self.peek()
        self.i += 1
        return tok

    def skip(self):
        self.i += 1

    def read(self) -> list[Token]:
        """Read all forms from the token stream."""
        forms = []
        while not self.eof():
            forms.append(self.read_form())
        return forms

    def read_form(self) -> Token:
        """Read a single form from the token stream."""
        return self.read_atom()

    def read_atom(self) -> Token:
        tok = self.peek()
        if tok is None:
            raise BestLangError("Unexpected end of input")
        if tok.type not in ATOM_TYPES:
            raise BestLangSyntaxError(tok.value, tok.location)
        self.skip()
        return tok


def read(tokens: list[Token]) -> list[Token]:
    """Phase 1b: Read - turn a token list into raw forms."""
    return Reader(tokens).read()


def read_str(src: str, file: str = "stdin") -> list[Token]:
    """Phase 1: Read - tokenize and read source into raw forms."""
    return read(tokenize(src, file))


__all__ = ["Reader", "read", "read_str", "ATOM_TYPES"]
