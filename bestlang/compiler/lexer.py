"""
bestlang.compiler.lexer - Tokenizer for BestLang source code

This module handles Phase 1a of compilation: turning source text into a
flat list of Tokens, each carrying the SourceLocation where it starts.

Components:
- TokenType: the five recognized token kinds
- Token: a token with its raw text and source location
- Lexer: consumes a Cursor and produces tokens
- tokenize(): convenience function from text to tokens

Only atomic literals exist in the grammar: numbers, strings, booleans,
keywords and nil. Any other symbol text is a syntax error.
"""

from dataclasses import dataclass
from enum import Enum

from bestlang.compiler.errors import BestLangError, BestLangSyntaxError
from bestlang.compiler.source import (
    Cursor,
    SourceLocation,
    is_boolean,
    is_colon,
    is_dash,
    is_digit,
    is_dot,
    is_double_quote,
    is_hex_digit,
    is_newline,
    is_nil,
    is_number,
    is_plus,
    is_semicolon,
    is_symbol_char,
    is_symbol_start,
    is_whitespace,
)


class TokenType(Enum):
    """Kind of a token."""

    NUMBER = "Number"
    STRING = "String"
    BOOLEAN = "Boolean"
    KEYWORD = "Keyword"
    NIL = "Nil"


@dataclass(frozen=True)
class Token:
    """A token with its source location."""

    type: TokenType
    value: str  # Raw text (strings keep their quotes, keywords their colon)
    location: SourceLocation

    def __repr__(self):
        loc = self.location
        return f"Token({self.type.value}, {self.value!r}, {loc.line}:{loc.col})"


# Single-character escapes inside string literals
ESCAPES = {
    "n": "\n",
    "b": "\b",
    "f": "\f",
    "r": "\r",
    "t": "\t",
    "v": "\v",
    "0": "\0",
    "'": "'",
    '"': '"',
    "\\": "\\",
    # Strings are emitted inside backticks, so a backtick stays escaped
    "`": "\\`",
}


class Lexer:
    """
    Tokenizer over a Cursor.

    Each read_* method captures the location before consuming anything,
    so errors point at the first character of the offending token.
    """

    def __init__(self, cursor: Cursor):
        self.input = cursor

    def tokenize(self) -> list[Token]:
        """Consume the whole input and return its tokens in order."""
        tokens = []
        while not self.input.eof():
            ch = self.input.peek()
            if is_whitespace(ch):
                self.input.read_while(is_whitespace)
            elif is_semicolon(ch):
                # comment to end of line
                self.input.read_while(lambda c: not is_newline(c))
            elif (is_dash(ch) or is_plus(ch)) and is_digit(self.input.lookahead(1)):
                tokens.append(self.read_number())
            elif is_digit(ch):
                tokens.append(self.read_number())
            elif is_double_quote(ch):
                tokens.append(self.read_string())
            elif is_colon(ch):
                tokens.append(self.read_keyword())
            elif is_symbol_start(ch):
                tokens.append(self.read_symbol())
            else:
                raise BestLangSyntaxError(ch, self.input.location())
        return tokens

    def read_number(self) -> Token:
        loc = self.input.location()
        num = ""
        if is_dash(self.input.peek()) or is_plus(self.input.peek()):
            num += self.input.next()
        num += self.input.read_while(lambda c: is_digit(c) or is_dot(c))
        if not is_number(num):
            raise BestLangSyntaxError(num, loc)
        return Token(TokenType.NUMBER, num, loc)

    def read_string(self) -> Token:
        loc = self.input.location()
        opening = self.input.next()
        return Token(TokenType.STRING, opening + self.read_escaped(), loc)

    def read_escaped(self) -> str:
        """Read a string body up to and including the closing quote."""
        buf = []
        escaped = False
        while not self.input.eof():
            ch = self.input.next()
            if escaped:
                buf.append(self.read_escape_sequence(ch))
                escaped = False
            elif ch == "\\":
                escaped = True
            elif is_double_quote(ch):
                buf.append(ch)
                return "".join(buf)
            elif is_newline(ch):
                raise BestLangError(
                    "Unexpected newline in nonterminated single-line string literal"
                )
            elif ch == "`":
                buf.append("\\`")
            else:
                buf.append(ch)
        raise BestLangError("Expected double quote to close string literal; got EOF")

    def read_escape_sequence(self, c: str) -> str:
        """Resolve the character following a backslash."""
        if c in ESCAPES:
            return ESCAPES[c]
        if c in ("u", "U"):
            seq = self.input.read_while(is_hex_digit)
            if not seq:
                raise BestLangError(
                    f"Invalid unicode escape sequence \\{c} at {self.input.location()}"
                )
            code_point = int(seq, 16)
            if code_point > 0x10FFFF or 0xD800 <= code_point <= 0xDFFF:
                raise BestLangError(
                    f"Invalid code point \\{c}{seq} at {self.input.location()}"
                )
            return chr(code_point)
        # Unknown escapes resolve to nothing
        return ""

    def read_keyword(self) -> Token:
        loc = self.input.location()
        kw = self.input.next() + self.input.read_while(is_symbol_char)
        return Token(TokenType.KEYWORD, kw, loc)

    def read_symbol(self) -> Token:
        loc = self.input.location()
        sym = self.input.read_while(is_symbol_char)
        if is_boolean(sym):
            return Token(TokenType.BOOLEAN, sym, loc)
        if is_nil(sym):
            return Token(TokenType.NIL, sym, loc)
        raise BestLangSyntaxError(sym, loc)


def tokenize(src: str, file: str = "stdin") -> list[Token]:
    """Tokenize source text into a list of Tokens with source locations."""
    return Lexer(Cursor(src, file)).tokenize()


__all__ = ["TokenType", "Token", "Lexer", "tokenize", "ESCAPES"]
