"""
bestlang.compiler.source - Character stream and character classes

This module holds the leaf layer of the compiler:

- SourceLocation: offset/line/column/file of a token or AST node
- Character class predicates used by the lexer
- Cursor: a character stream that tracks offset, line and column

Every predicate accepts ``None`` (the EOF character returned by
``Cursor.peek()``) and returns False for it.
"""

import re
import unicodedata
from dataclasses import dataclass
from typing import Callable, Optional

# =============================================================================
# Source Location Tracking
# =============================================================================


@dataclass(frozen=True)
class SourceLocation:
    """Where a token or AST node starts in the source text."""

    offset: int = 0  # 0-based character offset
    line: int = 1  # 1-based line number
    col: int = 1  # 1-based column number
    file: str = "stdin"

    @classmethod
    def none(cls) -> "SourceLocation":
        """Location used when there is nothing to point at (empty program)."""
        return cls(0, 0, 0, "none")

    def __str__(self):
        return f"{self.file} ({self.line}:{self.col})"


# =============================================================================
# Character Classes
# =============================================================================

DIGITS = frozenset("0123456789")
HEX_DIGITS = frozenset("0123456789abcdefABCDEF")

# Punctuation allowed in addition to letters
SYMBOL_START_PUNCT = frozenset("=<>%:|?\\/*_$!+-")
SYMBOL_CHAR_PUNCT = frozenset(":=@~<>%&|?\\/^*#'_$!+-")

_NUMBER_RE = re.compile(r"[+-]?[0-9]+(\.[0-9]+)?")

Predicate = Callable[[Optional[str]], bool]


def is_letter(ch: Optional[str]) -> bool:
    return ch is not None and unicodedata.category(ch).startswith("L")


def is_numeric(ch: Optional[str]) -> bool:
    return ch is not None and unicodedata.category(ch).startswith("N")


def is_digit(ch: Optional[str]) -> bool:
    return ch is not None and ch in DIGITS


def is_hex_digit(ch: Optional[str]) -> bool:
    return ch is not None and ch in HEX_DIGITS


def is_dot(ch: Optional[str]) -> bool:
    return ch == "."


def is_whitespace(ch: Optional[str]) -> bool:
    return ch is not None and ch.isspace()


def is_semicolon(ch: Optional[str]) -> bool:
    return ch == ";"


def is_newline(ch: Optional[str]) -> bool:
    return ch == "\n"


def is_dash(ch: Optional[str]) -> bool:
    return ch == "-"


def is_plus(ch: Optional[str]) -> bool:
    return ch == "+"


def is_double_quote(ch: Optional[str]) -> bool:
    return ch == '"'


def is_colon(ch: Optional[str]) -> bool:
    return ch == ":"


def is_symbol_start(ch: Optional[str]) -> bool:
    """Can ``ch`` begin a symbol? Letters (any script) or SYMBOL_START_PUNCT."""
    return ch is not None and (ch in SYMBOL_START_PUNCT or is_letter(ch))


def is_symbol_char(ch: Optional[str]) -> bool:
    """Can ``ch`` continue a symbol or keyword? Adds numbers and more punctuation."""
    return ch is not None and (
        ch in SYMBOL_CHAR_PUNCT or is_letter(ch) or is_numeric(ch)
    )


def is_number(text: str) -> bool:
    """Whole-text check for a numeral: optional sign, digits, optional fraction."""
    return _NUMBER_RE.fullmatch(text) is not None


def is_boolean(text: str) -> bool:
    return text in ("true", "false")


def is_nil(text: str) -> bool:
    return text == "nil"


# =============================================================================
# Cursor
# =============================================================================


class Cursor:
    """
    Character stream over source text.

    Tracks the absolute offset plus the 1-based line and column of the
    next character to be consumed.
    """

    def __init__(self, text: str, file: str = "stdin"):
        self.text = text
        self.file = file
        self.offset = 0
        self.line = 1
        self.col = 1

    def __len__(self):
        return len(self.text)

    def eof(self) -> bool:
        return self.offset >= len(self.text)

    def peek(self) -> Optional[str]:
        """Current character, or None at EOF."""
        return self.lookahead(0)

    def lookahead(self, n: int = 1) -> Optional[str]:
        """Character ``n`` positions ahead of the current one, or None."""
        i = self.offset + n
        if 0 <= i < len(self.text):
            return self.text[i]
        return None

    def next(self) -> Optional[str]:
        """Consume and return the current character."""
        ch = self.peek()
        if ch is None:
            return None
        self.offset += 1
        if is_newline(ch):
            self.line += 1
            self.col = 1
        else:
            self.col += 1
        return ch

    def read_while(self, pred: Predicate) -> str:
        """Consume characters while ``pred`` holds and return them."""
        buf = []
        while not self.eof() and pred(self.peek()):
            buf.append(self.next())
        return "".join(buf)

    def location(self) -> SourceLocation:
        """Snapshot of the current position."""
        return SourceLocation(self.offset, self.line, self.col, self.file)


__all__ = [
    "SourceLocation",
    "Cursor",
    "Predicate",
    "is_letter",
    "is_numeric",
    "is_digit",
    "is_hex_digit",
    "is_dot",
    "is_whitespace",
    "is_semicolon",
    "is_newline",
    "is_dash",
    "is_plus",
    "is_double_quote",
    "is_colon",
    "is_symbol_start",
    "is_symbol_char",
    "is_number",
    "is_boolean",
    "is_nil",
]
