"""
bestlang.compiler.errors - Exceptions raised by the compiler phases

- BestLangError: generic failure (unterminated strings, bad escapes, ...)
- BestLangSyntaxError: malformed or unrecognized input, with the offending
  raw value and the location where scanning of it began
"""

from bestlang.compiler.source import SourceLocation


class BestLangError(Exception):
    """Generic compiler failure. Carries a message only."""

    pass


class BestLangSyntaxError(SyntaxError):
    """Raised for invalid characters, numerals, symbols and tokens."""

    def __init__(self, value, location: SourceLocation):
        self.value = value
        self.location = location
        super().__init__(
            f"BestLang: Syntax Exception: invalid syntax {value} found at "
            f"{location.file} ({location.line}:{location.col})."
        )


__all__ = ["BestLangError", "BestLangSyntaxError"]
