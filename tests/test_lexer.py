"""
Test suite for the BestLang tokenizer.

Covers:
- Number, string, keyword, boolean and nil tokens
- Escape sequence resolution in strings
- Comments and whitespace
- Error reporting for unknown characters and symbols
"""

import unittest

from bestlang.compiler.errors import BestLangError, BestLangSyntaxError
from bestlang.compiler.lexer import Token, TokenType, tokenize
from bestlang.compiler.source import SourceLocation


def values(src):
    return [tok.value for tok in tokenize(src)]


def types(src):
    return [tok.type for tok in tokenize(src)]


class TestNumbers(unittest.TestCase):
    def test_integer(self):
        self.assertEqual(
            tokenize("42"),
            [Token(TokenType.NUMBER, "42", SourceLocation(0, 1, 1, "stdin"))],
        )

    def test_signed_and_fractional(self):
        self.assertEqual(values("-3.14 +7 0.5"), ["-3.14", "+7", "0.5"])
        self.assertEqual(types("-3.14 +7"), [TokenType.NUMBER, TokenType.NUMBER])

    def test_invalid_numeral(self):
        """Invalid numerals are reported at the first character."""
        for src in ("1.2.3", "1.", " -4."):
            with self.subTest(src=src):
                with self.assertRaises(BestLangSyntaxError) as cm:
                    tokenize(src)
                self.assertEqual(cm.exception.value, src.strip())
                self.assertEqual(cm.exception.location.offset, src.index(src.strip()))

    def test_number_followed_by_symbol(self):
        with self.assertRaises(BestLangSyntaxError) as cm:
            tokenize("12abc")
        self.assertEqual(cm.exception.value, "abc")
        self.assertEqual(cm.exception.location.offset, 2)

    def test_lone_dash_is_a_symbol(self):
        with self.assertRaises(BestLangSyntaxError) as cm:
            tokenize("-")
        self.assertEqual(cm.exception.value, "-")


class TestStrings(unittest.TestCase):
    def test_simple_string_keeps_quotes(self):
        toks = tokenize('"hello"')
        self.assertEqual(toks[0].type, TokenType.STRING)
        self.assertEqual(toks[0].value, '"hello"')

    def test_newline_escape(self):
        self.assertEqual(values('"hi\\nthere"'), ['"hi\nthere"'])

    def test_control_escapes(self):
        self.assertEqual(
            values(r'"\n\b\f\r\t\v\0"'),
            ['"\n\b\f\r\t\v\0"'],
        )

    def test_quote_escapes(self):
        self.assertEqual(values(r'"\'\"\\"'), ['"\'"\\"'])

    def test_unicode_escapes(self):
        self.assertEqual(values(r'"\u0041"'), ['"A"'])
        self.assertEqual(values(r'"\U1F600"'), ['"\U0001F600"'])

    def test_invalid_unicode_escape(self):
        with self.assertRaises(BestLangError):
            tokenize(r'"\uzz"')
        with self.assertRaises(BestLangError):
            tokenize(r'"\U110000"')

    def test_surrogate_escape_is_rejected(self):
        """Lone surrogates cannot be encoded in the emitted text."""
        for src in (r'"\uD800"', r'"\uDFFF"', r'"\UDC00"'):
            with self.subTest(src=src):
                with self.assertRaises(BestLangError):
                    tokenize(src)
        self.assertEqual(values(r'"\uD7FF"'), ['"' + chr(0xD7FF) + '"'])

    def test_backtick_stays_escaped(self):
        self.assertEqual(values('"a`b"'), ['"a\\`b"'])
        self.assertEqual(values(r'"a\`b"'), ['"a\\`b"'])

    def test_unknown_escape_is_dropped(self):
        self.assertEqual(values(r'"a\qb"'), ['"ab"'])

    def test_newline_inside_string(self):
        with self.assertRaises(BestLangError) as cm:
            tokenize('"ab\ncd"')
        self.assertNotIsInstance(cm.exception, BestLangSyntaxError)
        self.assertIn("newline", str(cm.exception))

    def test_unterminated_string(self):
        with self.assertRaises(BestLangError) as cm:
            tokenize('"abc')
        self.assertIn("got EOF", str(cm.exception))

    def test_unterminated_after_escape(self):
        with self.assertRaises(BestLangError):
            tokenize('"abc\\"')


class TestKeywordsAndSymbols(unittest.TestCase):
    def test_keyword(self):
        toks = tokenize(":hello")
        self.assertEqual(toks[0].type, TokenType.KEYWORD)
        self.assertEqual(toks[0].value, ":hello")

    def test_keyword_characters(self):
        self.assertEqual(
            values(":a-b? :x1 :λ2 :a:b"), [":a-b?", ":x1", ":λ2", ":a:b"]
        )

    def test_booleans(self):
        toks = tokenize("true false")
        self.assertEqual(types("true false"), [TokenType.BOOLEAN, TokenType.BOOLEAN])
        self.assertEqual(toks[1].location, SourceLocation(5, 1, 6, "stdin"))

    def test_nil(self):
        self.assertEqual(types("nil"), [TokenType.NIL])

    def test_symbols_containing_literal_names_are_rejected(self):
        for src in ("truex", "untrue", "nilly", "vanilla"):
            with self.subTest(src=src):
                with self.assertRaises(BestLangSyntaxError) as cm:
                    tokenize(src)
                self.assertEqual(cm.exception.value, src)

    def test_other_symbols_are_rejected(self):
        with self.assertRaises(BestLangSyntaxError) as cm:
            tokenize("foo")
        self.assertEqual(cm.exception.value, "foo")

    def test_unicode_symbol(self):
        with self.assertRaises(BestLangSyntaxError) as cm:
            tokenize("λ")
        self.assertEqual(cm.exception.value, "λ")


class TestLayout(unittest.TestCase):
    def test_comment_only(self):
        self.assertEqual(tokenize("; just a comment"), [])

    def test_comment_ends_at_newline(self):
        toks = tokenize("1 ; c\n2")
        self.assertEqual([t.value for t in toks], ["1", "2"])
        self.assertEqual(toks[1].location, SourceLocation(6, 2, 1, "stdin"))

    def test_locations_across_lines(self):
        toks = tokenize("1\n  :k", "main.best")
        self.assertEqual(toks[1].location, SourceLocation(4, 2, 3, "main.best"))

    def test_empty_input(self):
        self.assertEqual(tokenize(""), [])
        self.assertEqual(tokenize(" \t\n "), [])


class TestErrors(unittest.TestCase):
    def test_unknown_character(self):
        with self.assertRaises(BestLangSyntaxError) as cm:
            tokenize("@")
        err = cm.exception
        self.assertEqual(err.value, "@")
        self.assertEqual(err.location, SourceLocation(0, 1, 1, "stdin"))
        self.assertEqual(
            str(err),
            "BestLang: Syntax Exception: invalid syntax @ found at stdin (1:1).",
        )

    def test_unknown_character_after_tokens(self):
        with self.assertRaises(BestLangSyntaxError) as cm:
            tokenize("1 @", "x.best")
        self.assertEqual(cm.exception.location, SourceLocation(2, 1, 3, "x.best"))

    def test_syntax_error_is_a_python_syntax_error(self):
        with self.assertRaises(SyntaxError):
            tokenize("(")


if __name__ == "__main__":
    unittest.main()
