"""Tests for the AST pretty printer."""

import unittest

from bestlang.compiler.errors import BestLangSyntaxError
from bestlang.compiler.parser import parse
from bestlang.compiler.printer import (
    ASTPrinter,
    pprint_ast,
    pprint_desugared_ast,
    print_ast,
)
from bestlang.compiler.reader import read_str


class TestASTPrinter(unittest.TestCase):
    def test_one_line_per_literal(self):
        self.assertEqual(
            pprint_ast('1 "s" true :k nil'),
            "NumberLiteral: 1\n"
            'StringLiteral: "s"\n'
            "BooleanLiteral: true\n"
            "KeywordLiteral: :k\n"
            "NilLiteral: nil",
        )

    def test_empty_program(self):
        self.assertEqual(pprint_ast("; nothing"), "")

    def test_indent(self):
        ast = parse(read_str("1 2"))
        self.assertEqual(
            ASTPrinter(ast).print(indent=2),
            "  NumberLiteral: 1\n  NumberLiteral: 2",
        )

    def test_print_single_node(self):
        ast = parse(read_str(":a nil"))
        printer = ASTPrinter(ast)
        self.assertEqual(printer.print(ast.body[1]), "NilLiteral: nil")

    def test_print_ast(self):
        self.assertEqual(print_ast(parse(read_str("false"))), "BooleanLiteral: false")

    def test_desugared_matches_plain_dump(self):
        src = '-2.5 "x" :y'
        self.assertEqual(pprint_desugared_ast(src), pprint_ast(src))

    def test_errors_propagate(self):
        with self.assertRaises(BestLangSyntaxError):
            pprint_ast("what")


if __name__ == "__main__":
    unittest.main()
