"""
Test suite for the expression grammar.

Tests cover:
- Operator precedence across every level
- Left associativity of binary operators
- Right associativity of assignment and unary chains
- Grouping preservation
- Invalid assignment targets

Author: xwest
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from loxparse.lexer.errors import DiagnosticCollector
from loxparse.lexer.tokens import TokenType
from loxparse.parser.ast_nodes import (
    Assign, Binary, Grouping, Literal, Unary, Variable, walk,
)
from loxparse.parser.parser import Parser, parse_expression
from loxparse.parser.printer import AstPrinter
from loxparse.parser.errors import ParseError
from tests.helpers import scan


class TestExpressionParsing(unittest.TestCase):
    """Test cases for expression parsing."""

    def setUp(self):
        self.printer = AstPrinter()
        self.collector = DiagnosticCollector()

    def _parse(self, source: str):
        parser = Parser(scan(source), self.collector)
        return parser.parse_expression()

    def _print(self, source: str) -> str:
        expr = self._parse(source)
        self.assertIsNotNone(expr, f"Unexpected errors: {self.collector}")
        return self.printer.print(expr)

    def test_factor_binds_tighter_than_term(self):
        """1 + 2 * 3 groups the multiplication."""
        expr = self._parse("1 + 2 * 3")

        self.assertIsInstance(expr, Binary)
        self.assertEqual(expr.operator.type, TokenType.PLUS)
        self.assertEqual(expr.left, Literal(1.0))
        self.assertIsInstance(expr.right, Binary)
        self.assertEqual(expr.right.operator.type, TokenType.STAR)
        self.assertEqual(expr.right.left, Literal(2.0))
        self.assertEqual(expr.right.right, Literal(3.0))

    def test_precedence_chain(self):
        self.assertEqual(
            self._print("1 + 2 < 3 * 4 == true"),
            "(== (< (+ 1.0 2.0) (* 3.0 4.0)) true)",
        )
        self.assertEqual(
            self._print("a != b >= - c / d"),
            "(!= a (>= b (/ (- c) d)))",
        )

    def test_left_associativity(self):
        """1 - 2 - 3 folds to the left."""
        expr = self._parse("1 - 2 - 3")

        self.assertIsInstance(expr, Binary)
        self.assertIsInstance(expr.left, Binary)
        self.assertEqual(expr.left.left, Literal(1.0))
        self.assertEqual(expr.left.right, Literal(2.0))
        self.assertEqual(expr.right, Literal(3.0))
        self.assertEqual(self._print("8 / 4 / 2"), "(/ (/ 8.0 4.0) 2.0)")
        self.assertEqual(self._print("a == b == c"), "(== (== a b) c)")

    def test_unary_chaining(self):
        expr = self._parse("! ! true")

        self.assertIsInstance(expr, Unary)
        self.assertEqual(expr.operator.type, TokenType.BANG)
        self.assertIsInstance(expr.operand, Unary)
        self.assertEqual(expr.operand.operand, Literal(True))
        self.assertEqual(self._print("- - 1"), "(- (- 1.0))")

    def test_unary_binds_tighter_than_factor(self):
        self.assertEqual(self._print("- 1 * 2"), "(* (- 1.0) 2.0)")

    def test_grouping_is_preserved(self):
        """(a) and a parse to different shapes."""
        grouped = self._parse("( a )")
        bare = self._parse("a")

        self.assertIsInstance(grouped, Grouping)
        self.assertIsInstance(grouped.expression, Variable)
        self.assertIsInstance(bare, Variable)
        self.assertNotEqual(grouped, bare)
        self.assertEqual(self._print("( 1 + 2 ) * 3"), "(* (group (+ 1.0 2.0)) 3.0)")

    def test_literals(self):
        self.assertEqual(self._parse("nil"), Literal(None))
        self.assertEqual(self._parse("false"), Literal(False))
        self.assertEqual(self._parse('"hello"'), Literal("hello"))
        self.assertEqual(self._parse("42"), Literal(42.0))

    def test_boolean_literals_differ_from_numbers(self):
        """true and 1 (or false and 0) parse to unequal trees."""
        self.assertNotEqual(self._parse("true"), self._parse("1"))
        self.assertNotEqual(self._parse("false"), self._parse("0"))
        self.assertEqual(self._parse("true"), Literal(True))
        self.assertIs(self._parse("false").value, False)

    def test_assignment_is_right_associative(self):
        """a = b = c nests to the right."""
        expr = self._parse("a = b = c")

        self.assertIsInstance(expr, Assign)
        self.assertEqual(expr.name.lexeme, "a")
        self.assertIsInstance(expr.value, Assign)
        self.assertEqual(expr.value.name.lexeme, "b")
        self.assertIsInstance(expr.value.value, Variable)
        self.assertEqual(expr.value.value.name.lexeme, "c")
        self.assertEqual(self._print("a = b = c"), "(= a (= b c))")

    def test_assignment_value_is_full_expression(self):
        self.assertEqual(self._print("x = 1 + 2"), "(= x (+ 1.0 2.0))")

    def test_invalid_assignment_target_does_not_fail(self):
        """1 = 2 reports an error but still yields the left-hand side."""
        parser = Parser(scan("1 = 2"), self.collector)
        expr = parser.parse_expression()

        self.assertEqual(expr, Literal(1.0))
        self.assertFalse(parser.had_error)
        self.assertEqual(len(self.collector.errors), 1)
        self.assertEqual(self.collector.errors[0].message, "Invalid assignment target.")
        self.assertEqual(self.collector.errors[0].where, " at '='")

    def test_grouped_target_is_invalid(self):
        expr = self._parse("( a ) = 1")

        self.assertIsInstance(expr, Grouping)
        self.assertEqual([d.message for d in self.collector.errors], ["Invalid assignment target."])

    def test_missing_closing_paren(self):
        expr = self._parse("( 1 + 2")

        self.assertIsNone(expr)
        self.assertEqual(len(self.collector.errors), 1)
        self.assertEqual(self.collector.errors[0].message, "Expect ')' after expression.")
        self.assertEqual(self.collector.errors[0].where, " at end")

    def test_expect_expression(self):
        expr = self._parse("1 + ;")

        self.assertIsNone(expr)
        self.assertEqual(self.collector.errors[0].message, "Expect expression.")
        self.assertEqual(self.collector.errors[0].where, " at ';'")

    def test_trailing_tokens_are_ignored(self):
        """The expression-only entry point stops after one expression."""
        self.assertEqual(self._print("1 2"), "1.0")

    def test_leaves_are_literals_or_variables(self):
        expr = self._parse("a = ( b + - 2 ) * c == ! d")

        for node in walk(expr):
            if not node.children():
                self.assertIsInstance(node, (Literal, Variable))

    def test_reparse_yields_equal_trees(self):
        parser = Parser(scan("a = ( 1 + b ) * - 3"), self.collector)
        first = parser.parse_expression()
        second = parser.parse_expression()

        self.assertIsNotNone(first)
        self.assertEqual(first, second)
        self.assertIsNot(first, second)

    def test_parse_expression_helper_raises(self):
        with self.assertRaises(ParseError) as ctx:
            parse_expression(scan("( 1"))
        self.assertEqual(ctx.exception.diagnostic.message, "Expect ')' after expression.")
        self.assertEqual(parse_expression(scan("1 * 2")), self._parse("1 * 2"))


if __name__ == "__main__":
    unittest.main()
