import unittest
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from calcengine.errors import ExpressionSyntaxError, LexicalError
from calcengine.evaluator import BinaryNode, BinaryOp, NumberNode, UnaryNode, UnaryOp
from calcengine.parser import Parser
from calcengine.scanner import Scanner
from calcengine.tokens import TokenKind


def answer(text):
    p = Parser()
    p.parse(text)
    return p.answer


class TestParserResults(unittest.TestCase):
    def test_binary_operators(self):
        cases = [
            ("10 + 20", 30.0),
            ("10 - 20", -10.0),
            ("10 * 20", 200.0),
            ("10 / 20", 0.5),
            ("1.5 + 2.25", 3.75),
            ("7 / 2", 3.5),
            ("10 + 20 - 40 + 100", 90.0),
        ]
        for text, expected in cases:
            with self.subTest(text=text):
                self.assertEqual(answer(text), expected)

    def test_left_associativity(self):
        self.assertEqual(answer("10 - 2 - 3"), 5.0)
        self.assertEqual(answer("100 / 10 / 5"), 2.0)

    def test_precedence(self):
        self.assertEqual(answer("10 + 20 * 30"), 610.0)
        self.assertEqual(answer("10 * 20 / 50"), 4.0)

    def test_parentheses(self):
        self.assertEqual(answer("(10 + 20) * 30"), 900.0)
        self.assertEqual(answer("-(10 + 20) * 30"), -900.0)
        self.assertEqual(answer("((((2))))"), 2.0)

    def test_unary_chains(self):
        self.assertEqual(answer("-10"), -10.0)
        self.assertEqual(answer("+10"), 10.0)
        self.assertEqual(answer("--10"), 10.0)
        self.assertEqual(answer("--++-+-10"), 10.0)
        self.assertEqual(answer("---10"), -10.0)
        self.assertEqual(answer("10 + -20 - +30"), -40.0)
        self.assertEqual(answer("2 * -3"), -6.0)

    def test_division_by_zero_is_not_an_error(self):
        self.assertEqual(answer("10 / 0"), float("inf"))
        self.assertEqual(answer("-10 / 0"), float("-inf"))

    def test_no_spaces(self):
        self.assertEqual(answer("(1+2)*3-4/2"), 7.0)


class TestParserTrees(unittest.TestCase):
    def test_left_leaning_tree(self):
        tree = Parser().parse("10 - 2 - 3")
        expected = BinaryNode(
            BinaryNode(NumberNode(10.0), NumberNode(2.0), BinaryOp.SUB),
            NumberNode(3.0),
            BinaryOp.SUB,
        )
        self.assertEqual(tree, expected)

    def test_nested_negation(self):
        tree = Parser().parse("--10")
        self.assertEqual(tree, UnaryNode(UnaryNode(NumberNode(10.0), UnaryOp.NEGATE), UnaryOp.NEGATE))

    def test_unary_plus_leaves_no_node(self):
        self.assertEqual(Parser().parse("+++10"), NumberNode(10.0))

    def test_precedence_shape(self):
        tree = Parser().parse("1 + 2 * 3")
        self.assertEqual(tree.op, BinaryOp.ADD)
        self.assertEqual(tree.right, BinaryNode(NumberNode(2.0), NumberNode(3.0), BinaryOp.MUL))


class TestParserErrors(unittest.TestCase):
    def assertSyntaxError(self, text, prefix):
        with self.assertRaises(ExpressionSyntaxError) as ctx:
            Parser().parse(text)
        self.assertTrue(ctx.exception.message.startswith(prefix), ctx.exception.message)
        return ctx.exception

    def test_missing_operand(self):
        err = self.assertSyntaxError("10 +", "unexpected token")
        self.assertEqual(err.position, 4)

    def test_missing_closing_parenthesis(self):
        self.assertSyntaxError("(10 + 20", "missing closing parenthesis")

    def test_trailing_input(self):
        err = self.assertSyntaxError("10 20", "trailing input")
        self.assertEqual(err.position, 3)
        self.assertSyntaxError("(1))", "trailing input")

    def test_second_decimal_point(self):
        self.assertSyntaxError("1.2.3", "trailing input")

    def test_unexpected_tokens(self):
        for text in ["", ")", "()", "* 2", "1 + * 2"]:
            with self.subTest(text=text):
                self.assertSyntaxError(text, "unexpected token")

    def test_lexical_error_propagates(self):
        with self.assertRaises(LexicalError) as ctx:
            Parser().parse("10 $ 5")
        self.assertEqual(ctx.exception.char, "$")

    def test_errors_are_value_errors(self):
        with self.assertRaises(ValueError):
            Parser().parse("(")


class TestParserReuse(unittest.TestCase):
    def test_shared_scanner_reset_between_expressions(self):
        scanner = Scanner("10 + 20")
        p = Parser(scanner)
        p.parse_expression()
        self.assertEqual(p.answer, 30.0)

        scanner.reset("10 - 20")
        p.parse_expression()
        self.assertEqual(p.answer, -10.0)
        self.assertIs(p.scanner, scanner)

    def test_scanner_rewound_after_success(self):
        p = Parser()
        first = p.parse("1 + 2")
        self.assertEqual(p.scanner.token.kind, TokenKind.NUMBER)
        self.assertEqual(p.scanner.token.position, 0)
        self.assertEqual(p.parse_expression(), first)
        self.assertEqual(p.answer, 3.0)

    def test_reuse_after_failure(self):
        p = Parser()
        p.parse("1 + 1")
        with self.assertRaises(ExpressionSyntaxError):
            p.parse("(2 *")
        self.assertEqual(p.answer, 2.0)
        p.parse("2 * 3")
        self.assertEqual(p.answer, 6.0)

    def test_results_independent_of_previous_expression(self):
        p = Parser()
        p.parse("(((1 + 2) * 3) - 4) / 5")
        p.parse("7")
        self.assertEqual(p.answer, 7.0)
        self.assertEqual(p.parse("7"), NumberNode(7.0))


if __name__ == "__main__":
    unittest.main()
