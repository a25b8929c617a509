#!/usr/bin/env python3
"""Recursive-descent expression parser for calculator.

Grammar, lowest precedence first::

    expression := add_sub EOF
    add_sub    := mul_div (('+' | '-') mul_div)*
    mul_div    := unary (('*' | '/') unary)*
    unary      := '+' unary | '-' unary | leaf
    leaf       := NUMBER | '(' add_sub ')'
"""

from __future__ import annotations

from typing import Optional

from .errors import ExpressionSyntaxError
from .evaluator import BinaryNode, BinaryOp, Node, NumberNode, UnaryNode, UnaryOp, evaluate_node
from .scanner import Scanner
from .tokens import TokenKind

_ADD_SUB = {
    TokenKind.PLUS: BinaryOp.ADD,
    TokenKind.MINUS: BinaryOp.SUB,
}

_MUL_DIV = {
    TokenKind.STAR: BinaryOp.MUL,
    TokenKind.SLASH: BinaryOp.DIV,
}


class Parser:
    """Builds expression trees from the tokens of one scanner.

    Not safe to share between threads; use one parser per thread.
    """

    def __init__(self, scanner: Optional[Scanner] = None):
        self.scanner = scanner if scanner is not None else Scanner()
        self.answer: Optional[float] = None

    def parse(self, text: str) -> Node:
        self.scanner.reset(text)
        return self.parse_expression()

    def parse_expression(self) -> Node:
        """Parse the scanner's whole source, evaluate it and store ``answer``.

        On success the scanner is rewound to the start of the same source.
        """
        tree = self._parse_add_sub()
        token = self.scanner.token
        if token.kind is not TokenKind.EOF:
            raise ExpressionSyntaxError(f"trailing input: {token.describe()}", token.position)
        self.answer = evaluate_node(tree)
        self.scanner.rewind()
        return tree

    def _parse_add_sub(self) -> Node:
        left = self._parse_mul_div()
        while True:
            op = _ADD_SUB.get(self.scanner.token.kind)
            if op is None:
                return left
            self.scanner.advance_token()
            right = self._parse_mul_div()
            left = BinaryNode(left, right, op)

    def _parse_mul_div(self) -> Node:
        left = self._parse_unary()
        while True:
            op = _MUL_DIV.get(self.scanner.token.kind)
            if op is None:
                return left
            self.scanner.advance_token()
            right = self._parse_unary()
            left = BinaryNode(left, right, op)

    def _parse_unary(self) -> Node:
        while self.scanner.token.kind is TokenKind.PLUS:
            self.scanner.advance_token()
        if self.scanner.token.kind is TokenKind.MINUS:
            self.scanner.advance_token()
            return UnaryNode(self._parse_unary(), UnaryOp.NEGATE)
        return self._parse_leaf()

    def _parse_leaf(self) -> Node:
        token = self.scanner.token
        if token.kind is TokenKind.NUMBER:
            self.scanner.advance_token()
            return NumberNode(token.value)

        if token.kind is TokenKind.LPAREN:
            self.scanner.advance_token()
            node = self._parse_add_sub()
            closing = self.scanner.token
            if closing.kind is not TokenKind.RPAREN:
                raise ExpressionSyntaxError(
                    f"missing closing parenthesis: found {closing.describe()}", closing.position
                )
            self.scanner.advance_token()
            return node

        raise ExpressionSyntaxError(f"unexpected token: {token.describe()}", token.position)
