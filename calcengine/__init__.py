"""Arithmetic expression engine: scanner, recursive-descent parser and tree evaluator."""

from .calculator import calculate
from .errors import CalcError, ExpressionSyntaxError, LexicalError
from .evaluator import BinaryNode, BinaryOp, NumberNode, UnaryNode, UnaryOp, evaluate_node
from .parser import Parser
from .scanner import Scanner, tokenize
from .tokens import Token, TokenKind

__all__ = [
    "calculate",
    "CalcError",
    "ExpressionSyntaxError",
    "LexicalError",
    "BinaryNode",
    "BinaryOp",
    "NumberNode",
    "UnaryNode",
    "UnaryOp",
    "evaluate_node",
    "Parser",
    "Scanner",
    "tokenize",
    "Token",
    "TokenKind",
]
