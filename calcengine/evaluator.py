#!/usr/bin/env python3
"""Expression tree and evaluator for calculator."""

from __future__ import annotations

import math
import operator
from dataclasses import dataclass
from enum import Enum
from typing import Union


class UnaryOp(Enum):
    NEGATE = "-"


class BinaryOp(Enum):
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"


def _divide(left: float, right: float) -> float:
    if right == 0:
        # IEEE-754: x/0 is a signed infinity, 0/0 and nan/0 are nan
        if left == 0 or math.isnan(left):
            return math.nan
        return math.copysign(math.inf, left) * math.copysign(1.0, right)
    return left / right


_UNARY_OPS = {
    UnaryOp.NEGATE: operator.neg,
}

_BIN_OPS = {
    BinaryOp.ADD: operator.add,
    BinaryOp.SUB: operator.sub,
    BinaryOp.MUL: operator.mul,
    BinaryOp.DIV: _divide,
}


def _fmt_number(value: float) -> str:
    value = float(value)
    if value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(value)


@dataclass(frozen=True)
class NumberNode:
    value: float

    def evaluate(self) -> float:
        return evaluate_node(self)

    def __str__(self) -> str:
        return _fmt_number(self.value)


@dataclass(frozen=True)
class UnaryNode:
    operand: "Node"
    op: UnaryOp = UnaryOp.NEGATE

    def evaluate(self) -> float:
        return evaluate_node(self)

    def __str__(self) -> str:
        return f"({self.op.value}{self.operand})"


@dataclass(frozen=True)
class BinaryNode:
    left: "Node"
    right: "Node"
    op: BinaryOp

    def evaluate(self) -> float:
        return evaluate_node(self)

    def __str__(self) -> str:
        return f"({self.left} {self.op.value} {self.right})"


Node = Union[NumberNode, UnaryNode, BinaryNode]


def evaluate_node(node: Node) -> float:
    """Reduce ``node`` to a float, children first. Never raises on arithmetic."""
    if isinstance(node, NumberNode):
        return float(node.value)

    if isinstance(node, UnaryNode):
        value = evaluate_node(node.operand)
        return float(_UNARY_OPS[node.op](value))

    if isinstance(node, BinaryNode):
        left = evaluate_node(node.left)
        right = evaluate_node(node.right)
        return float(_BIN_OPS[node.op](left, right))

    raise TypeError(f"Unsupported expression node: {type(node).__name__}")
