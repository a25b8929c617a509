"""Token kinds and the immutable token record produced by the scanner."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class TokenKind(Enum):
    PLUS = "+"
    MINUS = "-"
    STAR = "*"
    SLASH = "/"
    LPAREN = "("
    RPAREN = ")"
    NUMBER = "number"
    EOF = "end of input"


# single-character operators and parentheses
PUNCTUATION = {
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.STAR,
    "/": TokenKind.SLASH,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
}


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    value: Optional[float] = None
    position: int = 0

    def describe(self) -> str:
        if self.kind is TokenKind.NUMBER:
            return f"number {self.value!r}"
        if self.kind is TokenKind.EOF:
            return "end of input"
        return repr(self.kind.value)
