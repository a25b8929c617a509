"""Errors raised by the expression engine."""

from __future__ import annotations

from typing import Optional


class CalcError(ValueError):
    """Base class for bad calculator input."""


class LexicalError(CalcError):
    def __init__(self, char: str, position: int):
        self.char = char
        self.position = position
        super().__init__(f"Unsupported character {char!r} at position {position}")


class ExpressionSyntaxError(CalcError):
    def __init__(self, message: str, position: Optional[int] = None):
        self.message = message
        self.position = position
        if position is None:
            super().__init__(message)
        else:
            super().__init__(f"{message} at position {position}")
