"""Lexical scanner: source text -> one current token at a time.

The scanner keeps exactly one token of lookahead. ``reset(text)`` is the
only way to start on a new expression; ``advance_token()`` moves to the
next token.
"""

from __future__ import annotations

from typing import List, Optional

from .errors import LexicalError
from .tokens import PUNCTUATION, Token, TokenKind


class Scanner:
    def __init__(self, text: Optional[str] = None):
        self.source = ""
        self.pos = 0
        self.char: Optional[str] = None
        self.token = Token(TokenKind.EOF)
        self.number = 0.0
        if text is not None:
            self.reset(text)

    def reset(self, text: str) -> Token:
        """Start scanning ``text`` from the beginning and return its first token."""
        self.source = text
        self.pos = 0
        self.char = None
        self.token = Token(TokenKind.EOF)
        self.number = 0.0
        self._next_char()
        return self.advance_token()

    def rewind(self) -> Token:
        """Start over on the current source."""
        return self.reset(self.source)

    def _next_char(self) -> None:
        # self.char is None once the source is exhausted
        if self.pos < len(self.source):
            self.char = self.source[self.pos]
        else:
            self.char = None
        self.pos += 1

    def _char_index(self) -> int:
        return self.pos - 1

    def advance_token(self) -> Token:
        while self.char == " ":
            self._next_char()

        start = self._char_index()
        ch = self.char
        if ch is None:
            self.token = Token(TokenKind.EOF, position=min(start, len(self.source)))
            return self.token

        kind = PUNCTUATION.get(ch)
        if kind is not None:
            self._next_char()
            self.token = Token(kind, position=start)
            return self.token

        if _is_digit(ch) or ch == ".":
            self.number = self._scan_number()
            self.token = Token(TokenKind.NUMBER, self.number, start)
            return self.token

        raise LexicalError(ch, start)

    def _scan_number(self) -> float:
        # Digits with at most one '.'; a second '.' ends the run.
        chars = []
        seen_dot = False
        while self.char is not None and (_is_digit(self.char) or (self.char == "." and not seen_dot)):
            if self.char == ".":
                seen_dot = True
            chars.append(self.char)
            self._next_char()
        text = "".join(chars)
        if text == ".":
            return 0.0
        return float(text)


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def tokenize(text: str) -> List[Token]:
    """Return every token of ``text``, ending with the EOF token."""
    scanner = Scanner(text)
    out = [scanner.token]
    while scanner.token.kind is not TokenKind.EOF:
        out.append(scanner.advance_token())
    return out
