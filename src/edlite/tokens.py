from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .errors import WeirdInputError
from .spans import Span


DIGITS = "0123456789"
SYMBOLS = ".$+-"
SEPARATORS = ",;"


class TokenKind(str, Enum):
    NUMERIC = "NUMERIC"
    SYMBOLIC = "SYMBOLIC"
    SEPARATOR = "SEPARATOR"
    EMPTY = "EMPTY"


@dataclass(frozen=True, slots=True)
class Token:
    kind: TokenKind
    lexeme: str
    span: Span

    @property
    def value(self) -> int | str | None:
        if self.kind is TokenKind.NUMERIC:
            return int(self.lexeme)
        if self.kind is TokenKind.EMPTY:
            return None
        return self.lexeme

    def __repr__(self) -> str:
        return f"Token({self.kind.value}, {self.lexeme!r}, {self.span.format()})"


def classify(lexeme: str, span: Span) -> Token:
    """Turn one flushed character run into a token.

    Raises WeirdInputError when the run matches none of the address shapes.
    """
    if not lexeme:
        return Token(TokenKind.EMPTY, lexeme, span)
    if all(c in DIGITS for c in lexeme):
        return Token(TokenKind.NUMERIC, lexeme, span)
    if len(lexeme) == 1 and lexeme in SYMBOLS:
        return Token(TokenKind.SYMBOLIC, lexeme, span)
    if len(lexeme) == 1 and lexeme in SEPARATORS:
        return Token(TokenKind.SEPARATOR, lexeme, span)
    raise WeirdInputError(
        lexeme,
        span=span,
        hint="addresses are line numbers, '.', '$', '+', '-' joined by ',' or ';'",
    )
