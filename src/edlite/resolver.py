from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence, cast

from .errors import AddressUnderflowError, LineNumberError, MalformedAddressError
from .spans import Span
from .state import EditorState
from .tokens import Token, TokenKind


logger = logging.getLogger(__name__)

# Count before any address-bearing token has been seen.
UNSET = -1


@dataclass(slots=True)
class _Accumulator:
    """Running registers of one resolution; committed only after validation."""

    addr1: int
    addr2: int
    dot: int
    dollar: int
    prev1: int
    prev2: int
    count: int = UNSET
    first: bool = False
    moved: bool = False
    anchored: bool = False
    after_sep: bool = False
    # Some term followed a separator, so the result is a range.
    ranged: bool = False
    # The current term already added to count.
    term_counted: bool = False

    @classmethod
    def seed(cls, state: EditorState) -> "_Accumulator":
        return cls(
            addr1=state.address1,
            addr2=state.address2,
            dot=state.dot,
            dollar=state.dollar,
            prev1=state.address1,
            prev2=state.address2,
        )

    def _touch(self) -> None:
        if self.count == UNSET:
            self.count = 0

    def step(self, tok: Token) -> None:
        kind = tok.kind
        if kind is TokenKind.NUMERIC:
            self._touch()
            self.addr2 = cast(int, tok.value)
            self._count_term()
            self._term()
        elif kind is TokenKind.SYMBOLIC:
            self._symbol(tok)
            self._term()
        elif kind is TokenKind.SEPARATOR:
            self._separator(tok)
        elif kind is TokenKind.EMPTY:
            self._touch()
            self.addr1 = self.prev1
            self.addr2 = self.prev2
        else:
            raise RuntimeError(f"unhandled token kind: {kind!r}")

    def _count_term(self) -> None:
        self.count += 1
        self.term_counted = True

    def _term(self) -> None:
        self.moved = True
        self.anchored = False
        if self.after_sep:
            self.ranged = True

    def _symbol(self, tok: Token) -> None:
        sym = tok.lexeme
        if sym in "+-":
            if self.count == UNSET:
                # An expression opening with '+' or '-' is relative to '.'.
                self.addr2 = self.dot
            if self.after_sep and not self.term_counted:
                self.count = max(self.count, 0) + 1
                self.term_counted = True
        self._touch()
        if sym == ".":
            self.addr2 = self.dot
            self._count_term()
        elif sym == "$":
            self.addr2 = self.dollar
            self._count_term()
        elif sym == "+":
            self.addr2 += 1
        elif sym == "-":
            if self.addr2 == 0:
                raise AddressUnderflowError(span=tok.span, hint="there is no line before line 0")
            self.addr2 -= 1
        else:
            raise RuntimeError(f"unknown symbolic address: {sym!r}")

    def _separator(self, tok: Token) -> None:
        sep = tok.lexeme
        if sep == ";":
            # ';' re-anchors '.' to the address reached so far.
            self.dot = self.addr2
        elif sep != ",":
            raise RuntimeError(f"unknown separator: {sep!r}")

        self.after_sep = True
        self.term_counted = False
        self.addr1 = self.addr2
        if self.count <= 0:
            # Bare ',' means 1,$ and bare ';' means .,$
            self.count = 0
            self.addr1 = 1 if sep == "," else self.dot
            self.addr2 = self.dollar
            self.first = True
            self.anchored = sep == ";"

    def finish(self) -> None:
        # A lone address names one line; an expression made only of empty
        # terms repeats the previous range as is.
        if self.count <= 1 and not (self.first or self.ranged) and self.moved:
            self.addr1 = self.addr2
        if not self.anchored:
            self.dot = self.addr2

    def validate(self) -> None:
        if not 1 <= self.addr1 <= self.dollar:
            raise LineNumberError(self.addr1)
        if not 1 <= self.addr2 <= self.dollar:
            raise LineNumberError(self.addr2)
        if self.addr1 > self.addr2:
            raise MalformedAddressError(self.addr1, self.addr2)


def resolve(tokens: Sequence[Token], state: EditorState) -> int:
    """Resolve ``tokens`` against ``state`` and commit the new addresses.

    Returns the number of addresses supplied: 0 when the address was omitted
    or defaulted, 1 for a single address, 2 or more for an explicit range.
    Raises an ``AddressError`` and leaves ``state`` untouched on failure.
    """
    acc = _Accumulator.seed(state)
    if not tokens:
        acc.step(Token(TokenKind.EMPTY, "", Span(0, 0)))
    for tok in tokens:
        acc.step(tok)
    acc.finish()
    acc.validate()

    state.address1 = acc.addr1
    state.address2 = acc.addr2
    state.dot = acc.dot
    logger.debug(
        "resolved a1=%d a2=%d dot=%d count=%d", state.address1, state.address2, state.dot, acc.count
    )
    return acc.count
