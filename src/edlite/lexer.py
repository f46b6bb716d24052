from __future__ import annotations

from dataclasses import dataclass

from .spans import Span
from .tokens import DIGITS, SEPARATORS, SYMBOLS, Token, classify


_BLANKS = " \t"


@dataclass(slots=True)
class EditorInput:
    """Scanning cursor over one command line."""

    characters: str
    position: int = 0

    def at_end(self) -> bool:
        return self.position >= len(self.characters)

    def peek(self) -> str:
        if self.at_end():
            return ""
        return self.characters[self.position]

    def pop(self) -> str:
        ch = self.peek()
        if ch:
            self.position += 1
        return ch

    def remainder(self) -> str:
        return self.characters[self.position :]


def tokenize(inp: EditorInput) -> list[Token]:
    tokens: list[Token] = []
    pending: list[str] = []
    start = inp.position
    # True until the current term produces a token of its own.
    term_absent = True

    def flush() -> None:
        nonlocal start, term_absent
        if pending:
            tokens.append(classify("".join(pending), Span(start, inp.position)))
            term_absent = False
        pending.clear()
        start = inp.position

    def emit(ch: str) -> None:
        nonlocal start
        begin = inp.position
        inp.pop()
        tokens.append(classify(ch, Span(begin, inp.position)))
        start = inp.position

    while not inp.at_end():
        ch = inp.peek()

        if ch in _BLANKS:
            inp.pop()
            if not pending:
                start = inp.position
            continue

        if ch in DIGITS:
            if not pending:
                start = inp.position
            pending.append(inp.pop())
            continue

        if ch in SEPARATORS:
            flush()
            if term_absent:
                tokens.append(classify("", Span(inp.position, inp.position)))
            emit(ch)
            term_absent = True
            continue

        if ch in SYMBOLS:
            flush()
            emit(ch)
            term_absent = False
            continue

        # Command letter or anything else: leave it for the command.
        break

    flush()
    return tokens
