from __future__ import annotations

from dataclasses import dataclass

from .lexer import EditorInput, tokenize
from .resolver import resolve
from .state import EditorState


@dataclass(frozen=True, slots=True)
class Resolution:
    count: int
    remainder: str  # unconsumed input, starting at the command letter


def resolve_input(inp: EditorInput, state: EditorState) -> int:
    return resolve(tokenize(inp), state)


def resolve_line(text: str, state: EditorState) -> Resolution:
    inp = EditorInput(text)
    count = resolve_input(inp, state)
    return Resolution(count=count, remainder=inp.remainder())
