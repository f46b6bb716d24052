from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Span:
    """Half-open span [start, end) inside one command line.

    Offsets are 0-based; the column in user-facing messages is 1-based.
    """

    start: int
    end: int

    @property
    def column(self) -> int:
        return self.start + 1

    def format(self) -> str:
        return f"col {self.column}"
