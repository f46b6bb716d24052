from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Iterable


logger = logging.getLogger(__name__)


class Mode(str, Enum):
    COMMAND = "command"
    INSERT = "insert"


@dataclass(slots=True)
class EditorState:
    """Buffer plus the addressing registers of one editing session.

    ``buffer[0]`` is a sentinel so that line numbers index the list directly.
    ``dollar`` always equals the number of real lines.
    """

    buffer: list[str] = field(default_factory=lambda: [""])
    prompt: str = ""
    mode: Mode = Mode.COMMAND
    dot: int = 0
    dollar: int = 0
    address1: int = 0
    address2: int = 0

    @classmethod
    def from_lines(cls, lines: Iterable[str], *, prompt: str = "") -> "EditorState":
        buffer = [""] + list(lines)
        dollar = len(buffer) - 1
        return cls(
            buffer=buffer,
            prompt=prompt,
            dot=dollar,
            dollar=dollar,
            address1=dollar,
            address2=dollar,
        )

    @classmethod
    def from_file(cls, path: str | Path, *, prompt: str = "") -> "EditorState":
        p = Path(path).expanduser()
        text = p.read_text(encoding="utf-8")
        state = cls.from_lines(text.splitlines(), prompt=prompt)
        logger.info("loaded %s: %d lines", p, state.dollar)
        return state

    def lines(self, first: int, last: int) -> list[str]:
        return self.buffer[first : last + 1]

    def insert_lines(self, after: int, lines: list[str]) -> None:
        """Insert ``lines`` after line ``after`` (0 inserts at the top).

        Leaves ``dot`` and both addresses on the last inserted line.
        """
        if not 0 <= after <= self.dollar:
            raise IndexError(f"insert position out of range: {after}")
        self.buffer[after + 1 : after + 1] = lines
        self.dollar = len(self.buffer) - 1
        if lines:
            self.dot = after + len(lines)
            self.address1 = self.address2 = self.dot
        logger.debug("inserted %d lines after %d, dollar=%d", len(lines), after, self.dollar)

    def flip_mode(self) -> None:
        if self.mode is Mode.COMMAND:
            self.mode = Mode.INSERT
        else:
            self.mode = Mode.COMMAND
