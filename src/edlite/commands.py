from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TextIO

from .errors import AddressError, CommandError
from .lexer import EditorInput, tokenize
from .resolver import resolve
from .state import EditorState, Mode


logger = logging.getLogger(__name__)

# Count handed to execute() for a blank line: no address and no command.
NO_ADDRESS = -1

_INSERT_COMMANDS = "ai"


class SessionExit(Exception):
    pass


def execute(inp: EditorInput, state: EditorState, count: int, *, out: TextIO) -> None:
    """Run the command at the cursor over the resolved range.

    ``a``/``i`` only switch ``state`` into insert mode; collecting the text is
    the caller's job (see ``Session``).
    """
    cmd = inp.pop()
    rest = inp.remainder()
    if rest.strip():
        raise CommandError(cmd + rest, "unexpected text after command")

    if cmd == "":
        if count < 0:
            raise CommandError("", "no command")
        print(state.buffer[state.dot], file=out)
    elif cmd == "p":
        for line in state.lines(state.address1, state.address2):
            print(line, file=out)
    elif cmd == "n":
        for num in range(state.address1, state.address2 + 1):
            print(f"{num}\t{state.buffer[num]}", file=out)
    elif cmd == "=":
        print(state.address2 if count > 0 else state.dollar, file=out)
    elif cmd in _INSERT_COMMANDS:
        state.flip_mode()
    elif cmd in "qQ":
        raise SessionExit()
    else:
        raise CommandError(cmd)


@dataclass(slots=True)
class Session:
    """Feeds input lines to the editor one at a time."""

    state: EditorState
    out: TextIO
    _pending: list[str] = field(default_factory=list)
    _insert_after: int = 0

    def feed(self, line: str) -> None:
        if self.state.mode is Mode.INSERT:
            self._collect(line)
            return
        try:
            self._command(line)
        except AddressError as e:
            logger.debug("address error: %r", e)
            print(f"? : {e}", file=self.out)
        except CommandError as e:
            logger.debug("command error: %s", e)
            print("?", file=self.out)

    def _command(self, line: str) -> None:
        inp = EditorInput(line)
        tokens = tokenize(inp)
        cmd = inp.peek()

        if not tokens and inp.at_end():
            count = NO_ADDRESS
        elif not tokens and cmd and cmd in _INSERT_COMMANDS and self.state.dollar == 0:
            # An empty buffer has no line to address; text goes at the top.
            count = 0
        else:
            count = resolve(tokens, self.state)

        execute(inp, self.state, count, out=self.out)

        if self.state.mode is Mode.INSERT:
            if self.state.dollar == 0:
                self._insert_after = 0
            elif cmd == "a":
                self._insert_after = self.state.address2
            else:
                self._insert_after = self.state.address2 - 1
            self._pending.clear()

    def _collect(self, line: str) -> None:
        if line != ".":
            self._pending.append(line)
            return
        self.state.insert_lines(self._insert_after, list(self._pending))
        self._pending.clear()
        self.state.flip_mode()
