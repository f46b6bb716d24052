from __future__ import annotations

import argparse
import logging
import os
import sys
from dataclasses import dataclass
from typing import TextIO

from .commands import Session, SessionExit
from .state import EditorState


logger = logging.getLogger(__name__)

ENV_PREFIX = "EDLITE_"


@dataclass(frozen=True, slots=True)
class EditorConfig:
    prompt: str = ""
    file: str | None = None
    verbose: bool = False

    @classmethod
    def from_args(cls, argv: list[str] | None = None) -> "EditorConfig":
        ap = argparse.ArgumentParser(prog="edlite", description="Edit text files.")
        ap.add_argument(
            "-p",
            "--prompt",
            default=os.environ.get(f"{ENV_PREFIX}PROMPT", ""),
            help="Set a prompt string (default: $EDLITE_PROMPT)",
        )
        ap.add_argument("-v", "--verbose", action="store_true", help="Log resolved addresses")
        ap.add_argument("file", nargs="?", help="File to operate on")
        args = ap.parse_args(argv)
        return cls(prompt=args.prompt, file=args.file, verbose=args.verbose)


def setup_logger(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def load_state(config: EditorConfig) -> EditorState:
    if config.file is None:
        logger.debug("no file given, starting with an empty buffer")
        return EditorState.from_lines([], prompt=config.prompt)
    return EditorState.from_file(config.file, prompt=config.prompt)


def run(state: EditorState, *, stdin: TextIO, stdout: TextIO) -> int:
    session = Session(state=state, out=stdout)
    while True:
        if state.prompt:
            stdout.write(state.prompt)
            stdout.flush()
        line = stdin.readline()
        if not line:
            return 0
        try:
            session.feed(line.rstrip("\n"))
        except SessionExit:
            return 0


def main(argv: list[str] | None = None) -> int:
    config = EditorConfig.from_args(argv)
    setup_logger(config.verbose)
    try:
        state = load_state(config)
    except OSError as e:
        print(f"edlite: {e}", file=sys.stderr)
        return 1
    return run(state, stdin=sys.stdin, stdout=sys.stdout)
