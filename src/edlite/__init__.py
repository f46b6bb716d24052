from __future__ import annotations

from .api import Resolution, resolve_line
from .errors import (
    AddressError,
    AddressUnderflowError,
    CommandError,
    LineNumberError,
    MalformedAddressError,
    WeirdInputError,
)
from .lexer import EditorInput, tokenize
from .resolver import resolve
from .state import EditorState, Mode
from .tokens import Token, TokenKind

__all__ = [
    "AddressError",
    "AddressUnderflowError",
    "CommandError",
    "EditorInput",
    "EditorState",
    "LineNumberError",
    "MalformedAddressError",
    "Mode",
    "Resolution",
    "Token",
    "TokenKind",
    "WeirdInputError",
    "resolve",
    "resolve_line",
    "tokenize",
]
