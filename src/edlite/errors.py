from __future__ import annotations

from dataclasses import dataclass, field

from .spans import Span


@dataclass(slots=True)
class AddressError(Exception):
    span: Span | None = field(default=None, kw_only=True)
    hint: str | None = field(default=None, kw_only=True)

    @property
    def message(self) -> str:
        return "bad address"

    def __str__(self) -> str:
        base = self.message
        if self.span is not None:
            base = f"{self.span.format()}: {base}"
        if self.hint:
            return f"{base}\nhint: {self.hint}"
        return base


@dataclass(slots=True)
class WeirdInputError(AddressError):
    text: str

    @property
    def message(self) -> str:
        return f"{self.text}: unsupported address"


@dataclass(slots=True)
class LineNumberError(AddressError):
    line: int

    @property
    def message(self) -> str:
        return f"{self.line}: invalid line number"


@dataclass(slots=True)
class MalformedAddressError(AddressError):
    first: int
    second: int

    @property
    def message(self) -> str:
        return f"address malformed ({self.first} > {self.second})"


@dataclass(slots=True)
class AddressUnderflowError(AddressError):
    @property
    def message(self) -> str:
        return "address underflow"


@dataclass(slots=True)
class CommandError(Exception):
    command: str
    message: str = "unknown command"

    def __str__(self) -> str:
        if self.command:
            return f"{self.command!r}: {self.message}"
        return self.message
