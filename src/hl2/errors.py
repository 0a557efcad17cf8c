from __future__ import annotations

from dataclasses import dataclass

from .tokens import Token


@dataclass(slots=True)
class LexError(Exception):
    """Lexing failure.

    Raised unlocated (`file`/`line` unset) by the token recognizers, which only
    see a character cursor. The lex driver attaches the file name and the
    0-based line once, via `at()`, before the error leaves `lex()`.
    """

    message: str
    file: str | None = None
    line: int | None = None

    @property
    def is_located(self) -> bool:
        return self.line is not None

    def at(self, file: str, line: int) -> "LexError":
        if self.is_located:
            raise RuntimeError(f"lex error is already located: {self}")
        return LexError(message=self.message, file=file, line=line)

    def __str__(self) -> str:
        if not self.is_located:
            return self.message
        return f"{self.file}:{self.line + 1} - {self.message}"


@dataclass(slots=True)
class ParseError(Exception):
    """Parsing failure.

    Located errors carry the offending token; turning it into a line number is
    left to the caller, who holds the source (see `hl2.diagnostics`).
    """

    message: str
    token: Token | None = None

    @property
    def is_located(self) -> bool:
        return self.token is not None

    def __str__(self) -> str:
        if self.token is None:
            return self.message
        return f"{self.message} (at offset {self.token.start})"
