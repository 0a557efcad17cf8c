"""Turn lex and parse errors into one-line, human readable diagnostics.

The core never prints; callers that hold the source and file name use these
helpers to resolve locations and render `{file}:{line} - {message}`.
"""

from __future__ import annotations

from .errors import LexError, ParseError
from .spans import line_number


_RED = "\x1b[31m"
_RESET = "\x1b[0m"


def render_message(text: str, *, color: bool = False) -> str:
    if not color:
        return text
    return f"{_RED}Error: {_RESET}{text}"


def render_lex_error(err: LexError, *, color: bool = False) -> str:
    if err.is_located:
        return render_message(f"{err.file}:{err.line + 1} - {err.message}", color=color)
    return render_message(err.message, color=color)


def render_parse_error(err: ParseError, src: str, file: str, *, color: bool = False) -> str:
    if err.token is None:
        return render_message(err.message, color=color)
    line = line_number(src, err.token.start)
    return render_message(f"{file}:{line} - {err.message}", color=color)


def render_error(
    err: LexError | ParseError, src: str, file: str, *, color: bool = False
) -> str:
    if isinstance(err, LexError):
        return render_lex_error(err, color=color)
    return render_parse_error(err, src, file, color=color)
