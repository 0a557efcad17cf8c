from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .lexer import lex
from .parser import DEFAULT_MAX_DEPTH, parse
from .tokens import Token
from .tree import NonTerminal


@dataclass(frozen=True, slots=True)
class ParseResult:
    file: str
    source: str
    tokens: tuple[Token, ...]
    tree: NonTerminal  # always a Program node


def parse_source(
    src: str, *, file: str = "<memory>", max_depth: int = DEFAULT_MAX_DEPTH
) -> ParseResult:
    toks = lex(src, file)
    tree = parse(toks, src, max_depth=max_depth)
    return ParseResult(file=file, source=src, tokens=tuple(toks), tree=tree)


def _read(path: str | Path) -> tuple[str, str]:
    p = Path(path).expanduser()
    return str(p), p.read_text(encoding="utf-8")


def lex_file(path: str | Path) -> tuple[str, list[Token]]:
    """Read and lex one file, returning its source alongside the tokens."""
    file, src = _read(path)
    return src, lex(src, file)


def parse_file(path: str | Path, *, max_depth: int = DEFAULT_MAX_DEPTH) -> ParseResult:
    file, src = _read(path)
    return parse_source(src, file=file, max_depth=max_depth)
