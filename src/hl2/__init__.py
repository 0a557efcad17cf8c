from __future__ import annotations

from .api import ParseResult, lex_file, parse_file, parse_source
from .diagnostics import render_error
from .errors import LexError, ParseError
from .format import format_tokens, format_tree, reconstruct
from .lexer import lex
from .parser import parse
from .tokens import Token, TokenKind
from .tree import NodeKind, NonTerminal, Terminal

__all__ = [
    "LexError",
    "NodeKind",
    "NonTerminal",
    "ParseError",
    "ParseResult",
    "Terminal",
    "Token",
    "TokenKind",
    "format_tokens",
    "format_tree",
    "lex",
    "lex_file",
    "parse",
    "parse_file",
    "parse_source",
    "reconstruct",
    "render_error",
]
