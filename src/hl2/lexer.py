from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from .errors import LexError
from .language import (
    BOOLEAN_LITERALS,
    CORE_TYPES,
    DOUBLED_OPERATORS,
    EQ_OPERATORS,
    KEYWORDS,
    PUNCTUATION,
    SINGLE_OPERATORS,
)
from .tokens import Token, TokenKind


logger = logging.getLogger(__name__)

_DIGITS = frozenset("0123456789")


@dataclass(slots=True)
class _Cursor:
    src: str
    i: int = 0
    line: int = 0

    def eof(self) -> bool:
        return self.i >= len(self.src)

    def peek(self, n: int = 0) -> str:
        j = self.i + n
        if j >= len(self.src):
            return ""
        return self.src[j]

    def startswith(self, prefix: str) -> bool:
        return self.src.startswith(prefix, self.i)

    def advance(self, n: int = 1) -> None:
        for _ in range(n):
            if self.eof():
                return
            if self.src[self.i] == "\n":
                self.line += 1
            self.i += 1

    def take(self, kind: TokenKind, n: int) -> Token:
        start = self.i
        self.advance(n)
        return Token(start=start, end=self.i, kind=kind)


# Each recognizer either consumes one token and returns it, returns None
# without moving the cursor, or raises an unlocated LexError.
Recognizer = Callable[[_Cursor], "Token | None"]


def _try_punctuation(cur: _Cursor) -> Token | None:
    if cur.peek() in PUNCTUATION:
        return cur.take(TokenKind.PUNCTUATION, 1)
    return None


def _try_number(cur: _Cursor) -> Token | None:
    ch = cur.peek()
    if ch == "-" and cur.peek(1) in _DIGITS:
        n = 1
    elif ch in _DIGITS:
        n = 0
    else:
        return None

    seen_dot = False
    while True:
        c = cur.peek(n)
        if c in _DIGITS:
            n += 1
        elif c == ".":
            if seen_dot:
                raise LexError("Number literal contains more than one `.`")
            seen_dot = True
            n += 1
        elif c.isalpha():
            raise LexError("Identifier cannot start with a digit")
        else:
            break

    if cur.peek(n - 1) == ".":
        raise LexError("Number literal cannot end with `.`")
    return cur.take(TokenKind.NUMBER_LITERAL, n)


def _try_operator(cur: _Cursor) -> Token | None:
    ch = cur.peek()
    if ch in SINGLE_OPERATORS:
        return cur.take(TokenKind.OPERATOR, 1)

    if ch in EQ_OPERATORS:
        nxt = cur.peek(1)
        if nxt == "":
            raise LexError(f"Unexpected end of input at operator `{ch}`")
        return cur.take(TokenKind.OPERATOR, 2 if nxt == "=" else 1)

    if ch in DOUBLED_OPERATORS:
        # A lone `&`/`|`, including one right before end of input.
        if cur.peek(1) != ch:
            raise LexError(f"Bitwise `{ch}` operator is not supported")
        return cur.take(TokenKind.OPERATOR, 2)

    return None


def _try_prefix(cur: _Cursor, words: tuple[str, ...], kind: TokenKind) -> Token | None:
    # Plain prefix match: `trueish` lexes as `true` followed by `ish`.
    for word in words:
        if cur.startswith(word):
            return cur.take(kind, len(word))
    return None


def _try_boolean(cur: _Cursor) -> Token | None:
    return _try_prefix(cur, BOOLEAN_LITERALS, TokenKind.BOOLEAN_LITERAL)


def _try_core_type(cur: _Cursor) -> Token | None:
    return _try_prefix(cur, CORE_TYPES, TokenKind.CORE_TYPE)


def _try_keyword(cur: _Cursor) -> Token | None:
    for word in KEYWORDS:
        if cur.startswith(word):
            follow = cur.peek(len(word))
            if follow.isspace() or follow == "(":
                return cur.take(TokenKind.KEYWORD, len(word))
            return None
    return None


def _try_string(cur: _Cursor) -> Token | None:
    if cur.peek() != '"':
        return None

    start = cur.i
    cur.advance()
    escaped = False
    while not cur.eof():
        c = cur.peek()
        cur.advance()
        if escaped:
            escaped = False
        elif c == "\\":
            escaped = True
        elif c == '"':
            return Token(start=start, end=cur.i, kind=TokenKind.STRING_LITERAL)
    raise LexError("Unexpected end of input in string literal")


def _try_ident(cur: _Cursor) -> Token | None:
    if not cur.peek().isalpha():
        return None
    n = 1
    while cur.peek(n).isalnum():
        n += 1
    return cur.take(TokenKind.IDENT, n)


# Several recognizers share prefixes, so this order is part of the language.
RECOGNIZERS: tuple[Recognizer, ...] = (
    _try_punctuation,
    _try_number,
    _try_operator,
    _try_boolean,
    _try_core_type,
    _try_keyword,
    _try_string,
    _try_ident,
)


def _lex_token(cur: _Cursor) -> Token:
    for recognize in RECOGNIZERS:
        tok = recognize(cur)
        if tok is not None:
            return tok
    raise LexError(f"Unknown token `{cur.peek()}`")


def lex(src: str, file: str = "<memory>") -> list[Token]:
    """Split `src` into tokens.

    Raises an unlocated LexError for empty or whitespace-only input, and a
    LexError located at `file` and the 0-based line of the offending token
    otherwise.
    """
    if not src:
        raise LexError("file is empty")

    cur = _Cursor(src=src)
    tokens: list[Token] = []

    while not cur.eof():
        if cur.peek().isspace():
            cur.advance()
            continue

        line = cur.line
        try:
            tokens.append(_lex_token(cur))
        except LexError as e:
            raise e.at(file, line) from None

    if not tokens:
        raise LexError("file contains no tokens")

    logger.debug("lexed %d tokens from %s", len(tokens), file)
    return tokens
