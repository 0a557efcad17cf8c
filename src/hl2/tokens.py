from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TokenKind(str, Enum):
    IDENT = "Ident"
    PUNCTUATION = "Punctuation"
    KEYWORD = "Keyword"
    OPERATOR = "Operator"
    CORE_TYPE = "CoreType"
    NUMBER_LITERAL = "NumberLiteral"
    STRING_LITERAL = "StringLiteral"
    BOOLEAN_LITERAL = "BooleanLiteral"


@dataclass(frozen=True, slots=True)
class Token:
    """A half-open range [start, end) of the source, tagged with its kind.

    Tokens never hold their text; slice the source they were lexed from.
    """

    start: int
    end: int
    kind: TokenKind

    def text(self, src: str) -> str:
        return src[self.start : self.end]

    def __repr__(self) -> str:
        return f"Token({self.kind.value}, {self.start}..{self.end})"
