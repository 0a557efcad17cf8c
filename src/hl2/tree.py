from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator

from .tokens import Token


class NodeKind(str, Enum):
    PROGRAM = "Program"
    STMT = "Stmt"
    DECLARATION = "Declaration"
    ASSIGNMENT = "Assignment"
    FUNCTION_CALL = "FunctionCall"
    PARAMETER_LIST = "ParameterList"
    IF = "If"
    WHILE = "While"
    EXPRESSION = "Expression"
    TERM2 = "Term2"
    TERM1 = "Term1"
    TERM0 = "Term0"
    ATOM = "Atom"


@dataclass(frozen=True, slots=True)
class Terminal:
    """A parse tree leaf wrapping exactly one token."""

    token: Token

    @property
    def children(self) -> tuple["Node", ...]:
        return ()


@dataclass(frozen=True, slots=True)
class NonTerminal:
    """An interior node for one grammar rule.

    Children keep the rule's punctuation and operator terminals, so the tree
    covers every token of its source range.
    """

    kind: NodeKind
    children: tuple["Node", ...]


Node = Terminal | NonTerminal


def walk(node: Node) -> Iterator[Node]:
    """Yield `node` and its descendants in pre-order."""
    stack: list[Node] = [node]
    while stack:
        cur = stack.pop()
        yield cur
        stack.extend(reversed(cur.children))


def terminals(node: Node) -> Iterator[Token]:
    """Yield the tokens of all terminals in source order."""
    for n in walk(node):
        if isinstance(n, Terminal):
            yield n.token
