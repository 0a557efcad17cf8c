"""Recursive descent parser producing a concrete parse tree.

One method per grammar rule (see `hl2.language.GRAMMAR`). Each rule decides
between alternatives by peeking at most two tokens; nothing is consumed
speculatively. The first error aborts the parse.

The binary operator rules are right-recursive, so `1 - 2 - 3` is grouped as
`1 - (2 - 3)`:

    Term1(Term0(1), -, Term1(Term0(2), -, Term1(Term0(3))))

They are built with a loop and a right fold instead of real recursion, which
yields the same tree without growing the stack on long operator chains.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Callable, Iterator, Sequence

from .errors import ParseError
from .language import OP0, OP1, OP2, OP3
from .tokens import Token, TokenKind
from .tree import NodeKind, NonTerminal, Node, Terminal


logger = logging.getLogger(__name__)

# Blocks and nested calls recurse on the Python stack. A nested call is the
# costliest level at about a dozen frames, so 64 levels stay well inside the
# default recursion limit of 1000.
DEFAULT_MAX_DEPTH = 64

_LITERALS = frozenset(
    {TokenKind.NUMBER_LITERAL, TokenKind.STRING_LITERAL, TokenKind.BOOLEAN_LITERAL}
)

_KIND_NAMES = {
    TokenKind.IDENT: "an identifier",
    TokenKind.CORE_TYPE: "a type name",
    TokenKind.NUMBER_LITERAL: "a number",
    TokenKind.STRING_LITERAL: "a string",
    TokenKind.BOOLEAN_LITERAL: "a boolean",
    TokenKind.KEYWORD: "a keyword",
    TokenKind.OPERATOR: "an operator",
    TokenKind.PUNCTUATION: "punctuation",
}


@dataclass(slots=True)
class Parser:
    tokens: Sequence[Token]
    src: str
    max_depth: int = DEFAULT_MAX_DEPTH
    pos: int = 0
    depth: int = 0

    # Cursor primitives

    def peek(self, n: int = 0) -> Token | None:
        j = self.pos + n
        if j >= len(self.tokens):
            return None
        return self.tokens[j]

    def text(self, tok: Token) -> str:
        return tok.text(self.src)

    def at(self, kind: TokenKind, lexeme: str | None = None, n: int = 0) -> bool:
        tok = self.peek(n)
        if tok is None or tok.kind is not kind:
            return False
        return lexeme is None or self.text(tok) == lexeme

    def advance(self) -> Terminal:
        tok = self.peek()
        if tok is None:
            raise ParseError("Unexpected end of input")
        self.pos += 1
        return Terminal(tok)

    def expect(self, kind: TokenKind, lexeme: str | None = None) -> Terminal:
        """Consume one token of `kind` (and `lexeme`, if given) or fail."""
        want = f"`{lexeme}`" if lexeme is not None else _KIND_NAMES[kind]
        tok = self.peek()
        if tok is None:
            raise ParseError(f"Unexpected end of input, expected {want}")
        if not self.at(kind, lexeme):
            raise ParseError(f"Expected {want}, found `{self.text(tok)}`", tok)
        return self.advance()

    @contextmanager
    def nested(self, tok: Token) -> Iterator[None]:
        self.depth += 1
        try:
            if self.depth > self.max_depth:
                raise ParseError(f"Nesting too deep (limit is {self.max_depth})", tok)
            yield
        finally:
            self.depth -= 1

    # Entry point

    def parse(self) -> NonTerminal:
        if not self.tokens:
            raise ParseError("No tokens to parse")

        program = self.parse_program()
        tok = self.peek()
        if tok is not None:
            raise ParseError(f"Unexpected `{self.text(tok)}` outside of any block", tok)

        logger.debug("parsed %d tokens", len(self.tokens))
        return program

    # Statements

    def parse_program(self) -> NonTerminal:
        children: list[Node] = []
        while self.peek() is not None and not self.at(TokenKind.PUNCTUATION, "}"):
            if self.at(TokenKind.KEYWORD, "if"):
                children.append(self.parse_if())
            elif self.at(TokenKind.KEYWORD, "while"):
                children.append(self.parse_while())
            else:
                children.append(self.parse_stmt())
                children.append(self.expect(TokenKind.PUNCTUATION, ";"))
        return NonTerminal(NodeKind.PROGRAM, tuple(children))

    def parse_stmt(self) -> NonTerminal:
        tok = self.peek()
        if tok is None:
            raise ParseError("Unexpected end of input, expected a statement")

        if tok.kind is TokenKind.CORE_TYPE:
            inner = self.parse_declaration()
        elif tok.kind is TokenKind.IDENT:
            nxt = self.peek(1)
            if self.at(TokenKind.PUNCTUATION, "(", n=1):
                inner = self.parse_function_call()
            elif self.at(TokenKind.OPERATOR, "=", n=1):
                inner = self.parse_assignment()
            elif nxt is None:
                raise ParseError(
                    f"Unexpected end of input after `{self.text(tok)}`, expected `=` or `(`"
                )
            else:
                raise ParseError(
                    f"Expected `=` or `(` after `{self.text(tok)}`, found `{self.text(nxt)}`",
                    nxt,
                )
        else:
            raise ParseError(
                "Expected a declaration, assignment or function call, "
                f"found `{self.text(tok)}`",
                tok,
            )
        return NonTerminal(NodeKind.STMT, (inner,))

    def parse_declaration(self) -> NonTerminal:
        return NonTerminal(
            NodeKind.DECLARATION,
            (
                self.expect(TokenKind.CORE_TYPE),
                self.expect(TokenKind.IDENT),
                self.expect(TokenKind.OPERATOR, "="),
                self.parse_expression(),
            ),
        )

    def parse_assignment(self) -> NonTerminal:
        return NonTerminal(
            NodeKind.ASSIGNMENT,
            (
                self.expect(TokenKind.IDENT),
                self.expect(TokenKind.OPERATOR, "="),
                self.parse_expression(),
            ),
        )

    def parse_function_call(self) -> NonTerminal:
        name = self.expect(TokenKind.IDENT)
        with self.nested(name.token):
            return NonTerminal(
                NodeKind.FUNCTION_CALL,
                (
                    name,
                    self.expect(TokenKind.PUNCTUATION, "("),
                    self.parse_parameter_list(),
                    self.expect(TokenKind.PUNCTUATION, ")"),
                ),
            )

    def parse_parameter_list(self) -> NonTerminal:
        children: list[Node] = []
        while not self.at(TokenKind.PUNCTUATION, ")"):
            if self.peek() is None:
                raise ParseError("Unexpected end of input, expected `)`")
            if self.at(TokenKind.PUNCTUATION, ","):
                children.append(self.advance())
            else:
                children.append(self.parse_expression())
        return NonTerminal(NodeKind.PARAMETER_LIST, tuple(children))

    def _block(self) -> list[Node]:
        return [
            self.expect(TokenKind.PUNCTUATION, "{"),
            self.parse_program(),
            self.expect(TokenKind.PUNCTUATION, "}"),
        ]

    def _condition(self) -> list[Node]:
        return [
            self.expect(TokenKind.PUNCTUATION, "("),
            self.parse_expression(),
            self.expect(TokenKind.PUNCTUATION, ")"),
        ]

    def parse_if(self) -> NonTerminal:
        kw = self.expect(TokenKind.KEYWORD, "if")
        with self.nested(kw.token):
            children: list[Node] = [kw, *self._condition(), *self._block()]
            if self.at(TokenKind.KEYWORD, "else"):
                children.append(self.advance())
                children.extend(self._block())
        return NonTerminal(NodeKind.IF, tuple(children))

    def parse_while(self) -> NonTerminal:
        kw = self.expect(TokenKind.KEYWORD, "while")
        with self.nested(kw.token):
            children: list[Node] = [kw, *self._condition(), *self._block()]
        return NonTerminal(NodeKind.WHILE, tuple(children))

    # Expressions

    def _binary(
        self,
        kind: NodeKind,
        operand: Callable[[], NonTerminal],
        ops: frozenset[str],
    ) -> NonTerminal:
        operands = [operand()]
        operators: list[Terminal] = []
        while self.at(TokenKind.OPERATOR) and self.text(self.tokens[self.pos]) in ops:
            operators.append(self.advance())
            operands.append(operand())

        # Fold from the right: a op (b op (c)).
        node = NonTerminal(kind, (operands.pop(),))
        while operators:
            node = NonTerminal(kind, (operands.pop(), operators.pop(), node))
        return node

    def parse_expression(self) -> NonTerminal:
        return self._binary(NodeKind.EXPRESSION, self.parse_term2, OP3)

    def parse_term2(self) -> NonTerminal:
        return self._binary(NodeKind.TERM2, self.parse_term1, OP2)

    def parse_term1(self) -> NonTerminal:
        return self._binary(NodeKind.TERM1, self.parse_term0, OP1)

    def parse_term0(self) -> NonTerminal:
        return self._binary(NodeKind.TERM0, self.parse_atom, OP0)

    def parse_atom(self) -> NonTerminal:
        tok = self.peek()
        if tok is None:
            raise ParseError("Unexpected end of input, expected an expression")

        if tok.kind is TokenKind.IDENT:
            if self.at(TokenKind.PUNCTUATION, "(", n=1):
                child: Node = self.parse_function_call()
            else:
                child = self.advance()
        elif tok.kind in _LITERALS:
            child = self.advance()
        else:
            raise ParseError(
                f"Expected an identifier, literal or function call, found `{self.text(tok)}`",
                tok,
            )
        return NonTerminal(NodeKind.ATOM, (child,))


def parse(
    tokens: Sequence[Token], src: str, *, max_depth: int = DEFAULT_MAX_DEPTH
) -> NonTerminal:
    """Parse a token list lexed from `src` into a `Program` node."""
    return Parser(tokens=tokens, src=src, max_depth=max_depth).parse()
