from __future__ import annotations

import json
from typing import Iterable

from .tokens import Token
from .tree import Node, NonTerminal, Terminal, terminals


def format_tokens(tokens: Iterable[Token], src: str) -> str:
    return "\n".join(f"{t.kind.value}({t.text(src)})" for t in tokens) + "\n"


def format_tree(node: Node, src: str) -> str:
    """Render an indented outline, one node per line.

        Program
          Stmt
            Declaration
              CoreType `int`
              ...
    """
    # Operator chains nest one level per operator, so avoid recursion here.
    out: list[str] = []
    stack: list[tuple[Node, int]] = [(node, 0)]
    while stack:
        cur, indent = stack.pop()
        pad = "  " * indent
        if isinstance(cur, Terminal):
            out.append(f"{pad}{cur.token.kind.value} `{cur.token.text(src)}`")
            continue
        out.append(f"{pad}{cur.kind.value}")
        stack.extend((c, indent + 1) for c in reversed(cur.children))
    return "\n".join(out) + "\n"


def tree_to_jsonable(node: Node, src: str) -> dict[str, object]:
    """Nested dicts and lists ready for `json.dumps`."""
    root: dict[str, object] = {}
    # Each entry pairs a node with the (still empty) dict it fills in.
    stack: list[tuple[Node, dict[str, object]]] = [(node, root)]
    while stack:
        cur, out = stack.pop()
        if isinstance(cur, NonTerminal):
            children: list[dict[str, object]] = [{} for _ in cur.children]
            out["kind"] = cur.kind.value
            out["children"] = children
            stack.extend(zip(cur.children, children))
            continue
        out.update(_terminal_fields(cur.token, src))
    return root


def _terminal_fields(tok: Token, src: str) -> dict[str, object]:
    return {"token": tok.kind.value, "text": tok.text(src), "start": tok.start, "end": tok.end}


def tree_to_json(node: Node, src: str, *, indent: int = 2) -> str:
    """Same text as `json.dumps(tree_to_jsonable(node, src), indent=indent)`.

    The stdlib encoder recurses once per nesting level, which a long operator
    chain easily exceeds, so the document is written from an explicit stack.
    """
    out: list[str] = []
    stack: list[tuple[Node, int] | str] = [(node, 0)]
    while stack:
        item = stack.pop()
        if isinstance(item, str):
            out.append(item)
            continue

        cur, level = item
        pad = "\n" + " " * (indent * (level + 1))
        close = "\n" + " " * (indent * level) + "}"
        if isinstance(cur, Terminal):
            fields = _terminal_fields(cur.token, src)
            out.append(
                "{" + ",".join(f"{pad}{json.dumps(k)}: {json.dumps(v)}" for k, v in fields.items()) + close
            )
            continue

        out.append(f'{{{pad}"kind": {json.dumps(cur.kind.value)},{pad}"children": ')
        if not cur.children:
            out.append("[]" + close)
            continue
        inner = "\n" + " " * (indent * (level + 2))
        stack.append(pad + "]" + close)
        for i in reversed(range(len(cur.children))):
            stack.append((cur.children[i], level + 2))
            stack.append(("[" if i == 0 else ",") + inner)
    return "".join(out)


def reconstruct(node: Node, src: str) -> str:
    """Concatenate the terminal lexemes under `node` in source order."""
    return "".join(t.text(src) for t in terminals(node))
