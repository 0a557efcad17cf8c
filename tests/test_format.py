from __future__ import annotations

import json
from pathlib import Path

from hl2 import format_tokens, format_tree, lex, parse, reconstruct
from hl2.format import tree_to_json, tree_to_jsonable


FIXTURES = Path(__file__).resolve().parent / "fixtures"


def test_format_tokens() -> None:
    src = 'string s = "hi";'
    assert format_tokens(lex(src), src) == (
        "CoreType(string)\n"
        "Ident(s)\n"
        "Operator(=)\n"
        'StringLiteral("hi")\n'
        "Punctuation(;)\n"
    )


def test_format_tree() -> None:
    src = "f(a);"
    assert format_tree(parse(lex(src), src), src) == (
        "Program\n"
        "  Stmt\n"
        "    FunctionCall\n"
        "      Ident `f`\n"
        "      Punctuation `(`\n"
        "      ParameterList\n"
        "        Expression\n"
        "          Term2\n"
        "            Term1\n"
        "              Term0\n"
        "                Atom\n"
        "                  Ident `a`\n"
        "      Punctuation `)`\n"
        "  Punctuation `;`\n"
    )


def test_tree_to_jsonable() -> None:
    src = "x = 1;"
    data = tree_to_jsonable(parse(lex(src), src), src)
    assign = data["children"][0]["children"][0]
    assert assign["kind"] == "Assignment"
    assert assign["children"][0] == {"token": "Ident", "text": "x", "start": 0, "end": 1}
    assert assign["children"][1]["text"] == "="


def test_reconstruct_drops_whitespace_only() -> None:
    src = "if (a >= 2) {\n  b = a * 3;\n} else {\n  b = 0;\n}\n"
    assert reconstruct(parse(lex(src), src), src) == "if(a>=2){b=a*3;}else{b=0;}"


def test_tree_to_json_matches_json_dumps() -> None:
    src = (FIXTURES / "fizzbuzz.hl2").read_text(encoding="utf-8")
    tree = parse(lex(src), src)
    assert tree_to_json(tree, src) == json.dumps(tree_to_jsonable(tree, src), indent=2)
    assert tree_to_json(tree, src, indent=4) == json.dumps(tree_to_jsonable(tree, src), indent=4)

    empty = "if (a) { }"
    assert tree_to_json(parse(lex(empty), empty), empty) == json.dumps(
        tree_to_jsonable(parse(lex(empty), empty), empty), indent=2
    )


def test_jsonable_view_of_long_chain() -> None:
    src = "x = " + " * ".join(["2"] * 2000) + ";"
    data = tree_to_jsonable(parse(lex(src), src), src)
    node = data["children"][0]["children"][0]["children"][2]["children"][0]["children"][0]["children"][0]
    depth = 0
    while node["kind"] == "Term0":
        depth += 1
        node = node["children"][-1]
    assert depth == 2000
