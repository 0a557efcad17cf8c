from __future__ import annotations

from pathlib import Path

import pytest

from hl2 import LexError, NodeKind, ParseError, lex_file, parse_file, parse_source, reconstruct


def test_parse_source_returns_tokens_and_tree() -> None:
    src = "int x = 1 + 2;\nprint(x);\n"
    res = parse_source(src, file="x.hl2")
    assert res.file == "x.hl2"
    assert res.source == src
    assert len(res.tokens) == 12
    assert res.tree.kind is NodeKind.PROGRAM
    assert reconstruct(res.tree, src) == "intx=1+2;print(x);"


def test_parse_source_empty_is_lex_error() -> None:
    with pytest.raises(LexError) as e:
        parse_source("", file="x.hl2")
    assert "file is empty" in str(e.value)


def test_parse_source_located_lex_error() -> None:
    with pytest.raises(LexError) as e:
        parse_source('x = 1;\ny = "open', file="x.hl2")
    assert str(e.value) == "x.hl2:2 - Unexpected end of input in string literal"


def test_parse_source_parse_error() -> None:
    with pytest.raises(ParseError) as e:
        parse_source("while (x) { y = 1; ", file="x.hl2")
    assert "expected `}`" in str(e.value)


def test_parse_source_max_depth() -> None:
    src = "if (a) { if (b) { if (c) { } } }"
    parse_source(src, max_depth=3)
    with pytest.raises(ParseError):
        parse_source(src, max_depth=2)


def test_parse_file(tmp_path: Path) -> None:
    p = tmp_path / "prog.hl2"
    p.write_text("bool done = false;\nwhile (done == false) { done = true; }\n", encoding="utf-8")
    res = parse_file(p)
    assert res.file == str(p)
    assert [c.kind for c in res.tree.children if hasattr(c, "kind")] == [NodeKind.STMT, NodeKind.WHILE]


def test_parse_file_reports_file_name(tmp_path: Path) -> None:
    p = tmp_path / "bad.hl2"
    p.write_text("x = 1;\n\nx = a | b;\n", encoding="utf-8")
    with pytest.raises(LexError) as e:
        parse_file(p)
    assert e.value.file == str(p)
    assert e.value.line == 2


def test_lex_file(tmp_path: Path) -> None:
    p = tmp_path / "prog.hl2"
    p.write_text("f();", encoding="utf-8")
    src, toks = lex_file(p)
    assert src == "f();"
    assert [t.text(src) for t in toks] == ["f", "(", ")", ";"]


def test_missing_file_raises_os_error(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        parse_file(tmp_path / "missing.hl2")
