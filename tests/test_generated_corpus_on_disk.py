from __future__ import annotations

import importlib.util
import os
from pathlib import Path

from hl2 import NodeKind, parse_file, reconstruct
from hl2.testing import generate_corpus_files, generate_sources


def test_generator_is_deterministic() -> None:
    assert generate_sources(seed=7, count=20) == generate_sources(seed=7, count=20)
    assert generate_sources(seed=7, count=20) != generate_sources(seed=8, count=20)


def test_generated_corpus_on_disk_parses(tmp_path: Path) -> None:
    # Large enough to be meaningful, small enough to keep CI fast.
    seed = int(os.environ.get("HL2_CORPUS_SEED", "1"))
    count = int(os.environ.get("HL2_CORPUS_CASES", "300"))

    corpus_dir = tmp_path / "corpus"
    corpus_dir.mkdir(parents=True, exist_ok=True)

    files = generate_corpus_files(seed=seed, count=count)
    assert [rel for rel, _ in files[:2]] == ["case_000000.hl2", "case_000001.hl2"]

    seen: set[NodeKind] = set()
    for rel, src in files:
        p = corpus_dir / rel
        p.write_text(src, encoding="utf-8")
        res = parse_file(p)
        assert res.file == str(p)
        assert reconstruct(res.tree, src) == "".join(src.split())
        seen.update(c.kind for c in res.tree.children if hasattr(c, "kind"))

    # The corpus exercises every statement form at the top level.
    assert {NodeKind.STMT, NodeKind.IF, NodeKind.WHILE} <= seen


def _load_script(name: str):
    path = Path(__file__).resolve().parents[1] / "scripts" / f"{name}.py"
    spec = importlib.util.spec_from_file_location(name, path)
    assert spec is not None and spec.loader is not None
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_generate_corpus_script(tmp_path: Path) -> None:
    script = _load_script("generate_corpus")
    out_dir = tmp_path / "seed3-n5"
    out_dir.mkdir()
    (out_dir / "stale.hl2").write_text("x = ;", encoding="utf-8")

    assert script.main(["--seed", "3", "--count", "5", "--out", str(tmp_path), "--clean"]) == 0

    written = sorted(p.name for p in out_dir.glob("*.hl2"))
    assert written == [f"case_{i:06d}.hl2" for i in range(5)]
    expected = dict(generate_corpus_files(seed=3, count=5))
    for name in written:
        assert (out_dir / name).read_text(encoding="utf-8") == expected[name]
