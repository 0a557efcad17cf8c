from __future__ import annotations

import argparse
import logging
from collections import Counter
from pathlib import Path

from hl2 import NonTerminal, parse_source
from hl2.testing import generate_corpus_files


logger = logging.getLogger("generate_corpus")


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="generate_corpus", description="Write generated .hl2 programs to disk")
    ap.add_argument("--seed", type=int, default=1)
    ap.add_argument("--count", type=int, default=1000)
    ap.add_argument("--out", default="tests/fixtures/generated_corpus")
    ap.add_argument("--clean", action="store_true", help="Remove stale .hl2 files from the output directory")
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(message)s")

    out_dir = Path(args.out).resolve() / f"seed{args.seed}-n{args.count}"
    out_dir.mkdir(parents=True, exist_ok=True)
    if args.clean:
        for stale in out_dir.glob("*.hl2"):
            stale.unlink()

    # Every file is parsed before it is written, so a corpus on disk is
    # always valid input.
    kinds: Counter[str] = Counter()
    for rel, src in generate_corpus_files(seed=args.seed, count=args.count):
        res = parse_source(src, file=rel)
        kinds.update(c.kind.value for c in res.tree.children if isinstance(c, NonTerminal))
        (out_dir / rel).write_text(src, encoding="utf-8")

    logger.info("wrote %d files to %s", args.count, out_dir)
    for kind, n in sorted(kinds.items()):
        logger.info("  %-6s %d", kind, n)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
