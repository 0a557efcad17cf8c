from __future__ import annotations

import argparse
import timeit
from pathlib import Path

from hl2 import lex, parse


DEFAULT_SOURCE = Path(__file__).resolve().parent.parent / "tests" / "fixtures" / "fizzbuzz.hl2"


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="bench_lex")
    ap.add_argument("file", nargs="?", default=str(DEFAULT_SOURCE))
    ap.add_argument("--number", type=int, default=2000)
    ap.add_argument("--parse", action="store_true", help="Time lex + parse instead of lex only")
    args = ap.parse_args(argv)

    src = Path(args.file).read_text(encoding="utf-8")
    if args.parse:
        stmt = lambda: parse(lex(src, args.file), src)  # noqa: E731
    else:
        stmt = lambda: lex(src, args.file)  # noqa: E731

    total = timeit.timeit(stmt, number=args.number)
    print(f"{args.number} runs, {total / args.number * 1e6:.1f} us/run")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
