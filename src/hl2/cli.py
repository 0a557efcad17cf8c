from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .api import parse_source
from .diagnostics import render_error, render_message
from .errors import LexError, ParseError
from .format import format_tokens, format_tree, tree_to_json
from .language import GRAMMAR


def _read_source(file: str, *, color: bool) -> str | None:
    try:
        return Path(file).read_text(encoding="utf-8")
    except FileNotFoundError:
        msg = f"File `{file}` not found"
    except PermissionError:
        msg = f"No read permissions for `{file}`"
    except (OSError, UnicodeDecodeError):
        msg = f"Unknown error when reading `{file}`"
    print(render_message(msg, color=color), file=sys.stderr)
    return None


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="hl2c", description="Lex and parse .hl2 files")
    ap.add_argument("file", nargs="?", help="The file to compile")
    ap.add_argument("--tokens", action="store_true", help="Also print the token stream")
    ap.add_argument("--json", action="store_true", help="Print the parse tree as JSON")
    ap.add_argument("--grammar", action="store_true", help="Print the grammar and exit")
    ap.add_argument("--no-color", action="store_true", help="Never color error output")
    ap.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = ap.parse_args(argv)

    if args.grammar:
        sys.stdout.write(GRAMMAR)
        return 0
    if args.file is None:
        ap.error("the following arguments are required: file")

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    color = not args.no_color and sys.stderr.isatty()

    src = _read_source(args.file, color=color)
    if src is None:
        return 2

    try:
        res = parse_source(src, file=args.file)
    except (LexError, ParseError) as e:
        print(render_error(e, src, args.file, color=color), file=sys.stderr)
        return 1

    if args.tokens:
        sys.stdout.write(format_tokens(res.tokens, src))
    if args.json:
        print(tree_to_json(res.tree, src))
    else:
        sys.stdout.write(format_tree(res.tree, src))
    return 0
