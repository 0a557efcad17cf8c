from __future__ import annotations


def line_index(src: str, offset: int) -> int:
    """0-based line containing `offset`, found by counting newlines before it."""
    if offset < 0:
        raise ValueError(f"negative offset: {offset}")
    return src.count("\n", 0, offset)


def line_number(src: str, offset: int) -> int:
    """1-based line for user-facing messages."""
    return line_index(src, offset) + 1
