"""Star triangles and an interactive prompt that prints them."""

from __future__ import annotations

import argparse
import sys
from typing import Iterable, Iterator, List, Optional, Sequence

__all__ = ["triangle", "reverse_triangle", "main"]

_LINES_PROMPT = "Enter no of lines you want in pattern "
_SHAPE_PROMPT = "Enter 0 if you want triangle\nEnter 1 if you want reverse triangle "
_CONTINUE_PROMPT = "Continue printing another pattern?? -- Press any no\nExit Program -- 0 "


def triangle(lines: int) -> List[str]:
    """Rows of stars growing from one to ``lines``.

    Raises ValueError when ``lines`` is less than one.
    """
    if lines < 1:
        raise ValueError("the number of lines must be positive")
    return ["*" * width for width in range(1, lines + 1)]


def reverse_triangle(lines: int) -> List[str]:
    """Rows of stars shrinking from ``lines`` to one.

    Raises ValueError when ``lines`` is less than one.
    """
    return triangle(lines)[::-1]


def _tokens(stream: Iterable[str]) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _as_int(token: str) -> Optional[int]:
    try:
        return int(token)
    except ValueError:
        return None


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Ask for sizes and shapes on standard input and print star triangles until told to stop."""
    parser = argparse.ArgumentParser(
        prog="patterns",
        description="Print star triangles interactively.",
    )
    parser.parse_args(argv)

    tokens = _tokens(sys.stdin)
    out = sys.stdout
    while True:
        out.write(_LINES_PROMPT)
        token = next(tokens, None)
        if token is None:
            break
        lines = _as_int(token)
        if lines is not None and lines > 0:
            out.write(_SHAPE_PROMPT)
            token = next(tokens, None)
            if token is None:
                break
            shape = _as_int(token)
            if shape == 0:
                out.write("".join(row + "\n" for row in triangle(lines)))
            elif shape == 1:
                out.write("".join(row + "\n" for row in reverse_triangle(lines)))
            else:
                out.write("Invalid Input")
        else:
            out.write("Invalid input")

        out.write(_CONTINUE_PROMPT)
        token = next(tokens, None)
        if token is None:
            break
        if _as_int(token) == 0:
            out.write("Thanks For Using Our Program!!!\n")
            break
    out.flush()
    return 0