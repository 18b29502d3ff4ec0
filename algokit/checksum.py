"""One's-complement checksums over fixed-width bit words."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

__all__ = ["ones_complement_sum", "checksum", "main"]


def _parse_bits(word: Iterable) -> List[int]:
    bits = [int(bit) for bit in word]
    if any(bit not in (0, 1) for bit in bits):
        raise ValueError("bits must be 0 or 1")
    return bits


def ones_complement_sum(words: Iterable[Iterable]) -> List[int]:
    """Add equal-width bit words with end-around carry, most significant bit first.

    Raises ValueError for no words, empty or unequal words, or non-bit values.
    """
    rows = [_parse_bits(word) for word in words]
    if not rows:
        raise ValueError("at least one word is needed")
    width = len(rows[0])
    if width == 0:
        raise ValueError("words must not be empty")
    if any(len(row) != width for row in rows):
        raise ValueError("all words must have the same width")
    mask = (1 << width) - 1
    total = 0
    for row in rows:
        total += int("".join(map(str, row)), 2)
        if total > mask:
            total = (total & mask) + 1
    return [int(bit) for bit in format(total, f"0{width}b")]


def checksum(words: Iterable[Iterable]) -> List[int]:
    """The complement of the one's-complement sum of ``words``."""
    return [1 - bit for bit in ones_complement_sum(words)]


def _render(bits: Sequence[int]) -> str:
    return "".join(map(str, bits))


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read bits from standard input and report their sum and its complement."""
    parser = argparse.ArgumentParser(
        prog="checksum",
        description="Compute a one's-complement checksum of bits read from standard input.",
    )
    parser.add_argument("-o", "--output", help="write the report to this file")
    parser.add_argument("--words", type=int, default=4, help="number of words")
    parser.add_argument("--width", type=int, default=8, help="bits per word")
    args = parser.parse_args(argv)
    if args.words < 1 or args.width < 1:
        parser.error("--words and --width must be positive")

    bits = sys.stdin.read().split()
    expected = args.words * args.width
    if len(bits) != expected:
        parser.error(f"expected {expected} bits, got {len(bits)}")
    words = [bits[start:start + args.width] for start in range(0, expected, args.width)]
    try:
        total = ones_complement_sum(words)
    except ValueError as error:
        parser.error(str(error))
    complement = [1 - bit for bit in total]

    report = f"the final result\n{_render(total)}\ncompliment\n{_render(complement)}\n"
    if args.output:
        Path(args.output).write_text(report)
    else:
        sys.stdout.write(report)
    return 0