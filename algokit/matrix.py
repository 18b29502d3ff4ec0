"""Grid algorithms: transposition, sparse triplets, sudoku solving and quad trees."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

__all__ = [
    "QuadNode",
    "transpose",
    "to_sparse",
    "is_valid_placement",
    "solve_sudoku",
    "build_quad_tree",
]

_DIGITS = "123456789"
_EMPTY = "."


def _rectangular(matrix: Iterable[Iterable]) -> List[list]:
    rows = [list(row) for row in matrix]
    if rows and any(len(row) != len(rows[0]) for row in rows):
        raise ValueError("all rows must have the same length")
    return rows


def transpose(matrix: Iterable[Iterable]) -> List[list]:
    """Swap rows and columns of a rectangular matrix.

    Raises ValueError for rows of unequal length.
    """
    rows = _rectangular(matrix)
    return [list(column) for column in zip(*rows)]


def to_sparse(matrix: Iterable[Iterable]) -> List[Tuple[int, int, object]]:
    """Triplet form: ``(rows, columns, nonzero count)`` then ``(row, column, value)`` per nonzero.

    Raises ValueError for rows of unequal length.
    """
    rows = _rectangular(matrix)
    entries = [
        (i, j, value)
        for i, row in enumerate(rows)
        for j, value in enumerate(row)
        if value != 0
    ]
    width = len(rows[0]) if rows else 0
    return [(len(rows), width, len(entries)), *entries]


def is_valid_placement(board: Sequence[Sequence[str]], row: int, col: int, digit: str) -> bool:
    """Report whether ``digit`` appears in neither the row, the column nor the 3x3 box."""
    digit = str(digit)
    box_row, box_col = 3 * (row // 3), 3 * (col // 3)
    for i in range(9):
        if board[i][col] == digit or board[row][i] == digit:
            return False
        if board[box_row + i // 3][box_col + i % 3] == digit:
            return False
    return True


def _sudoku_grid(board: Iterable[Iterable[str]]) -> List[List[str]]:
    grid = [[str(cell) for cell in row] for row in board]
    if len(grid) != 9 or any(len(row) != 9 for row in grid):
        raise ValueError("a sudoku board must be 9 by 9")
    if any(cell not in _DIGITS and cell != _EMPTY for row in grid for cell in row):
        raise ValueError("cells must be digits 1-9 or '.'")
    return grid


def solve_sudoku(board: Iterable[Iterable[str]]) -> List[List[str]]:
    """Fill every '.' cell by backtracking and return the solved board.

    The input is left untouched. Raises ValueError for a malformed board or
    one that has no solution.
    """
    grid = _sudoku_grid(board)
    empties = [
        (r, c) for r, row in enumerate(grid) for c, cell in enumerate(row) if cell == _EMPTY
    ]

    def fill(position: int) -> bool:
        if position == len(empties):
            return True
        r, c = empties[position]
        for digit in _DIGITS:
            if is_valid_placement(grid, r, c, digit):
                grid[r][c] = digit
                if fill(position + 1):
                    return True
                grid[r][c] = _EMPTY
        return False

    if not fill(0):
        raise ValueError("the puzzle has no solution")
    return grid


@dataclass
class QuadNode:
    """A quad-tree node; leaves carry a value, inner nodes carry four children."""

    val: bool
    is_leaf: bool
    top_left: Optional["QuadNode"] = None
    top_right: Optional["QuadNode"] = None
    bottom_left: Optional["QuadNode"] = None
    bottom_right: Optional["QuadNode"] = None


def build_quad_tree(grid: Iterable[Iterable[int]]) -> Optional[QuadNode]:
    """Build a quad tree of a square 0/1 grid whose side is a power of two.

    Uniform quadrants collapse into leaves. An empty grid gives None.
    Raises ValueError for a grid that is not square or not a power of two wide.
    """
    rows = [list(row) for row in grid]
    if not rows:
        return None
    size = len(rows)
    if any(len(row) != size for row in rows):
        raise ValueError("the grid must be square")
    if size & (size - 1):
        raise ValueError("the grid side must be a power of two")

    def build(x: int, y: int, length: int) -> QuadNode:
        if length == 1:
            return QuadNode(rows[x][y] == 1, True)
        half = length // 2
        children = (
            build(x, y, half),
            build(x, y + half, half),
            build(x + half, y, half),
            build(x + half, y + half, half),
        )
        if all(child.is_leaf for child in children) and len({c.val for c in children}) == 1:
            return QuadNode(children[0].val, True)
        return QuadNode(True, False, *children)

    return build(0, 0, size)