import pytest

from algokit.matrix import (
    QuadNode,
    build_quad_tree,
    is_valid_placement,
    solve_sudoku,
    to_sparse,
    transpose,
)

PUZZLE = [
    "53..7....",
    "6..195...",
    ".98....6.",
    "8...6...3",
    "4..8.3..1",
    "7...2...6",
    ".6....28.",
    "...419..5",
    "....8..79",
]


def test_transpose_row_to_column():
    assert transpose([[1, 2, 3]]) == [[1], [2], [3]]


@pytest.mark.parametrize(
    "matrix", [[[1, 2], [3, 4]], [[1, 2, 3], [4, 5, 6]], [[7]], [[1], [2], [3]]]
)
def test_transpose_twice_is_identity(matrix):
    flipped = transpose(matrix)
    assert len(flipped) == len(matrix[0])
    assert all(len(row) == len(matrix) for row in flipped)
    assert transpose(flipped) == matrix


def test_transpose_element_positions():
    matrix = [[1, 2, 3], [4, 5, 6]]
    flipped = transpose(matrix)
    for i, row in enumerate(matrix):
        for j, value in enumerate(row):
            assert flipped[j][i] == value


def test_transpose_empty():
    assert transpose([]) == []


def test_transpose_ragged_raises():
    with pytest.raises(ValueError):
        transpose([[1, 2], [3]])


def test_to_sparse_round_trip():
    matrix = [[0, 0, 3], [4, 0, 0], [0, 5, 0], [0, 0, 0]]
    header, *entries = to_sparse(matrix)
    assert header == (4, 3, 3)
    rebuilt = [[0] * header[1] for _ in range(header[0])]
    for i, j, value in entries:
        rebuilt[i][j] = value
    assert rebuilt == matrix
    assert entries == sorted(entries)


def test_to_sparse_all_zero():
    assert to_sparse([[0, 0], [0, 0]]) == [(2, 2, 0)]


def test_to_sparse_ragged_raises():
    with pytest.raises(ValueError):
        to_sparse([[1], [1, 2]])


def test_is_valid_placement():
    assert is_valid_placement(PUZZLE, 0, 2, "5") is False  # row
    assert is_valid_placement(PUZZLE, 0, 2, "8") is False  # column
    assert is_valid_placement(PUZZLE, 0, 2, "6") is False  # box
    assert is_valid_placement(PUZZLE, 0, 2, "1") is True


def test_solve_sudoku_gives_valid_completion():
    solved = solve_sudoku(PUZZLE)
    digits = set("123456789")
    for r in range(9):
        for c in range(9):
            if PUZZLE[r][c] != ".":
                assert solved[r][c] == PUZZLE[r][c]
    for row in solved:
        assert set(row) == digits
    for column in zip(*solved):
        assert set(column) == digits
    for br in range(0, 9, 3):
        for bc in range(0, 9, 3):
            box = {solved[br + i][bc + j] for i in range(3) for j in range(3)}
            assert box == digits
    assert PUZZLE[0] == "53..7...."


def test_solve_sudoku_unsolvable():
    board = ["12345678.", "........9"] + ["." * 9] * 7
    with pytest.raises(ValueError):
        solve_sudoku(board)


def test_solve_sudoku_malformed():
    with pytest.raises(ValueError):
        solve_sudoku(["123"])
    with pytest.raises(ValueError):
        solve_sudoku(["x" * 9] * 9)


def test_quad_tree_uniform_grid_is_leaf():
    node = build_quad_tree([[1] * 4 for _ in range(4)])
    assert node == QuadNode(True, True)


def test_quad_tree_mixed_grid():
    node = build_quad_tree([[1, 0], [0, 1]])
    assert node.is_leaf is False
    assert node.top_left == QuadNode(True, True)
    assert node.top_right == QuadNode(False, True)
    assert node.bottom_left == QuadNode(False, True)
    assert node.bottom_right == QuadNode(True, True)


def test_quad_tree_collapses_uniform_quadrants():
    grid = [
        [0, 0, 1, 1],
        [0, 0, 1, 1],
        [1, 1, 1, 0],
        [1, 1, 0, 1],
    ]
    node = build_quad_tree(grid)
    assert node.top_left == QuadNode(False, True)
    assert node.top_right == QuadNode(True, True)
    assert node.bottom_left == QuadNode(True, True)
    assert node.bottom_right.is_leaf is False


def test_quad_tree_empty_grid():
    assert build_quad_tree([]) is None


def test_quad_tree_rejects_bad_shapes():
    with pytest.raises(ValueError):
        build_quad_tree([[1, 0, 1]] * 3)
    with pytest.raises(ValueError):
        build_quad_tree([[1, 0], [1]])