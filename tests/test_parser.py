import numpy as np
import pandas as pd
import pytest

from sudoku_solver.grid.parser import (
    empty_board,
    format_board,
    normalize_board,
    normalize_cell,
    parse_board_string,
)


CLASSIC_STRING = (
    "53..7...."
    "6..195..."
    ".98....6."
    "8...6...3"
    "4..8.3..1"
    "7...2...6"
    ".6....28."
    "...419..5"
    "....8..79"
)


def test_normalize_cell_blanks():
    assert normalize_cell(None) == 0
    assert normalize_cell("") == 0
    assert normalize_cell(".") == 0
    assert normalize_cell(float("nan")) == 0
    assert normalize_cell(" 7 ") == 7
    assert normalize_cell(np.int64(3)) == 3


@pytest.mark.parametrize("value", [10, -1, "x", 2.5])
def test_normalize_cell_rejects_invalid(value):
    with pytest.raises(ValueError):
        normalize_cell(value)


def test_normalize_board_from_lists(classic_puzzle):
    grid = normalize_board(classic_puzzle)
    assert grid.shape == (9, 9)
    assert grid[0, 0] == 5
    assert grid.tolist() == classic_puzzle


def test_normalize_board_does_not_alias_input(classic_puzzle):
    grid = normalize_board(classic_puzzle)
    grid[0, 2] = 4
    assert classic_puzzle[0][2] == 0


def test_normalize_board_from_dataframe(classic_puzzle):
    df = pd.DataFrame(classic_puzzle).replace(0, "")
    grid = normalize_board(df)
    assert grid.tolist() == classic_puzzle


def test_normalize_board_rejects_wrong_shape():
    with pytest.raises(ValueError):
        normalize_board([[0] * 9 for _ in range(8)])
    with pytest.raises(ValueError):
        normalize_board([[0] * 8 for _ in range(9)])
    with pytest.raises(ValueError):
        normalize_board(pd.DataFrame([[0] * 4 for _ in range(4)]))


def test_parse_board_string(classic_puzzle):
    assert parse_board_string(CLASSIC_STRING).tolist() == classic_puzzle


def test_parse_board_string_ignores_separators(classic_puzzle):
    text = "\n".join(CLASSIC_STRING[i:i + 9] for i in range(0, 81, 9))
    assert parse_board_string(text).tolist() == classic_puzzle


def test_parse_board_string_wrong_length():
    with pytest.raises(ValueError):
        parse_board_string("123")


def test_empty_board():
    board = empty_board()
    assert board.shape == (9, 9)
    assert not board.any()


def test_format_board(classic_puzzle):
    text = format_board(classic_puzzle)
    lines = text.splitlines()
    assert len(lines) == 11
    assert lines[0] == "5 3 . | . 7 . | . . ."
    assert lines[3] == "------+-------+------"


def test_normalize_cell_pandas_missing_values():
    assert normalize_cell(pd.NA) == 0
    assert normalize_cell(pd.NaT) == 0
    assert normalize_cell(np.nan) == 0


def test_normalize_board_from_nullable_dataframe(classic_puzzle):
    df = pd.DataFrame(classic_puzzle, dtype="Int64")
    df = df.mask(df == 0)
    assert df.isna().any().any()
    assert normalize_board(df).tolist() == classic_puzzle


@pytest.mark.parametrize("value", ["inf", "-inf", "1e400", float("inf")])
def test_normalize_cell_rejects_infinity(value):
    with pytest.raises(ValueError):
        normalize_cell(value)


@pytest.mark.parametrize(
    "board",
    [
        [0] * 81,
        np.zeros(81, dtype=int),
        np.zeros((3, 27), dtype=int),
        "0" * 81,
        [[0] * 9 for _ in range(8)] + [[0] * 8],
    ],
)
def test_normalize_board_rejects_non_grid_shapes(board):
    with pytest.raises(ValueError):
        normalize_board(board)
