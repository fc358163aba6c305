import copy

import pytest

CLASSIC_PUZZLE = [
    [5, 3, 0, 0, 7, 0, 0, 0, 0],
    [6, 0, 0, 1, 9, 5, 0, 0, 0],
    [0, 9, 8, 0, 0, 0, 0, 6, 0],
    [8, 0, 0, 0, 6, 0, 0, 0, 3],
    [4, 0, 0, 8, 0, 3, 0, 0, 1],
    [7, 0, 0, 0, 2, 0, 0, 0, 6],
    [0, 6, 0, 0, 0, 0, 2, 8, 0],
    [0, 0, 0, 4, 1, 9, 0, 0, 5],
    [0, 0, 0, 0, 8, 0, 0, 7, 9],
]

CLASSIC_SOLUTION = [
    [5, 3, 4, 6, 7, 8, 9, 1, 2],
    [6, 7, 2, 1, 9, 5, 3, 4, 8],
    [1, 9, 8, 3, 4, 2, 5, 6, 7],
    [8, 5, 9, 7, 6, 1, 4, 2, 3],
    [4, 2, 6, 8, 5, 3, 7, 9, 1],
    [7, 1, 3, 9, 2, 4, 8, 5, 6],
    [9, 6, 1, 5, 3, 7, 2, 8, 4],
    [2, 8, 7, 4, 1, 9, 6, 3, 5],
    [3, 4, 5, 2, 8, 6, 1, 7, 9],
]


@pytest.fixture
def classic_puzzle():
    return copy.deepcopy(CLASSIC_PUZZLE)


@pytest.fixture
def classic_solution():
    return copy.deepcopy(CLASSIC_SOLUTION)


@pytest.fixture
def empty_grid():
    return [[0] * 9 for _ in range(9)]


@pytest.fixture
def duplicate_in_row(empty_grid):
    # two 5s in the first row
    empty_grid[0][0] = 5
    empty_grid[0][4] = 5
    return empty_grid


@pytest.fixture
def pigeonhole_board(empty_grid):
    # (0,0), (0,1), (0,2) can only take {1, 2}; arc consistency alone
    # cannot see that three cells do not fit into two values.
    empty_grid[0] = [0, 0, 0, 3, 4, 5, 6, 7, 8]
    empty_grid[1][0] = 9
    return empty_grid
