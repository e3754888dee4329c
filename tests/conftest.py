"""
Shared puzzles and solutions for the tests.
"""

from typing import List

import pytest

from humansudoku.puzzle import parse_puzzle
from humansudoku.puzzles import (
    EASY_SUDOKU,
    HARD_SUDOKU,
    SEVENTEEN_SUDOKU,
    WIKIPEDIA_SUDOKU,
)

EASY_SOLUTION = (
    "483921657"
    "967345821"
    "251876493"
    "548132976"
    "729564138"
    "136798245"
    "372689514"
    "814253769"
    "695417382"
)

WIKIPEDIA_SOLUTION = (
    "534678912"
    "672195348"
    "198342567"
    "859761423"
    "426853791"
    "713924856"
    "961537284"
    "287419635"
    "345286179"
)


def rows_of(line: str) -> List[List[int]]:
    return [[int(ch) for ch in line[r * 9:(r + 1) * 9]] for r in range(9)]


@pytest.fixture
def easy_grid() -> List[List[int]]:
    return parse_puzzle(EASY_SUDOKU)


@pytest.fixture
def easy_solution() -> List[List[int]]:
    return rows_of(EASY_SOLUTION)


@pytest.fixture
def hard_grid() -> List[List[int]]:
    return parse_puzzle(HARD_SUDOKU)


@pytest.fixture
def wikipedia_grid() -> List[List[int]]:
    return parse_puzzle(WIKIPEDIA_SUDOKU)


@pytest.fixture
def wikipedia_solution() -> List[List[int]]:
    return rows_of(WIKIPEDIA_SOLUTION)


@pytest.fixture
def seventeen_grid() -> List[List[int]]:
    return parse_puzzle(SEVENTEEN_SUDOKU)


@pytest.fixture
def empty() -> List[List[int]]:
    return [[0] * 9 for _ in range(9)]


@pytest.fixture
def cascade_grid() -> List[List[int]]:
    """
    Consistent as given, but the first naked single, 9 at (row 1, col 7),
    leaves (row 1, col 8) with nothing.
    """
    grid = [[0] * 9 for _ in range(9)]
    grid[0][:6] = [1, 2, 3, 4, 5, 6]
    grid[3][6] = 7
    grid[6][6] = 8
    grid[4][7] = 8
    grid[7][7] = 7
    return grid
