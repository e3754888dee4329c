"""
Tests for humansudoku.integer_programming, and the logic solver against it.
"""

import pytest

from humansudoku.common import SolutionFailure
from humansudoku.grid import copy_grid
from humansudoku.integer_programming import solve_ip
from humansudoku.puzzle import SudokuPuzzle
from humansudoku.puzzles import EASY_SUDOKU
from humansudoku.solver import Status, solve
from humansudoku.validator import check


def test_solve_ip_easy(easy_grid, easy_solution):
    assert solve_ip(easy_grid) == easy_solution


def test_logic_agrees_with_ip_where_it_gets(hard_grid):
    answer = solve_ip(hard_grid)
    assert check(answer)
    result = solve(hard_grid)
    assert result.status == Status.STALLED
    for r in range(9):
        for c in range(9):
            if result.grid[r][c]:
                assert result.grid[r][c] == answer[r][c]


def test_solve_ip_no_solution(empty):
    grid = copy_grid(empty)
    grid[0][0] = 5
    grid[0][4] = 5
    with pytest.raises(SolutionFailure):
        solve_ip(grid)


def test_puzzle_solve_via_ip(easy_solution):
    problem = SudokuPuzzle(EASY_SUDOKU)
    problem.solve()
    assert problem.solved
    assert problem.status == Status.SOLVED
    assert problem.solution_data == easy_solution
    assert problem.working == ["Solved via integer programming method"]


def test_seventeen_givens_solved_by_singles(seventeen_grid):
    assert sum(1 for row in seventeen_grid for v in row if v) == 17
    answer = solve_ip(seventeen_grid)
    result = solve(seventeen_grid)
    assert result.status == Status.SOLVED
    assert len(result.deductions) == 64
    assert check(result.grid)
    assert result.grid == answer
    for r in range(9):
        for c in range(9):
            if seventeen_grid[r][c]:
                assert result.grid[r][c] == seventeen_grid[r][c]
    again = solve(seventeen_grid)
    assert again.deductions == result.deductions
