"""
Tests for humansudoku.puzzle.SudokuPuzzle and the command line.
"""

import pytest

from humansudoku.common import EXIT_FAILURE, EXIT_SUCCESS
from humansudoku.grid import grid_str
from humansudoku.main import main
from humansudoku.puzzle import SudokuPuzzle
from humansudoku.puzzles import EASY_SUDOKU, HARD_SUDOKU
from humansudoku.solver import Status

EASY_SUDOKU_LINE = (
    "..3.2.6..9..3.5..1..18.64....81.29..7.......8"
    "..67.82....26.95..8..2.3..9..5.1.3.."
)


def run_main(argv):
    with pytest.raises(SystemExit) as excinfo:
        main(argv)
    return excinfo.value.code


def test_puzzle_solve_logic(easy_solution):
    problem = SudokuPuzzle(EASY_SUDOKU)
    assert str(problem) == problem.problem_str()
    result = problem.solve_logic()
    assert problem.solved
    assert problem.status == Status.SOLVED
    assert problem.solution_data == easy_solution
    assert problem.working == result.working
    assert len(problem.working) == 49
    assert str(problem) == grid_str(easy_solution)


def test_puzzle_solve_logic_twice_starts_working_afresh():
    problem = SudokuPuzzle(EASY_SUDOKU)
    problem.solve_logic()
    problem.solve_logic()
    assert len(problem.working) == 49
    assert problem.working == problem.result.working


def test_puzzle_stalls():
    problem = SudokuPuzzle(HARD_SUDOKU)
    problem.solve_logic(strict=False)
    assert not problem.solved
    assert problem.status == Status.STALLED
    assert str(problem) == problem.problem_str()


def test_puzzle_contradiction_recorded_in_working():
    text = "5...5....\n" + "\n".join(["........."] * 8)
    problem = SudokuPuzzle(text)
    result = problem.solve_logic()
    assert result.status == Status.CONTRADICTION
    assert problem.working == [str(result.contradiction)]
    assert "row 1" in problem.working[0]


def test_cli_demo():
    assert run_main(["demo", "easy"]) == EXIT_SUCCESS


def test_cli_working_from_file(tmp_path):
    filename = tmp_path / "puzzle.txt"
    filename.write_text(HARD_SUDOKU)
    assert run_main(["working", str(filename), "--lenient"]) == EXIT_SUCCESS


def test_cli_working_contradiction(tmp_path):
    filename = tmp_path / "bad.txt"
    filename.write_text("55.......\n" + "\n".join(["........."] * 8))
    assert run_main(["working", str(filename)]) == EXIT_FAILURE


def test_cli_check(tmp_path, easy_solution):
    good = tmp_path / "good.txt"
    good.write_text(grid_str(easy_solution))
    assert run_main(["check", str(good)]) == EXIT_SUCCESS
    bad = tmp_path / "bad.txt"
    bad.write_text(EASY_SUDOKU)
    assert run_main(["check", str(bad)]) == EXIT_FAILURE


def test_cli_list(capsys):
    assert run_main(["list"]) == EXIT_SUCCESS
    out = capsys.readouterr().out
    assert "easy: " + EASY_SUDOKU_LINE in out
    assert "seventeen:" in out


def test_cli_requires_command(capsys):
    assert run_main([]) == EXIT_FAILURE
