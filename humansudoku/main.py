#!/usr/bin/env python

"""
humansudoku/main.py

===============================================================================

    Copyright (C) 2019-2019 Rudolf Cardinal (rudolf@pobox.com).

    This is free software: you can redistribute it and/or modify
    it under the terms of the GNU General Public License as published by
    the Free Software Foundation, either version 3 of the License, or
    (at your option) any later version.

    This software is distributed in the hope that it will be useful,
    but WITHOUT ANY WARRANTY; without even the implied warranty of
    MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
    GNU General Public License for more details.

    You should have received a copy of the GNU General Public License
    along with this software. If not, see <http://www.gnu.org/licenses/>.

===============================================================================

**Command-line entry point.**

"""

import argparse
import logging
import sys
from typing import List

from cardinal_pythonlib.argparse_func import RawDescriptionArgumentDefaultsHelpFormatter  # noqa
from cardinal_pythonlib.logs import main_only_quicksetup_rootlogger

from humansudoku.common import EXIT_FAILURE, EXIT_SUCCESS, run_guard
from humansudoku.grid import grid_line
from humansudoku.puzzle import SudokuPuzzle
from humansudoku.puzzles import DEMO_SUDOKU_1, PUZZLES
from humansudoku.solver import Status, log_deduction
from humansudoku.validator import validate

log = logging.getLogger(__name__)


# =============================================================================
# Commands
# =============================================================================

def read_puzzle(filename: str) -> SudokuPuzzle:
    log.info(f"Reading {filename}")
    with open(filename, "rt") as f:
        string_version = f.read()
    return SudokuPuzzle(string_version)


def show_working(problem: SudokuPuzzle, strict: bool) -> int:
    """
    Solves by logic, logging each step. Returns an exit code.
    """
    log.info(f"Solving:\n{problem}")
    result = problem.solve_logic(strict=strict, observer=log_deduction)
    log.info(f"Possibilities:\n{result.candidates}")
    if result.status == Status.CONTRADICTION:
        log.error(f"No solution: {result.contradiction}")
        return EXIT_FAILURE
    if result.status == Status.STALLED:
        log.warning("No improvement; would need to guess, which we don't")
    log.info(f"Answer ({result.status}, {len(result.deductions)} "
             f"deduction(s), {result.passes} pass(es)):\n"
             f"{problem.solution_str()}")
    return EXIT_SUCCESS


def check_answer(problem: SudokuPuzzle) -> int:
    """
    Checks a completed grid. Returns an exit code.
    """
    report = validate(problem.problem_data)
    if report.ok:
        log.info("Valid solution")
        return EXIT_SUCCESS
    for failure in report.failures:
        log.error(f"Found {failure}")
    return EXIT_FAILURE


def main(argv: List[str] = None) -> None:
    """
    Command-line entry point.
    """
    cmd_check = "check"
    cmd_demo = "demo"
    cmd_list = "list"
    cmd_solve = "solve"
    cmd_working = "working"

    help_filename = (
        "Puzzle filename to read. Must contain text in format as above.")

    parser = argparse.ArgumentParser(
        formatter_class=RawDescriptionArgumentDefaultsHelpFormatter,
        description=(
            f"Solve Sudoku puzzles by logic, showing working. Format is:\n\n"
            f"{DEMO_SUDOKU_1}"
        )
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Be verbose")
    subparsers = parser.add_subparsers(
        dest="command",
        help="Append --help for more help")

    parser_solve = subparsers.add_parser(
        cmd_solve, help="Solve from a file, via integer programming")
    parser_solve.add_argument(
        "filename", type=str, help=help_filename)

    parser_working = subparsers.add_parser(
        cmd_working,
        help="Solve from a file, via puzzle logic, showing working")
    parser_working.add_argument(
        "filename", type=str, help=help_filename)
    parser_working.add_argument(
        "--lenient", action="store_true",
        help="Check for contradictions after each pass, not after each "
             "assignment")

    parser_check = subparsers.add_parser(
        cmd_check, help="Check that a file contains a valid completed grid")
    parser_check.add_argument(
        "filename", type=str, help=help_filename)

    parser_demo = subparsers.add_parser(
        cmd_demo, help="Run demo, via puzzle logic, showing working")
    parser_demo.add_argument(
        "name", nargs="?", default="easy", choices=list(PUZZLES.keys()),
        help="Which built-in puzzle to solve")

    _parser_list = subparsers.add_parser(
        cmd_list, help="List built-in puzzles")

    args = parser.parse_args(argv)
    main_only_quicksetup_rootlogger(level=logging.DEBUG if args.verbose
                                    else logging.INFO)

    if not args.command:
        print("Must specify command")
        sys.exit(EXIT_FAILURE)
    if args.command == cmd_list:
        for name, text in PUZZLES.items():
            puzzle = SudokuPuzzle(text)
            print(f"{name}: {grid_line(puzzle.problem_data)}\n{puzzle}\n")
        exit_code = EXIT_SUCCESS
    elif args.command == cmd_demo:
        exit_code = show_working(SudokuPuzzle(PUZZLES[args.name]),
                                 strict=True)
    else:
        problem = read_puzzle(args.filename)
        if args.command == cmd_solve:
            log.info(f"Solving:\n{problem}")
            problem.solve()
            log.info(f"Answer:\n{problem}")
            exit_code = EXIT_SUCCESS
        elif args.command == cmd_working:
            exit_code = show_working(problem, strict=not args.lenient)
        else:
            exit_code = check_answer(problem)
    sys.exit(exit_code)


def entry() -> None:
    run_guard(main)


# =============================================================================
# Command-line entry point
# =============================================================================

if __name__ == "__main__":
    entry()
