#!/usr/bin/env python

"""
humansudoku/puzzle.py

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

Reading puzzles from text, and a convenience class tying together the logic
solver and the integer programming solver.

"""

import logging
from typing import List, Optional

from humansudoku.common import HASH, InvalidInput, N
from humansudoku.grid import Grid, copy_grid, grid_str, make_grid
from humansudoku.integer_programming import solve_ip
from humansudoku.solver import Observer, SolveResult, Status, solve

log = logging.getLogger(__name__)


# =============================================================================
# Parsing
# =============================================================================

def parse_puzzle(string_version: str) -> Grid:
    """
    Reads a puzzle in text format:

    - Initial/terminal blank lines are ignored.
    - Lines starting with ``#`` are comments.
    - Use numbers 1-9 for known cells.
    - ``.`` (or ``0``) represents an unknown cell.
    - Whitespace within a line is ignored, so cells may be grouped in threes.

    Raises:
        :exc:`InvalidInput` if there aren't 9 lines of 9 cells
    """
    lines = string_version.splitlines()
    if not lines:
        raise InvalidInput("No data")

    # Remove comments
    lines = [line for line in lines if not line.strip().startswith(HASH)]

    lines = ["".join(line.split())
             for line in lines if line.strip()]  # remove blank lines/columns
    if len(lines) != N:
        raise InvalidInput(f"Must have {N} active lines; "
                           f"found {len(lines)}, which are:\n"
                           f"{lines}")
    for row_zb, line in enumerate(lines):
        if len(line) != N:
            raise InvalidInput(
                f"Data line has wrong non-blank length: should be {N}, "
                f"but is {len(line)} ({line!r})", row=row_zb)
    return make_grid("".join(lines))


# =============================================================================
# SudokuPuzzle
# =============================================================================

class SudokuPuzzle(object):
    """
    Represents a Sudoku puzzle and, once solved, its solution.
    """

    def __init__(self, string_version: str) -> None:
        """
        Args:
            string_version:
                String representation of the puzzle; see
                :func:`parse_puzzle`.
        """
        self.problem_data = parse_puzzle(string_version)
        self.solution_data = copy_grid(self.problem_data)
        self.solved = False
        self.status = None  # type: Optional[Status]
        self.result = None  # type: Optional[SolveResult]
        self.working = []  # type: List[str]

    # -------------------------------------------------------------------------
    # String representations
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        return self.solution_str() if self.solved else self.problem_str()

    def problem_str(self) -> str:
        """
        Creates the string representation of the problem.
        """
        return grid_str(self.problem_data)

    def solution_str(self) -> str:
        """
        Creates the string representation of the solution (or as far as we
        got).
        """
        return grid_str(self.solution_data)

    # -------------------------------------------------------------------------
    # Solve via integer programming
    # -------------------------------------------------------------------------

    def solve(self) -> None:
        """
        Solves the problem via integer programming, writing to :attr:`solved`
        and :attr:`solution_data`.
        """
        if self.solved:
            log.info("Already solved")
            return
        self.solution_data = solve_ip(self.problem_data)
        self.solved = True
        self.status = Status.SOLVED
        self.working.append("Solved via integer programming method")

    # -------------------------------------------------------------------------
    # Solve via puzzle logic and show working
    # -------------------------------------------------------------------------

    def solve_logic(self, strict: bool = True,
                    observer: Optional[Observer] = None) -> SolveResult:
        """
        Solve via conventional logic, and save our working. Each call starts
        the working afresh.
        """
        result = solve(self.problem_data, observer=observer, strict=strict)
        self.result = result
        self.status = result.status
        self.solution_data = copy_grid(result.grid)
        self.solved = result.solved
        self.working = list(result.working)
        if result.contradiction is not None:
            self.working.append(str(result.contradiction))
        return result
