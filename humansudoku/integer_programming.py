#!/usr/bin/env python

"""
humansudoku/integer_programming.py

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

**Solves Sudoku puzzles via integer programming.**

This is close to magic. You say "here are my constraints; go" and a few
milliseconds later you have a valid answer. It shows no working, so it is no
use to a human wanting to learn; we use it to obtain the answer directly, and
as an oracle against which to check the logic solver.

"""

import logging

from mip import BINARY, Constr, Model, Var, xsum

from humansudoku.common import ALMOST_ONE, EMPTY, N, SolutionFailure
from humansudoku.grid import Grid, empty_grid, make_grid
from humansudoku.units import enumerate_units

log = logging.getLogger(__name__)


# =============================================================================
# Functions for mip models
# =============================================================================

def debug_model_constraints(m: Model) -> None:
    """
    Shows constraints for a model.
    """
    lines = [f"Constraints in model {m.name!r}:"]
    for c in m.constrs:  # type: Constr
        lines.append(f"{c.name} == {c.expr}")
    log.debug("\n".join(lines))


def debug_model_vars(m: Model) -> None:
    """
    Show the names/values of model variables after fitting.
    """
    lines = [f"Variables in model {m.name!r}:"]
    for v in m.vars:  # type: Var
        lines.append(f"{v.name} == {v.x}")
    log.debug("\n".join(lines))


# =============================================================================
# Solve via integer programming
# =============================================================================

def solve_ip(grid: object) -> Grid:
    """
    Solves a Sudoku via integer programming.

    Args:
        grid: 81 values (row-major) or 9 rows of 9 values; 0 for unknown

    Returns:
        the completed grid (a new object)

    Raises:
        :exc:`SolutionFailure` if there is no solution
    """
    problem = make_grid(grid)
    m = Model("Sudoku solver")
    m.verbose = 0

    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    # Variables
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    x = [
        [
            [
                m.add_var(f"x(row={r + 1}, col={c + 1}, digit={d + 1})",
                          var_type=BINARY)
                for d in range(N)
            ] for c in range(N)
        ] for r in range(N)
    ]  # index as: x[row_zb][col_zb][digit_zb]

    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    # Constraints
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    # One digit per cell
    for r in range(N):
        for c in range(N):
            m += xsum(x[r][c][d] for d in range(N)) == 1
    # One of each digit per row, column, and 3x3 box
    for d in range(N):
        for unit in enumerate_units():
            m += xsum(x[r][c][d] for r, c in unit.cells) == 1
    # Starting values
    for r in range(N):
        for c in range(N):
            if problem[r][c] != EMPTY:
                m += x[r][c][problem[r][c] - 1] == 1

    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    # Solve
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    debug_model_constraints(m)
    m.optimize()

    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    # Read out answers
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    if not m.num_solutions:
        raise SolutionFailure("Unable to solve via integer programming")
    debug_model_vars(m)
    solution = empty_grid()
    for r in range(N):
        for c in range(N):
            for d_zb in range(N):
                if x[r][c][d_zb].x > ALMOST_ONE:
                    solution[r][c] = d_zb + 1
                    break
    return solution
