#!/usr/bin/env python

"""
humansudoku/solver.py

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

**Solves Sudoku puzzles by logic, like a human would, showing its working.**

Only two tactics are used (Sudoku Snake terminology; see
http://www.sudokusnake.com/techniques.php):

- Naked Singles: a cell with only one possible digit must hold that digit.

- Hidden Singles (by row, column, and box): where there is only one location
  for a digit in a row, column, or box, the digit goes there.

Both are applied, in passes, until a pass finds nothing new. We never guess.
That means some puzzles can't be finished this way: the result is then
"stalled", with some cells still unknown.

Strategy:

1.  Seed the candidates from the starting values. Duplicate starting values
    in a unit are reported as a contradiction straight away.

2.  Each pass: look for naked singles in every unknown cell (row-major), then
    for hidden singles in every unit (rows, then columns, then boxes, unless
    the caller specifies an order), for digits 1-9.

3.  Every assignment eliminates its digit from the peers of the cell. After
    each assignment (or, if ``strict`` is off, at the end of each pass) we
    check for a contradiction; if there is one, we stop and hand back the
    last consistent state.

Because every assignment is forced rather than guessed, the final grid does
not depend on the order in which units are scanned; only the order of the
working does.

"""

from enum import Enum
import logging
from typing import Callable, List, NamedTuple, Optional, Sequence, Tuple

from humansudoku.candidates import CandidateSet, digit_bit
from humansudoku.common import (
    Contradiction,
    DIGITS,
    EMPTY,
    N,
    N_CELLS,
)
from humansudoku.grid import Grid, copy_grid, is_complete, make_grid, n_filled
from humansudoku.propagator import (
    assign,
    check_consistency,
    placed_in_unit,
    seed,
)
from humansudoku.units import ALL_UNITS, Unit
from humansudoku.validator import find_conflicts

log = logging.getLogger(__name__)


# =============================================================================
# Results
# =============================================================================

class Rule(Enum):
    NAKED_SINGLE = "naked single"
    HIDDEN_SINGLE = "hidden single"

    def __str__(self) -> str:
        return self.value


class Status(Enum):
    SOLVED = "solved"
    STALLED = "stalled"
    CONTRADICTION = "contradiction"

    def __str__(self) -> str:
        return self.value


class Deduction(NamedTuple):
    """
    One step of working. ``unit`` and ``position`` are only set for hidden
    singles: they say which unit forced the digit, and where in that unit it
    went.
    """
    rule: Rule
    row: int
    col: int
    value: int
    unit: Optional[Unit] = None
    position: Optional[int] = None

    def __str__(self) -> str:
        if self.rule == Rule.NAKED_SINGLE:
            return (f"(row={self.row + 1}, col={self.col + 1}) "
                    f"can only be {self.value}")
        return (f"Only possibility for digit {self.value} in {self.unit} "
                f"is {self.unit.describe_position(self.position)}")


Observer = Callable[[Deduction], None]


class SolveResult(NamedTuple):
    grid: Grid
    candidates: CandidateSet
    deductions: Tuple[Deduction, ...]
    status: Status
    contradiction: Optional[Contradiction]
    passes: int

    @property
    def solved(self) -> bool:
        return self.status == Status.SOLVED

    @property
    def working(self) -> List[str]:
        return [str(d) for d in self.deductions]


def log_deduction(deduction: Deduction) -> None:
    """
    An observer that shows the working via the log.
    """
    log.info(str(deduction))


# =============================================================================
# LogicSolver
# =============================================================================

class LogicSolver(object):
    """
    Runs naked and hidden singles to a fixpoint. Use once, via :meth:`run`.
    """
    def __init__(self,
                 grid: Grid,
                 observer: Optional[Observer] = None,
                 units: Optional[Sequence[Unit]] = None,
                 strict: bool = True) -> None:
        """
        Args:
            grid:
                starting grid; must already be validated (see
                :func:`humansudoku.grid.make_grid`). We work on it in place.
            observer:
                called with each :class:`Deduction` once it is known to be
                consistent
            units:
                order in which to scan units for hidden singles; all 27 units,
                each once
            strict:
                check consistency after every assignment, rather than after
                every pass
        """
        if units is None:
            units = ALL_UNITS
        else:
            units = tuple(units)
            if len(units) != len(ALL_UNITS) or set(units) != set(ALL_UNITS):
                raise ValueError(
                    f"units must contain each of the {len(ALL_UNITS)} units "
                    f"exactly once")
        self.grid = grid
        self.candidates = CandidateSet()
        self.observer = observer
        self.units = units  # type: Tuple[Unit, ...]
        self.strict = strict
        self.deductions = []  # type: List[Deduction]
        self.passes = 0
        self._n_reported = 0

    # -------------------------------------------------------------------------
    # State helpers
    # -------------------------------------------------------------------------

    def _snapshot(self) -> Tuple[Grid, CandidateSet, int]:
        return copy_grid(self.grid), self.candidates.clone(), \
            len(self.deductions)

    def _restore(self, snapshot: Tuple[Grid, CandidateSet, int]) -> None:
        grid, candidates, n_deductions = snapshot
        for r in range(N):
            self.grid[r][:] = grid[r]
        self.candidates.restore(candidates)
        del self.deductions[n_deductions:]

    def _report(self) -> None:
        """
        Passes any deductions not yet reported to the observer.
        """
        while self._n_reported < len(self.deductions):
            deduction = self.deductions[self._n_reported]
            self._n_reported += 1
            if self.observer is not None:
                self.observer(deduction)

    def _result(self, status: Status,
                contradiction: Optional[Contradiction] = None) \
            -> SolveResult:
        return SolveResult(
            grid=self.grid,
            candidates=self.candidates,
            deductions=tuple(self.deductions),
            status=status,
            contradiction=contradiction,
            passes=self.passes,
        )

    # -------------------------------------------------------------------------
    # Computations
    # -------------------------------------------------------------------------

    def _assign(self, deduction: Deduction) -> None:
        """
        Applies a deduction. In strict mode, checks consistency straight
        afterwards, and if that fails, undoes the assignment before raising.
        """
        snapshot = self._snapshot() if self.strict else None
        assign(self.grid, self.candidates,
               deduction.row, deduction.col, deduction.value)
        self.deductions.append(deduction)
        log.debug(str(deduction))
        if self.strict:
            try:
                check_consistency(self.grid, self.candidates)
            except Contradiction:
                self._restore(snapshot)
                raise
            self._report()

    def _find_naked_singles(self) -> int:
        """
        Where a cell has only one possible digit, assign it.

        Returns: number of cells assigned.
        """
        n_assigned = 0
        for r in range(N):
            for c in range(N):
                if self.grid[r][c] != EMPTY:
                    continue
                digits = self.candidates.possible_digits(r, c)
                if len(digits) == 1:
                    self._assign(Deduction(
                        rule=Rule.NAKED_SINGLE, row=r, col=c,
                        value=digits[0]))
                    n_assigned += 1
        return n_assigned

    def _find_hidden_singles(self) -> int:
        """
        Where there is only one location for a digit in a row, column, or box,
        assign it.

        Returns: number of cells assigned.
        """
        n_assigned = 0
        for unit in self.units:
            for d in DIGITS:
                if placed_in_unit(self.grid, unit) & digit_bit(d):
                    continue
                unknown = [
                    (r, c) for r, c in unit.cells
                    if self.grid[r][c] == EMPTY
                ]
                admitting = self.candidates.cells_admitting(unknown, d)
                if len(admitting) == 1:
                    r, c = admitting[0]
                    self._assign(Deduction(
                        rule=Rule.HIDDEN_SINGLE, row=r, col=c, value=d,
                        unit=unit, position=unit.position_of(r, c)))
                    n_assigned += 1
        return n_assigned

    # -------------------------------------------------------------------------
    # Strategy
    # -------------------------------------------------------------------------

    def _seed(self) -> Optional[Contradiction]:
        conflicts = find_conflicts(self.grid)
        if conflicts:
            unit, digit = conflicts[0]
            return Contradiction(
                unit.kind, index=unit.unit_zb, value=digit,
                reason="more than one location among the starting values")
        n_given = seed(self.grid, self.candidates)
        n_distinct = len(set(v for row in self.grid for v in row
                             if v != EMPTY))
        if n_distinct < N - 1:
            log.warning(
                f"Not a well-formed Sudoku: {n_distinct} distinct initial "
                f"values given, but need {N - 1} to be well-formed.")
            # http://pi.math.cornell.edu/~mec/Summer2009/Mahmood/More.html
        log.debug(f"Seeded {n_given} starting values")
        try:
            check_consistency(self.grid, self.candidates)
        except Contradiction as e:
            return e
        return None

    def run(self) -> SolveResult:
        """
        Solves as far as logic allows.
        """
        contradiction = self._seed()
        if contradiction is not None:
            log.info(f"Contradiction in starting values: {contradiction}")
            return self._result(Status.CONTRADICTION, contradiction)

        while not is_complete(self.grid):
            self.passes += 1
            log.debug(
                f"Pass {self.passes}. "
                f"Unsolved cells: {N_CELLS - n_filled(self.grid)}. "
                f"Possible digit assignments: "
                f"{self.candidates.n_possibilities_overall()} "
                f"(target {N_CELLS}).")
            pass_start = None if self.strict else self._snapshot()
            try:
                n_assigned = self._find_naked_singles()
                n_assigned += self._find_hidden_singles()
                if not self.strict:
                    check_consistency(self.grid, self.candidates)
            except Contradiction as e:
                if pass_start is not None:
                    self._restore(pass_start)
                self._report()
                log.info(f"Contradiction on pass {self.passes}: {e}")
                return self._result(Status.CONTRADICTION, e)
            self._report()
            if n_assigned == 0:
                log.info(
                    f"No improvement on pass {self.passes}; stalled with "
                    f"{N_CELLS - n_filled(self.grid)} unknown cells")
                return self._result(Status.STALLED)

        log.info(f"Solved after {self.passes} pass(es) and "
                 f"{len(self.deductions)} deduction(s)")
        return self._result(Status.SOLVED)


# =============================================================================
# Entry point
# =============================================================================

def solve(grid: object,
          observer: Optional[Observer] = None,
          units: Optional[Sequence[Unit]] = None,
          strict: bool = True) -> SolveResult:
    """
    Solves a Sudoku by logic alone.

    Args:
        grid:
            81 values (row-major) or 9 rows of 9 values; 0 for unknown. Not
            modified.
        observer:
            optional callable, given each :class:`Deduction` as it is made
        units:
            optional order in which to scan the 27 units for hidden singles
        strict:
            check for contradictions after every assignment (the default), or
            only at the end of each pass

    Returns:
        a :class:`SolveResult`

    Raises:
        :exc:`humansudoku.common.InvalidInput` for a malformed grid
    """
    working_grid = make_grid(grid)
    return LogicSolver(working_grid, observer=observer, units=units,
                       strict=strict).run()
