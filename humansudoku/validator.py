#!/usr/bin/env python

"""
humansudoku/validator.py

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

Checks whether a grid is a valid completed Sudoku. Read-only; works on grids
alone and knows nothing of candidates.

"""

from collections import Counter
import logging
from typing import List, NamedTuple, Sequence, Tuple

from humansudoku.common import DIGITS, EMPTY
from humansudoku.units import Unit, enumerate_units

log = logging.getLogger(__name__)


# =============================================================================
# Reports
# =============================================================================

class UnitReport(NamedTuple):
    """
    The state of one unit. ``missing`` and ``duplicated`` are sorted lists of
    digits.
    """
    unit: Unit
    missing: List[int]
    duplicated: List[int]

    @property
    def ok(self) -> bool:
        return not self.missing and not self.duplicated

    def __str__(self) -> str:
        problems = []
        if self.missing:
            problems.append(f"missing {self.missing}")
        if self.duplicated:
            problems.append(f"duplicated {self.duplicated}")
        return f"{self.unit}: {'; '.join(problems) or 'OK'}"


class ValidationReport(NamedTuple):
    units: List[UnitReport]

    @property
    def ok(self) -> bool:
        return all(u.ok for u in self.units)

    @property
    def failures(self) -> List[UnitReport]:
        return [u for u in self.units if not u.ok]

    def __str__(self) -> str:
        if self.ok:
            return "Valid solution"
        return "\n".join(str(u) for u in self.failures)


# =============================================================================
# Checks
# =============================================================================

def check_unit(grid: Sequence[Sequence[int]], unit: Unit) -> UnitReport:
    counts = Counter(grid[r][c] for r, c in unit.cells)
    return UnitReport(
        unit=unit,
        missing=[d for d in DIGITS if counts[d] == 0],
        duplicated=[d for d in DIGITS if counts[d] > 1],
    )


def validate(grid: Sequence[Sequence[int]]) -> ValidationReport:
    """
    For each of the 27 units, which digits are missing and which are repeated.
    """
    return ValidationReport(
        units=[check_unit(grid, unit) for unit in enumerate_units()]
    )


def check(grid: Sequence[Sequence[int]], verbose: bool = False) -> bool:
    """
    Is this a completed grid with every digit 1-9 exactly once in every row,
    column and block?
    """
    report = validate(grid)
    if verbose:
        for failure in report.failures:
            log.warning(f"Found {failure}")
    return report.ok


def find_conflicts(grid: Sequence[Sequence[int]]) -> List[Tuple[Unit, int]]:
    """
    Digits that appear more than once in the same unit, ignoring unknown
    cells. Works for partially filled grids.

    Returns:
        ``(unit, digit)`` pairs: rows first, then columns, then blocks; digits
        ascending within a unit.
    """
    conflicts = []  # type: List[Tuple[Unit, int]]
    for unit in enumerate_units():
        counts = Counter(
            grid[r][c] for r, c in unit.cells if grid[r][c] != EMPTY
        )
        conflicts.extend(
            (unit, d) for d in sorted(counts) if counts[d] > 1
        )
    return conflicts
