#!/usr/bin/env python

"""
humansudoku/propagator.py

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

**Keeps the candidates consistent with the grid.**

- Where a digit is known, eliminate it as a possibility from other cells in
  the same row/column/3x3 block, and eliminate every other possibility from
  the cell itself.

- Check that no unknown cell has run out of possibilities, and that every
  digit not yet placed in a unit still has somewhere to go within it.

"""

import logging
from typing import Iterable, List, Optional, Tuple

from humansudoku.candidates import CandidateSet, digit_bit
from humansudoku.common import CELL, Contradiction, DIGITS, EMPTY, N
from humansudoku.grid import Grid
from humansudoku.units import Unit, enumerate_units, peers

log = logging.getLogger(__name__)

PEERS = [
    [
        tuple(peers(r, c)) for c in range(N)
    ] for r in range(N)
]  # type: List[List[Tuple[Tuple[int, int], ...]]]
# ... index as: PEERS[row_zb][col_zb]


# =============================================================================
# Assignment
# =============================================================================

def assign(grid: Grid, candidates: CandidateSet,
           row_zb: int, col_zb: int, value: int) -> None:
    """
    Records that a cell now holds a digit: writes it to the grid, removes it
    from the candidates of every peer cell, and collapses the cell's own
    candidates to that digit alone.

    Assigning the same digit to the same cell again changes nothing.

    Args:
        grid: the grid, modified in place
        candidates: the candidates, modified in place
        row_zb: zero-based row
        col_zb: zero-based column
        value: genuine (one-based) digit
    """
    if value not in DIGITS:
        raise ValueError(f"Can't assign {value!r}; must be a digit 1-{N}")
    if not candidates.possible(row_zb, col_zb, value):
        log.debug(f"Assigning digit {value} to (row={row_zb + 1}, "
                  f"col={col_zb + 1}) where that was thought impossible")
    grid[row_zb][col_zb] = value
    candidates.eliminate(PEERS[row_zb][col_zb], value)
    candidates.set_only(row_zb, col_zb, value)


def seed(grid: Grid, candidates: CandidateSet) -> int:
    """
    Makes the candidates reflect every known cell in the grid.

    Returns: the number of known cells.
    """
    n = 0
    for r in range(N):
        for c in range(N):
            value = grid[r][c]
            if value != EMPTY:
                assign(grid, candidates, r, c, value)
                n += 1
    return n


# =============================================================================
# Consistency
# =============================================================================

def placed_in_unit(grid: Grid, unit: Unit) -> int:
    """
    Bitmask of the digits already placed in a unit.
    """
    placed = 0
    for r, c in unit.cells:
        if grid[r][c] != EMPTY:
            placed |= digit_bit(grid[r][c])
    return placed


def check_consistency(grid: Grid, candidates: CandidateSet,
                      units: Optional[Iterable[Unit]] = None) -> None:
    """
    Raises :exc:`Contradiction` if the state cannot extend to a solution.

    Cells are checked first, in row-major order: an unknown cell with no
    possible digits is a contradiction. Then, for every unit and every digit
    1-9 not yet placed in that unit, at least one unknown cell of the unit
    must still admit the digit.
    """
    for r in range(N):
        for c in range(N):
            if grid[r][c] == EMPTY and candidates.mask(r, c) == 0:
                raise Contradiction(CELL, row=r, col=c)
    for unit in (units if units is not None else enumerate_units()):
        placed = placed_in_unit(grid, unit)
        unknown = [(r, c) for r, c in unit.cells if grid[r][c] == EMPTY]
        for d in DIGITS:
            if placed & digit_bit(d):
                continue
            if not candidates.cells_admitting(unknown, d):
                raise Contradiction(unit.kind, index=unit.unit_zb, value=d)

